# /student_records/services/database_helpers/student_repository_sql.py

"""
This module contains the raw SQLAlchemy queries for the Students table. It is
the direct interface to the database for student records and knows nothing
about forms, drafts or notifications.

Update and delete are filter-based: an id that matches no row affects zero
rows and is not treated as an error.
"""

import uuid
from typing import List, Dict
from sqlalchemy.orm import Session

from student_records.db.models.student_models import Student


def new_student_id() -> str:
    return f"stu_{uuid.uuid4().hex[:12]}"


def _to_dict(obj: Student) -> Dict:
    return {name: getattr(obj, name) for name in Student.PUBLIC_COLUMNS}


class StudentRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def get_all_students(self) -> List[Dict]:
        """Retrieves every student, in insertion order."""
        rows = self.db.query(Student).order_by(Student.seq).all()
        return [_to_dict(row) for row in rows]

    def add_student(self, record: Dict) -> Dict:
        """
        Creates a new Student row. Any id in `record` is ignored; the
        repository assigns a fresh one.
        """
        data = {k: v for k, v in record.items() if k in Student.PUBLIC_COLUMNS and k != "id"}
        new_student = Student(id=new_student_id(), **data)
        self.db.add(new_student)
        self.db.commit()
        self.db.refresh(new_student)
        return _to_dict(new_student)

    def update_student(self, student_id: str, data: Dict) -> int:
        """Updates the matching row and returns the number of rows affected."""
        values = {k: v for k, v in data.items() if k in Student.PUBLIC_COLUMNS and k != "id"}
        if not values:
            return 0
        count = (
            self.db.query(Student)
            .filter(Student.id == student_id)
            .update(values, synchronize_session=False)
        )
        self.db.commit()
        return count

    def delete_student(self, student_id: str) -> int:
        """Deletes the matching row and returns the number of rows affected."""
        count = (
            self.db.query(Student)
            .filter(Student.id == student_id)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        return count
