# /student_records/db/models/student_models.py

"""
SQLAlchemy ORM model for the Students table, the single remote table that
holds every student record shown on the page.
"""

from sqlalchemy import Column, String, Integer

from ..database import Base, STUDENTS_TABLE


class Student(Base):
    """
    SQLAlchemy model representing a single student record.

    `seq` is a surrogate, auto-incrementing column used only to return rows
    in insertion order; it is never exposed outside the repository.
    """
    __tablename__ = STUDENTS_TABLE

    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String, unique=True, index=True, nullable=False)
    name = Column(String, nullable=False, default="")
    email = Column(String, nullable=False, default="")
    phone_number = Column(String, nullable=False, default="")
    gender = Column(String, nullable=False, default="")

    # Columns returned to callers, in this order.
    PUBLIC_COLUMNS = ("id", "name", "email", "phone_number", "gender")
