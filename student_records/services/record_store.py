# /student_records/services/record_store.py

"""
The RecordStore contract and its SQL-backed implementation.

A RecordStore owns persistence and identity for student records. It exposes
exactly four async operations and reports every failure, whatever its cause,
as a `StoreError` carrying a human-readable message.
"""

import asyncio
import logging
from typing import List, Protocol

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from ..models.student_model import StudentRecord
from .database_helpers.student_repository_sql import StudentRepositorySQL

log = logging.getLogger(__name__)


class StoreError(Exception):
    """Any failure of a store call. `message` is surfaced verbatim to the user."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class RecordStore(Protocol):
    async def list_all(self) -> List[StudentRecord]: ...

    async def insert(self, record: StudentRecord) -> None: ...

    async def update_by_id(self, record_id: str, record: StudentRecord) -> None: ...

    async def delete_by_id(self, record_id: str) -> None: ...


class SQLRecordStore:
    """
    RecordStore over the Students table. Each call opens its own session and
    runs the blocking query work in a worker thread so the event loop is
    never held up by the database.
    """

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def _run(self, operation, *args):
        with self._session_factory() as session:
            try:
                return operation(StudentRepositorySQL(session), *args)
            except SQLAlchemyError as e:
                session.rollback()
                log.warning("Store call %s failed: %s", operation.__name__, e)
                raise StoreError(str(getattr(e, "orig", None) or e)) from e

    async def _call(self, operation, *args):
        return await asyncio.to_thread(self._run, operation, *args)

    async def list_all(self) -> List[StudentRecord]:
        rows = await self._call(StudentRepositorySQL.get_all_students)
        return [StudentRecord.model_validate(row) for row in rows or []]

    async def insert(self, record: StudentRecord) -> None:
        created = await self._call(StudentRepositorySQL.add_student, record.model_dump(exclude={"id"}))
        log.debug("Inserted student %s", created["id"])

    async def update_by_id(self, record_id: str, record: StudentRecord) -> None:
        count = await self._call(StudentRepositorySQL.update_student, record_id, record.model_dump(exclude={"id"}))
        if not count:
            log.info("Update of student %s matched no rows", record_id)

    async def delete_by_id(self, record_id: str) -> None:
        count = await self._call(StudentRepositorySQL.delete_student, record_id)
        if not count:
            log.info("Delete of student %s matched no rows", record_id)
