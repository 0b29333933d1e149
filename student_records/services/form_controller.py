# /student_records/services/form_controller.py

"""
The page controller for the student-records form and table.

It owns the page state (the listed records, the form draft and the edit
target) and mediates between user actions and the RecordStore. Every store
failure is caught here and turned into an error toast; the state is left as
it was. Every successful mutation is followed by a full reload of the list.
"""

import logging
from typing import List, Optional

from pydantic import BaseModel, Field

from ..models.student_model import StudentRecord, StudentDraft, PageView, Notification
from .record_store import RecordStore, StoreError
from .notifications import NotificationSink
from .confirmation import ConfirmationPrompt

log = logging.getLogger(__name__)

DELETE_PROMPT_TITLE = "Are you sure?"
DELETE_PROMPT_TEXT = "You will not be able to recover this file!"

EDITABLE_FIELDS = ("name", "email", "phone_number", "gender")

_CURRENT = object()


class PageState(BaseModel):
    records: List[StudentRecord] = Field(default_factory=list)
    draft: StudentDraft = Field(default_factory=StudentDraft)
    edit_target: Optional[str] = None


class FormController:
    def __init__(self, store: RecordStore, notifier: NotificationSink, prompt: ConfirmationPrompt):
        self.store = store
        self.notifier = notifier
        self.prompt = prompt
        self.state = PageState()

    # --- Presentation accessors ---

    @property
    def records(self) -> List[StudentRecord]:
        return self.state.records

    @property
    def draft(self) -> StudentDraft:
        return self.state.draft

    @property
    def edit_target(self) -> Optional[str]:
        return self.state.edit_target

    @property
    def is_editing(self) -> bool:
        return self.state.edit_target is not None

    @property
    def submit_label(self) -> str:
        return "Update" if self.is_editing else "Add"

    @property
    def show_cancel(self) -> bool:
        return self.is_editing

    def view(self, notifications: Optional[List[Notification]] = None) -> PageView:
        return PageView(
            students=[r.model_copy() for r in self.state.records],
            draft=self.state.draft.model_copy(),
            is_editing=self.is_editing,
            submit_label=self.submit_label,
            show_cancel=self.show_cancel,
            notifications=notifications or [],
        )

    # --- Actions ---

    async def load_all(self) -> None:
        try:
            records = await self.store.list_all()
        except StoreError as e:
            self.notifier.error(f"Failed to fetch students {e.message}")
            return
        self.state.records = list(records or [])
        log.debug("Loaded %d students", len(self.state.records))

    async def submit(self, draft: Optional[StudentDraft] = None, edit_target=_CURRENT) -> None:
        draft = self.state.draft if draft is None else draft
        edit_target = self.state.edit_target if edit_target is _CURRENT else edit_target

        if edit_target:
            log.info("Updating student %s", edit_target)
            try:
                await self.store.update_by_id(edit_target, draft)
            except StoreError as e:
                self.notifier.error(f"Failed to update student {e.message}")
                return
            self.notifier.success("Student updated successfully")
        else:
            log.info("Creating student %r", draft.name)
            try:
                await self.store.insert(StudentRecord(**draft.model_dump(exclude={"id"})))
            except StoreError as e:
                self.notifier.error(f"Failed to create {e.message}")
                return
            self.notifier.success("Student created successfully")

        await self.load_all()
        self.reset_form()

    def update_draft(self, **fields) -> None:
        unknown = set(fields) - set(EDITABLE_FIELDS)
        if unknown:
            raise ValueError(f"Unknown form field(s): {', '.join(sorted(unknown))}")
        self.state.draft = self.state.draft.model_copy(update=fields)

    def begin_edit(self, record: StudentRecord) -> None:
        self.state.draft = StudentDraft(**record.model_dump())
        if record.id:
            self.state.edit_target = record.id

    def begin_edit_by_id(self, record_id: str) -> StudentRecord:
        """Enters edit mode for a record from the displayed list."""
        for record in self.state.records:
            if record.id == record_id:
                self.begin_edit(record)
                return record
        raise LookupError(f"Student with ID {record_id} is not listed")

    def reset_form(self) -> None:
        self.state.draft = StudentDraft()
        self.state.edit_target = None

    cancel_edit = reset_form

    async def delete_record(self, record_id: Optional[str], prompt: Optional[ConfirmationPrompt] = None) -> None:
        if not record_id:
            log.warning("Ignoring delete request without a student id")
            return

        prompt = prompt or self.prompt
        if not await prompt.confirm(DELETE_PROMPT_TITLE, DELETE_PROMPT_TEXT):
            log.debug("Delete of student %s declined", record_id)
            return

        try:
            await self.store.delete_by_id(record_id)
        except StoreError as e:
            self.notifier.error(f"Failed to delete student {e.message}")
            return

        self.notifier.success("Student deleted successfully")
        await self.load_all()
        # The record being edited no longer exists.
        if self.state.edit_target == record_id:
            self.reset_form()
