# /student_records/models/student_model.py

# --- Core Imports ---
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional, List, Literal

# The options a form offers for gender. Note that the default draft value
# is "Male"; the casing mismatch with these options is kept as-is.
GENDER_OPTIONS = ("male", "female", "other")
DEFAULT_GENDER = "Male"

# --- Model Definitions ---

class StudentBase(BaseModel):
    """
    The base model for a Student. Contains the editable fields shared by
    stored records and form drafts. No field is validated: empty strings
    are accepted and persisted as-is.
    """
    name: str = Field(default="", description="The full name of the student.")
    email: str = Field(default="", description="The student's email address.")
    phone_number: str = Field(default="", description="The student's phone number.")
    gender: str = Field(default=DEFAULT_GENDER, description="Free-text gender value.")


class StudentRecord(StudentBase):
    """
    A single row of the Students table. The id is assigned by the store on
    insert and is absent on a record that has not been persisted yet.
    """
    model_config = ConfigDict(from_attributes=True)

    id: Optional[str] = Field(default=None, description="The store-assigned identifier.")


class StudentDraft(StudentRecord):
    """The in-progress form state. `id` is only set while editing an existing record."""
    model_config = ConfigDict(extra="forbid")


class DraftUpdate(BaseModel):
    """Partial update of the draft, one entry per changed form field."""
    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None
    gender: Optional[str] = None


class Notification(BaseModel):
    """A transient, user-visible toast."""
    level: Literal["success", "error"]
    message: str


class PageView(BaseModel):
    """
    Everything a view layer needs to render the page: the table rows, the
    form, the Add/Update toggle and any toasts raised since the last view.
    """
    students: List[StudentRecord] = Field(default_factory=list)
    draft: StudentDraft = Field(default_factory=StudentDraft)
    is_editing: bool = False
    submit_label: str = "Add"
    show_cancel: bool = False
    gender_options: List[str] = Field(default_factory=lambda: list(GENDER_OPTIONS))
    notifications: List[Notification] = Field(default_factory=list)
