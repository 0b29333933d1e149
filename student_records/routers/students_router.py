# /student_records/routers/students_router.py

from fastapi import APIRouter, Depends, HTTPException, Request, status, Body
from typing import Optional

from ..models.student_model import PageView, DraftUpdate, StudentDraft
from ..services.form_controller import FormController
from ..services.confirmation import PresetConfirmation
from ..services.notifications import ToastQueue

router = APIRouter()


def get_controller(request: Request) -> FormController:
    return request.app.state.controller


def get_toasts(request: Request) -> ToastQueue:
    return request.app.state.toasts


def _render(controller: FormController, toasts: ToastQueue) -> PageView:
    return controller.view(notifications=toasts.drain())


# --- PAGE STATE (/api/students) ---

@router.get("", response_model=PageView, summary="Get the Current Page State")
async def get_page(controller: FormController = Depends(get_controller), toasts: ToastQueue = Depends(get_toasts)):
    return _render(controller, toasts)

@router.post("/reload", response_model=PageView, summary="Reload All Students")
async def reload_students(controller: FormController = Depends(get_controller), toasts: ToastQueue = Depends(get_toasts)):
    await controller.load_all()
    return _render(controller, toasts)

# --- FORM ACTIONS ---

@router.patch("/draft", response_model=PageView, summary="Change Form Fields")
async def update_draft(changes: DraftUpdate, controller: FormController = Depends(get_controller), toasts: ToastQueue = Depends(get_toasts)):
    # Unknown fields are rejected with 422 by the request model.
    controller.update_draft(**changes.model_dump(exclude_unset=True, exclude_none=True))
    return _render(controller, toasts)

@router.post("/submit", response_model=PageView, summary="Add or Update the Drafted Student")
async def submit_form(
    draft: Optional[StudentDraft] = Body(default=None),
    controller: FormController = Depends(get_controller),
    toasts: ToastQueue = Depends(get_toasts),
):
    if draft is not None:
        # The edit target is owned by the page; a posted id is ignored.
        controller.update_draft(**draft.model_dump(exclude={"id"}, exclude_unset=True))
    await controller.submit()
    return _render(controller, toasts)

@router.post("/cancel", response_model=PageView, summary="Cancel Editing and Reset the Form")
async def cancel_edit(controller: FormController = Depends(get_controller), toasts: ToastQueue = Depends(get_toasts)):
    controller.cancel_edit()
    return _render(controller, toasts)

# --- INDIVIDUAL STUDENT ACTIONS (/api/students/{record_id}) ---

@router.post("/{record_id}/edit", response_model=PageView, summary="Load a Listed Student into the Form")
async def begin_edit(record_id: str, controller: FormController = Depends(get_controller), toasts: ToastQueue = Depends(get_toasts)):
    try:
        controller.begin_edit_by_id(record_id)
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return _render(controller, toasts)

@router.delete("/{record_id}", response_model=PageView, summary="Delete a Student")
async def delete_student(
    record_id: str,
    confirm: bool = False,
    controller: FormController = Depends(get_controller),
    toasts: ToastQueue = Depends(get_toasts),
):
    await controller.delete_record(record_id, prompt=PresetConfirmation(confirm))
    return _render(controller, toasts)
