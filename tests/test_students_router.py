# /tests/test_students_router.py

import pytest
from unittest.mock import patch
from fastapi.testclient import TestClient

from student_records.db.database import make_engine, make_session_factory
from student_records.main import app


@pytest.fixture
def client(tmp_path):
    """
    Runs the app against a temporary SQLite database. The engine and session
    factory are patched WHERE the startup code uses them.
    """
    engine = make_engine(f"sqlite:///{tmp_path / 'students.db'}")
    with patch("student_records.main.engine", engine), \
         patch("student_records.main.SessionLocal", make_session_factory(engine)):
        with TestClient(app) as test_client:
            yield test_client
    engine.dispose()


def _add(client, name, **fields):
    body = {"name": name, "email": f"{name.lower()}@x.com", "phone_number": "123", **fields}
    return client.post("/api/students/submit", json=body).json()


def test_health_check(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["version"] == "1.0.0"

def test_initial_page_is_empty_create_form(client):
    page = client.get("/api/students").json()
    assert page["students"] == []
    assert page["draft"] == {"id": None, "name": "", "email": "", "phone_number": "", "gender": "Male"}
    assert page["is_editing"] is False
    assert page["submit_label"] == "Add"
    assert page["show_cancel"] is False

def test_create_student(client):
    page = _add(client, "Bo", gender="Male")
    assert [s["name"] for s in page["students"]] == ["Bo"]
    assert page["students"][0]["id"].startswith("stu_")
    assert page["notifications"] == [{"level": "success", "message": "Student created successfully"}]
    assert page["draft"]["name"] == ""

    # Toasts are delivered once.
    assert client.get("/api/students").json()["notifications"] == []

def test_patch_draft_then_submit(client):
    client.patch("/api/students/draft", json={"name": "Ann"})
    page = client.patch("/api/students/draft", json={"email": "a@x.com"}).json()
    assert page["draft"]["name"] == "Ann"
    assert page["draft"]["email"] == "a@x.com"

    page = client.post("/api/students/submit").json()
    assert page["students"][0]["name"] == "Ann"
    assert page["students"][0]["email"] == "a@x.com"

def test_edit_update_flow(client):
    student = _add(client, "Ann")["students"][0]

    page = client.post(f"/api/students/{student['id']}/edit").json()
    assert page["draft"] == student
    assert page["is_editing"] is True
    assert page["submit_label"] == "Update"
    assert page["show_cancel"] is True

    page = client.post("/api/students/submit", json={"name": "Annie"}).json()
    assert page["notifications"] == [{"level": "success", "message": "Student updated successfully"}]
    assert len(page["students"]) == 1
    assert page["students"][0]["id"] == student["id"]
    assert page["students"][0]["name"] == "Annie"
    assert page["is_editing"] is False

def test_edit_unlisted_student_is_404(client):
    response = client.post("/api/students/stu_nope/edit")
    assert response.status_code == 404
    assert client.get("/api/students").json()["is_editing"] is False

def test_cancel_resets_form(client):
    student = _add(client, "Ann")["students"][0]
    client.post(f"/api/students/{student['id']}/edit")
    page = client.post("/api/students/cancel").json()
    assert page["is_editing"] is False
    assert page["draft"]["name"] == ""

def test_delete_requires_confirmation(client):
    student = _add(client, "Ann")["students"][0]

    page = client.delete(f"/api/students/{student['id']}").json()
    assert len(page["students"]) == 1
    assert page["notifications"] == []

    page = client.delete(f"/api/students/{student['id']}", params={"confirm": "true"}).json()
    assert page["students"] == []
    assert page["notifications"] == [{"level": "success", "message": "Student deleted successfully"}]

def test_delete_of_edited_student_clears_form(client):
    student = _add(client, "Ann")["students"][0]
    client.post(f"/api/students/{student['id']}/edit")
    page = client.delete(f"/api/students/{student['id']}", params={"confirm": "true"}).json()
    assert page["is_editing"] is False
    assert page["draft"]["name"] == ""

def test_reload(client):
    _add(client, "Ann")
    page = client.post("/api/students/reload").json()
    assert [s["name"] for s in page["students"]] == ["Ann"]

def test_unknown_draft_fields_are_rejected(client):
    response = client.patch("/api/students/draft", json={"nmae": "x", "id": "99"})
    assert response.status_code == 422
    assert client.get("/api/students").json()["draft"]["name"] == ""

def test_unknown_submit_fields_are_rejected(client):
    response = client.post("/api/students/submit", json={"name": "Ann", "nmae": "x"})
    assert response.status_code == 422
    assert client.get("/api/students").json()["students"] == []

def test_startup_with_unreachable_database_reports_toast(tmp_path):
    """The app starts even when the database cannot be opened."""
    engine = make_engine(f"sqlite:///{tmp_path / 'missing_dir' / 'students.db'}")
    with patch("student_records.main.engine", engine), \
         patch("student_records.main.SessionLocal", make_session_factory(engine)):
        with TestClient(app) as test_client:
            page = test_client.get("/api/students").json()
    engine.dispose()

    assert page["students"] == []
    [toast] = page["notifications"]
    assert toast["level"] == "error"
    assert toast["message"].startswith("Failed to fetch students ")
