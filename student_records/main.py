# /student_records/main.py

import os
import logging

# --- Core FastAPI Imports ---
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from sqlalchemy.exc import SQLAlchemyError

# --- Application-specific Imports ---
from .routers import students_router
from .db.database import Base, engine, SessionLocal
from .db.models import student_models  # noqa: F401  (registers the Students table)
from .services.record_store import SQLRecordStore
from .services.notifications import ToastQueue
from .services.confirmation import PresetConfirmation
from .services.form_controller import FormController

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
log = logging.getLogger(__name__)

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]


# --- Application Lifecycle Management ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    # This code runs ONCE when the application starts up.
    try:
        Base.metadata.create_all(bind=engine)
    except SQLAlchemyError as e:
        # The page still starts; the initial load reports the failure as a toast.
        log.error("Could not prepare the students table: %s", e)
    toasts = ToastQueue()
    # Deletes are refused unless the request carries an explicit confirmation.
    controller = FormController(SQLRecordStore(SessionLocal), toasts, PresetConfirmation(False))
    app.state.toasts = toasts
    app.state.controller = controller
    await controller.load_all()
    log.info("Student records page ready with %d students", len(controller.records))
    yield


# --- FastAPI Application Instance Creation ---
app = FastAPI(
    title="Student Records API",
    description="Single-page manager for the Students table.",
    version="1.0.0",
    lifespan=lifespan
)

# --- Middleware Configuration ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- API Router Inclusion ---
app.include_router(students_router.router, prefix="/api/students", tags=["Students"])

# --- Root / Health Check Endpoint ---
@app.get("/", tags=["Health Check"])
async def read_root():
    """A simple health check endpoint to confirm the API is online."""
    return {"status": "Student Records API is running!", "version": app.version}
