# /student_records/db/database.py

import os
from dotenv import load_dotenv
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

load_dotenv()

# The URL of the database that hosts the Students table.
# The second argument is a default value for local development.
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./students.db")
STUDENTS_TABLE = os.getenv("STUDENTS_TABLE", "Students")


def make_engine(url: str):
    # The 'check_same_thread' argument is only needed for SQLite. Store calls
    # run in worker threads, so a connection may cross threads.
    engine_args = {"connect_args": {"check_same_thread": False}} if url.startswith("sqlite") else {}
    return create_engine(url, **engine_args)


def make_session_factory(bind):
    return sessionmaker(autocommit=False, autoflush=False, bind=bind)


engine = make_engine(DATABASE_URL)

# Each instance of this class will be a database session.
SessionLocal = make_session_factory(engine)

# Our database model classes inherit from this.
Base = declarative_base()
