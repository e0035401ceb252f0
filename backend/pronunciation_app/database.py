"""Database engine and helpers.

This module configures the SQLModel/SQLAlchemy engine from
`settings.DATABASE_URL` (a local SQLite file at the backend root by
default) and provides small helpers used by the application, scripts and
tests.
"""

from sqlmodel import SQLModel, create_engine, Session

from .config import settings
from . import models  # noqa: F401  (registers tables on SQLModel.metadata)

_connect_args = {"check_same_thread": False} if settings.is_sqlite else {}
engine = create_engine(settings.DATABASE_URL, echo=settings.DB_ECHO, connect_args=_connect_args)


def create_db_and_tables():
    """Create database tables using SQLModel metadata.

    Tables are derived from the models in `pronunciation_app.models`,
    including the `word_category` join table. Existing tables are left
    untouched.
    """
    SQLModel.metadata.create_all(engine)


def drop_db_and_tables():
    """Drop every table known to the SQLModel metadata."""
    SQLModel.metadata.drop_all(engine)


def get_session():
    """Yield a database `Session` for FastAPI dependency injection.

    The generator yields a session and ensures it is closed when the
    request scope finishes.
    """
    with Session(engine) as session:
        yield session
