from pathlib import Path
import os
import tempfile
import pytest

# Point the app at a throwaway SQLite file before anything imports it.
_DB_DIR = Path(tempfile.mkdtemp(prefix="pronunciation-app-tests-"))
os.environ["DATABASE_URL"] = f"sqlite:///{_DB_DIR / 'test.db'}"
os.environ["ENV"] = "dev"


@pytest.fixture(autouse=True)
def reset_db():
    """Give every test empty tables."""
    from pronunciation_app.database import create_db_and_tables, drop_db_and_tables
    drop_db_and_tables()
    create_db_and_tables()
    yield


@pytest.fixture
def session():
    from sqlmodel import Session
    from pronunciation_app.database import engine
    with Session(engine) as s:
        yield s
