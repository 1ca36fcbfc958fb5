"""Pytest fixtures — a fresh SQLite database file per test."""
import os
import uuid

# Keep the app's own engine off the developer database during tests.
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from fastapi.testclient import TestClient

from civiconnect.database import Base, get_db
from civiconnect.main import app

# Import all models so they register with Base.metadata
from civiconnect.models.user import User                  # noqa: F401
from civiconnect.models.event import Event                # noqa: F401
from civiconnect.models.joined_event import JoinedEvent   # noqa: F401


@pytest.fixture(scope="function")
def db_engine(tmp_path):
    """Create a fresh SQLite engine for each test."""
    engine = create_engine(f"sqlite:///{tmp_path / 'test.db'}", connect_args={"check_same_thread": False})
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def session_factory(db_engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=db_engine)


@pytest.fixture(scope="function")
def db(session_factory):
    """Yield a database session for direct store assertions."""
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def client(session_factory):
    """FastAPI TestClient with the database dependency overridden to the test file."""

    def _override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Helpers: create records via the API, return the new id
# ---------------------------------------------------------------------------
def create_test_user(client: TestClient, email: str = "alice@example.com", **fields) -> str:
    """Helper — POST /users and return the inserted id."""
    resp = client.post("/users", json={"email": email, **fields})
    assert resp.status_code == 200, resp.text
    return resp.json()["insertedId"]


def create_test_event(client: TestClient, title: str = "Beach Cleanup", date: str = "2026-05-08",
                      type: str = "cleanup", organizer: str = "org@example.com", **fields) -> str:
    """Helper — POST /events and return the inserted id."""
    resp = client.post("/events", json={
        "title": title,
        "date": date,
        "type": type,
        "organizer": organizer,
        **fields,
    })
    assert resp.status_code == 200, resp.text
    return resp.json()["insertedId"]


def missing_id() -> str:
    return str(uuid.uuid4())
