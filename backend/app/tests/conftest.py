"""
Shared fixtures: an in-memory SQLite database behind the API.
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.base import Base
from app.db.session import get_db
from app.main import app
from app.models import Note

TEST_DATABASE_URL = "sqlite://"

engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session():
    """Fresh schema and session per test."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    """Test client whose requests use the test session."""

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def create_user(client):
    """Create a user through the API and return its id."""

    def _create(username, password="secret123", roles=None):
        response = client.post(
            "/api/users",
            json={"username": username, "password": password, "roles": roles or ["Employee"]},
        )
        assert response.status_code == 201
        users = client.get("/api/users").json()
        return next(u["id"] for u in users if u["username"] == username)

    return _create


@pytest.fixture
def add_note(db_session):
    """Attach a note to a user directly in the database."""

    def _add(user_id, title="Fix printer"):
        note = Note(user_id=user_id, title=title, text="Paper jam on floor 2")
        db_session.add(note)
        db_session.commit()
        return note

    return _add
