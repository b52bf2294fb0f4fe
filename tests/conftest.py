import os
import tempfile

# Point the application at a throwaway SQLite file before it is imported
_DB_DIR = tempfile.mkdtemp(prefix="site-api-tests-")
os.environ["DATABASE_URL"] = "sqlite:///" + os.path.join(_DB_DIR, "test.db")
os.environ["SESSION_SECRET"] = "test-secret"
os.environ["ENVIRONMENT"] = "test"

from typing import Callable, Optional

import pytest
from fastapi.testclient import TestClient

from database import Base, SessionLocal, engine
from main import app
from models.analytics import Analytics
from models.users import User
from utils.hashing import get_password_hash

DEFAULT_PASSWORD = "password123"


@pytest.fixture(autouse=True)
def _reset_database():
    """Give every test empty tables."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def client() -> TestClient:
    """Anonymous client with its own cookie jar."""
    return TestClient(app)


def _create_user(username: str, email: Optional[str] = None, password: str = DEFAULT_PASSWORD, is_admin: bool = False) -> User:
    with SessionLocal() as db:
        user = User(
            username=username,
            email=email or f"{username}@example.com",
            password=get_password_hash(password),
            is_admin=is_admin,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        db.expunge(user)
        return user


@pytest.fixture
def make_user() -> Callable[..., User]:
    return _create_user


def login(client: TestClient, identifier: str, password: str = DEFAULT_PASSWORD):
    return client.post("/api/login", json={"username": identifier, "password": password})


@pytest.fixture
def user_client() -> TestClient:
    """Client logged in as a regular (non-admin) user."""
    _create_user("regular")
    c = TestClient(app)
    assert login(c, "regular").status_code == 200
    return c


@pytest.fixture
def admin_client() -> TestClient:
    """Client logged in as an admin."""
    _create_user("admin", is_admin=True)
    c = TestClient(app)
    assert login(c, "admin").status_code == 200
    return c


def today_counters() -> Optional[Analytics]:
    """Fresh read of today's analytics row (None when no row exists yet)."""
    from datetime import date

    with SessionLocal() as db:
        row = db.query(Analytics).filter(Analytics.date == date.today()).first()
        if row is not None:
            db.expunge(row)
        return row


def counter(name: str) -> int:
    row = today_counters()
    return getattr(row, name) if row else 0
