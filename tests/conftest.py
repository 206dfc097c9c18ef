# File: tests/conftest.py

"""
Shared fixtures. Every test gets its own in-memory SQLite database with the
default categories seeded, wired into the app by overriding get_db.
"""

import os
import tempfile

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["AUTO_CREATE_TABLES"] = "false"
os.environ.setdefault("STATIC_DIR", tempfile.mkdtemp(prefix="funding-static-"))

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from app.api.deps import get_db
from app.db.init_db import init_db, seed_categories
from app.db.session import build_engine
from app.main import app

PASSWORD = "Passw0rdOK"


@pytest.fixture
def session_factory():
    engine = build_engine("sqlite://")
    init_db(engine)
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    with factory() as db:
        seed_categories(db)
    yield factory
    engine.dispose()


@pytest.fixture
def db(session_factory):
    """A session for asserting on what the API wrote."""
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def signup_and_signin(client: TestClient, email: str, name: str = "Tester") -> str:
    resp = client.post(
        "/api/v1/users/signup",
        json={"email": email, "name": name, "password": PASSWORD},
    )
    assert resp.status_code == 201, resp.text
    resp = client.post(
        "/api/v1/users/signin",
        json={"email": email, "password": PASSWORD},
    )
    assert resp.status_code == 200, resp.text
    return resp.json()["data"]["token"]


@pytest.fixture
def auth_headers(client):
    token = signup_and_signin(client, "owner@example.com", "Owner")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def other_auth_headers(client):
    token = signup_and_signin(client, "other@example.com", "Other")
    return {"Authorization": f"Bearer {token}"}
