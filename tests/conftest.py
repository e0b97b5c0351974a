"""Root conftest — fresh store and app per test."""

import os

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("ENV", "test")

import pytest
from fastapi.testclient import TestClient

from app.core.store import DataStore
from app.main import create_app


@pytest.fixture
def store():
    return DataStore()


@pytest.fixture
def app(store):
    return create_app(store)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def register(client):
    """Register a user through the API and return (user, auth headers)."""

    def _register(email="user@example.com", password="secret123", role="attendee", name=None):
        body = {"email": email, "password": password, "role": role}
        if name is not None:
            body["name"] = name
        res = client.post("/register", json=body)
        assert res.status_code == 201, res.text
        data = res.json()
        return data["user"], {"Authorization": f"Bearer {data['access_token']}"}

    return _register


@pytest.fixture
def organizer(register):
    return register(email="org@example.com", role="organizer", name="Olga")


@pytest.fixture
def attendee(register):
    return register(email="att@example.com", role="attendee", name="Ana")
