"""Auth routes — register, login, profile and bearer-token checks."""

from datetime import datetime, timedelta, timezone

from jose import jwt

from app.core.config import settings
from app.core.security import create_access_token


def test_register_returns_token_and_public_user(client):
    res = client.post(
        "/register",
        json={"email": "ana@example.com", "password": "secret123", "name": "Ana"},
    )
    assert res.status_code == 201
    data = res.json()
    assert data["access_token"]
    assert data["token_type"] == "bearer"
    assert data["user"]["id"] == 1
    assert data["user"]["email"] == "ana@example.com"
    assert data["user"]["role"] == "attendee"
    assert "password" not in data["user"]


def test_register_stores_hashed_password(client, store):
    client.post("/register", json={"email": "ana@example.com", "password": "secret123"})
    user = store.find_user_by_email("ana@example.com")
    assert user.password != "secret123"
    assert user.password.startswith("$2")


def test_register_duplicate_email(client, register):
    register(email="ana@example.com")
    res = client.post("/register", json={"email": "ana@example.com", "password": "other123"})
    assert res.status_code == 400
    assert res.json()["detail"] == "Email already registered"


def test_register_rejects_long_password(client):
    res = client.post("/register", json={"email": "ana@example.com", "password": "x" * 73})
    assert res.status_code == 400


def test_register_validation_error(client):
    res = client.post("/register", json={"email": "not-an-email", "password": "secret123"})
    assert res.status_code == 422
    fields = [d["field"] for d in res.json()["details"]]
    assert "body.email" in fields


def test_register_rejects_unknown_role(client):
    res = client.post(
        "/register",
        json={"email": "ana@example.com", "password": "secret123", "role": "admin"},
    )
    assert res.status_code == 422


def test_login_success(client, register):
    register(email="ana@example.com", password="secret123")
    res = client.post("/login", json={"email": "ana@example.com", "password": "secret123"})
    assert res.status_code == 200
    assert res.json()["user"]["email"] == "ana@example.com"


def test_login_wrong_password(client, register):
    register(email="ana@example.com", password="secret123")
    res = client.post("/login", json={"email": "ana@example.com", "password": "wrong123"})
    assert res.status_code == 401


def test_login_unknown_email(client):
    res = client.post("/login", json={"email": "ghost@example.com", "password": "secret123"})
    assert res.status_code == 401


def test_profile_requires_token(client):
    res = client.get("/profile")
    assert res.status_code == 401


def test_profile_returns_current_user(client, register):
    user, headers = register(email="ana@example.com", name="Ana")
    res = client.get("/profile", headers=headers)
    assert res.status_code == 200
    assert res.json()["id"] == user["id"]
    assert res.json()["name"] == "Ana"
    assert "password" not in res.json()


def test_profile_rejects_garbage_token(client):
    res = client.get("/profile", headers={"Authorization": "Bearer not-a-jwt"})
    assert res.status_code == 401


def test_profile_rejects_expired_token(client, register):
    user, _ = register()
    expired = datetime.now(timezone.utc) - timedelta(minutes=1)
    token = jwt.encode(
        {"sub": str(user["id"]), "exp": expired}, settings.SECRET_KEY, algorithm=settings.ALGORITHM,
    )
    res = client.get("/profile", headers={"Authorization": f"Bearer {token}"})
    assert res.status_code == 401


def test_profile_rejects_token_for_unknown_user(client):
    token = create_access_token("999")
    res = client.get("/profile", headers={"Authorization": f"Bearer {token}"})
    assert res.status_code == 401
