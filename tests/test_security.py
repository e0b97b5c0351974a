import pytest
from jose import jwt

from app.core.config import settings
from app.core.security import create_access_token, hash_password, verify_password


def test_hash_and_verify():
    hashed = hash_password("secret123")
    assert hashed != "secret123"
    assert verify_password("secret123", hashed)
    assert not verify_password("wrong", hashed)


def test_hash_rejects_passwords_over_72_bytes():
    with pytest.raises(ValueError):
        hash_password("ñ" * 40)


def test_verify_long_password_is_false():
    hashed = hash_password("secret123")
    assert verify_password("x" * 100, hashed) is False


def test_verify_against_non_hash_is_false():
    assert verify_password("secret123", "") is False


def test_access_token_subject():
    token = create_access_token("7")
    payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    assert payload["sub"] == "7"
    assert "exp" in payload
