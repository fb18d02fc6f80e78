# tests/test_core.py
"""Tests for security helpers and the error taxonomy."""

import pytest
from jose import jwt

from meetback.core.errors import (
    Conflict,
    ErrorKind,
    Forbidden,
    NotFound,
    RateLimited,
    ValidationFailed,
)
from meetback.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)
from meetback.core.settings import settings


def test_password_hash_roundtrip() -> None:
    hashed = hash_password("correct horse")
    assert hashed != "correct horse"
    assert verify_password("correct horse", hashed)
    assert not verify_password("wrong horse", hashed)
    assert not verify_password("correct horse", "not-a-hash")
    assert not verify_password("correct horse", None)


def test_token_carries_user_id() -> None:
    token = create_access_token(42)
    assert decode_access_token(token) == 42


def test_token_signed_with_other_key_is_rejected() -> None:
    forged = jwt.encode({"sub": "42"}, "another-key", algorithm=settings.jwt_algorithm)
    assert decode_access_token(forged) is None


def test_token_with_non_numeric_subject() -> None:
    token = jwt.encode({"sub": "abc"}, settings.secret_key, algorithm=settings.jwt_algorithm)
    assert decode_access_token(token) is None


@pytest.mark.parametrize(
    ("error", "kind", "status_code"),
    [
        (ValidationFailed("X", "x"), ErrorKind.VALIDATION, 422),
        (Forbidden("X", "x"), ErrorKind.FORBIDDEN, 403),
        (NotFound("X", "x"), ErrorKind.NOT_FOUND, 404),
        (Conflict("X", "x"), ErrorKind.CONFLICT, 409),
        (RateLimited("X", "x"), ErrorKind.RATE_LIMITED, 429),
        (Conflict("X", "x", status_code=400), ErrorKind.CONFLICT, 400),
    ],
)
def test_error_status_mapping(error, kind, status_code) -> None:
    assert error.kind is kind
    assert error.status_code == status_code
