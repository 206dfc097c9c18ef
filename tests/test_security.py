# File: tests/test_security.py

from datetime import timedelta

import jwt
import pytest

from app.core.security import (
    TokenError,
    create_access_token,
    decode_access_token,
    extract_bearer_token,
    hash_password,
    verify_password,
)


def test_password_hash_verifies():
    hashed = hash_password("Secret123")
    assert hashed != "Secret123"
    assert verify_password("Secret123", hashed)
    assert not verify_password("secret123", hashed)


def test_verify_password_with_corrupt_hash():
    assert verify_password("Secret123", "not-a-bcrypt-hash") is False


def test_token_carries_id_claim():
    claims = decode_access_token(create_access_token({"id": 42}))
    assert claims["id"] == 42
    assert "exp" in claims


def test_expired_token_raises():
    token = create_access_token({"id": 1}, expires_delta=timedelta(minutes=-5))
    with pytest.raises(TokenError, match="expired"):
        decode_access_token(token)


def test_token_signed_with_other_secret_raises():
    token = jwt.encode({"id": 1}, "some-other-secret", algorithm="HS256")
    with pytest.raises(TokenError):
        decode_access_token(token)


@pytest.mark.parametrize(
    "header, expected",
    [
        (None, None),
        ("", None),
        ("Bearer abc.def", "abc.def"),
        ("bearer abc.def", "abc.def"),
        ("Basic abc", None),
        ("Bearer", None),
        ("Bearer a b", None),
    ],
)
def test_extract_bearer_token(header, expected):
    assert extract_bearer_token(header) == expected
