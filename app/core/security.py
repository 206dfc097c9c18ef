# File: app/core/security.py

"""
Security helpers for the crowdfunding API.

Passwords are stored as bcrypt hashes. Access tokens are HS256 JWTs signed
with the shared secret from settings; the user's primary key travels in the
``id`` claim.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import bcrypt
import jwt

from app.core.config import settings


ALGORITHM = settings.algorithm


class TokenError(Exception):
    """Raised when a bearer token cannot be parsed or verified."""


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # corrupt hash
        return False


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """
    Sign ``data`` into a JWT.

    ``exp`` defaults to ``settings.jwt_expires_days`` from now.
    """
    to_encode: dict[str, Any] = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(days=settings.jwt_expires_days)
    )
    to_encode["exp"] = expire
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=ALGORITHM)


def decode_access_token(token: str) -> dict[str, Any]:
    """
    Verify signature and expiry and return the claims.

    Raises TokenError for anything PyJWT rejects.
    """
    try:
        return jwt.decode(token, settings.jwt_secret, algorithms=[ALGORITHM])
    except jwt.ExpiredSignatureError as exc:
        raise TokenError("token expired") from exc
    except jwt.PyJWTError as exc:
        raise TokenError("invalid token") from exc


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """
    Return the token part of an ``Authorization: Bearer <token>`` header,
    or None when the header is missing or uses another scheme.
    """
    if not authorization:
        return None
    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None
    return parts[1]


def is_user_id(value: Any) -> bool:
    """True when a decoded ``id`` claim can be used as a user's primary key."""
    return isinstance(value, int) and not isinstance(value, bool)
