# File: app/api/deps.py

import logging
from collections.abc import Generator
from typing import Optional

from fastapi import Depends, Header, Request, status
from sqlalchemy.orm import Session

from app.core.errors import AppError
from app.core.security import (
    TokenError,
    decode_access_token,
    extract_bearer_token,
    is_user_id,
)
from app.db.session import SessionLocal
from app.models.user import User

logger = logging.getLogger(__name__)


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency that provides a SQLAlchemy session.

    Usage in route functions:
        db: Session = Depends(get_db)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_current_user(
    request: Request,
    authorization: Optional[str] = Header(default=None),
    db: Session = Depends(get_db),
) -> User:
    """
    Resolve the bearer token to a User or stop the request with 401.

    Nothing is cached between requests; each call verifies the token and
    reloads the user.
    """
    token = extract_bearer_token(authorization)
    if not token:
        raise AppError(status.HTTP_401_UNAUTHORIZED, "please log in first")

    try:
        claims = decode_access_token(token)
    except TokenError as exc:
        logger.info("Rejected token on %s: %s", request.url.path, exc)
        raise AppError(status.HTTP_401_UNAUTHORIZED, "invalid or expired token")

    user_id = claims.get("id")
    user = db.get(User, user_id) if is_user_id(user_id) else None
    if user is None:
        raise AppError(status.HTTP_401_UNAUTHORIZED, "invalid or expired token")

    request.state.user = user
    return user
