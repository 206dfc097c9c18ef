# File: app/services/auth_service.py

"""
Authentication service.

Contains:
  - User creation (signup) with bcrypt-hashed passwords
  - Credential verification (signin)
  - Profile updates
"""

import logging
from typing import Optional

from fastapi import status
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import AppError
from app.core.security import hash_password, verify_password
from app.models.user import User
from app.schemas.user import ProfileUpdate, UserCreate

logger = logging.getLogger(__name__)


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.scalars(select(User).where(User.email == email.lower())).first()


def create_user(db: Session, payload: UserCreate) -> User:
    """
    Register a new account. Emails are stored lowercased and must be unique.
    """
    email = payload.email.lower()
    if get_user_by_email(db, email) is not None:
        raise AppError(status.HTTP_409_CONFLICT, "email already registered")

    user = User(
        email=email,
        name=payload.name,
        password=hash_password(payload.password),
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # lost a race with another signup for the same email
        db.rollback()
        raise AppError(status.HTTP_409_CONFLICT, "email already registered")
    db.refresh(user)
    logger.info("Created user %s", user.id)
    return user


def authenticate_user(
    db: Session,
    *,
    email: str,
    password: str,
) -> Optional[User]:
    """
    Return the user when the password matches, otherwise None.

    Unknown emails and wrong passwords are indistinguishable to the caller.
    """
    user = get_user_by_email(db, email)
    if user is None or not verify_password(password, user.password):
        return None
    return user


def update_profile(db: Session, user: User, payload: ProfileUpdate) -> User:
    changes = payload.model_dump(exclude_unset=True)
    if not changes:
        raise AppError(status.HTTP_400_BAD_REQUEST, "no profile fields to update")
    if "name" in changes:
        name = (changes["name"] or "").strip()
        if len(name) < 2:
            raise AppError(status.HTTP_400_BAD_REQUEST, "name must be 2-50 characters")
        changes["name"] = name

    for field, value in changes.items():
        setattr(user, field, value)

    try:
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Profile update failed for user %s: %s", user.id, exc)
        raise AppError(status.HTTP_500_INTERNAL_SERVER_ERROR, "failed to update profile")
    db.refresh(user)
    return user
