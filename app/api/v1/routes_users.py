# File: app/api/v1/routes_users.py

"""
User account routes: signup, signin, token status and profile.
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.deps import get_current_user, get_db
from app.core.errors import AppError
from app.core.security import create_access_token
from app.models.user import User
from app.schemas.user import ProfileRead, ProfileUpdate, UserCreate, UserRead, UserSignin
from app.services import auth_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/signup", status_code=status.HTTP_201_CREATED, summary="Create an account")
def signup(payload: UserCreate, db: Session = Depends(get_db)):
    user = auth_service.create_user(db, payload)
    return {
        "status": True,
        "message": "signup succeeded",
        "data": {"user": {"id": user.id, "name": user.name}},
    }


@router.post("/signin", summary="Exchange credentials for a token")
def signin(payload: UserSignin, db: Session = Depends(get_db)):
    user = auth_service.authenticate_user(db, email=payload.email, password=payload.password)
    if user is None:
        raise AppError(status.HTTP_400_BAD_REQUEST, "user does not exist or password is incorrect")

    token = create_access_token({"id": user.id})
    logger.info("User %s signed in", user.id)
    return {
        "status": True,
        "data": {"token": token, "user": {"name": user.name}},
    }


@router.post("/status", summary="Check the current token")
def check_status(current_user: User = Depends(get_current_user)):
    return {
        "status": True,
        "data": {"user": UserRead.model_validate(current_user)},
    }


@router.get("/profile", summary="Read the current user's profile")
def get_profile(current_user: User = Depends(get_current_user)):
    return {
        "status": True,
        "data": ProfileRead.model_validate(current_user),
    }


@router.patch("/profile", summary="Update the current user's profile")
def patch_profile(
    payload: ProfileUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    user = auth_service.update_profile(db, current_user, payload)
    return {
        "status": True,
        "data": ProfileRead.model_validate(user),
    }
