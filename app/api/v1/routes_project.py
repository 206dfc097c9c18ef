# File: app/api/v1/routes_project.py

from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Header, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from sqlalchemy.orm import Session

from app.api.deps import get_current_user, get_db
from app.core.errors import AppError
from app.core.security import TokenError, decode_access_token, extract_bearer_token
from app.models.user import User
from app.schemas.project import (
    PlanCreateRequest,
    PlanRead,
    ProjectCreate,
    ProjectUpdate,
    missing_project_fields,
)
from app.services import project_service

router = APIRouter()


@router.post(
    "",
    status_code=status.HTTP_200_OK,
    summary="Create project (step one)",
)
def create_project(
    body: dict[str, Any] = Body(...),
    authorization: Optional[str] = Header(default=None),
    db: Session = Depends(get_db),
):
    """
    Create a project owned by the token's user.

    Required fields are checked before the token, so a bad body is reported
    as 400 even without credentials.
    """
    missing = missing_project_fields(body)
    if missing:
        raise AppError(
            status.HTTP_400_BAD_REQUEST,
            f"missing required fields: {', '.join(missing)}",
            errors=missing,
        )

    token = extract_bearer_token(authorization)
    if not token:
        raise AppError(status.HTTP_401_UNAUTHORIZED, "no valid token provided")
    try:
        claims = decode_access_token(token)
    except TokenError:
        raise AppError(status.HTTP_401_UNAUTHORIZED, "invalid token")

    try:
        payload = ProjectCreate.model_validate(body)
    except ValidationError as exc:
        raise RequestValidationError(exc.errors())

    project = project_service.create_project(db, user_id=claims.get("id"), payload=payload)
    return {
        "status": True,
        "message": "project created",
        "data": {"project_id": project.id},
    }


@router.post(
    "/{id}/plans",
    status_code=status.HTTP_201_CREATED,
    summary="Add a reward plan (step two)",
)
def create_project_plan(id: int, payload: PlanCreateRequest, db: Session = Depends(get_db)):
    plan = project_service.create_plan(db, id, payload.plans)
    return {
        "status": True,
        "message": "plan created",
        "data": PlanRead.model_validate(plan),
    }


@router.get("/{project_id}", summary="Get a project with its plans")
def get_project(project_id: int, db: Session = Depends(get_db)):
    project = project_service.get_project(db, project_id)
    return {
        "status": True,
        "data": project_service.project_detail(project),
    }


@router.patch("/{project_id}", summary="Update a project and/or replace its plans")
def update_project(
    project_id: int,
    payload: ProjectUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    project = project_service.update_project(db, project_id, current_user, payload)
    return {
        "status": True,
        "data": {"project_id": project.id},
    }
