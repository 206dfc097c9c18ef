# File: app/services/project_service.py

"""
Project and reward-plan persistence.

Routes call into here with validated schemas; every failure leaves as an
AppError carrying the status code the client should see.
"""

import logging

from fastapi import status
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload, selectinload

from app.core.errors import AppError
from app.core.security import is_user_id
from app.models.category import Category
from app.models.project import Project, ProjectPlan
from app.models.user import User
from app.schemas.project import (
    CategoryRead,
    PlanCreate,
    PlanDisplay,
    ProjectCreate,
    ProjectRead,
    ProjectUpdate,
    as_utc,
)

logger = logging.getLogger(__name__)

# Fields that may be explicitly cleared with null on update.
NULLABLE_UPDATE_FIELDS = {"faq"}


def _build_plan(plan: PlanCreate) -> ProjectPlan:
    return ProjectPlan(
        plan_name=plan.plan_name,
        amount=plan.amount,
        quantity=plan.quantity or 0,
        feedback=plan.feedback,
        feedback_img=plan.feedback_img,
        delivery_date=plan.delivery_date,
    )


def create_project(db: Session, *, user_id, payload: ProjectCreate) -> Project:
    """
    Insert a project owned by ``user_id``.

    The user and the referenced category must both exist (400 otherwise).
    """
    user = db.get(User, user_id) if is_user_id(user_id) else None
    if user is None:
        raise AppError(status.HTTP_400_BAD_REQUEST, "user not found")

    category = db.get(Category, payload.category_id)
    if category is None:
        raise AppError(status.HTTP_400_BAD_REQUEST, "invalid category")

    project = Project(
        **payload.model_dump(exclude={"category_id"}),
        category=category,
        user=user,
    )
    db.add(project)
    try:
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Failed to create project for user %s: %s", user.id, exc)
        raise AppError(status.HTTP_400_BAD_REQUEST, "project fields are incomplete or invalid")

    db.refresh(project)
    logger.info("User %s created project %s", user.id, project.id)
    return project


def create_plan(db: Session, project_id: int, payload: PlanCreate) -> ProjectPlan:
    project = db.get(Project, project_id)
    if project is None:
        raise AppError(status.HTTP_404_NOT_FOUND, "project not found")

    plan = _build_plan(payload)
    plan.project = project
    db.add(plan)
    try:
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Failed to create plan for project %s: %s", project_id, exc)
        raise AppError(status.HTTP_500_INTERNAL_SERVER_ERROR, "failed to create plan")

    db.refresh(plan)
    return plan


def get_project(db: Session, project_id: int) -> Project:
    project = db.scalars(
        select(Project)
        .options(joinedload(Project.category), selectinload(Project.plans))
        .where(Project.id == project_id)
    ).first()
    if project is None:
        raise AppError(status.HTTP_404_NOT_FOUND, "project not found")
    return project


def project_detail(project: Project) -> ProjectRead:
    """
    Shape a project for display: plans ordered by plan_id, internal ids
    dropped, faq defaulting to an empty list.
    """
    plans = sorted(project.plans, key=lambda plan: plan.plan_id)
    return ProjectRead(
        title=project.title,
        summary=project.summary,
        category=CategoryRead.model_validate(project.category),
        total_amount=project.total_amount,
        start_time=project.start_time,
        end_time=project.end_time,
        cover=project.cover,
        full_content=project.full_content,
        project_team=project.project_team,
        faq=project.faq or [],
        plans=[PlanDisplay.model_validate(plan) for plan in plans],
    )


def update_project(db: Session, project_id: int, user: User, payload: ProjectUpdate) -> Project:
    """
    Apply a partial update to a project owned by ``user``.

    Only fields present in the request are written. A ``plans`` list replaces
    the whole plan set. Field changes and the plan swap commit together or
    not at all.
    """
    project = db.scalars(
        select(Project)
        .options(selectinload(Project.plans))
        .where(Project.id == project_id, Project.user_id == user.id)
    ).first()
    if project is None:
        if db.get(Project, project_id) is not None:
            raise AppError(status.HTTP_403_FORBIDDEN, "you are not allowed to modify this project")
        raise AppError(status.HTTP_400_BAD_REQUEST, "project not found")
    if project.user_id != user.id:
        raise AppError(status.HTTP_403_FORBIDDEN, "you are not allowed to modify this project")

    changes = payload.model_dump(exclude_unset=True, exclude={"plans"})
    for field, value in changes.items():
        if value is None and field not in NULLABLE_UPDATE_FIELDS:
            raise AppError(status.HTTP_400_BAD_REQUEST, f"{field} cannot be null")

    if "category_id" in changes and db.get(Category, changes["category_id"]) is None:
        raise AppError(status.HTTP_400_BAD_REQUEST, "invalid category")

    if "start_time" in changes or "end_time" in changes:
        start_time = as_utc(changes.get("start_time", project.start_time))
        end_time = as_utc(changes.get("end_time", project.end_time))
        if end_time < start_time:
            raise AppError(status.HTTP_400_BAD_REQUEST, "end_time must not be earlier than start_time")

    for field, value in changes.items():
        setattr(project, field, value)

    if payload.plans is not None:
        # delete-orphan removes every previous plan row on flush
        project.plans = [_build_plan(plan) for plan in payload.plans]

    try:
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Failed to update project %s: %s", project_id, exc)
        raise AppError(status.HTTP_500_INTERNAL_SERVER_ERROR, "failed to update project")

    logger.info("User %s updated project %s", user.id, project.id)
    return project
