# File: app/models/project.py

"""
Project and ProjectPlan models.

A project is a fundraising campaign owned by one user. Its reward plans are
owned by it exclusively: deleting a plan from ``project.plans`` deletes the
row, and a plan row cannot exist without its project.
"""

from datetime import date, datetime
from typing import Any

from sqlalchemy import JSON, Date, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import Base, TimestampMixin
from app.models.category import Category
from app.models.user import User


class Project(TimestampMixin, Base):
    __tablename__ = "projects"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    summary: Mapped[str] = mapped_column(Text, nullable=False)
    total_amount: Mapped[int] = mapped_column(Integer, nullable=False)
    start_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    end_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    cover: Mapped[str] = mapped_column(String(2048), nullable=False)
    full_content: Mapped[str] = mapped_column(Text, nullable=False)
    project_team: Mapped[Any] = mapped_column(JSON, nullable=False)
    faq: Mapped[Any] = mapped_column(JSON, nullable=True)

    category_id: Mapped[int] = mapped_column(ForeignKey("categories.id"), nullable=False)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), index=True, nullable=False)

    category: Mapped[Category] = relationship()
    user: Mapped[User] = relationship(back_populates="projects")
    plans: Mapped[list["ProjectPlan"]] = relationship(
        back_populates="project",
        cascade="all, delete-orphan",
        order_by="ProjectPlan.plan_id",
    )


class ProjectPlan(Base):
    __tablename__ = "project_plans"

    plan_id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    project_id: Mapped[int] = mapped_column(
        ForeignKey("projects.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )
    plan_name: Mapped[str] = mapped_column(String(255), nullable=False)
    amount: Mapped[int] = mapped_column(Integer, nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    feedback: Mapped[str | None] = mapped_column(Text, nullable=True)
    feedback_img: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    delivery_date: Mapped[date | None] = mapped_column(Date, nullable=True)

    project: Mapped[Project] = relationship(back_populates="plans")
