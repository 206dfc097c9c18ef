"""
Database initialization helpers.

Models are imported here so their tables get registered on Base.metadata.
"""

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.db.session import engine
from app.models.base import Base
from app.models import category, project, user  # noqa: F401
from app.models.category import Category

logger = logging.getLogger(__name__)

DEFAULT_CATEGORIES = [
    "Technology",
    "Design",
    "Music",
    "Film",
    "Games",
    "Publishing",
    "Food",
    "Social Good",
]


def init_db(bind=None) -> None:
    """
    Create all tables based on SQLAlchemy models.
    """
    Base.metadata.create_all(bind=bind or engine)


def seed_categories(db: Session, names: list[str] | None = None) -> int:
    """
    Insert any of ``names`` (default: DEFAULT_CATEGORIES) not already present.

    Returns the number of rows inserted.
    """
    names = names or DEFAULT_CATEGORIES
    existing = set(db.scalars(select(Category.name)).all())
    new_names = [name for name in names if name not in existing]
    for name in new_names:
        db.add(Category(name=name))
    db.commit()
    if new_names:
        logger.info("Seeded %d categories", len(new_names))
    return len(new_names)
