# File: app/schemas/project.py

from datetime import date, datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

REQUIRED_PROJECT_FIELDS = (
    "title",
    "summary",
    "category_id",
    "total_amount",
    "start_time",
    "end_time",
    "cover",
    "full_content",
    "project_team",
    "faq",
)


def missing_project_fields(body: dict[str, Any]) -> list[str]:
    """
    Names of required project fields that are absent, null, false, zero or
    an empty string, in declaration order. Empty lists and objects count as
    present.
    """
    missing = []
    for field in REQUIRED_PROJECT_FIELDS:
        value = body.get(field)
        if not value and not isinstance(value, (list, dict)):
            missing.append(field)
    return missing


# ---------- plans ----------

class PlanBase(BaseModel):
    plan_name: str = Field(min_length=1, max_length=255)
    amount: int = Field(ge=0)
    quantity: int = Field(default=0, ge=0)
    feedback: Optional[str] = None
    feedback_img: Optional[str] = None
    delivery_date: Optional[date] = None

    @field_validator("quantity", mode="before")
    @classmethod
    def falsy_quantity_is_zero(cls, v):
        return v or 0


class PlanCreate(PlanBase):
    pass


class PlanCreateRequest(BaseModel):
    plans: PlanCreate


class PlanDisplay(PlanBase):
    class Config:
        from_attributes = True


class PlanRead(PlanDisplay):
    plan_id: int
    project_id: int


# ---------- projects ----------

def as_utc(v):
    if isinstance(v, datetime) and v.tzinfo is None:
        return v.replace(tzinfo=timezone.utc)
    return v


class ProjectCreate(BaseModel):
    title: str = Field(max_length=255)
    summary: str
    category_id: int
    total_amount: int = Field(ge=0)
    start_time: datetime
    end_time: datetime
    cover: str = Field(max_length=2048)
    full_content: str
    project_team: Any
    faq: list[Any]

    @field_validator("start_time", "end_time")
    @classmethod
    def assume_utc(cls, v):
        return as_utc(v)

    @model_validator(mode="after")
    def check_period(self):
        if self.end_time < self.start_time:
            raise ValueError("end_time must not be earlier than start_time")
        return self


class ProjectUpdate(BaseModel):
    """
    Partial update. Only fields present in the request body are applied;
    use ``model_dump(exclude_unset=True)`` to get them.
    """

    title: Optional[str] = Field(default=None, max_length=255)
    summary: Optional[str] = None
    category_id: Optional[int] = None
    total_amount: Optional[int] = Field(default=None, ge=0)
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    cover: Optional[str] = Field(default=None, max_length=2048)
    full_content: Optional[str] = None
    project_team: Optional[Any] = None
    faq: Optional[list[Any]] = None
    plans: Optional[list[PlanCreate]] = None

    @field_validator("start_time", "end_time")
    @classmethod
    def assume_utc(cls, v):
        return as_utc(v)


class CategoryRead(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True


class ProjectRead(BaseModel):
    title: str
    summary: str
    category: CategoryRead
    total_amount: int
    start_time: datetime
    end_time: datetime
    cover: str
    full_content: str
    project_team: Any
    faq: list[Any] = []
    plans: list[PlanDisplay] = []

    @field_validator("faq", mode="before")
    @classmethod
    def default_faq(cls, v):
        return v or []
