# File: app/schemas/user.py

import re
from typing import Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

PASSWORD_PATTERN = re.compile(r"^(?=.*\d)(?=.*[a-z])(?=.*[A-Z]).{8,16}$")


class UserBase(BaseModel):
    email: EmailStr


class UserCreate(UserBase):
    name: str = Field(min_length=2, max_length=50)
    password: str

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if len(v) < 2:
            raise ValueError("name must be 2-50 characters")
        return v

    @field_validator("password")
    @classmethod
    def check_password(cls, v: str) -> str:
        if not PASSWORD_PATTERN.match(v):
            raise ValueError(
                "password must be 8-16 characters with a digit, a lowercase and an uppercase letter"
            )
        return v


class UserSignin(UserBase):
    password: str = Field(min_length=1)


class UserRead(UserBase):
    id: int
    name: str

    class Config:
        from_attributes = True  # Pydantic v2: replaces orm_mode


class ProfileRead(UserBase):
    name: str
    avatar_url: Optional[str] = None
    phone: Optional[str] = None
    bio: Optional[str] = None

    class Config:
        from_attributes = True


class ProfileUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=2, max_length=50)
    avatar_url: Optional[str] = Field(default=None, max_length=2048)
    phone: Optional[str] = Field(default=None, max_length=20)
    bio: Optional[str] = None
