"""
Account and review schemas.
"""

from __future__ import annotations

import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

_PASSWORD_MIN = 6


def _same_as(other: str, value: str, info: ValidationInfo) -> str:
    if value != info.data.get(other):
        raise PydanticCustomError("password_mismatch", "Passwords don't match")
    return value


class SignInForm(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=_PASSWORD_MIN)


class SignUpForm(BaseModel):
    name: str = Field(..., min_length=2)
    email: EmailStr
    password: str = Field(..., min_length=_PASSWORD_MIN)
    confirm_password: str

    @field_validator("confirm_password")
    @classmethod
    def check_passwords_match(cls, v: str, info: ValidationInfo) -> str:
        return _same_as("password", v, info)


class ResetPasswordForm(BaseModel):
    email: EmailStr
    new_password: str = Field(..., min_length=_PASSWORD_MIN)
    confirm_new_password: str

    @field_validator("confirm_new_password")
    @classmethod
    def check_passwords_match(cls, v: str, info: ValidationInfo) -> str:
        return _same_as("new_password", v, info)


class ReviewForm(BaseModel):
    model_config = ConfigDict(frozen=True)

    user_name: str
    rating: int = Field(5, ge=1, le=5)
    comment: str = ""
    date: str = Field(default_factory=lambda: datetime.date.today().isoformat())

    @field_validator("user_name")
    @classmethod
    def check_name_present(cls, v: str) -> str:
        if not v.strip():
            raise PydanticCustomError("name_required", "Name is required")
        return v


__all__ = (
    "SignInForm",
    "SignUpForm",
    "ResetPasswordForm",
    "ReviewForm",
)
