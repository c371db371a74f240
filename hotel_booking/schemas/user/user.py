"""
User and authentication schemas.
"""

import re
from datetime import date
from typing import Optional

from pydantic import EmailStr, Field, field_validator

from hotel_booking.models.base import Gender, UserType
from hotel_booking.schemas.common import (
    BaseCreateSchema,
    BaseResponseSchema,
    BaseSchema,
    BaseUpdateSchema,
)

PHONE_PATTERN = re.compile(r"^\d{10,15}$")

__all__ = [
    "UserRegister",
    "UserLogin",
    "UserUpdate",
    "PasswordUpdate",
    "ForgotPasswordRequest",
    "ResetPasswordRequest",
    "UserResponse",
    "LoginResponse",
]


def _check_phone(value: Optional[str]) -> Optional[str]:
    if value is not None and not PHONE_PATTERN.match(value):
        raise ValueError("'numberPhone' must be a valid phone number.")
    return value


class UserRegister(BaseCreateSchema):
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=6, description="At least 6 characters")
    number_phone: str = Field(..., alias="numberPhone", description="10-15 digits")
    type: Optional[UserType] = None

    @field_validator("number_phone")
    @classmethod
    def validate_phone(cls, v: str) -> str:
        return _check_phone(v)


class UserLogin(BaseSchema):
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UserUpdate(BaseUpdateSchema):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(default=None, min_length=6)
    number_phone: Optional[str] = Field(default=None, alias="numberPhone")
    birth_date: Optional[date] = Field(default=None, alias="birthDate")
    gender: Optional[Gender] = None
    type: Optional[UserType] = None
    cccd: Optional[str] = Field(default=None, min_length=1, max_length=20)
    address: Optional[str] = Field(default=None, min_length=1, max_length=255)

    @field_validator("number_phone")
    @classmethod
    def validate_phone(cls, v: Optional[str]) -> Optional[str]:
        return _check_phone(v)


class PasswordUpdate(BaseSchema):
    user_id: int = Field(..., alias="userId")
    current_password: str = Field(..., alias="currentPassword", min_length=6)
    new_password: str = Field(..., alias="newPassword", min_length=6)


class ForgotPasswordRequest(BaseSchema):
    email: EmailStr


class ResetPasswordRequest(BaseSchema):
    token: str = Field(..., min_length=1)
    new_password: str = Field(..., alias="newpassword", min_length=6)


class UserResponse(BaseResponseSchema):
    name: str
    email: str
    number_phone: Optional[str] = Field(default=None, alias="numberPhone")
    birth_date: Optional[date] = Field(default=None, alias="birthDate")
    gender: Optional[Gender] = None
    type: UserType
    cccd: Optional[str] = None
    address: Optional[str] = None
    url: Optional[str] = None


class LoginResponse(BaseSchema):
    message: str = "successful"
    token: str
    name: str
    type: UserType
    id: int
