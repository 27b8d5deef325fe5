"""
Request / response schemas for the auth routes.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from auth.password import MAX_PASSWORD_BYTES
from database.models import Role


def _normalise_email(value: str) -> str:
    return value.strip().lower() if isinstance(value, str) else value


class SignUpRequest(BaseModel):
    name: str = Field(..., min_length=2, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=128)
    role: Role = Role.user

    @field_validator("name", mode="before")
    @classmethod
    def _strip_name(cls, value):
        return value.strip() if isinstance(value, str) else value

    @field_validator("email", mode="before")
    @classmethod
    def _lower_email(cls, value):
        return _normalise_email(value)

    @field_validator("email")
    @classmethod
    def _email_length(cls, value: str) -> str:
        if len(value) > 255:
            raise ValueError("Email must be at most 255 characters")
        return value

    @field_validator("password")
    @classmethod
    def _fits_bcrypt(cls, value: str) -> str:
        if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        if "\x00" in value:
            raise ValueError("Password must not contain NUL characters")
        return value


class SignInRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)

    @field_validator("email", mode="before")
    @classmethod
    def _lower_email(cls, value):
        return _normalise_email(value)


class SanitizedUser(BaseModel):
    """A user record without its password hash."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    role: str
    created_at: Optional[datetime] = None


class PublicUser(BaseModel):
    id: int
    name: str
    email: str
    role: str


class AuthResponse(BaseModel):
    message: str
    user: PublicUser


class MessageResponse(BaseModel):
    message: str


class MeResponse(BaseModel):
    user: dict
