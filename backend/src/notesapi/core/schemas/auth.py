"""
Authentication schemas.

These schemas define the API contracts for registration, login and the
user views returned alongside bearer tokens.
"""

import re
import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Same shape check as a typical "email" validator: something@domain.tld,
# no whitespace. The address is kept exactly as typed (no case folding).
EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def _check_email(value: str) -> str:
    if not EMAIL_PATTERN.match(value):
        raise ValueError("Invalid email address")
    return value


class RegisterRequest(BaseModel):
    """User registration request schema."""

    email: str = Field(max_length=255, description="Account email")
    password: str = Field(min_length=6, description="User password")
    name: str = Field(min_length=1, max_length=100, description="Display name")

    @field_validator("email")
    @classmethod
    def validate_email(cls, v):
        """Validate email format."""
        return _check_email(v)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"email": "a@x.com", "password": "secret1", "name": "A"}
        }
    )


class LoginRequest(BaseModel):
    """User login request schema."""

    email: str = Field(max_length=255, description="Account email")
    password: str = Field(min_length=1, description="User password")

    @field_validator("email")
    @classmethod
    def validate_email(cls, v):
        """Validate email format."""
        return _check_email(v)

    model_config = ConfigDict(
        json_schema_extra={"example": {"email": "a@x.com", "password": "secret1"}}
    )


class UserPublic(BaseModel):
    """User view returned at login. Never includes the password hash."""

    id: uuid.UUID = Field(description="User unique identifier")
    email: str = Field(description="Account email")
    name: str = Field(description="Display name")

    model_config = ConfigDict(from_attributes=True)


class UserResponse(UserPublic):
    """User view returned at registration and by /auth/me."""

    created_at: datetime = Field(description="Account creation timestamp")


class AuthPayload(BaseModel):
    """User plus freshly issued bearer token."""

    user: UserPublic
    token: str = Field(description="JWT bearer token")


class RegisterPayload(AuthPayload):
    user: UserResponse


class CurrentUserPayload(BaseModel):
    user: UserResponse
