"""
Accounts API schemas - Pydantic models for request/response.
"""

from datetime import datetime
from typing import Any

from ninja import Schema
from pydantic import ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel


class CamelSchema(Schema):
    """Schema serialized with camelCase keys when the endpoint sets by_alias=True."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- Request Schemas ---


class RegisterRequest(Schema):
    """Request to register a new user."""

    email: EmailStr = Field(
        ...,
        description="Email address used to log in",
        examples=["user@example.com"],
    )
    password: str = Field(
        ...,
        min_length=7,
        max_length=100,
        description="Plaintext password (7-100 characters)",
    )


class LoginRequest(Schema):
    """
    Request to log in with email and password.

    Fields accept any JSON value. authenticate_user rejects non-strings as
    bad credentials.
    """

    email: Any = Field(default="", description="Registered email address")
    password: Any = Field(default="", description="Account password")


# --- Response Schemas ---


class UserResponse(CamelSchema):
    """Public user fields."""

    id: int
    email: str
    created_at: datetime
    updated_at: datetime
