"""
Pydantic schemas for todo API endpoints.
"""

from datetime import datetime

from ninja import Schema
from pydantic import Field

from apps.accounts.schemas import CamelSchema


class CreateTodoRequest(Schema):
    """Request to create a todo."""

    description: str = Field(
        min_length=1,
        max_length=250,
        description="What needs doing",
        examples=["Walk the dog"],
    )
    completed: bool = Field(default=False, description="Whether the todo is done")


class UpdateTodoRequest(Schema):
    """Partial update of a todo. Omitted fields are left unchanged."""

    description: str | None = Field(default=None, description="New description")
    completed: bool | None = Field(default=None, description="New completed state")


class TodoResponse(CamelSchema):
    """Single todo."""

    id: int
    description: str
    completed: bool
    user_id: int
    created_at: datetime
    updated_at: datetime
