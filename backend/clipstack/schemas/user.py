"""
Pydantic schemas for User procedures.
"""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field

from .common import EntityId


class CreateUserInput(BaseModel):
    """Schema for creating a user."""

    username: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="Unique username"
    )
    email: EmailStr = Field(
        ...,
        description="Unique email address"
    )


class GetUserInput(BaseModel):
    id: EntityId


class UserResponse(BaseModel):
    """User as returned by the API."""

    id: int
    username: str
    email: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
