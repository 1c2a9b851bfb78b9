"""
Pydantic schemas for Project procedures.

Includes request/response models for project CRUD operations.
"""

from datetime import datetime
from typing import ClassVar, Optional, Tuple

from pydantic import BaseModel, Field

from .common import MAX_INTEGER, EntityId, PartialUpdate, ProjectStatus


# Numeric(5, 2) and Numeric(10, 3) column limits
MAX_FRAME_RATE = 1000
MAX_SECONDS = 10_000_000


# --- Request Schemas ---

class CreateProjectInput(BaseModel):
    """Schema for creating a new project."""

    title: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Project display title"
    )
    description: Optional[str] = Field(
        default=None,
        description="Optional project description"
    )
    frame_rate: float = Field(
        default=30,
        gt=0,
        lt=MAX_FRAME_RATE,
        description="Frames per second"
    )
    resolution_width: int = Field(
        default=1920,
        gt=0,
        le=MAX_INTEGER,
        description="Output width in pixels"
    )
    resolution_height: int = Field(
        default=1080,
        gt=0,
        le=MAX_INTEGER,
        description="Output height in pixels"
    )
    user_id: EntityId


class UpdateProjectInput(PartialUpdate):
    """Partial project update; only fields present in the payload change."""

    non_nullable_fields: ClassVar[Tuple[str, ...]] = (
        "title",
        "status",
        "frame_rate",
        "resolution_width",
        "resolution_height",
    )

    id: EntityId
    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    status: Optional[ProjectStatus] = None
    duration: Optional[float] = Field(default=None, ge=0, lt=MAX_SECONDS)
    frame_rate: Optional[float] = Field(default=None, gt=0, lt=MAX_FRAME_RATE)
    resolution_width: Optional[int] = Field(default=None, gt=0, le=MAX_INTEGER)
    resolution_height: Optional[int] = Field(default=None, gt=0, le=MAX_INTEGER)


class GetProjectsByUserInput(BaseModel):
    user_id: EntityId


class GetProjectInput(BaseModel):
    id: EntityId


class DeleteProjectInput(BaseModel):
    id: EntityId


# --- Response Schemas ---

class ProjectResponse(BaseModel):
    """Project with numeric columns surfaced as floats."""

    id: int
    title: str
    description: Optional[str] = None
    status: ProjectStatus
    duration: Optional[float] = None
    frame_rate: float
    resolution_width: int
    resolution_height: int
    user_id: int
    created_at: datetime
    updated_at: datetime
