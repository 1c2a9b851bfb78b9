"""
Pydantic schemas for TimelineItem procedures.

Bounds mirror the storage precision of each column, e.g. ``scale`` is a
Numeric(5, 3) and so must stay below 100.
"""

from datetime import datetime
from typing import ClassVar, Optional, Tuple

from pydantic import BaseModel, Field, model_validator

from .common import MAX_INTEGER, EntityId, PartialUpdate
from .project import MAX_SECONDS


MAX_POSITION = 100_000_000
MAX_SCALE = 100
MAX_ROTATION = 10_000


# --- Request Schemas ---


class CreateTimelineItemInput(BaseModel):
    """Schema for placing a media asset on a project timeline."""

    project_id: EntityId
    media_asset_id: EntityId
    track_number: int = Field(..., ge=0, le=MAX_INTEGER, description="Track (layer) number")
    start_time: float = Field(..., ge=0, lt=MAX_SECONDS, description="Start time in seconds")
    end_time: float = Field(..., gt=0, lt=MAX_SECONDS, description="End time in seconds")
    media_start_offset: float = Field(
        default=0,
        ge=0,
        lt=MAX_SECONDS,
        description="Offset into the source media in seconds"
    )
    volume: Optional[float] = Field(default=None, ge=0, le=1)
    opacity: Optional[float] = Field(default=None, ge=0, le=1)
    position_x: Optional[float] = Field(default=None, gt=-MAX_POSITION, lt=MAX_POSITION)
    position_y: Optional[float] = Field(default=None, gt=-MAX_POSITION, lt=MAX_POSITION)
    scale: Optional[float] = Field(default=None, gt=0, lt=MAX_SCALE)
    rotation: Optional[float] = Field(default=None, gt=-MAX_ROTATION, lt=MAX_ROTATION)

    @model_validator(mode="after")
    def check_time_order(self):
        if self.end_time <= self.start_time:
            raise ValueError("End time must be greater than start time")
        return self


class UpdateTimelineItemInput(PartialUpdate):
    """Partial timeline item update; only fields present in the payload change."""

    non_nullable_fields: ClassVar[Tuple[str, ...]] = (
        "track_number",
        "start_time",
        "end_time",
        "media_start_offset",
    )

    id: EntityId
    track_number: Optional[int] = Field(default=None, ge=0, le=MAX_INTEGER)
    start_time: Optional[float] = Field(default=None, ge=0, lt=MAX_SECONDS)
    end_time: Optional[float] = Field(default=None, gt=0, lt=MAX_SECONDS)
    media_start_offset: Optional[float] = Field(default=None, ge=0, lt=MAX_SECONDS)
    volume: Optional[float] = Field(default=None, ge=0, le=1)
    opacity: Optional[float] = Field(default=None, ge=0, le=1)
    position_x: Optional[float] = Field(default=None, gt=-MAX_POSITION, lt=MAX_POSITION)
    position_y: Optional[float] = Field(default=None, gt=-MAX_POSITION, lt=MAX_POSITION)
    scale: Optional[float] = Field(default=None, gt=0, lt=MAX_SCALE)
    rotation: Optional[float] = Field(default=None, gt=-MAX_ROTATION, lt=MAX_ROTATION)

    @model_validator(mode="after")
    def check_time_order(self):
        # Only decidable here when both ends are in the patch
        if (
            self.start_time is not None
            and self.end_time is not None
            and self.end_time <= self.start_time
        ):
            raise ValueError("End time must be greater than start time")
        return self


class GetTimelineItemsByProjectInput(BaseModel):
    project_id: EntityId


class GetTimelineItemInput(BaseModel):
    id: EntityId


class DeleteTimelineItemInput(BaseModel):
    id: EntityId


# --- Response Schemas ---


class TimelineItemResponse(BaseModel):
    """Timeline item with numeric columns surfaced as floats."""

    id: int
    project_id: int
    media_asset_id: int
    track_number: int
    start_time: float
    end_time: float
    media_start_offset: float
    volume: Optional[float] = None
    opacity: Optional[float] = None
    position_x: Optional[float] = None
    position_y: Optional[float] = None
    scale: Optional[float] = None
    rotation: Optional[float] = None
    created_at: datetime
    updated_at: datetime
