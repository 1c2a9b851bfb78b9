"""
Pydantic schemas for MediaAsset procedures.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from .common import MAX_BIGINT, MAX_INTEGER, EntityId, MediaType
from .project import MAX_SECONDS


# --- Request Schemas ---


class CreateMediaAssetInput(BaseModel):
    """Schema for registering an uploaded media file."""

    filename: str = Field(..., min_length=1, max_length=255)
    original_filename: str = Field(..., min_length=1, max_length=255)
    file_path: str = Field(..., min_length=1, max_length=500)
    file_size: int = Field(..., gt=0, le=MAX_BIGINT, description="File size in bytes")
    mime_type: str = Field(..., min_length=1, max_length=100)
    media_type: MediaType
    duration: Optional[float] = Field(
        default=None,
        gt=0,
        lt=MAX_SECONDS,
        description="Duration in seconds (video/audio)"
    )
    width: Optional[int] = Field(default=None, gt=0, le=MAX_INTEGER, description="Width in pixels")
    height: Optional[int] = Field(default=None, gt=0, le=MAX_INTEGER, description="Height in pixels")
    user_id: EntityId


class GetMediaAssetsByUserInput(BaseModel):
    user_id: EntityId
    media_type: Optional[MediaType] = None


class GetMediaAssetInput(BaseModel):
    id: EntityId


class DeleteMediaAssetInput(BaseModel):
    id: EntityId


# --- Response Schemas ---


class MediaAssetResponse(BaseModel):
    """Full media asset details."""

    id: int
    filename: str
    original_filename: str
    file_path: str
    file_size: int
    mime_type: str
    media_type: MediaType
    duration: Optional[float] = None
    width: Optional[int] = None
    height: Optional[int] = None
    user_id: int
    created_at: datetime
    updated_at: datetime
