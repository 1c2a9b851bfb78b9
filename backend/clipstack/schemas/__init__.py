"""
Pydantic schemas for ClipStack API.
"""

from .common import (
    DeleteResponse,
    HealthResponse,
    MediaType,
    PartialUpdate,
    ProjectStatus,
)
from .user import (
    CreateUserInput,
    GetUserInput,
    UserResponse,
)
from .project import (
    CreateProjectInput,
    DeleteProjectInput,
    GetProjectInput,
    GetProjectsByUserInput,
    ProjectResponse,
    UpdateProjectInput,
)
from .media import (
    CreateMediaAssetInput,
    DeleteMediaAssetInput,
    GetMediaAssetInput,
    GetMediaAssetsByUserInput,
    MediaAssetResponse,
)
from .timeline import (
    CreateTimelineItemInput,
    DeleteTimelineItemInput,
    GetTimelineItemInput,
    GetTimelineItemsByProjectInput,
    TimelineItemResponse,
    UpdateTimelineItemInput,
)

__all__ = [
    # Common
    "DeleteResponse",
    "HealthResponse",
    "MediaType",
    "PartialUpdate",
    "ProjectStatus",
    # User schemas
    "CreateUserInput",
    "GetUserInput",
    "UserResponse",
    # Project schemas
    "CreateProjectInput",
    "DeleteProjectInput",
    "GetProjectInput",
    "GetProjectsByUserInput",
    "ProjectResponse",
    "UpdateProjectInput",
    # Media schemas
    "CreateMediaAssetInput",
    "DeleteMediaAssetInput",
    "GetMediaAssetInput",
    "GetMediaAssetsByUserInput",
    "MediaAssetResponse",
    # Timeline schemas
    "CreateTimelineItemInput",
    "DeleteTimelineItemInput",
    "GetTimelineItemInput",
    "GetTimelineItemsByProjectInput",
    "TimelineItemResponse",
    "UpdateTimelineItemInput",
]
