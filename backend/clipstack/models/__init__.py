"""
SQLAlchemy models for ClipStack.

This module exports all database models for convenient importing:

    from clipstack.models import User, Project, MediaAsset, TimelineItem

All models use integer serial primary keys.
"""

from .user import User
from .project import PROJECT_STATUSES, Project
from .media import MEDIA_TYPES, MediaAsset
from .timeline import TimelineItem

__all__ = [
    "User",
    "Project",
    "MediaAsset",
    "TimelineItem",
    "PROJECT_STATUSES",
    "MEDIA_TYPES",
]
