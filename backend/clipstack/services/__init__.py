"""
Entity handlers for ClipStack.

One coroutine per operation. Each takes an ``AsyncSession`` plus validated
input and returns a response schema, raising ``clipstack.core.errors``
exceptions on failure. Transactions are owned by the caller.
"""

from .media import (
    create_media_asset,
    delete_media_asset,
    get_media_asset,
    get_media_assets_by_user,
)
from .projects import (
    create_project,
    delete_project,
    extend_project_duration,
    get_project,
    get_projects_by_user,
    update_project,
)
from .timeline import (
    create_timeline_item,
    delete_timeline_item,
    get_timeline_item,
    get_timeline_items_by_project,
    update_timeline_item,
)
from .users import create_user, get_user

__all__ = [
    "create_user",
    "get_user",
    "create_project",
    "get_projects_by_user",
    "get_project",
    "update_project",
    "delete_project",
    "extend_project_duration",
    "create_media_asset",
    "get_media_assets_by_user",
    "get_media_asset",
    "delete_media_asset",
    "create_timeline_item",
    "get_timeline_items_by_project",
    "get_timeline_item",
    "update_timeline_item",
    "delete_timeline_item",
]
