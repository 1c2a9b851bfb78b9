"""
Timeline item handlers for ClipStack.

Timeline items are listed in render order: ascending track number, then
ascending start time within a track. Creating or moving an item extends
the owning project's duration when the item ends past it.
"""

import logging
from decimal import Decimal
from typing import Any, Dict, List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from clipstack.core.errors import ValidationError
from clipstack.models.media import MediaAsset
from clipstack.models.project import Project
from clipstack.models.timeline import TimelineItem
from clipstack.schemas.common import DeleteResponse
from clipstack.schemas.timeline import (
    CreateTimelineItemInput,
    TimelineItemResponse,
    UpdateTimelineItemInput,
)

from .base import get_or_raise, next_updated_at
from .numeric import to_float, to_storage
from .projects import extend_project_duration

logger = logging.getLogger(__name__)


# Columns copied from create input to the row
TIMELINE_FIELDS = (
    "track_number",
    "start_time",
    "end_time",
    "media_start_offset",
    "volume",
    "opacity",
    "position_x",
    "position_y",
    "scale",
    "rotation",
)


def timeline_item_to_response(item: TimelineItem) -> TimelineItemResponse:
    """Convert a TimelineItem row to its API representation."""
    return TimelineItemResponse(
        id=item.id,
        project_id=item.project_id,
        media_asset_id=item.media_asset_id,
        track_number=item.track_number,
        start_time=to_float(item.start_time),
        end_time=to_float(item.end_time),
        media_start_offset=to_float(item.media_start_offset),
        volume=to_float(item.volume),
        opacity=to_float(item.opacity),
        position_x=to_float(item.position_x),
        position_y=to_float(item.position_y),
        scale=to_float(item.scale),
        rotation=to_float(item.rotation),
        created_at=item.created_at,
        updated_at=item.updated_at,
    )


def check_time_order(start_time: Decimal, end_time: Decimal) -> None:
    """
    Reject items whose stored end does not come after their stored start.

    Checked on quantized values: 1.0001 and 1.0004 both store as 1.000.
    """
    if end_time <= start_time:
        raise ValidationError(
            "End time must be greater than start time",
            resource_type="timeline_item",
            field="end_time",
        )


async def create_timeline_item(
    db: AsyncSession,
    data: CreateTimelineItemInput,
) -> TimelineItemResponse:
    """
    Place a media asset on a project timeline.

    Unset optional fields are stored as null.

    Raises:
        NotFoundError: If the project or media asset does not exist
        ValidationError: If end_time is not after start_time once stored
    """
    await get_or_raise(db, Project, data.project_id, "project")
    await get_or_raise(db, MediaAsset, data.media_asset_id, "media_asset")

    values: Dict[str, Any] = {
        field: to_storage(TimelineItem, field, getattr(data, field))
        for field in TIMELINE_FIELDS
    }
    check_time_order(values["start_time"], values["end_time"])

    item = TimelineItem(
        project_id=data.project_id,
        media_asset_id=data.media_asset_id,
        **values,
    )

    db.add(item)
    await db.flush()
    await db.refresh(item)

    await extend_project_duration(db, item.project_id, item.end_time)

    logger.info(
        f"Created timeline item {item.id} on project {item.project_id} "
        f"(track {item.track_number}, {item.start_time}-{item.end_time}s)"
    )
    return timeline_item_to_response(item)


async def get_timeline_items_by_project(
    db: AsyncSession,
    project_id: int,
) -> List[TimelineItemResponse]:
    """Items of a project ordered by track, then start time; empty if none."""
    result = await db.execute(
        select(TimelineItem)
        .where(TimelineItem.project_id == project_id)
        .order_by(
            TimelineItem.track_number.asc(),
            TimelineItem.start_time.asc(),
            TimelineItem.id.asc(),
        )
    )
    return [timeline_item_to_response(i) for i in result.scalars().all()]


async def get_timeline_item(db: AsyncSession, item_id: int) -> TimelineItemResponse:
    item = await get_or_raise(db, TimelineItem, item_id, "timeline_item")
    return timeline_item_to_response(item)


async def update_timeline_item(
    db: AsyncSession,
    data: UpdateTimelineItemInput,
) -> TimelineItemResponse:
    """
    Apply the fields present in ``data``; all others keep their stored value.

    Raises:
        NotFoundError: If the item does not exist
        ValidationError: If the merged start/end times are out of order
    """
    item = await get_or_raise(db, TimelineItem, data.id, "timeline_item")

    changes = {
        field: to_storage(TimelineItem, field, value)
        for field, value in data.present_fields().items()
    }
    check_time_order(
        changes.get("start_time", item.start_time),
        changes.get("end_time", item.end_time),
    )

    for field, value in changes.items():
        setattr(item, field, value)

    item.updated_at = next_updated_at(item.updated_at)

    await db.flush()
    await db.refresh(item)

    if "end_time" in changes:
        await extend_project_duration(db, item.project_id, item.end_time)

    logger.info(f"Updated timeline item {item.id}: {sorted(changes)}")
    return timeline_item_to_response(item)


async def delete_timeline_item(db: AsyncSession, item_id: int) -> DeleteResponse:
    """
    Delete a timeline item.

    Raises:
        NotFoundError: If the item does not exist
    """
    item = await get_or_raise(db, TimelineItem, item_id, "timeline_item")

    await db.delete(item)
    await db.flush()

    logger.info(f"Deleted timeline item {item_id}")
    return DeleteResponse(success=True)
