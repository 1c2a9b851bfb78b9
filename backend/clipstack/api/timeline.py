"""
Timeline procedures for ClipStack.
"""

from typing import Annotated, List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from clipstack.api.deps import get_db
from clipstack.schemas.common import DeleteResponse
from clipstack.schemas.timeline import (
    CreateTimelineItemInput,
    DeleteTimelineItemInput,
    GetTimelineItemInput,
    GetTimelineItemsByProjectInput,
    TimelineItemResponse,
    UpdateTimelineItemInput,
)
from clipstack.services import timeline as timeline_service

router = APIRouter()


# =============================================================================
# Queries
# =============================================================================


@router.get(
    "/getTimelineItemsByProject",
    response_model=List[TimelineItemResponse],
    summary="List timeline items",
    description="Items of a project ordered by track number, then start time.",
)
async def get_timeline_items_by_project(
    params: Annotated[GetTimelineItemsByProjectInput, Query()],
    db: AsyncSession = Depends(get_db),
) -> List[TimelineItemResponse]:
    return await timeline_service.get_timeline_items_by_project(db, params.project_id)


@router.get(
    "/getTimelineItem",
    response_model=TimelineItemResponse,
    summary="Get timeline item",
    responses={404: {"description": "Timeline item not found"}},
)
async def get_timeline_item(
    params: Annotated[GetTimelineItemInput, Query()],
    db: AsyncSession = Depends(get_db),
) -> TimelineItemResponse:
    return await timeline_service.get_timeline_item(db, params.id)


# =============================================================================
# Mutations
# =============================================================================


@router.post(
    "/createTimelineItem",
    response_model=TimelineItemResponse,
    summary="Create timeline item",
    description="Place a media asset on a project track between start_time and end_time.",
    responses={404: {"description": "Project or media asset not found"}},
)
async def create_timeline_item(
    data: CreateTimelineItemInput,
    db: AsyncSession = Depends(get_db),
) -> TimelineItemResponse:
    return await timeline_service.create_timeline_item(db, data)


@router.post(
    "/updateTimelineItem",
    response_model=TimelineItemResponse,
    summary="Update timeline item",
    description="Change only the fields present in the body; null clears nullable fields.",
    responses={404: {"description": "Timeline item not found"}},
)
async def update_timeline_item(
    data: UpdateTimelineItemInput,
    db: AsyncSession = Depends(get_db),
) -> TimelineItemResponse:
    return await timeline_service.update_timeline_item(db, data)


@router.post(
    "/deleteTimelineItem",
    response_model=DeleteResponse,
    summary="Delete timeline item",
    responses={404: {"description": "Timeline item not found"}},
)
async def delete_timeline_item(
    data: DeleteTimelineItemInput,
    db: AsyncSession = Depends(get_db),
) -> DeleteResponse:
    return await timeline_service.delete_timeline_item(db, data.id)
