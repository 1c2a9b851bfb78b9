"""
Media asset handlers for ClipStack.

Assets are logical references only; nothing is read from or written to disk.
"""

import logging
from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from clipstack.models.media import MediaAsset
from clipstack.models.timeline import TimelineItem
from clipstack.models.user import User
from clipstack.schemas.common import DeleteResponse
from clipstack.schemas.media import CreateMediaAssetInput, MediaAssetResponse

from .base import get_or_raise
from .numeric import to_float, to_storage

logger = logging.getLogger(__name__)


def media_asset_to_response(asset: MediaAsset) -> MediaAssetResponse:
    """Convert a MediaAsset row to its API representation."""
    return MediaAssetResponse(
        id=asset.id,
        filename=asset.filename,
        original_filename=asset.original_filename,
        file_path=asset.file_path,
        file_size=int(asset.file_size),
        mime_type=asset.mime_type,
        media_type=asset.media_type,
        duration=to_float(asset.duration),
        width=asset.width,
        height=asset.height,
        user_id=asset.user_id,
        created_at=asset.created_at,
        updated_at=asset.updated_at,
    )


async def create_media_asset(
    db: AsyncSession,
    data: CreateMediaAssetInput,
) -> MediaAssetResponse:
    """
    Register a media asset for an existing user.

    Raises:
        NotFoundError: If ``user_id`` does not reference a user
    """
    await get_or_raise(db, User, data.user_id, "user")

    asset = MediaAsset(
        filename=data.filename,
        original_filename=data.original_filename,
        file_path=data.file_path,
        file_size=data.file_size,
        mime_type=data.mime_type,
        media_type=data.media_type,
        duration=to_storage(MediaAsset, "duration", data.duration),
        width=data.width,
        height=data.height,
        user_id=data.user_id,
    )

    db.add(asset)
    await db.flush()
    await db.refresh(asset)

    logger.info(f"Created {asset.media_type} asset {asset.id} for user {data.user_id}")
    return media_asset_to_response(asset)


async def get_media_assets_by_user(
    db: AsyncSession,
    user_id: int,
    media_type: Optional[str] = None,
) -> List[MediaAssetResponse]:
    """Assets owned by ``user_id``, optionally restricted to one media type."""
    query = select(MediaAsset).where(MediaAsset.user_id == user_id)

    if media_type is not None:
        query = query.where(MediaAsset.media_type == media_type)

    result = await db.execute(query.order_by(MediaAsset.id))
    return [media_asset_to_response(a) for a in result.scalars().all()]


async def get_media_asset(db: AsyncSession, asset_id: int) -> MediaAssetResponse:
    asset = await get_or_raise(db, MediaAsset, asset_id, "media_asset")
    return media_asset_to_response(asset)


async def delete_media_asset(db: AsyncSession, asset_id: int) -> DeleteResponse:
    """
    Delete a media asset and every timeline item that references it.

    Child rows go first so the asset delete never trips the foreign key.

    Raises:
        NotFoundError: If the asset does not exist
    """
    asset = await get_or_raise(db, MediaAsset, asset_id, "media_asset")

    removed = await db.execute(
        delete(TimelineItem).where(TimelineItem.media_asset_id == asset_id)
    )
    await db.delete(asset)
    await db.flush()

    logger.info(f"Deleted media asset {asset_id} and {removed.rowcount} timeline item(s)")
    return DeleteResponse(success=True)
