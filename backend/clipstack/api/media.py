"""
Media asset procedures for ClipStack.
"""

from typing import Annotated, List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from clipstack.api.deps import get_db
from clipstack.schemas.common import DeleteResponse
from clipstack.schemas.media import (
    CreateMediaAssetInput,
    DeleteMediaAssetInput,
    GetMediaAssetInput,
    GetMediaAssetsByUserInput,
    MediaAssetResponse,
)
from clipstack.services import media as media_service

router = APIRouter()


@router.get(
    "/getMediaAssetsByUser",
    response_model=List[MediaAssetResponse],
    summary="List a user's media assets",
    description="Assets owned by the user, optionally filtered by media_type.",
)
async def get_media_assets_by_user(
    params: Annotated[GetMediaAssetsByUserInput, Query()],
    db: AsyncSession = Depends(get_db),
) -> List[MediaAssetResponse]:
    return await media_service.get_media_assets_by_user(
        db, params.user_id, params.media_type
    )


@router.get(
    "/getMediaAsset",
    response_model=MediaAssetResponse,
    summary="Get media asset",
    responses={404: {"description": "Media asset not found"}},
)
async def get_media_asset(
    params: Annotated[GetMediaAssetInput, Query()],
    db: AsyncSession = Depends(get_db),
) -> MediaAssetResponse:
    return await media_service.get_media_asset(db, params.id)


@router.post(
    "/createMediaAsset",
    response_model=MediaAssetResponse,
    summary="Register media asset",
    description="Record metadata for an uploaded file. No file is stored.",
    responses={404: {"description": "User not found"}},
)
async def create_media_asset(
    data: CreateMediaAssetInput,
    db: AsyncSession = Depends(get_db),
) -> MediaAssetResponse:
    return await media_service.create_media_asset(db, data)


@router.post(
    "/deleteMediaAsset",
    response_model=DeleteResponse,
    summary="Delete media asset",
    description="Delete an asset and every timeline item that references it.",
    responses={404: {"description": "Media asset not found"}},
)
async def delete_media_asset(
    data: DeleteMediaAssetInput,
    db: AsyncSession = Depends(get_db),
) -> DeleteResponse:
    return await media_service.delete_media_asset(db, data.id)
