"""
User procedures for ClipStack.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from clipstack.api.deps import get_db
from clipstack.schemas.user import CreateUserInput, GetUserInput, UserResponse
from clipstack.services import users as user_service

router = APIRouter()


@router.post(
    "/createUser",
    response_model=UserResponse,
    summary="Create user",
    description="Create a user. Username and email must both be unused.",
    responses={409: {"description": "Username or email already exists"}},
)
async def create_user(
    data: CreateUserInput,
    db: AsyncSession = Depends(get_db),
) -> UserResponse:
    return await user_service.create_user(db, data)


@router.get(
    "/getUser",
    response_model=UserResponse,
    summary="Get user",
    responses={404: {"description": "User not found"}},
)
async def get_user(
    params: Annotated[GetUserInput, Query()],
    db: AsyncSession = Depends(get_db),
) -> UserResponse:
    return await user_service.get_user(db, params.id)
