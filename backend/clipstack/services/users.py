"""
User handlers for ClipStack.
"""

import logging

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from clipstack.core.errors import ConflictError
from clipstack.models.user import User
from clipstack.schemas.user import CreateUserInput, UserResponse

from .base import get_or_raise

logger = logging.getLogger(__name__)


def user_to_response(user: User) -> UserResponse:
    return UserResponse.model_validate(user)


async def create_user(db: AsyncSession, data: CreateUserInput) -> UserResponse:
    """
    Create a user with a unique username and email.

    Raises:
        ConflictError: If the username or email is already taken
    """
    email = str(data.email)
    result = await db.execute(
        select(User).where(or_(User.username == data.username, User.email == email))
    )
    existing = result.scalars().first()

    if existing is not None:
        field = "username" if existing.username == data.username else "email"
        logger.warning(f"User creation rejected: {field} already in use")
        raise ConflictError(
            f"User with this {field} already exists",
            resource_type="user",
            field=field,
        )

    user = User(username=data.username, email=email)
    db.add(user)

    try:
        await db.flush()
    except IntegrityError as e:
        # Lost a race with a concurrent insert of the same username/email
        raise ConflictError(
            "User with this username or email already exists",
            resource_type="user",
        ) from e

    await db.refresh(user)
    logger.info(f"Created user {user.id} ({user.username})")
    return user_to_response(user)


async def get_user(db: AsyncSession, user_id: int) -> UserResponse:
    user = await get_or_raise(db, User, user_id, "user")
    return user_to_response(user)
