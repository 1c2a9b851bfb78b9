"""
Helpers shared by the entity services.
"""

import logging
from datetime import datetime, timedelta
from typing import Optional, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from clipstack.core.database import Base, utcnow
from clipstack.core.errors import NotFoundError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


async def get_or_raise(
    db: AsyncSession,
    model: Type[ModelT],
    entity_id: int,
    resource_type: str,
) -> ModelT:
    """
    Load an entity by primary key.

    Raises:
        NotFoundError: If no row has this id
    """
    result = await db.execute(select(model).where(model.id == entity_id))
    entity = result.scalar_one_or_none()

    if entity is None:
        logger.warning(f"{resource_type} {entity_id} not found")
        raise NotFoundError(resource_type, entity_id)

    return entity


def next_updated_at(previous: Optional[datetime]) -> datetime:
    """
    Timestamp for an update that is strictly later than ``previous``.

    Two updates inside the same clock tick still get increasing values.
    """
    now = utcnow()
    if previous is not None and now <= previous:
        return previous + timedelta(microseconds=1)
    return now
