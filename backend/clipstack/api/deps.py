"""
Common dependencies for ClipStack RPC procedures.
"""

from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from clipstack.core.database import get_async_session


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Provides an async database session for procedure handlers.
    The session is automatically committed on success or
    rolled back on exception.

    Usage:
        @router.get("/getItems")
        async def get_items(db: AsyncSession = Depends(get_db)):
            ...
    """
    async for session in get_async_session():
        yield session


__all__ = [
    "get_db",
]
