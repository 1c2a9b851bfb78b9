"""
Shared test fixtures for ClipStack Backend tests.

Provides:
- Test database (SQLite in-memory, foreign keys enforced)
- Test session for calling services directly
- Test client (httpx AsyncClient over the ASGI app)
- Factories that insert rows directly
"""

import os
import uuid
from decimal import Decimal
from typing import AsyncGenerator, Optional

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

# Set test environment variables before importing app modules
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["AUTO_CREATE_TABLES"] = "false"

from clipstack.api.deps import get_db
from clipstack.core.database import Base, enable_sqlite_foreign_keys
from clipstack.main import app
from clipstack.models import MediaAsset, Project, TimelineItem, User


# =============================================================================
# Test Database Configuration
# =============================================================================

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture(scope="function")
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    """
    Provide a fresh in-memory database engine for each test.

    StaticPool keeps a single connection so every session sees the same
    in-memory database.
    """
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )
    enable_sqlite_foreign_keys(engine)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def session_factory(test_engine: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )


@pytest_asyncio.fixture(scope="function")
async def test_db(session_factory: async_sessionmaker) -> AsyncGenerator[AsyncSession, None]:
    """Provide an async database session for calling services directly."""
    async with session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# =============================================================================
# Test Client Fixtures
# =============================================================================


@pytest_asyncio.fixture(scope="function")
async def async_client(
    session_factory: async_sessionmaker,
) -> AsyncGenerator[AsyncClient, None]:
    """
    Provide an async HTTP client for testing the FastAPI application.

    Overrides the database dependency to use the test database.
    """

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


# =============================================================================
# RPC Fixtures
# =============================================================================


@pytest_asyncio.fixture
async def test_user(async_client: AsyncClient) -> dict:
    """Create a user through the RPC surface and return it."""
    suffix = uuid.uuid4().hex[:8]
    response = await async_client.post(
        "/rpc/createUser",
        json={"username": f"user_{suffix}", "email": f"user_{suffix}@example.com"},
    )
    assert response.status_code == 200, f"Failed to create user: {response.text}"
    return response.json()


@pytest_asyncio.fixture
async def test_project(async_client: AsyncClient, test_user: dict) -> dict:
    """Create a 30fps 1920x1080 project for ``test_user``."""
    response = await async_client.post(
        "/rpc/createProject",
        json={
            "title": f"Test Project {uuid.uuid4().hex[:8]}",
            "frame_rate": 30,
            "resolution_width": 1920,
            "resolution_height": 1080,
            "user_id": test_user["id"],
        },
    )
    assert response.status_code == 200, f"Failed to create project: {response.text}"
    return response.json()


@pytest_asyncio.fixture
async def test_video(async_client: AsyncClient, test_user: dict) -> dict:
    """Create a 120.5s video asset for ``test_user``."""
    response = await async_client.post(
        "/rpc/createMediaAsset",
        json=sample_media_payload(test_user["id"]),
    )
    assert response.status_code == 200, f"Failed to create media asset: {response.text}"
    return response.json()


# =============================================================================
# Helper Functions
# =============================================================================


def sample_media_payload(user_id: int, media_type: str = "video", **overrides) -> dict:
    """Build a createMediaAsset payload."""
    name = f"clip_{uuid.uuid4().hex[:8]}"
    extension, mime_type = {
        "video": ("mp4", "video/mp4"),
        "image": ("jpg", "image/jpeg"),
        "audio": ("mp3", "audio/mpeg"),
    }[media_type]

    payload = {
        "filename": f"{name}.{extension}",
        "original_filename": f"My {media_type}.{extension}",
        "file_path": f"/uploads/{user_id}/{name}.{extension}",
        "file_size": 1024 * 1024,
        "mime_type": mime_type,
        "media_type": media_type,
        "user_id": user_id,
    }
    if media_type in ("video", "audio"):
        payload["duration"] = 120.5
    if media_type in ("video", "image"):
        payload["width"] = 1920
        payload["height"] = 1080
    payload.update(overrides)
    return payload


async def create_user_directly(
    db: AsyncSession,
    username: Optional[str] = None,
    email: Optional[str] = None,
) -> User:
    """Create a user directly in the database."""
    suffix = uuid.uuid4().hex[:8]
    user = User(
        username=username or f"testuser_{suffix}",
        email=email or f"testuser_{suffix}@example.com",
    )
    db.add(user)
    await db.flush()
    await db.refresh(user)
    return user


async def create_project_directly(
    db: AsyncSession,
    user: User,
    title: Optional[str] = None,
    duration: Optional[str] = None,
) -> Project:
    """Create a project directly in the database."""
    project = Project(
        user_id=user.id,
        title=title or f"Test Project {uuid.uuid4().hex[:8]}",
        status="draft",
        duration=Decimal(duration) if duration is not None else None,
    )
    db.add(project)
    await db.flush()
    await db.refresh(project)
    return project


async def create_media_asset_directly(
    db: AsyncSession,
    user: User,
    media_type: str = "video",
) -> MediaAsset:
    """Create a media asset directly in the database."""
    filename = f"test_{uuid.uuid4().hex[:8]}.mp4"
    asset = MediaAsset(
        user_id=user.id,
        filename=filename,
        original_filename=filename,
        file_path=f"/uploads/{user.id}/{filename}",
        file_size=2048,
        mime_type="video/mp4",
        media_type=media_type,
        duration=Decimal("60.000"),
        width=1920,
        height=1080,
    )
    db.add(asset)
    await db.flush()
    await db.refresh(asset)
    return asset


async def create_timeline_item_directly(
    db: AsyncSession,
    project: Project,
    asset: MediaAsset,
    track_number: int = 0,
    start_time: str = "0",
    end_time: str = "5",
) -> TimelineItem:
    """Create a timeline item directly in the database."""
    item = TimelineItem(
        project_id=project.id,
        media_asset_id=asset.id,
        track_number=track_number,
        start_time=Decimal(start_time),
        end_time=Decimal(end_time),
    )
    db.add(item)
    await db.flush()
    await db.refresh(item)
    return item
