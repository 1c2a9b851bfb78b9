"""
Project handlers for ClipStack.

Create, list, update, and delete projects. Deleting a project removes its
timeline items through the ORM/store cascade; media assets are untouched.
"""

import logging
from decimal import Decimal
from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from clipstack.models.project import Project
from clipstack.models.user import User
from clipstack.schemas.common import DeleteResponse
from clipstack.schemas.project import (
    CreateProjectInput,
    ProjectResponse,
    UpdateProjectInput,
)

from .base import get_or_raise, next_updated_at
from .numeric import to_float, to_storage

logger = logging.getLogger(__name__)


def project_to_response(project: Project) -> ProjectResponse:
    """Convert a Project row to its API representation."""
    return ProjectResponse(
        id=project.id,
        title=project.title,
        description=project.description,
        status=project.status,
        duration=to_float(project.duration),
        frame_rate=to_float(project.frame_rate),
        resolution_width=project.resolution_width,
        resolution_height=project.resolution_height,
        user_id=project.user_id,
        created_at=project.created_at,
        updated_at=project.updated_at,
    )


async def create_project(db: AsyncSession, data: CreateProjectInput) -> ProjectResponse:
    """
    Create a draft project for an existing user.

    Raises:
        NotFoundError: If ``user_id`` does not reference a user
    """
    await get_or_raise(db, User, data.user_id, "user")

    project = Project(
        title=data.title,
        description=data.description,
        status="draft",
        duration=None,
        frame_rate=to_storage(Project, "frame_rate", data.frame_rate),
        resolution_width=data.resolution_width,
        resolution_height=data.resolution_height,
        user_id=data.user_id,
    )

    db.add(project)
    await db.flush()
    await db.refresh(project)

    logger.info(f"Created project {project.id} for user {data.user_id}")
    return project_to_response(project)


async def get_projects_by_user(db: AsyncSession, user_id: int) -> List[ProjectResponse]:
    """All projects owned by ``user_id``; empty if there are none or the user is unknown."""
    result = await db.execute(
        select(Project).where(Project.user_id == user_id).order_by(Project.id)
    )
    return [project_to_response(p) for p in result.scalars().all()]


async def get_project(db: AsyncSession, project_id: int) -> ProjectResponse:
    project = await get_or_raise(db, Project, project_id, "project")
    return project_to_response(project)


async def update_project(db: AsyncSession, data: UpdateProjectInput) -> ProjectResponse:
    """
    Apply the fields present in ``data``; all others keep their stored value.

    Raises:
        NotFoundError: If the project does not exist
        ValidationError: If a value no longer fits its column once rounded
    """
    project = await get_or_raise(db, Project, data.id, "project")

    changes = {
        field: to_storage(Project, field, value)
        for field, value in data.present_fields().items()
    }
    for field, value in changes.items():
        setattr(project, field, value)

    project.updated_at = next_updated_at(project.updated_at)

    await db.flush()
    await db.refresh(project)

    logger.info(f"Updated project {project.id}: {sorted(changes)}")
    return project_to_response(project)


async def delete_project(db: AsyncSession, project_id: int) -> DeleteResponse:
    """
    Delete a project and, by cascade, all of its timeline items.

    Raises:
        NotFoundError: If the project does not exist
    """
    project = await get_or_raise(db, Project, project_id, "project")

    await db.delete(project)
    await db.flush()

    logger.info(f"Deleted project {project_id}")
    return DeleteResponse(success=True)


async def extend_project_duration(
    db: AsyncSession,
    project_id: int,
    end_time: Decimal,
) -> None:
    """
    Raise a project's duration to cover a timeline item ending at ``end_time``.

    The duration only grows here; removing items never shortens it.
    """
    project = await get_or_raise(db, Project, project_id, "project")

    if project.duration is None or project.duration < end_time:
        logger.debug(f"Extending project {project_id} duration to {end_time}")
        project.duration = end_time
        await db.flush()
