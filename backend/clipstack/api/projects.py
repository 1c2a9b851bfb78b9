"""
Project procedures for ClipStack.

Queries are GET with query parameters, mutations are POST with a JSON body.
"""

from typing import Annotated, List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from clipstack.api.deps import get_db
from clipstack.schemas.common import DeleteResponse
from clipstack.schemas.project import (
    CreateProjectInput,
    DeleteProjectInput,
    GetProjectInput,
    GetProjectsByUserInput,
    ProjectResponse,
    UpdateProjectInput,
)
from clipstack.services import projects as project_service

router = APIRouter()


# =============================================================================
# Queries
# =============================================================================


@router.get(
    "/getProjectsByUser",
    response_model=List[ProjectResponse],
    summary="List a user's projects",
    description="All projects owned by the user; empty if there are none.",
)
async def get_projects_by_user(
    params: Annotated[GetProjectsByUserInput, Query()],
    db: AsyncSession = Depends(get_db),
) -> List[ProjectResponse]:
    return await project_service.get_projects_by_user(db, params.user_id)


@router.get(
    "/getProject",
    response_model=ProjectResponse,
    summary="Get project",
    responses={404: {"description": "Project not found"}},
)
async def get_project(
    params: Annotated[GetProjectInput, Query()],
    db: AsyncSession = Depends(get_db),
) -> ProjectResponse:
    return await project_service.get_project(db, params.id)


# =============================================================================
# Mutations
# =============================================================================


@router.post(
    "/createProject",
    response_model=ProjectResponse,
    summary="Create project",
    description="Create a draft project with no duration for an existing user.",
    responses={404: {"description": "User not found"}},
)
async def create_project(
    data: CreateProjectInput,
    db: AsyncSession = Depends(get_db),
) -> ProjectResponse:
    return await project_service.create_project(db, data)


@router.post(
    "/updateProject",
    response_model=ProjectResponse,
    summary="Update project",
    description="Change only the fields present in the body; null clears nullable fields.",
    responses={404: {"description": "Project not found"}},
)
async def update_project(
    data: UpdateProjectInput,
    db: AsyncSession = Depends(get_db),
) -> ProjectResponse:
    return await project_service.update_project(db, data)


@router.post(
    "/deleteProject",
    response_model=DeleteResponse,
    summary="Delete project",
    description="Delete a project and its timeline items. Media assets are kept.",
    responses={404: {"description": "Project not found"}},
)
async def delete_project(
    data: DeleteProjectInput,
    db: AsyncSession = Depends(get_db),
) -> DeleteResponse:
    return await project_service.delete_project(db, data.id)
