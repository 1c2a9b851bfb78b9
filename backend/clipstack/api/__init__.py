"""
ClipStack RPC routes package.

Each procedure is exposed at ``/rpc/<procedureName>``: queries as GET with
query parameters, mutations as POST with a JSON body.
"""

from fastapi import APIRouter

from .health import router as health_router
from .media import router as media_router
from .projects import router as projects_router
from .timeline import router as timeline_router
from .users import router as users_router

# Main RPC router that includes all sub-routers
api_router = APIRouter()

api_router.include_router(health_router, tags=["health"])
api_router.include_router(users_router, tags=["users"])
api_router.include_router(projects_router, tags=["projects"])
api_router.include_router(media_router, tags=["media"])
api_router.include_router(timeline_router, tags=["timeline"])

__all__ = [
    "api_router",
    "health_router",
    "media_router",
    "projects_router",
    "timeline_router",
    "users_router",
]
