"""
Health procedure for ClipStack.
"""

from fastapi import APIRouter

from clipstack.core.database import utcnow
from clipstack.schemas.common import HealthResponse

router = APIRouter()


def health_payload() -> HealthResponse:
    """Static liveness payload; does not touch the database."""
    return HealthResponse(status="ok", timestamp=utcnow())


@router.get(
    "/healthcheck",
    response_model=HealthResponse,
    summary="Health check",
)
async def healthcheck() -> HealthResponse:
    return health_payload()
