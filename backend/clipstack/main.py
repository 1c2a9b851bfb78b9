"""
ClipStack Backend API

Main FastAPI application entry point.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from clipstack.api import api_router
from clipstack.api.health import health_payload
from clipstack.core.config import get_settings
from clipstack.core.database import create_all_tables
from clipstack.core.errors import ClipStackError
from clipstack.schemas.common import HealthResponse

# Load settings
settings = get_settings()

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info(f"Starting {settings.app_name} v{settings.version}")

    if settings.auto_create_tables:
        await create_all_tables()
        logger.info("Database tables ensured")

    yield

    logger.info("Shutting down...")


app = FastAPI(
    title=settings.app_name,
    description="Video editing project, media, and timeline service",
    version=settings.version,
    lifespan=lifespan,
)


@app.exception_handler(ClipStackError)
async def clipstack_error_handler(request: Request, exc: ClipStackError) -> JSONResponse:
    """Render domain errors with the same detail shape as HTTPException."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.to_detail()},
    )


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    """Constraint violations from concurrent writes surface as conflicts."""
    logger.warning(f"Integrity error on {request.url.path}: {exc.orig}")
    return JSONResponse(
        status_code=409,
        content={
            "detail": {
                "error": "conflict",
                "message": "Operation violates a database constraint",
            }
        },
    )


# CORS configuration (loaded from environment)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include RPC routes
app.include_router(api_router, prefix="/rpc")


@app.get("/")
async def root():
    """Root endpoint - API info."""
    return {
        "name": settings.app_name,
        "version": settings.version,
        "status": "running",
        "rpc": "/rpc",
    }


@app.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Health check endpoint for Docker/orchestration."""
    return health_payload()


def run() -> None:
    """Start the HTTP listener (``clipstack-server`` console script)."""
    import uvicorn

    uvicorn.run(
        "clipstack.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
