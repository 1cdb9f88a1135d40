"""Health check endpoint."""

from datetime import UTC, datetime

from fastapi import APIRouter

from .._version import __version__
from ..config import settings
from ..utils.logging import SERVICE_NAME

router = APIRouter()


@router.get("/health", summary="Basic health check")
async def basic_health_check():
    """Basic health check endpoint that doesn't require authentication."""
    return {
        "status": "healthy",
        "version": __version__,
        "timestamp": datetime.now(UTC).isoformat(),
        "service": SERVICE_NAME,
        "runner": {
            "base_url": settings.runner_base_url,
            "timeout_seconds": settings.runner_timeout_seconds,
            "module_mocks": settings.enable_module_mocks,
        },
    }
