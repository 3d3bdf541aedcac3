"""Health check endpoints.

Public endpoints for service health monitoring.
"""

from datetime import datetime

from fastapi import APIRouter

from api.models import HealthResponse
from version import __version__


router = APIRouter(tags=["Health"])


@router.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "healthy", "service": "Password Strength API"}


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Detailed health check."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now().isoformat(),
        version=__version__,
    )
