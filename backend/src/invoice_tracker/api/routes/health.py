"""
Health check endpoint.

Provides system health status for monitoring and load balancers.
"""

from fastapi import APIRouter

from invoice_tracker import __version__
from invoice_tracker.api.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Check system health.

    The POC has no backing services, so a response means healthy.
    """
    return HealthResponse(status="healthy", version=__version__)
