"""
Health check route.

This endpoint is PUBLIC and provides a simple status check for load
balancers and deployment verification. It does not touch the external APIs.
"""

import logging

from fastapi import APIRouter

from zhihu_writer.schemas.health import HealthResponse

logger = logging.getLogger(__name__)

# Create router with no prefix (mounted at root level in main.py)
router = APIRouter(tags=["system"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check endpoint",
    status_code=200,
)
async def health_check() -> HealthResponse:
    """
    Public health check endpoint.

    Example response:
        {
            "status": "ok",
            "service": "zhihu-answer-writer"
        }
    """
    logger.debug("Health check endpoint called")

    return HealthResponse(status="ok")
