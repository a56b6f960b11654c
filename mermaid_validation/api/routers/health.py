"""
Health check API endpoints.

Routes: GET /health

Liveness only. The renderer is not probed.

System role: Health check HTTP API
"""

from fastapi import APIRouter

from mermaid_validation.models import HealthResponse

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="ok")
