"""
Tarot Reader Backend — Health Check Route
=========================================

What:  Liveness endpoint for Docker and load balancer health checks.
How:   The service has no external dependencies (no database, no upstream
       APIs), so if the process can answer, it is healthy.
"""

from datetime import datetime, timezone

from fastapi import APIRouter

from app.schemas.reading import HealthResponse

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    description="Always reports 'healthy' together with the current server time.",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="healthy", timestamp=datetime.now(timezone.utc))
