"""
Tarot Reader Backend — Index Route
==================================

GET / returns a static description of the service and its endpoints.
"""

from fastapi import APIRouter

from app import __version__
from app.schemas.reading import IndexResponse

router = APIRouter(tags=["Index"])

ENDPOINTS = {
    "health": "GET /health",
    "readings": "GET /api/readings",
    "reading": "GET /api/readings/{id}",
    "create_reading": "POST /api/readings",
}


@router.get(
    "/",
    response_model=IndexResponse,
    summary="Service description",
)
async def index() -> IndexResponse:
    return IndexResponse(
        message="Tarot Reader API",
        version=__version__,
        endpoints=dict(ENDPOINTS),
    )
