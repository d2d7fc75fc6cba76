"""
Tarot Reader Backend — Readings Route Handlers
==============================================

What:  GET /api/readings (list), GET /api/readings/{id} (detail) and
       POST /api/readings (create).
How:   Each handler performs exactly one store operation, injected via
       Depends(get_store), and shapes the response.

Why sync handlers:
    The store is guarded by a threading-based read/write lock. Declaring the
    handlers with plain `def` makes FastAPI run them in its worker threadpool
    instead of on the event loop, so a writer holding the lock never stalls
    the loop.

Caching Strategy:
    - GET /api/readings: no cache headers (new readings appear at any time)
    - GET /api/readings/{id}: private, 1 hour, since readings are immutable
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response, status

from app.exceptions import NotFoundError
from app.schemas.reading import ReadingCreate, ReadingResponse
from app.store import ReadingStore, get_store

logger = logging.getLogger(__name__)

# ── Router Configuration ──────────────────────────────────────────────────
router = APIRouter(prefix="/api", tags=["Readings"])


@router.get(
    "/readings",
    response_model=List[ReadingResponse],
    summary="List all readings, newest first",
    description=(
        "Returns every stored reading ordered by creation time, most recent first. "
        "There is no pagination; the total is also reported in X-Total-Count."
    ),
)
def list_readings(
    response: Response,
    store: ReadingStore = Depends(get_store),
) -> List[ReadingResponse]:
    readings = store.list()
    response.headers["X-Total-Count"] = str(len(readings))
    return [ReadingResponse.model_validate(r) for r in readings]


@router.get(
    "/readings/{reading_id}",
    response_model=ReadingResponse,
    responses={
        200: {"description": "The reading", "model": ReadingResponse},
        404: {"description": "Unknown or malformed reading ID (empty body)"},
    },
    summary="Get a single reading by ID",
)
def get_reading(
    reading_id: str,
    response: Response,
    store: ReadingStore = Depends(get_store),
) -> ReadingResponse:
    """
    Get one reading.

    Args:
        reading_id: Taken as a plain string, not `UUID`, so that a malformed
                    ID produces the same 404 as an unknown one instead of
                    FastAPI's 422.
    """
    reading = store.get(reading_id)
    if reading is None:
        raise NotFoundError(resource="reading", resource_id=reading_id)

    response.headers["Cache-Control"] = "private, max-age=3600"
    return ReadingResponse.model_validate(reading)


@router.post(
    "/readings",
    status_code=status.HTTP_201_CREATED,
    response_model=ReadingResponse,
    responses={
        201: {"description": "Reading created", "model": ReadingResponse},
        422: {"description": "Request body is missing fields or has wrong types"},
    },
    summary="Create a reading",
    description=(
        "Stores a new reading with a server-generated ID and timestamp. "
        "The Location header points at the new resource."
    ),
)
def create_reading(
    payload: ReadingCreate,
    response: Response,
    store: ReadingStore = Depends(get_store),
) -> ReadingResponse:
    reading = store.create(
        question=payload.question,
        cards=payload.cards,
        interpretation=payload.interpretation,
    )
    logger.info("Reading %s created with %d cards", reading.id, len(reading.cards))

    response.headers["Location"] = f"/api/readings/{reading.id}"
    return ReadingResponse.model_validate(reading)
