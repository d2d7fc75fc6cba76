"""
Tarot Reader Backend — Pydantic Request/Response Schemas
========================================================

What:  Pydantic models defining the API contract between frontend and backend.
Why:   Request bodies are parsed and type-checked before any handler runs;
       responses are serialized consistently and documented in OpenAPI.
How:   FastAPI uses these models to validate request bodies, serialize responses,
       and generate Swagger/OpenAPI documentation automatically.

Design Decision:
    Schemas are separate from the Reading dataclass so the stored shape
    (tuple of cards, frozen) and the wire shape (JSON array) can differ.
    ReadingResponse reads straight off a Reading via `from_attributes`.
"""

import uuid
from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models: what the client sends
# ══════════════════════════════════════════════════════════════════════════


class ReadingCreate(BaseModel):
    """
    Body of POST /api/readings.

    Only types are checked: empty strings and empty card lists are accepted.
    A missing field or a wrong type is rejected by FastAPI with 422.
    """
    question: str = Field(description="The question asked of the cards")
    cards: List[str] = Field(description="Names of the drawn cards, in draw order")
    interpretation: str = Field(description="Interpretation of the spread")


# ══════════════════════════════════════════════════════════════════════════
# Response Models: what the API returns to clients
# ══════════════════════════════════════════════════════════════════════════


class ReadingResponse(BaseModel):
    """
    What:  Full representation of a stored reading.
    Who:   Returned by all three /api/readings endpoints.
    """
    id: uuid.UUID = Field(description="Unique reading identifier (UUID)")
    question: str = Field(description="The question asked")
    cards: List[str] = Field(description="Drawn cards, in draw order")
    interpretation: str = Field(description="Interpretation of the spread")
    created_at: datetime = Field(description="When the reading was created (UTC ISO 8601)")

    model_config = {"from_attributes": True}


class HealthResponse(BaseModel):
    """Returned by GET /health. The service has no dependencies to check."""
    status: str = Field(description="Always 'healthy' while the process serves requests")
    timestamp: datetime = Field(description="Current server time (UTC)")


class IndexResponse(BaseModel):
    """Static service description returned by GET /."""
    message: str = Field(description="Service name")
    version: str = Field(description="API version")
    endpoints: Dict[str, str] = Field(description="Endpoint name → 'METHOD path'")


class ErrorResponse(BaseModel):
    """
    Error body for server-side failures.

    Fields:
        error: Machine-readable error code (e.g., "internal_server_error")
        message: Human-readable description for display to users
        request_id: Correlation ID for tracing this error in server logs
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")
