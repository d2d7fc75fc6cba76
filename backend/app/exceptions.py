"""
Tarot Reader Backend — Custom Exception Hierarchy
=================================================

What:  Application-specific exceptions for the few error scenarios that exist.
How:   Each exception carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       turn them into HTTP responses.
Who:   Raised by the store and route handlers; caught by global handlers.

Exception Hierarchy:
    TarotReaderError (base)         → 500 Internal Server Error
    ├── NotFoundError               → 404 Not Found (empty body)
    └── DuplicateReadingError       → 500 Internal Server Error

Request body shape errors never reach this hierarchy: FastAPI rejects them
with 422 before the handler runs.
"""

from typing import Any, Dict, Optional


class TarotReaderError(Exception):
    """
    Base exception for all Tarot Reader application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class NotFoundError(TarotReaderError):
    """
    Raised when a requested reading does not exist.

    When:    GET /api/readings/{id} with an unknown id, or with a string that is
             not a UUID at all. Both cases are reported identically.
    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DuplicateReadingError(TarotReaderError):
    """Raised when a reading is inserted under an id the store already holds."""

    def __init__(self, reading_id: str, context: Optional[Dict[str, Any]] = None):
        ctx = context or {}
        ctx["reading_id"] = reading_id
        super().__init__(
            message=f"reading with ID '{reading_id}' already exists",
            context=ctx,
        )
        self.reading_id = reading_id
