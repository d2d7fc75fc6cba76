"""
Tarot Reader Backend — Request ID Middleware
============================================

What:  Assigns an ID to each incoming request and echoes it in the response.
Why:   Lets every log line and error body of a request be correlated.
How:   Takes X-Request-ID from the client if sent, otherwise (or when it is blank)
       generates a short hex ID; stores it in a ContextVar and in request.state.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"

# Coroutine-local storage for the current request ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def new_request_id() -> str:
    """Short form of a UUID4; enough to correlate the lines of one request."""
    return uuid.uuid4().hex[:8]


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Middleware that assigns a unique ID to each request for tracing.

    A non-blank X-Request-ID from the client is reused as is; anything else
    gets a fresh ID. The ID lands in request_id_var (loggers, exception
    handlers), in request.state, and on the response.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get(REQUEST_ID_HEADER, "").strip() or new_request_id()
        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = rid
        return response
