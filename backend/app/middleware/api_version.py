"""
Tarot Reader Backend — API Version Header Middleware
====================================================

What:  Stamps every outgoing response with `X-API-Version`.
Why:   Clients can detect which contract they are talking to without an
       extra request.
When:  Outermost middleware, so error and preflight responses carry it too.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from app import __version__

API_VERSION_HEADER = "X-API-Version"


class APIVersionMiddleware(BaseHTTPMiddleware):
    """Adds a fixed API version header to every response."""

    def __init__(self, app: ASGIApp, version: str = __version__):
        super().__init__(app)
        self.version = version

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)
        response.headers[API_VERSION_HEADER] = self.version
        return response
