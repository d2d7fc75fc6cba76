"""
Tarot Reader Backend — FastAPI Application Factory
==================================================

What:  Creates and configures the FastAPI application instance.
Why:   Centralizes app configuration, middleware registration, route mounting,
       and lifecycle management in one place.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn to start the server (uvicorn app.main:app), or by
       the `tarot-reader` console script via run().

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌───────────┐ ┌────────┐ ┌─────────┐ ┌──────┐      │
    │  │API Version│→│ Req ID │→│ Logging │→│ CORS │      │
    │  └───────────┘ └────────┘ └─────────┘ └──────┘      │
    │                                                     │
    │  Routes:                                            │
    │  ┌────────┐ ┌─────────┐ ┌──────────────────────┐    │
    │  │ GET /  │ │ /health │ │ /api/readings[/{id}] │    │
    │  └────────┘ └─────────┘ └──────────────────────┘    │
    │                                                     │
    │  State:  app.state.store  (seeded ReadingStore)     │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Build (create_app):
    1. Initialize logging
    2. Create the store and seed the three sample readings
    3. Resolve the CORS policy from the run mode
    4. Register middleware, exception handlers and routes

    Startup (lifespan):
    1. Log run mode, origins and store size

    Shutdown:
    1. Log shutdown; the store is simply dropped (nothing to persist)
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse, Response

from app import __version__
from app.config import Settings, settings as default_settings
from app.cors import build_cors_policy
from app.exceptions import NotFoundError, TarotReaderError
from app.middleware.api_version import API_VERSION_HEADER, APIVersionMiddleware
from app.middleware.logging import RequestLoggingMiddleware
from app.middleware.request_id import RequestIDMiddleware, request_id_var
from app.routes import health, index, readings
from app.sample_data import seed_sample_readings
from app.schemas.reading import ErrorResponse
from app.store import ReadingStore

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(log_level: str = "INFO") -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    """
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),  # Docker captures stdout
        ],
        force=True,
    )

    # Our own access log replaces uvicorn's
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup: report what the app was built with (logging is already set up
    by create_app).
    Shutdown: log it. The in-memory store is discarded with the process.
    """
    app_settings: Settings = app.state.settings

    logger.info("=" * 60)
    logger.info("Tarot Reader API starting up (no database)...")
    logger.info("Run mode: %s", app_settings.environment.value)
    logger.info("CORS origins: %s", ", ".join(app.state.cors_policy.allow_origins) or "(none)")
    logger.info("Readings in store: %d", len(app.state.store))
    logger.info("Server ready at http://%s:%d", app_settings.backend_host, app_settings.backend_port)
    logger.info("=" * 60)

    yield

    logger.info("Tarot Reader API shutting down...")
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map application exceptions to HTTP responses.

    Handler hierarchy:
        NotFoundError           → 404 Not Found, empty body
        TarotReaderError (base) → 500 Internal Server Error
        Exception (fallback)    → 500 Internal Server Error

    Request body validation keeps FastAPI's own 422 handler.
    Internal details are logged server-side, never returned to the client.
    """

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        """Unknown and malformed IDs look the same to the client: a bare 404."""
        logger.debug("[%s] %s", request_id_var.get(""), exc.message)
        return Response(status_code=404)

    @app.exception_handler(TarotReaderError)
    async def handle_app_error(request: Request, exc: TarotReaderError):
        rid = request_id_var.get("")
        logger.error("[%s] Application error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(
                error="server_error",
                message="An internal error occurred. Please try again later.",
                request_id=rid,
            ).model_dump(),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """
        Catch-all: generic 500, full stack trace in the server log only.

        Starlette answers from ServerErrorMiddleware, outside our own
        middleware, so the shared response headers are set here.
        """
        rid = getattr(request.state, "request_id", "") or request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        headers = {API_VERSION_HEADER: __version__}
        if rid:
            headers["X-Request-ID"] = rid
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(
                error="internal_server_error",
                message="An unexpected error occurred. Please try again or contact support.",
                request_id=rid,
            ).model_dump(),
            headers=headers,
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        app_settings: Configuration to build with. Defaults to the
                      environment-derived singleton; tests pass their own.

    Returns:
        A FastAPI instance owning a freshly seeded ReadingStore.
    """
    app_settings = app_settings or default_settings

    # Before anything below logs: the seeder and the CORS configurator both do
    setup_logging(app_settings.log_level)

    app = FastAPI(
        title="Tarot Reader API",
        description="Store and browse tarot readings. All data is kept in memory.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # ── Application State ─────────────────────────────────────────────────
    # The store is owned by this app instance and injected via get_store.
    store = ReadingStore()
    seed_sample_readings(store)
    cors_policy = build_cors_policy(app_settings)

    app.state.settings = app_settings
    app.state.store = store
    app.state.cors_policy = cors_policy

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added = first to execute. Execution order becomes:
    # APIVersion → RequestID → Logging → GZip → CORS
    app.add_middleware(
        CORSMiddleware,
        expose_headers=["X-Request-ID", "X-Total-Count", "X-API-Version", "Location"],
        **cors_policy.middleware_kwargs(),
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(APIVersionMiddleware, version=__version__)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(index.router)
    app.include_router(health.router)
    app.include_router(readings.router)

    return app


def run() -> None:
    """Start the server with uvicorn (console script: tarot-reader)."""
    uvicorn.run(
        "app.main:app",
        host=default_settings.backend_host,
        port=default_settings.backend_port,
        log_level=default_settings.log_level.lower(),
    )


# ── Application Instance ─────────────────────────────────────────────────
# uvicorn expects `app.main:app` to be importable
app = create_app()


if __name__ == "__main__":
    run()
