"""
Tarot Reader Backend — Cross-Origin Policy
==========================================

What:  Builds the CORS allow-list from the configured run mode.
Why:   The frontend is served from a different origin than the API.
How:   build_cors_policy() resolves the policy once at startup; create_app()
       feeds it to Starlette's CORSMiddleware.

Policy by mode:
    development → the local frontend dev servers (ports 3000 and 5173 on
                  localhost and 127.0.0.1)
    production  → the origins listed in ALLOWED_ORIGINS, or ALL origins
                  when ALLOWED_ORIGINS is unset. A set-but-blank value
                  allows no origins.

Open Fallback:
    Allowing every origin in production when ALLOWED_ORIGINS is unset is a
    permissive default kept on purpose for drop-in deployments. It is logged
    as a warning at startup so it never goes unnoticed.
"""

import logging
from dataclasses import dataclass, field
from typing import List

from app.config import Settings

logger = logging.getLogger(__name__)

DEV_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]

ALLOWED_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]


@dataclass(frozen=True)
class CorsPolicy:
    """Arguments for CORSMiddleware, resolved once per process."""

    allow_origins: List[str]
    allow_methods: List[str] = field(default_factory=lambda: list(ALLOWED_METHODS))
    allow_headers: List[str] = field(default_factory=lambda: ["*"])
    allow_credentials: bool = True

    @property
    def allows_all_origins(self) -> bool:
        return "*" in self.allow_origins

    def middleware_kwargs(self) -> dict:
        return {
            "allow_origins": list(self.allow_origins),
            "allow_methods": list(self.allow_methods),
            "allow_headers": list(self.allow_headers),
            "allow_credentials": self.allow_credentials,
        }


def build_cors_policy(settings: Settings) -> CorsPolicy:
    """
    Resolve the CORS policy for the configured run mode.

    In production only an unset ALLOWED_ORIGINS opens the policy. A value
    that is set but holds no usable origin ("" or " , ") yields an empty
    allow-list, which rejects every cross-origin request.
    """
    if not settings.is_production:
        return CorsPolicy(allow_origins=list(DEV_ORIGINS))

    if settings.allowed_origins is None:
        logger.warning(
            "ALLOWED_ORIGINS is not set in production mode; allowing requests from any origin"
        )
        return CorsPolicy(allow_origins=["*"])

    origins = settings.allowed_origins_list
    if not origins:
        logger.warning(
            "ALLOWED_ORIGINS is set but lists no origins; cross-origin requests will be rejected"
        )
    return CorsPolicy(allow_origins=origins)
