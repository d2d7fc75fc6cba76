"""
Tarot Reader Backend — Application Configuration
================================================

What:  Centralized configuration management using Pydantic Settings.
Why:   Type-safe environment variable loading with validation on startup.
How:   Pydantic Settings reads from environment variables (or an optional .env
       file for local development) and provides a singleton `settings` object.
Who:   Imported by the bootstrap, the CORS configurator and the middleware.
When:  Loaded once at module import time.

Run Mode:
    The service runs in one of two named modes, resolved once at startup:
    - development: CORS allows the local frontend dev servers
    - production:  CORS allows whatever ALLOWED_ORIGINS lists (or everything
                   when it is unset; see app/cors.py)
"""

from enum import Enum
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Environment(str, Enum):
    """Named run modes. The value is what ENVIRONMENT must be set to."""

    DEVELOPMENT = "development"
    PRODUCTION = "production"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have defaults suitable for local development.
    Attributes are grouped by concern for readability.
    """

    # ── Run Mode ──────────────────────────────────────────────────────────
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Run mode: development or production",
    )

    # ── CORS ──────────────────────────────────────────────────────────────
    # Comma-separated origins, only consulted in production mode.
    allowed_origins: Optional[str] = Field(
        default=None,
        description="Comma-separated list of allowed origins (production only)",
    )

    @property
    def allowed_origins_list(self) -> List[str]:
        """Splits ALLOWED_ORIGINS into a list, dropping blank entries."""
        if not self.allowed_origins:
            return []
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=8000, ge=1, le=65535)

    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    @field_validator("environment", mode="before")
    @classmethod
    def normalize_environment(cls, v):
        """Accepts ENVIRONMENT in any case (e.g. 'Production')."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @property
    def is_production(self) -> bool:
        return self.environment is Environment.PRODUCTION

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # ALLOWED_ORIGINS and allowed_origins both work
        "extra": "ignore",
    }


# Singleton instance, imported throughout the application
settings = Settings()
