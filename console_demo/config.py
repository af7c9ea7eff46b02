"""
Console Demo API - Application Configuration
=============================================

What:  Centralized configuration management using Pydantic Settings.
Why:   Type-safe environment variable loading with validation on startup.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by main.py, the middleware and the credential service.
When:  Loaded once at module import time.

Environment variables (all optional):
    BACKEND_HOST         Interface uvicorn binds to          (0.0.0.0)
    BACKEND_PORT         Listening port                      (8080)
    LOG_LEVEL            Root logger level                   (INFO)
    CORS_ORIGINS         Comma-separated allowed origins     (*)
    API_KEY              Enables x-api-key check on /save    (disabled)
    RATE_LIMIT_ENABLED   Turn on the per-IP limiter          (false)
    RATE_LIMIT_REQUESTS  Requests allowed per window         (100)
    RATE_LIMIT_WINDOW    Window length in seconds            (60)
"""

from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Every setting has a default suitable for local development, so the
    service starts with no environment at all.
    """

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=8080, ge=1, le=65535)

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

    # ── CORS ──────────────────────────────────────────────────────────────
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Credentials ───────────────────────────────────────────────────────
    # Empty string leaves POST /save open. Any other value must be sent
    # back by clients in the x-api-key header.
    api_key: str = Field(default="", description="Shared key required on POST /save")

    @property
    def api_key_enabled(self) -> bool:
        return bool(self.api_key)

    # ── Rate Limiting ─────────────────────────────────────────────────────
    # Opt-in: with it off every request is served, no matter the volume
    rate_limit_enabled: bool = Field(default=False)
    rate_limit_requests: int = Field(default=100, ge=1, le=100000)
    rate_limit_window: int = Field(default=60, ge=1, le=86400)  # seconds

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


# Singleton instance imported throughout the application
settings = Settings()
