"""
Hello API — Application Configuration
======================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by the app factory, middleware, and the hello service.
When:  Loaded once at module import time.
"""

from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from hello_api import __version__


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Every setting has a development default; nothing is required to boot.
    """

    # ── Runtime ───────────────────────────────────────────────────────────
    # Echoed back as environment.environment in the GET envelope
    environment: str = Field(default="development")

    # ── API Contract ──────────────────────────────────────────────────────
    # Sent as X-API-Version on GET /api/hello
    api_version: str = Field(default=__version__)

    # Cache-Control max-age (seconds) for GET /api/hello
    cache_max_age: int = Field(default=300, ge=0, le=86400)

    # ── CORS ──────────────────────────────────────────────────────────────
    # Format: Comma-separated URLs (see cors_origins_list)
    cors_origins: str = Field(default="http://localhost:3000,http://localhost:8000")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=8000, ge=1024, le=65535)

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

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


# Singleton instance — imported throughout the application
settings = Settings()
