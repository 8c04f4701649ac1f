"""
API settings.

All values can be overridden via environment variables prefixed with
``ROSTER_`` (for example ``ROSTER_DATABASE_URL``) or a ``.env`` file.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings


class RosterAPISettings(BaseSettings):
    """Settings for the roster REST API.

    Order of precedence (highest → lowest):
        1. Environment variables (``ROSTER_API_PREFIX``, etc.)
        2. ``.env`` file
        3. Defaults below
    """

    # ── Server ───────────────────────────────────────────────────────────
    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=8080, description="Bind port")
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Log level")
    log_json: bool | None = Field(
        default=None,
        description="JSON logs (True), console logs (False), or auto-detect from TTY (None)",
    )

    # ── API ──────────────────────────────────────────────────────────────
    api_prefix: str = Field(default="/api/v1", description="URL prefix for entity endpoints")
    api_title: str = Field(default="roster API", description="OpenAPI title")
    api_version: str = Field(default="0.1.0", description="OpenAPI version string")

    # ── Database ─────────────────────────────────────────────────────────
    database_url: str = Field(
        default="sqlite:///roster.db",
        description="SQLAlchemy connection URL",
    )
    database_echo: bool = Field(default=False, description="Log every SQL statement")

    # ── CORS ─────────────────────────────────────────────────────────────
    cors_origins: list[str] = Field(
        default=["*"],
        description="Allowed CORS origins",
    )

    model_config: dict[str, Any] = {
        "env_prefix": "ROSTER_",
        "env_file": ".env",
        "extra": "ignore",
    }
