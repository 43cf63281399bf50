"""Centralized configuration management with environment-aware defaults.

Configuration is resolved once per process through Pydantic Settings and
never changes afterwards: the settings model is frozen and ``get_settings``
is cached.

Environment variables:
- **AUTH_PORT**: Port the server listens on. Its leading integer is used; a value with
  none, or one outside the valid TCP port range, falls back to ``DEFAULT_PORT``.
- **INSTANCE_DOMAIN**: Public URL of this instance. Falls back to
  ``DEFAULT_DOMAIN`` when absent or empty.
- **API_HOST**, **APP_NAME**, **ENVIRONMENT**, **DEBUG**: Service metadata.
- **LOG_CONFIG__***: Nested logging options (``__`` delimiter).

Malformed values never surface as errors; they silently degrade to defaults.
"""

import re
from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.constants import (
    DEFAULT_DOMAIN,
    DEFAULT_PORT,
    MAX_PORT,
    MIN_PORT,
    SENSITIVE_HEADERS,
)

_LEADING_INTEGER = re.compile(r"\s*[+-]?\d+")


class LogConfig(BaseModel):
    """Logging configuration."""

    log_level: Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = (
        Field(default="INFO", description="Logging level")
    )
    log_formatter_type: Literal["console", "json"] | None = Field(
        default=None,
        description="Log output formatter. Auto-detected if not specified.",
    )
    sensitive_headers: list[str] = Field(
        default_factory=lambda: list(SENSITIVE_HEADERS),
        description="Request headers whose values are redacted in diagnostics",
    )

    @field_validator("sensitive_headers", mode="after")
    @classmethod
    def lowercase_headers(cls, v: list[str]) -> list[str]:
        """Header names are compared case-insensitively."""
        return [header.lower() for header in v]


class Settings(BaseSettings):
    """Main settings class for the application."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        env_nested_delimiter="__",
        populate_by_name=True,
        frozen=True,
    )

    # Application settings
    app_name: str = Field(default="auth-server", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    environment: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Environment the application is running in",
    )
    debug: bool = Field(default=False, description="Debug mode flag")

    # Server settings
    api_host: str = Field(default="0.0.0.0", description="Interface to bind")  # nosec B104
    port: int = Field(
        default=DEFAULT_PORT,
        validation_alias="AUTH_PORT",
        description="Port the server listens on",
    )
    domain: str = Field(
        default=DEFAULT_DOMAIN,
        validation_alias="INSTANCE_DOMAIN",
        description="Public URL of this instance",
    )

    # Logging configuration
    log_config: LogConfig = Field(
        default_factory=LogConfig, description="Logging configuration"
    )

    @field_validator("port", mode="before")
    @classmethod
    def fallback_invalid_port(cls, v: object) -> int:
        """Read the leading integer of the value as the port.

        Trailing garbage is ignored (``"8080abc"`` and ``"8080.5"`` give 8080).
        No leading integer, or one outside the TCP port range, gives the
        default port.
        """
        match = _LEADING_INTEGER.match(str(v))
        if match is None:
            return DEFAULT_PORT
        port = int(match.group())
        if not MIN_PORT <= port <= MAX_PORT:
            return DEFAULT_PORT
        return port

    @field_validator("domain", mode="before")
    @classmethod
    def fallback_empty_domain(cls, v: str | None) -> str:
        """Convert empty values to the default domain."""
        if not v:
            return DEFAULT_DOMAIN
        return v


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
