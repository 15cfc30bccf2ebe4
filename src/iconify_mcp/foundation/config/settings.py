"""Environment-based configuration using pydantic-settings.

Provides type-safe, validated configuration from environment variables
with sensible defaults. Supports .env files and nested configuration.

Example:
    >>> from iconify_mcp.foundation.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.api.base_url)
    'https://api.iconify.design'
    >>> print(settings.logging.level)
    'INFO'

    # Or with environment variables:
    # ICONIFY_MCP_API_BASE_URL=http://localhost:3000
    # ICONIFY_MCP_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated, Literal

from pydantic import Field, PositiveFloat, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.iconify.design"
DEFAULT_USER_AGENT = "MCP-Iconify-Server/1.0.0"


class ApiSettings(BaseSettings):
    """Upstream icon directory configuration."""

    model_config = SettingsConfigDict(
        env_prefix="ICONIFY_MCP_API_",
        extra="ignore",
    )

    base_url: str = Field(default=DEFAULT_BASE_URL, description="Icon directory base URL")
    user_agent: str = Field(default=DEFAULT_USER_AGENT, description="User-Agent sent on every request")
    timeout: PositiveFloat | None = Field(
        default=None,
        description="Request timeout in seconds (None keeps the httpx default)",
    )

    @field_validator("base_url", mode="after")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="ICONIFY_MCP_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["json", "text"] = "text"
    include_timestamps: bool = True

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class ServerSettings(BaseSettings):
    """MCP server configuration."""

    model_config = SettingsConfigDict(
        env_prefix="ICONIFY_MCP_SERVER_",
        extra="ignore",
    )

    name: str = "IconifyIntegration"
    transport: Literal["stdio", "sse", "streamable-http"] = "stdio"
    host: str = "127.0.0.1"
    port: Annotated[int, Field(ge=1, le=65535)] = 8000


class IconifySettings(BaseSettings):
    """Root settings for the Iconify MCP server.

    Loads configuration from environment variables with ICONIFY_MCP_ prefix.
    Supports nested configuration and .env files.

    Example environment variables:
        ICONIFY_MCP_API_BASE_URL=https://api.iconify.design
        ICONIFY_MCP_API_TIMEOUT=10
        ICONIFY_MCP_LOG_LEVEL=DEBUG
        ICONIFY_MCP_SERVER_TRANSPORT=sse
    """

    model_config = SettingsConfigDict(
        env_prefix="ICONIFY_MCP_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    api: ApiSettings = Field(default_factory=ApiSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    server: ServerSettings = Field(default_factory=ServerSettings)


@lru_cache(maxsize=1)
def get_settings() -> IconifySettings:
    """Get the process-wide settings instance (cached)."""
    return IconifySettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).

    After calling this, the next get_settings() call will
    reload configuration from environment.
    """
    get_settings.cache_clear()
