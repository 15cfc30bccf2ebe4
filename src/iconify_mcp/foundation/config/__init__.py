"""Configuration management using pydantic-settings.

Provides environment-based configuration with type safety and validation.
"""

from .settings import (
    DEFAULT_BASE_URL,
    DEFAULT_USER_AGENT,
    ApiSettings,
    IconifySettings,
    LoggingSettings,
    ServerSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_USER_AGENT",
    "ApiSettings",
    "IconifySettings",
    "LoggingSettings",
    "ServerSettings",
    "clear_settings_cache",
    "get_settings",
]
