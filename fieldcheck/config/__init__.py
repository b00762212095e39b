"""Configuration module for fieldcheck.

This module provides centralized, type-safe configuration management
using pydantic-settings with environment variable loading.

Usage:
    from fieldcheck.config import get_settings

    settings = get_settings()

    host = settings.server.host
    strict = settings.cli.strict
"""

from fieldcheck.config.settings import (
    CLISettings,
    LoggingSettings,
    ServerSettings,
    Settings,
    get_settings,
    reset_settings,
)

__all__ = [
    "CLISettings",
    "LoggingSettings",
    "ServerSettings",
    "Settings",
    "get_settings",
    "reset_settings",
]
