"""Centralized configuration management using pydantic-settings.

This module provides type-safe configuration with environment variable loading,
validation, and sensible defaults for the fieldcheck CLI and HTTP example.
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerSettings(BaseSettings):
    """HTTP example server configuration."""

    model_config = SettingsConfigDict(env_prefix="FIELDCHECK_", extra="ignore")

    host: str = Field(
        default="127.0.0.1",
        description="Interface the HTTP example binds to",
    )
    port: int = Field(
        default=1234,
        ge=1,
        le=65535,
        description="Port the HTTP example listens on",
    )


class CLISettings(BaseSettings):
    """Command line behaviour."""

    model_config = SettingsConfigDict(env_prefix="FIELDCHECK_", extra="ignore")

    strict: bool = Field(
        default=False,
        description="Exit with a failure status when input is invalid",
    )


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(extra="ignore")

    debug_all: bool = Field(
        default=False,
        validation_alias="DEBUG_ALL",
        description="Enable debug logging for all libraries",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Log level for fieldcheck namespace",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def uppercase_log_level(cls, v: str) -> str:
        if isinstance(v, str):
            return v.upper()
        return v


class Settings(BaseSettings):
    """Root settings class with all nested configurations.

    Usage:
        from fieldcheck.config import get_settings

        settings = get_settings()
        port = settings.server.port
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
    )

    server: ServerSettings = Field(default_factory=ServerSettings)
    cli: CLISettings = Field(default_factory=CLISettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


# Singleton pattern for settings
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global settings instance.

    Returns:
        The singleton Settings instance with all configuration loaded.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings singleton (useful for testing)."""
    global _settings
    _settings = None
