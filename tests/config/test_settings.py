"""Tests for centralized configuration settings."""

import pytest
from pydantic import ValidationError

from fieldcheck.config import (
    CLISettings,
    LoggingSettings,
    ServerSettings,
    Settings,
    get_settings,
    reset_settings,
)


class TestServerSettings:
    """Tests for HTTP example server configuration."""

    def test_default_values(self):
        settings = ServerSettings()
        assert settings.host == "127.0.0.1"
        assert settings.port == 1234

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("FIELDCHECK_HOST", "0.0.0.0")
        monkeypatch.setenv("FIELDCHECK_PORT", "8080")

        settings = ServerSettings()
        assert settings.host == "0.0.0.0"
        assert settings.port == 8080

    def test_port_out_of_range(self, monkeypatch):
        monkeypatch.setenv("FIELDCHECK_PORT", "70000")

        with pytest.raises(ValidationError):
            ServerSettings()


class TestCLISettings:
    """Tests for command line configuration."""

    def test_default_values(self):
        assert CLISettings().strict is False

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("FIELDCHECK_STRICT", "1")
        assert CLISettings().strict is True


class TestLoggingSettings:
    """Tests for logging configuration."""

    def test_default_values(self):
        settings = LoggingSettings()
        assert settings.debug_all is False
        assert settings.log_level == "INFO"

    def test_log_level_uppercase(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = LoggingSettings()
        assert settings.log_level == "DEBUG"

    def test_invalid_log_level(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "chatty")

        with pytest.raises(ValidationError):
            LoggingSettings()


class TestSettings:
    """Tests for root Settings class."""

    def test_has_all_nested_settings(self):
        settings = Settings()
        assert isinstance(settings.server, ServerSettings)
        assert isinstance(settings.cli, CLISettings)
        assert isinstance(settings.logging, LoggingSettings)

    def test_nested_values_accessible(self, monkeypatch):
        monkeypatch.setenv("FIELDCHECK_PORT", "9999")
        monkeypatch.setenv("DEBUG_ALL", "true")

        settings = Settings()
        assert settings.server.port == 9999
        assert settings.logging.debug_all is True


class TestGetSettings:
    """Tests for the get_settings singleton function."""

    def test_returns_settings_instance(self):
        settings = get_settings()
        assert isinstance(settings, Settings)

    def test_singleton_pattern(self):
        settings1 = get_settings()
        settings2 = get_settings()
        assert settings1 is settings2

    def test_reset_clears_singleton(self):
        settings1 = get_settings()
        reset_settings()
        settings2 = get_settings()
        assert settings1 is not settings2

    def test_env_changes_after_reset(self, monkeypatch):
        settings1 = get_settings()
        original_port = settings1.server.port

        monkeypatch.setenv("FIELDCHECK_PORT", "4321")
        reset_settings()

        settings2 = get_settings()
        assert settings2.server.port == 4321
        assert settings2.server.port != original_port
