"""Tests for Pydantic Settings configuration."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest
from pydantic import SecretStr, ValidationError

from core.config import (
    DEFAULT_APP_BASE_URL,
    DEFAULT_AUTH_BASE_URL,
    OlxSettings,
    Settings,
    get_settings,
)

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Remove OLX_* variables and run away from any local .env file."""
    for key in list(os.environ.keys()):
        if key.startswith("OLX_") or key in {"ENVIRONMENT", "LOG_LEVEL", "LOG_JSON"}:
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


class TestOlxSettings:
    """Tests for OlxSettings."""

    def test_default_values(self, clean_env: None) -> None:
        """OlxSettings should default to the production OLX hosts."""
        settings = OlxSettings()

        assert settings.client_id == ""
        assert settings.redirect_uri == ""
        assert settings.auth_base_url == DEFAULT_AUTH_BASE_URL
        assert settings.app_base_url == DEFAULT_APP_BASE_URL
        assert settings.timeout is None
        assert settings.is_configured is False

    def test_reads_environment(self, clean_env: None, monkeypatch: pytest.MonkeyPatch) -> None:
        """OlxSettings should read OLX_* variables."""
        monkeypatch.setenv("OLX_CLIENT_ID", "my-client")
        monkeypatch.setenv("OLX_CLIENT_SECRET", "my-secret")
        monkeypatch.setenv("OLX_REDIRECT_URI", "https://example.com/callback")
        monkeypatch.setenv("OLX_TIMEOUT", "12.5")

        settings = OlxSettings()

        assert settings.client_id == "my-client"
        assert settings.client_secret.get_secret_value() == "my-secret"
        assert settings.redirect_uri == "https://example.com/callback"
        assert settings.timeout == 12.5
        assert settings.is_configured is True

    def test_secret_is_masked(self) -> None:
        """The client secret should not appear in the settings repr."""
        settings = OlxSettings(client_secret=SecretStr("my-secret"))

        assert "my-secret" not in repr(settings)

    def test_strips_trailing_slash(self) -> None:
        """Base URLs should be stored without a trailing slash."""
        settings = OlxSettings(
            auth_base_url="https://auth.example.com/",
            app_base_url="https://apps.example.com/",
        )

        assert settings.auth_base_url == "https://auth.example.com"
        assert settings.app_base_url == "https://apps.example.com"

    def test_rejects_non_positive_timeout(self) -> None:
        """Timeout must be positive when set."""
        with pytest.raises(ValidationError):
            OlxSettings(timeout=0)


class TestSettings:
    """Tests for main Settings class."""

    def test_default_values(self, clean_env: None) -> None:
        """Settings should have sensible defaults."""
        settings = Settings()

        assert settings.environment == "development"
        assert settings.log_level == "INFO"
        assert settings.log_json is False
        assert isinstance(settings.olx, OlxSettings)
        assert settings.is_production is False

    def test_normalizes_log_level(self) -> None:
        """log_level should be upper-cased."""
        settings = Settings(log_level="debug")

        assert settings.log_level == "DEBUG"

    def test_rejects_unknown_log_level(self) -> None:
        """Unknown log levels should be rejected."""
        with pytest.raises(ValidationError):
            Settings(log_level="verbose")

    def test_is_production(self) -> None:
        """is_production should reflect the environment."""
        settings = Settings(environment="production")

        assert settings.is_production is True

    def test_reads_env_file(self, clean_env: None, tmp_path: Path) -> None:
        """Settings should read variables from a local .env file."""
        (tmp_path / ".env").write_text("LOG_JSON=true\nENVIRONMENT=test\n")

        settings = Settings()

        assert settings.log_json is True
        assert settings.environment == "test"


class TestGetSettings:
    """Tests for get_settings function."""

    def test_returns_settings(self, clean_env: None) -> None:
        """get_settings should return a Settings instance."""
        assert isinstance(get_settings(), Settings)

    def test_is_cached(self, clean_env: None) -> None:
        """get_settings should return the same instance on repeated calls."""
        assert get_settings() is get_settings()
