"""
Configuration using Pydantic Settings.

Settings are read from ``OLX_*`` environment variables and an optional
``.env`` file. The client classes never require settings: they can be built
from plain arguments, or from a ``Settings`` instance via ``from_settings``.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated, Literal

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_AUTH_BASE_URL = "https://auth.olx.com.br"
DEFAULT_APP_BASE_URL = "https://apps.olx.com.br"


class OlxSettings(BaseSettings):
    """OLX API credentials and hosts."""

    model_config = SettingsConfigDict(
        env_prefix="OLX_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    client_id: str = Field(default="", description="OAuth client ID")
    client_secret: SecretStr = Field(default=SecretStr(""), description="OAuth client secret")
    redirect_uri: str = Field(default="", description="OAuth redirect URI")
    auth_base_url: str = Field(default=DEFAULT_AUTH_BASE_URL, description="Authentication host")
    app_base_url: str = Field(default=DEFAULT_APP_BASE_URL, description="Application host")
    timeout: Annotated[float, Field(gt=0)] | None = Field(
        default=None,
        description="Request timeout in seconds (httpx default when unset)",
    )

    @field_validator("auth_base_url", "app_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Store base URLs without a trailing slash."""
        return v.rstrip("/")

    @property
    def is_configured(self) -> bool:
        """Check if OAuth credentials are configured."""
        return bool(
            self.client_id and self.client_secret.get_secret_value() and self.redirect_uri
        )


class Settings(BaseSettings):
    """Top-level settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    environment: Literal["development", "production", "test"] = Field(
        default="development", description="Runtime environment"
    )
    log_level: str = Field(default="INFO", description="Minimum log level")
    log_json: bool = Field(default=False, description="Render logs as JSON lines")

    olx: OlxSettings = Field(default_factory=OlxSettings)

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Upper-case and validate the log level name."""
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            msg = f"Invalid log level: {v}"
            raise ValueError(msg)
        return level

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings.

    Returns:
        Configured Settings instance.
    """
    return Settings()
