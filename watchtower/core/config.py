"""
Application configuration models and helpers.

All settings are sourced from the environment (optionally seeded from a
``.env`` file). TikTok credentials are deliberately optional: the relay starts
without them and simply produces an unusable authorization URL.
"""

from functools import lru_cache
from pathlib import Path
from typing import Annotated, Optional

import os

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

DEFAULT_SITE_VERIFICATION = (
    "tiktok-developers-site-verification=ILEsVC0ujBzYh7df4cILTNNssOiUCLI1"
)
DEFAULT_SUCCESS_REDIRECT = "watchtower://oauth-success?tiktok=1"
DEFAULT_FAILURE_REDIRECT = "watchtower://oauth-failed?tiktok=1"


def _load_env_file(path: str = ".env") -> None:
    """Best-effort load key=value pairs from a .env file without extra deps."""
    env_path = Path(path)
    if not env_path.exists():
        return
    for raw_line in env_path.read_text().splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        key, sep, value = line.partition("=")
        if not sep:
            continue
        key = key.strip()
        if not key or key in os.environ:
            continue
        cleaned = value.strip().strip('"').strip("'")
        os.environ[key] = cleaned


_load_env_file()


def _split_csv(value: str | tuple[str, ...] | list[str]) -> tuple[str, ...]:
    if isinstance(value, tuple):
        return value
    if isinstance(value, list):
        return tuple(value)
    return tuple(item.strip() for item in value.split(",") if item.strip())


class TikTokSettings(BaseSettings):
    """Credentials and redirect targets for the TikTok login kit."""

    model_config = SettingsConfigDict(populate_by_name=True, extra="ignore")

    client_key: Optional[str] = Field(None, validation_alias="TIKTOK_CLIENT_KEY")
    client_secret: Optional[str] = Field(
        None,
        validation_alias="TIKTOK_CLIENT_SECRET",
        repr=False,
    )
    redirect_uri: Optional[str] = Field(None, validation_alias="TIKTOK_REDIRECT")
    site_verification: str = Field(
        DEFAULT_SITE_VERIFICATION,
        validation_alias="TIKTOK_SITE_VERIFICATION",
        description="Body served from /.well-known/tiktok.txt.",
    )
    success_redirect: str = Field(
        DEFAULT_SUCCESS_REDIRECT,
        validation_alias="TIKTOK_SUCCESS_REDIRECT",
        description="Deep link the client is sent to after a successful exchange.",
    )
    failure_redirect: str = Field(
        DEFAULT_FAILURE_REDIRECT,
        validation_alias="TIKTOK_FAILURE_REDIRECT",
        description="Deep link the client is sent to when the exchange fails.",
    )
    http_timeout: Optional[float] = Field(
        None,
        validation_alias="TIKTOK_HTTP_TIMEOUT",
        description="Timeout in seconds for the token request. Unset waits forever.",
    )

    @field_validator("success_redirect", mode="before")
    @classmethod
    def _default_success_redirect(cls, value: Optional[str]) -> str:
        return value or DEFAULT_SUCCESS_REDIRECT

    @field_validator("failure_redirect", mode="before")
    @classmethod
    def _default_failure_redirect(cls, value: Optional[str]) -> str:
        return value or DEFAULT_FAILURE_REDIRECT


class OAuthSettings(BaseSettings):
    """OAuth flow configuration."""

    model_config = SettingsConfigDict(populate_by_name=True, extra="ignore")

    scopes: Annotated[tuple[str, ...], NoDecode] = Field(
        ("user.info.basic", "video.list"),
        validation_alias="OAUTH_SCOPES",
    )
    # Sent unchanged on every authorization request and never checked on callback.
    state: str = Field(
        "watchtower-secure-state",
        validation_alias="OAUTH_STATE",
    )

    @field_validator("scopes", mode="before")
    @classmethod
    def _split_scopes(
        cls, value: str | tuple[str, ...] | list[str]
    ) -> tuple[str, ...]:
        """Support providing scopes as a comma-separated string."""
        return _split_csv(value)


class AppSettings(BaseSettings):
    """Root settings object for the FastAPI application."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        populate_by_name=True,
        extra="ignore",
    )

    environment: str = Field("development", validation_alias="APP_ENV")
    log_level: str = Field("INFO", validation_alias="APP_LOG_LEVEL")
    host: str = Field("0.0.0.0", validation_alias="HOST")
    port: int = Field(5005, validation_alias="PORT")
    cors_allow_origins: Annotated[tuple[str, ...], NoDecode] = Field(
        ("*",),
        validation_alias="CORS_ALLOW_ORIGINS",
    )
    static_dir: Path = Field(
        Path("public"),
        validation_alias="STATIC_DIR",
        description="Directory served at / when it exists.",
    )
    tiktok: TikTokSettings = Field(default_factory=TikTokSettings)
    oauth: OAuthSettings = Field(default_factory=OAuthSettings)

    @field_validator("cors_allow_origins", mode="before")
    @classmethod
    def _split_origins(
        cls, value: str | tuple[str, ...] | list[str]
    ) -> tuple[str, ...]:
        return _split_csv(value)


@lru_cache()
def get_settings() -> AppSettings:
    """Return a cached settings object."""
    return AppSettings()


__all__ = [
    "AppSettings",
    "DEFAULT_FAILURE_REDIRECT",
    "DEFAULT_SITE_VERIFICATION",
    "DEFAULT_SUCCESS_REDIRECT",
    "OAuthSettings",
    "TikTokSettings",
    "get_settings",
]
