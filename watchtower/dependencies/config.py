"""FastAPI dependency returning the relay settings."""

from watchtower.core.config import AppSettings, get_settings


def get_app_settings() -> AppSettings:
    """Overridable in tests through ``app.dependency_overrides``."""
    return get_settings()


__all__ = ["get_app_settings"]
