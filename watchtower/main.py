"""
FastAPI application entrypoint for the WatchTower relay.
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from watchtower import __version__
from watchtower.api.routes import router
from watchtower.core.config import get_settings
from watchtower.core.logging import configure_logging


def create_app() -> FastAPI:
    """Factory for the FastAPI application."""
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="WatchTower Backend",
        version=__version__,
        description="TikTok OAuth relay and creator stats API.",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_allow_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(router)

    # Mounted last so the explicit routes above take precedence.
    if settings.static_dir.is_dir():
        app.mount("/", StaticFiles(directory=settings.static_dir), name="static")
    return app


app = create_app()

__all__ = ["app", "create_app"]
