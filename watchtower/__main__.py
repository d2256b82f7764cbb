"""Run the relay with uvicorn: ``python -m watchtower``."""

from __future__ import annotations

import logging

import uvicorn

from watchtower.core.config import get_settings
from watchtower.core.logging import configure_logging

logger = logging.getLogger("watchtower")


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("WatchTower Backend running on PORT %s", settings.port)
    uvicorn.run(
        "watchtower.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":  # pragma: no cover - script entry point
    main()
