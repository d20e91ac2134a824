"""Console entry point: ``gitgrade`` serves the API with uvicorn."""

from __future__ import annotations

import logging

import uvicorn

from gitgrade.infrastructure.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s"

# Libraries that log every request at INFO.
_CHATTY_LOGGERS = ("httpx", "httpcore")


def configure_logging(settings: Settings) -> None:
    level = settings.log_level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
    if logging.getLevelName(level) != logging.DEBUG:
        for name in _CHATTY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)


def main() -> None:
    settings = get_settings()
    configure_logging(settings)
    uvicorn.run(
        "gitgrade.interface.app:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
