"""Structured JSON logging configuration.

Configures Python stdlib logging to emit JSON with GCP-compatible field names
(`severity`, `timestamp`, `logger`) on stdout.

Usage:
    from teamwork_unfurl.logging_config import configure_logging
    configure_logging()
"""

import copy
import logging
import logging.config
from typing import TypeVar

from teamwork_unfurl.config import get_settings

T = TypeVar("T")

logger = logging.getLogger(__name__)

LOGGING_CONFIG: dict = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "json": {
            "()": "pythonjsonlogger.json.JsonFormatter",
            "format": "%(asctime)s %(levelname)s %(name)s %(funcName)s %(message)s",
            "rename_fields": {
                "levelname": "severity",
                "asctime": "timestamp",
                "name": "logger",
            },
            "static_fields": {
                "service": "teamwork-unfurl",
            },
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "json",
            "stream": "ext://sys.stdout",
        },
    },
    "root": {
        "level": "INFO",
        "handlers": ["console"],
    },
}


def configure_logging(level: str | None = None) -> None:
    """Apply structured JSON logging configuration.

    Call once at application startup (e.g., in FastAPI lifespan).
    ``level`` overrides the root level; defaults to ``INFO``.
    """
    config = copy.deepcopy(LOGGING_CONFIG)
    if level:
        config["root"]["level"] = level.upper()
    logging.config.dictConfig(config)


def debug_dump(name: str, data: T) -> T:
    """Log a raw payload when debug mode is on, returning it unchanged.

    Lets callers wrap values inline: ``task = debug_dump("Teamwork Task", task)``.
    """
    if get_settings().debug:
        logger.info("Debug dump: %s", name, extra={"payload": data})
    return data
