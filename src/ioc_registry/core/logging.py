"""Logging configuration helpers.

The package logs through ``logging.getLogger(__name__)`` everywhere and never
installs handlers on import. Applications that want the registry's DEBUG
trail call :func:`configure_logging`, which only touches the ``ioc_registry``
logger hierarchy and leaves the root logger to the host application.
"""

from __future__ import annotations

import logging
import logging.config
from typing import Any

from .config import LoggingSettings

PACKAGE_LOGGER = "ioc_registry"


def _structured_formatter() -> dict[str, Any]:
    """Return a dictConfig fragment for brace-style structured logs."""
    return {
        "format": "{asctime} {levelname} {name} {message}",
        "style": "{",
    }


def _plain_formatter() -> dict[str, Any]:
    return {
        "format": "%(asctime)s %(levelname)s %(name)s %(message)s",
    }


def build_logging_config(settings: LoggingSettings) -> dict[str, Any]:
    """Build the dictConfig mapping for the package logger."""
    formatter = _structured_formatter() if settings.structured else _plain_formatter()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "registry": formatter,
        },
        "handlers": {
            "registry_console": {
                "class": "logging.StreamHandler",
                "formatter": "registry",
                "level": settings.level.upper(),
            },
        },
        "loggers": {
            PACKAGE_LOGGER: {
                "handlers": ["registry_console"],
                "level": settings.level.upper(),
                "propagate": False,
            },
        },
    }


def configure_logging(settings: LoggingSettings) -> None:
    """Configure the ``ioc_registry`` logger according to provided settings."""
    logging.config.dictConfig(build_logging_config(settings))


__all__ = ["PACKAGE_LOGGER", "build_logging_config", "configure_logging"]
