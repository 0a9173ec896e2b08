"""Logging setup for the package logger."""

from __future__ import annotations

import logging

from threadpost.core.settings import settings

PACKAGE_LOGGER = "threadpost"


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """Apply a level to the package logger and return it.

    Args:
        level: Level name or number. Defaults to ``settings.log_level``.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level if level is not None else settings.log_level.upper())
    return logger
