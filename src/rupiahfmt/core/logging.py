"""Logging setup for the rupiahfmt logger tree."""

from __future__ import annotations

import logging

from rupiahfmt.core.config import AppSettings

ROOT_LOGGER = "rupiahfmt"


def configure_logging(settings: AppSettings | None = None) -> logging.Logger:
    """Apply the configured log level to the package logger and return it."""
    if settings is None:
        settings = AppSettings()

    logger = logging.getLogger(ROOT_LOGGER)
    level = getattr(logging, settings.log_level.upper(), None)
    if not isinstance(level, int):
        level = logging.INFO
    logger.setLevel(level)
    return logger
