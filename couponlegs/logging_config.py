"""Logging setup for couponlegs.

Modules log through ``logging.getLogger(__name__)``; the package logger only
carries a ``NullHandler`` until an application calls :func:`configure_logging`.
"""

from __future__ import annotations

import logging
import os
import sys

from couponlegs.settings import DEFAULT_LOG_LEVEL, ENV_LOG_LEVEL

LOGGER_NAME = "couponlegs"
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str | None = None) -> logging.Logger:
    """Send couponlegs log records to stdout.

    Args:
        level: Logging level name. Defaults to ``COUPONLEGS_LOG_LEVEL`` or
            WARNING.

    Returns:
        The package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()

    level_str = level or os.getenv(ENV_LOG_LEVEL) or DEFAULT_LOG_LEVEL
    log_level = getattr(logging, level_str.upper(), logging.WARNING)
    logger.setLevel(log_level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter(DEFAULT_LOG_FORMAT, datefmt=DEFAULT_DATE_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def disable_logging() -> None:
    """Drop every handler from the package logger."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.addHandler(logging.NullHandler())


__all__ = ["LOGGER_NAME", "configure_logging", "disable_logging"]
