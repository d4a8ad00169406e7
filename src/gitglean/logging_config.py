"""Logging configuration for gitglean (loguru)."""

from __future__ import annotations

import sys
from typing import Optional

from loguru import logger

DEFAULT_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


def configure_logging(level: str = "WARNING", *, fmt: Optional[str] = None) -> None:
    """Route gitglean's log records to stderr at *level*.

    Library code only emits records; the package is disabled on import and
    this turns it back on. Calling it again replaces the previous sink.
    """
    level = level.upper()
    if level not in LEVELS:
        level = "WARNING"

    logger.remove()
    logger.add(
        sys.stderr,
        format=fmt or DEFAULT_FORMAT,
        level=level,
        colorize=None,
    )
    logger.enable("gitglean")
    logger.debug(f"Logging initialized at {level}")
