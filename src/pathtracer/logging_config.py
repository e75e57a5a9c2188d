"""Logging configuration for pathtracer."""

import logging
from typing import Optional

from pathtracer.config import LOG_FORMAT, LOG_LEVEL

PACKAGE_LOGGER = "pathtracer"
CONSOLE_HANDLER = "pathtracer-console"


def setup_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> logging.Logger:
    """
    Set up logging for the package logger.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        fmt: Log record format

    Returns:
        The configured package logger
    """
    if level is None:
        level = LOG_LEVEL
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(numeric_level)

    # Calling this twice must not duplicate output.
    for handler in list(logger.handlers):
        if handler.name == CONSOLE_HANDLER:
            logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(logging.Formatter(fmt or LOG_FORMAT))
    console_handler.set_name(CONSOLE_HANDLER)
    logger.addHandler(console_handler)

    return logger
