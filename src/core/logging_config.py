"""Logging setup. Modules only create their logger with logging.getLogger(__name__); the presentation layer calls setup_logging() once at startup."""

import logging
import sys

from src.core.config import LOG_DATE_FORMAT, LOG_FORMAT, LOG_LEVEL

PACKAGE_LOGGER_NAME = "src"


def setup_logging(level: int = LOG_LEVEL) -> logging.Logger:
    """Attach a console handler to the package logger (called by the presentation layer). Calling it again replaces the handler instead of stacking them."""
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    logger.setLevel(level)

    # Prevent duplicate handlers
    if logger.handlers:
        logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    logger.addHandler(console_handler)

    return logger
