"""Package logger configuration for underfold."""

import logging
import sys

from .config import settings

__all__ = ["logger", "setup_logger"]


def setup_logger(
    name: str = "underfold",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure and return a logger instance.

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL),
            defaults to the configured ``log_level``
        format_string: Custom format string, defaults to the configured ``log_format``

    Returns:
        Configured logger instance
    """
    level = level or settings.log_level
    format_string = format_string or settings.log_format

    logger = logging.getLogger(name)

    # only configure once per logger name
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(getattr(logging, level.upper()))
        logger.propagate = False

    return logger


logger = setup_logger()
