"""Logging configuration."""

import sys

from loguru import logger


def setup_logging(debug: bool = False):
    """Configure loguru with a single stderr sink."""
    logger.remove()

    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | {name}:{line} | <level>{message}</level>",
        level="DEBUG" if debug else "INFO",
        colorize=True,
    )

    return logger
