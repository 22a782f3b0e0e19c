"""Logging setup for the multicall-deployer command line."""

import sys

from loguru import logger

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)


def configure_logging(level: str = "WARNING") -> int:
    """Replace loguru's default sink with a stderr sink at the given level; returns the sink id."""
    logger.remove()
    return logger.add(sys.stderr, format=LOG_FORMAT, level=level.upper())
