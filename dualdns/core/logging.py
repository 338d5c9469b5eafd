"""
Logging setup for the resolver and CLI.
"""

import logging
import sys

from dualdns.core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: int | str | None = None) -> None:
    """
    Configure root logging on stdout.

    Args:
        level: Log level; defaults to DUALDNS_LOG_LEVEL from settings
    """
    if level is None:
        level = settings.log_level
    logging.basicConfig(format=LOG_FORMAT, level=level, stream=sys.stdout)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the given name."""
    return logging.getLogger(name)
