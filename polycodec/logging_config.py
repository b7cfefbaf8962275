"""Logging setup for applications embedding polycodec."""
import logging
import sys
from typing import Optional

from polycodec.config import settings


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Configure logging for applications embedding polycodec.

    Sends records to stdout. Development mode adds timestamps and module
    names and defaults to DEBUG so decode failures are visible.
    """
    if level is None:
        level = "DEBUG" if settings.is_development else settings.LOG_LEVEL

    if settings.is_development:
        fmt = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    else:
        fmt = "%(levelname)s %(name)s: %(message)s"

    logger = logging.getLogger("polycodec")
    logger.setLevel(level)
    logger.handlers.clear()
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt))
    logger.addHandler(handler)
    logger.propagate = False

    return logger
