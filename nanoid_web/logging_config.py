"""
Package logging configuration.

This module provides the logger used across nanoid_web. Strict entry points
raise errors to their callers; the best-effort ones report failures through
this logger instead.
"""
import logging
import sys

from nanoid_web.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging() -> logging.Logger:
    """
    Return the "nanoid_web" logger, attaching a stderr handler on first use.

    Both logger and handler follow NANOID_LOG_LEVEL. Records also reach the
    root logger, so a host application's handlers see failed id draws too.
    """
    logger = logging.getLogger("nanoid_web")
    logger.setLevel(settings.NANOID_LOG_LEVEL)

    if not logger.handlers:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setLevel(settings.NANOID_LOG_LEVEL)
        stderr_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(stderr_handler)

    return logger
