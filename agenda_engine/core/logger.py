"""
Logging setup shared by all services.
"""

import logging
import sys

from agenda_engine.core.config import get_settings

_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logger(name: str) -> logging.Logger:
    """
    Return a module logger with a single stream handler.

    Args:
        name: Logger name, usually __name__

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(get_settings().LOG_LEVEL)
    return logger
