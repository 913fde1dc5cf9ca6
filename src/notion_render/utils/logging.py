"""Logging utilities."""

import logging
import os
import sys
from typing import Optional

# Loggers are built at import time, before any Settings are validated
_LOG_LEVEL_ENV = "NOTION_RENDER_LOG_LEVEL"
_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """Get a configured logger.

    Args:
        name: Logger name (typically __name__)
        level: Optional log level override

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        logger.addHandler(handler)

    if level is not None:
        logger.setLevel(level)
    elif logger.level == logging.NOTSET:
        configured = getattr(
            logging, os.environ.get(_LOG_LEVEL_ENV, "WARNING").upper(), None
        )
        logger.setLevel(configured if isinstance(configured, int) else logging.WARNING)

    return logger
