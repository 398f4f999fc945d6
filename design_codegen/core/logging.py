"""
Logging setup for the design_codegen logger tree.

Modules log through ``logging.getLogger(__name__)``; this only attaches a
console handler to the package root logger once.
"""

import logging
import sys
from typing import Optional

from .config import get_settings


ROOT_LOGGER_NAME = "design_codegen"

LOG_FORMAT = "[%(asctime)s] %(levelname)s [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Configure the package logger.

    Args:
        level: Log level name; defaults to Settings.LOG_LEVEL

    Returns:
        The ``design_codegen`` root logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel((level or get_settings().LOG_LEVEL).upper())

    # Create console handler if not exists
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)

    return logger
