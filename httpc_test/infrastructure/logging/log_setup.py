# httpc_test/infrastructure/logging/log_setup.py
from __future__ import annotations

import sys

from loguru import logger

PACKAGE = "httpc_test"
LOG_FORMAT = "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <7}</level> | {message}"


def setup_console_logging(level: str = "INFO") -> int:
    """
    Route httpc_test events to stderr. The package is silent until this is called.
    """
    logger.remove()
    logger.enable(PACKAGE)
    return logger.add(sys.stderr, level=level.upper(), format=LOG_FORMAT)
