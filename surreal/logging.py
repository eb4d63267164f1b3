"""
Logger factory for the surreal package.

Every module logs through a child of the "surreal" logger, which owns the
one stream handler. SURREAL_LOG_LEVEL sets its level when the package is
first imported (default WARNING).
"""

import logging
import os

PACKAGE = "surreal"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LEVEL_ENV = "SURREAL_LOG_LEVEL"


def resolve_level(level_name: str, default: int = logging.WARNING) -> int:
    level = logging.getLevelName(level_name.upper())
    return level if isinstance(level, int) else default


def _package_logger() -> logging.Logger:
    logger = logging.getLogger(PACKAGE)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(resolve_level(os.getenv(LEVEL_ENV, "WARNING")))
    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Logger `name` under the package handler.

    Demo scripts (names ending in ".demo") speak at INFO unless
    SURREAL_LOG_LEVEL is set.
    """
    _package_logger()
    logger = logging.getLogger(name)
    if name.endswith(".demo") and LEVEL_ENV not in os.environ:
        logger.setLevel(logging.INFO)
    return logger
