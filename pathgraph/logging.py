"""Package-wide logging for pathgraph.

Module loggers are children of the "pathgraph" logger. That logger gets a
single stdout handler the first time any module asks for a logger, and its
level controls every module at once.
"""

import logging
import sys

ROOT_LOGGER_NAME = "pathgraph"

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _package_logger() -> logging.Logger:
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    if not root_logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(_FORMAT))
        root_logger.addHandler(handler)
        root_logger.setLevel(logging.INFO)
    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a pathgraph module, usually ``get_logger(__name__)``."""
    _package_logger()
    return logging.getLogger(name)


def set_level(level: int) -> None:
    """Set the level for all pathgraph loggers, e.g. ``set_level(logging.DEBUG)``."""
    _package_logger().setLevel(level)
