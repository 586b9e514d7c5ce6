"""Logging configuration."""

import logging
from typing import Optional, Union

PACKAGE_LOGGER = "clustermgr"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a configured logger instance."""
    root = logging.getLogger(PACKAGE_LOGGER)

    # Only configure if no handlers exist
    if not root.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(LOG_FORMAT)
        handler.setFormatter(formatter)
        root.addHandler(handler)
        root.setLevel(logging.WARNING)

    return logging.getLogger(name or PACKAGE_LOGGER)


def set_log_level(level: Union[int, str]) -> None:
    """Set the level of every clustermgr logger."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    get_logger().setLevel(level)
