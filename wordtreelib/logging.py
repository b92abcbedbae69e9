"""Project-wide logging utilities that honour the runtime configuration."""

from __future__ import annotations

import logging
from typing import Optional

from ._common import config as wt_config

_HANDLER_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _resolve_level(level: str) -> int:
    # Unknown names are left for TrackerConfig.validate() to report.
    resolved = logging.getLevelName(str(level).strip().upper())
    if isinstance(resolved, int):
        return resolved
    return logging.getLevelName(wt_config.DEFAULT_LOG_LEVEL)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger configured according to the runtime configuration."""

    package_logger = logging.getLogger("wordtreelib")
    if package_logger.level == logging.NOTSET:
        package_logger.setLevel(_resolve_level(wt_config.runtime_config().log_level))
    if name is None:
        return package_logger
    return logging.getLogger(f"wordtreelib.{name}")


def configure_logging(level: str) -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    Calling this more than once only updates the level.
    """
    level = level.upper()
    logger = logging.getLogger("wordtreelib")
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_HANDLER_FORMAT))
        logger.addHandler(handler)
    for handler in logger.handlers:
        handler.setLevel(level)
    return logger
