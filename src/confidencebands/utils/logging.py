"""Logging for confidencebands.

Modules log through get_logger(__name__) and never configure handlers
themselves; the package logger only has a NullHandler until a host attaches
its own handlers. Demos and scripts call configure_logging() to get stderr
output, with the level taken from CONFIDENCEBANDS_LOG_LEVEL when not given.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional, Union

LOGGER_NAME = "confidencebands"
LOG_LEVEL_ENV_VAR = "CONFIDENCEBANDS_LOG_LEVEL"

DEFAULT_FMT = "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d:%(funcName)s: %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(level: Optional[Union[str, int]]) -> int:
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV_VAR, "INFO")
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.INFO)
    return level


def configure_logging(
    level: Optional[Union[str, int]] = None,
    *,
    fmt: Optional[str] = None,
    datefmt: Optional[str] = None,
    force: bool = False,
) -> None:
    """Attach a stderr handler to the confidencebands logger (root is left alone).

    Args:
        level: Level name or number; None reads CONFIDENCEBANDS_LOG_LEVEL
            (INFO when unset or unknown).
        fmt: Record format, DEFAULT_FMT when None.
        datefmt: Timestamp format, DEFAULT_DATEFMT when None.
        force: Drop every existing handler first. Without it a second call
            reuses the stderr handler and only changes its level.
    """
    resolved = _resolve_level(level)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(resolved)

    formatter = logging.Formatter(fmt=fmt or DEFAULT_FMT, datefmt=datefmt or DEFAULT_DATEFMT)

    if force:
        for h in logger.handlers[:]:
            h.close()
            logger.removeHandler(h)
    else:
        for h in logger.handlers:
            if isinstance(h, logging.StreamHandler) and h.stream is sys.stderr:
                h.setLevel(resolved)
                return

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(resolved)
    console.setFormatter(formatter)
    logger.addHandler(console)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger for ``name``; the package logger when name is None."""
    if name is None:
        name = LOGGER_NAME
    return logging.getLogger(name)
