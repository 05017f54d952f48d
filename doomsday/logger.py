"""
Key-value logging for the doomsday package.

The package logger is silent on import (NullHandler only). Applications
opt in to output with ``setup_logger`` or DOOMSDAY_LOG_LEVEL, and a
Config passed to a lookup applies its ``log_level``.
"""

import logging
import os
import sys
from datetime import datetime
from pathlib import Path

LOGGER_NAME = "doomsday"

_base_logger = logging.getLogger(LOGGER_NAME)
_base_logger.addHandler(logging.NullHandler())


class StructuredLogger:
    """Renders ``event k=v ...`` messages on a stdlib logger"""

    def __init__(self, base: logging.Logger):
        self._logger = base

    def set_level(self, level: str):
        self._logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    def debug(self, event: str, **fields):
        if self._logger.isEnabledFor(logging.DEBUG):
            kv = " ".join(f"{k}={v}" for k, v in fields.items())
            self._logger.debug(f"{event} {kv}" if kv else event)


def setup_logger(level: str = "WARNING", log_file: bool = False) -> StructuredLogger:
    """
    Attach console (and optionally daily file) output to the package logger

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        log_file: Whether to also write logs/doomsday_YYYYMMDD.log

    Returns:
        The package's structured logger
    """
    _base_logger.handlers = [logging.NullHandler()]

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(
        "%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S"
    ))
    _base_logger.addHandler(console_handler)

    if log_file:
        log_dir = Path("logs")
        log_dir.mkdir(exist_ok=True)
        file_handler = logging.FileHandler(log_dir / f"doomsday_{datetime.now():%Y%m%d}.log", encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        ))
        _base_logger.addHandler(file_handler)

    logger.set_level(level)
    return logger


logger = StructuredLogger(_base_logger)

if _env_level := os.environ.get("DOOMSDAY_LOG_LEVEL"):
    setup_logger(
        level=_env_level,
        log_file=os.environ.get("DOOMSDAY_LOG_FILE", "").lower() in ("1", "true", "yes"),
    )
