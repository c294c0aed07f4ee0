# src/core/logs.py
"""
Logging helpers for the appraisal engine.

- Every module logs through a child of the "appraisal" logger.
- configure_logging() is called once by entry points (CLI); library callers may
  leave it alone and attach their own handlers.
- File logging is best-effort: a failure to open logs/appraisal.log never
  breaks a computation.
"""

from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler

ROOT_LOGGER_NAME = "appraisal"
DEFAULT_LOG_PATH = os.path.join("logs", "appraisal.log")

_CONFIGURED = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger in the appraisal namespace (module __name__ is fine)."""
    if name.startswith("src."):
        name = name[len("src.") :]
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def debug_enabled() -> bool:
    return os.getenv("APPRAISAL_DEBUG", "").strip().lower() in {"1", "true", "yes", "on"}


def configure_logging(level: str | int = "INFO", log_path: str | None = DEFAULT_LOG_PATH) -> logging.Logger:
    """
    Attach a stderr handler and a rotating file handler to the appraisal logger (idempotent).

    APPRAISAL_DEBUG=1 forces DEBUG regardless of the requested level.
    """
    global _CONFIGURED
    logger = logging.getLogger(ROOT_LOGGER_NAME)

    resolved = logging.DEBUG if debug_enabled() else _resolve_level(level)
    logger.setLevel(resolved)

    if _CONFIGURED:
        return logger

    formatter = logging.Formatter(fmt="%(asctime)s %(levelname)s %(name)s: %(message)s", datefmt="(%Y-%m-%d %H:%M:%S)")

    stream = logging.StreamHandler(sys.stderr)
    stream.setFormatter(formatter)
    logger.addHandler(stream)

    if log_path:
        try:
            directory = os.path.dirname(log_path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            handler = RotatingFileHandler(log_path, maxBytes=1_000_000, backupCount=3, encoding="utf-8")
            handler.setFormatter(formatter)
            logger.addHandler(handler)
        except OSError as exc:
            logger.warning("file logging disabled (%s): %s", log_path, exc)

    _CONFIGURED = True
    return logger


def _resolve_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).strip().upper())
    return value if isinstance(value, int) else logging.INFO
