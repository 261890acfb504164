"""gaugesim/logging_utils.py

Shared logging setup for the gauge simulator.

All modules log through :func:`logprintf` with the numeric levels used
across the project (0=error, 1=warning, 2=info, 3=debug).

Copyright BINGO Collaboration
Last modified: 2026-10-17
"""

from __future__ import annotations

import logging
import os
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s: %(message)s"

LOG_ERROR = 0
LOG_WARNING = 1
LOG_INFO = 2
LOG_DEBUG = 3

_LEVELS: dict[int, int] = {
    LOG_ERROR: logging.ERROR,
    LOG_WARNING: logging.WARNING,
    LOG_INFO: logging.INFO,
    LOG_DEBUG: logging.DEBUG,
}

logger = logging.getLogger("gauge-sim")
logger.setLevel(logging.INFO)
_handler = logging.StreamHandler(sys.stderr)
_handler.setFormatter(logging.Formatter(LOG_FORMAT))
if not logger.handlers:
    logger.addHandler(_handler)


def set_debug(enabled: bool) -> None:
    logger.setLevel(logging.DEBUG if enabled else logging.INFO)


def logprintf(level: int, fmt: str, *args: object) -> None:
    logger.log(_LEVELS.get(level, logging.INFO), fmt % args if args else fmt)


def preview_bytes(raw: bytes, limit: int = 64) -> str:
    """Render raw wire bytes for diagnostics, truncated to ``limit`` bytes."""

    text = repr(bytes(raw[:limit]))
    if len(raw) > limit:
        text += f"... ({len(raw)} bytes)"
    return text


def setup_file_logging(logdir: str, log_filename: str = "gauge-sim.log") -> str:
    os.makedirs(logdir, exist_ok=True)
    if not os.access(logdir, os.W_OK):
        raise PermissionError(f"Cannot write to log directory: {logdir}")

    logfile = os.path.join(logdir, log_filename)
    fh = logging.FileHandler(logfile)
    fh.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(fh)
    return logfile


__all__ = [
    "LOG_DEBUG",
    "LOG_ERROR",
    "LOG_INFO",
    "LOG_WARNING",
    "logger",
    "logprintf",
    "preview_bytes",
    "set_debug",
    "setup_file_logging",
]
