"""
Logging setup for the effort timer.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional

from loguru import logger as _logger

_LOG_INITIALISED = False
LOG_DIR = Path(os.environ.get("EFFORT_TIMER_LOG_DIR", str(Path.home() / ".effort-timer" / "logs")))
DEFAULT_LOG_PATH = LOG_DIR / "effort-timer.log"


def configure(log_path: Optional[Path] = None) -> None:
    """
    Send effort timer logs to stderr and a rotating file.

    ``log_path`` overrides the file under ``EFFORT_TIMER_LOG_DIR``. Only the
    first call in a process has any effect.
    """
    global _LOG_INITIALISED
    if _LOG_INITIALISED:
        return
    target = log_path or DEFAULT_LOG_PATH
    target.parent.mkdir(parents=True, exist_ok=True)

    # Keep console output and add a persistent file sink.
    _logger.remove()
    if sys.stderr is not None:
        _logger.add(sys.stderr, level="INFO")
    _logger.add(
        target,
        level="DEBUG",
        rotation="5 MB",
        retention=3,
        encoding="utf-8",
        backtrace=True,
        diagnose=False,
    )
    _LOG_INITIALISED = True


def get_logger():
    """Return the shared logger instance."""
    configure()
    return _logger
