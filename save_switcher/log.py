"""Package-wide logger for Save Switcher.

The TUI owns the terminal, so nothing is written to stderr by default.
``configure_logging`` attaches a file handler when the user asks for one.
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger("save_switcher")
logger.addHandler(logging.NullHandler())

_LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def configure_logging(debug: bool = False, log_file: Path | None = None) -> None:
    """Set the package log level and optionally log to *log_file*."""
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    if log_file is None:
        return
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file, encoding="utf-8")
    except OSError:
        logger.debug("cannot open log file %s", log_file, exc_info=True)
        return
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    logger.addHandler(handler)
