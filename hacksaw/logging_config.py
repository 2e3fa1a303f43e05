"""Logging setup for the hacksaw editor.

The terminal belongs to the fullscreen UI, so log records only go to a
rotating file in the user's log directory.
"""

import logging
import logging.handlers
import os
import sys
import tempfile
from typing import Optional

import platformdirs

LOG_FILENAME = "hacksaw.log"
LOG_FORMAT = "%(asctime)s - %(levelname)-8s - %(name)-18s - %(message)s"

logger = logging.getLogger("hacksaw")


def _log_directory(log_dir: Optional[str]) -> str:
    directory = log_dir or platformdirs.user_log_dir("hacksaw")
    try:
        os.makedirs(directory, exist_ok=True)
    except OSError as e:
        print(f"Error creating log directory '{directory}': {e}", file=sys.stderr)
        directory = tempfile.gettempdir()
    return directory


def setup_logging(level: str = "WARNING", log_dir: Optional[str] = None) -> Optional[str]:
    """Attach a rotating file handler to the ``hacksaw`` logger.

    Replaces any handler installed by an earlier call, so calling this
    twice does not duplicate records.

    Args:
        level: Logging level name for the package logger.
        log_dir: Directory for ``hacksaw.log``; defaults to the platform
            log directory, with the temp directory as fallback.

    Returns:
        Path of the log file, or None if no handler could be created.
    """
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    logger.propagate = False

    log_filename = os.path.join(_log_directory(log_dir), LOG_FILENAME)
    try:
        file_handler = logging.handlers.RotatingFileHandler(
            log_filename, maxBytes=2 * 1024 * 1024, backupCount=3, encoding="utf-8"
        )
    except OSError as e:
        print(f"Error setting up file logger for '{log_filename}': {e}", file=sys.stderr)
        logger.addHandler(logging.NullHandler())
        return None

    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(file_handler)
    return log_filename
