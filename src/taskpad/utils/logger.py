"""taskpad's log file.

Everything goes to one rotating file under the platform log directory;
nothing is written to the terminal. ``TASKPAD_LOG_LEVEL`` (a standard
level name such as ``INFO``) raises the threshold from the default
``DEBUG``.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path

from platformdirs import user_log_dir

_APP_NAME = "taskpad"
_LOG_FILE = "taskpad.log"
_LEVEL_ENV = "TASKPAD_LOG_LEVEL"
_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
_BACKUP_COUNT = 3

_logger: logging.Logger | None = None


def get_log_file() -> Path:
    """Path of the active log file."""
    return Path(user_log_dir(_APP_NAME)) / _LOG_FILE


def _level_from_env() -> int:
    name = os.environ.get(_LEVEL_ENV, "").strip().upper()
    level = logging.getLevelName(name) if name else logging.DEBUG
    # getLevelName returns "Level X" for unknown names
    return level if isinstance(level, int) else logging.DEBUG


def get_logger() -> logging.Logger:
    """Return the taskpad logger, creating its file handler on first use."""
    global _logger
    if _logger is not None:
        return _logger

    log_file = get_log_file()
    log_file.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=_MAX_BYTES,
        backupCount=_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)-8s %(module)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    logger = logging.getLogger(_APP_NAME)
    logger.setLevel(_level_from_env())
    if not logger.handlers:
        logger.addHandler(handler)
    logger.propagate = False

    _logger = logger
    return _logger
