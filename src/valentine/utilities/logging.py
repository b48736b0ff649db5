"""Logger factory for the heart animation.

curses owns stdout and stderr while a frame is on screen, so records go to
one rotating file per logger under ``VALENTINE_LOG_DIR``. Setting
``VALENTINE_LOG_TO_STDERR`` mirrors them to stderr, which is only readable
once the terminal has been restored.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

from valentine.utilities.env import Configuration

MAX_LOG_BYTES = 10 * 1024 * 1024  # 10 MiB
BACKUP_COUNT = 5
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _sanitize_logger_name(name: str) -> str:
    """Turn a dotted module name into a log file stem."""

    sanitized = name.replace("/", "_").replace(os.sep, "_")
    sanitized = sanitized.replace("..", ".")
    return sanitized.replace(".", "_") or "root"


def _log_file_for(name: str) -> Path:
    directory = Configuration.log_directory()
    directory.mkdir(parents=True, exist_ok=True)
    return directory / f"{_sanitize_logger_name(name)}.log"


def _build_handlers(name: str) -> list[logging.Handler]:
    handlers: list[logging.Handler] = []
    if Configuration.log_to_stderr():
        handlers.append(logging.StreamHandler())
    handlers.append(
        RotatingFileHandler(
            _log_file_for(name),
            maxBytes=MAX_LOG_BYTES,
            backupCount=BACKUP_COUNT,
        )
    )
    return handlers


def _configure_logger(logger: logging.Logger, log_level: str) -> None:
    level = getattr(logging, log_level, logging.INFO)
    logger.setLevel(level)

    if logger.handlers:
        # Only the first call for a name attaches handlers.
        return

    formatter = logging.Formatter(LOG_FORMAT)
    for handler in _build_handlers(logger.name):
        handler.setFormatter(formatter)
        handler.setLevel(level)
        logger.addHandler(handler)
    # The root logger may print to the terminal curses is drawing on.
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name``, writing to its own rotating log file.

    Repeated calls return the same logger without stacking handlers; only
    the level is refreshed from ``LOG_LEVEL``.
    """

    logger = logging.getLogger(name)
    _configure_logger(logger, Configuration.log_level())
    return logger
