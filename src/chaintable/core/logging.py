"""Centralized logging configuration for chaintable.

This module sets up the root logger with file rotation and optional
console output based on LoggingSettings. Library code never calls
setup_logging itself; applications embedding a HashMap decide whether to.
"""

from __future__ import annotations

import logging
import logging.handlers
import sys
from pathlib import Path

from chaintable.config import LoggingSettings, get_config
from chaintable.shared.constants import Logging


def setup_logging(
    log_file: str | Path | None = None,
    log_level: str | None = None,
    log_max_bytes: int | None = None,
    log_backup_count: int | None = None,
    *,
    console_output: bool | None = None,
    settings: LoggingSettings | None = None,
) -> None:
    """Set up the root logger.

    Args:
        log_file: Path to the log file. If None, uses config default.
            Relative paths resolve against the current directory.
        log_level: Logging level name. If None, uses config default.
        log_max_bytes: Maximum size of log file before rotation.
        log_backup_count: Number of backup files to keep.
        console_output: Whether to also log INFO and above to stdout.
        settings: Logging settings to fall back on instead of the
            global configuration.
    """
    config = settings or get_config().logging

    log_file = log_file or config.file
    log_level = log_level or config.level
    log_max_bytes = log_max_bytes or config.max_bytes
    if log_backup_count is None:
        log_backup_count = config.backup_count
    if console_output is None:
        console_output = config.console_output

    log_path = Path(log_file)
    if not log_path.is_absolute():
        log_path = Path.cwd() / log_path

    log_path.parent.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper()))

    # Clear any existing handlers
    root_logger.handlers.clear()

    formatter = logging.Formatter(
        fmt=config.format_string,
        datefmt=Logging.DEFAULT_DATE_FORMAT,
    )

    file_handler = logging.handlers.RotatingFileHandler(
        filename=str(log_path),
        maxBytes=log_max_bytes,
        backupCount=log_backup_count,
        encoding=Logging.DEFAULT_ENCODING,
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    if console_output:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.INFO)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name.

    Args:
        name: Logger name, typically __name__ of the calling module.

    Returns:
        Logger instance.
    """
    return logging.getLogger(name)

