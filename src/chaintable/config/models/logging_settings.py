"""Logging configuration model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from chaintable.shared.constants import Logging


class LoggingSettings(BaseModel):
    """Logging configuration.

    This class manages logging behavior including level, format,
    file output, and console output settings.
    """

    model_config = ConfigDict(populate_by_name=True)

    level: str = Field(default=Logging.DEFAULT_LEVEL, description="Logging level")
    format_string: str = Field(
        default=Logging.DEFAULT_FORMAT,
        description="Log format string",
        alias="format",
    )
    file: str = Field(default=Logging.DEFAULT_FILE_PATH, description="Log file path")
    max_bytes: int = Field(
        default=Logging.MAX_BYTES,
        gt=0,
        description="Maximum log file size in bytes",  # 10MB
    )
    backup_count: int = Field(
        default=Logging.BACKUP_COUNT,
        ge=0,
        description="Number of backup log files to keep",
    )
    console_output: bool = Field(default=True, description="Enable console logging")


__all__ = ["LoggingSettings"]
