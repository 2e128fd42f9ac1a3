"""chaintable Settings Configuration Model.

Main Settings class that consolidates the table and logging domains.
"""

from __future__ import annotations

import logging
from pathlib import Path

import toml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from chaintable.config.models.logging_settings import LoggingSettings
from chaintable.config.models.table_settings import TableSettings
from chaintable.shared.constants import FileSystem

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Settings facade providing unified configuration access.

    Values come from keyword arguments first, then ``CHAINTABLE_``-prefixed
    environment variables (``CHAINTABLE_TABLE__LOAD_FACTOR=0.5``), then the
    model defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix=FileSystem.ENV_PREFIX,
        env_nested_delimiter="__",
        env_ignore_empty=True,
        extra="ignore",
    )

    table: TableSettings = Field(default_factory=TableSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @classmethod
    def from_toml_file(cls, file_path: str | Path) -> Settings:
        """Load settings from TOML file with environment variable overrides."""
        file_path = Path(file_path)
        if not file_path.exists():
            msg = f"Configuration file not found: {file_path}"
            raise FileNotFoundError(msg)

        raw_config = toml.load(file_path)
        logger.debug("Loaded configuration sections %s from %s", sorted(raw_config), file_path)
        return cls(**raw_config)

    def to_toml_file(self, file_path: str | Path) -> None:
        """Save settings to TOML file."""
        file_path = Path(file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)

        config_dict = self.model_dump(by_alias=True, exclude_none=True)

        with open(file_path, "w", encoding="utf-8") as f:
            toml.dump(config_dict, f)


__all__ = ["Settings"]
