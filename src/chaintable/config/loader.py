"""Settings loader and singleton manager.

This module handles:
- Configuration file loading from TOML
- Thread-safe singleton pattern for the process-wide Settings instance
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path

import toml
from pydantic import ValidationError

from chaintable.config.models.settings import Settings
from chaintable.shared.constants import FileSystem
from chaintable.shared.errors import ErrorCode, create_config_error

logger = logging.getLogger(__name__)


class SettingsLoader:
    """Thread-safe singleton manager for Settings.

    Uses double-checked locking so the common path (already loaded)
    does not take the lock.
    """

    _instance: Settings | None = None
    _lock: threading.RLock = threading.RLock()

    def get_config(self) -> Settings:
        """Get the global settings instance, loading it if necessary."""
        if self._instance is None:
            with self._lock:
                if self._instance is None:
                    self._instance = load_settings()
        return self._instance

    def reload_config(self) -> Settings:
        """Reload the global settings instance from configuration files."""
        with self._lock:
            self._instance = load_settings()
        return self._instance


_loader = SettingsLoader()


def default_config_paths() -> list[Path]:
    """Candidate configuration files, in lookup order."""
    return [
        Path(FileSystem.CONFIG_DIRECTORY) / FileSystem.CONFIG_FILENAME,
        Path(FileSystem.CONFIG_FILENAME),
    ]


def load_settings(config_path: str | Path | None = None) -> Settings:
    """Load settings from a TOML configuration file or the environment.

    Args:
        config_path: Optional path to a TOML configuration file. If None,
            the default locations are tried before falling back to
            environment variables and defaults.

    Returns:
        Settings instance loaded from the first available source

    Raises:
        ConfigurationError: If the file is missing, is not valid TOML, or
            holds values that fail validation
    """
    if config_path is not None:
        return _load_from_file(Path(config_path))

    for candidate in default_config_paths():
        if candidate.exists():
            return _load_from_file(candidate)

    try:
        return Settings()
    except ValidationError as e:
        raise create_config_error(
            "Invalid configuration in environment variables",
            operation="load_settings",
            original_error=e,
        ) from e


def _load_from_file(config_path: Path) -> Settings:
    try:
        settings = Settings.from_toml_file(config_path)
    except FileNotFoundError as e:
        raise create_config_error(
            f"Configuration file not found: {config_path}",
            file_path=config_path,
            operation="load_settings",
            original_error=e,
            code=ErrorCode.CONFIG_MISSING,
        ) from e
    except toml.TomlDecodeError as e:
        raise create_config_error(
            f"Configuration file is not valid TOML: {config_path}",
            file_path=config_path,
            operation="load_settings",
            original_error=e,
        ) from e
    except ValidationError as e:
        raise create_config_error(
            f"Invalid configuration values in {config_path}",
            file_path=config_path,
            operation="load_settings",
            original_error=e,
        ) from e

    logger.info("Loaded configuration from %s", config_path)
    return settings


def get_config() -> Settings:
    """Get the global settings instance (thread-safe)."""
    return _loader.get_config()


def reload_config() -> Settings:
    """Reload the global settings instance from configuration files."""
    return _loader.reload_config()
