"""chaintable Configuration Module

This module provides unified access to configuration models and settings
management:
- Settings: Main configuration facade
- Loader functions: get_config, load_settings, reload_config
- Domain models: TableSettings, LoggingSettings
"""

from __future__ import annotations

from .loader import get_config, load_settings, reload_config
from .models import LoggingSettings, Settings, TableSettings

__all__ = [
    "LoggingSettings",
    "Settings",
    "TableSettings",
    "get_config",
    "load_settings",
    "reload_config",
]
