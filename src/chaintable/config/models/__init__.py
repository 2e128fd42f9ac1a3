"""Configuration domain models.

This module provides centralized access to the configuration models.
"""

from __future__ import annotations

from .logging_settings import LoggingSettings
from .settings import Settings
from .table_settings import TableSettings

__all__ = [
    "LoggingSettings",
    "Settings",
    "TableSettings",
]
