"""
System Configuration Constants

This module contains constants shared by the configuration and logging
layers: file locations and log rotation limits.
"""

# =============================================================================
# BASE CONSTANTS (Foundation values used by other constants)
# =============================================================================

# Base file size unit (1KB)
BASE_FILE_SIZE = 1024  # 1KB in bytes

# =============================================================================
# FILE AND PATH CONFIGURATION
# =============================================================================


class FileSystem:
    """File system related constants."""

    CONFIG_DIRECTORY = "config"
    CONFIG_FILENAME = "config.toml"
    ENV_PREFIX = "CHAINTABLE_"


# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================


class Logging:
    """Logging configuration constants."""

    MAX_BYTES = 10 * BASE_FILE_SIZE**2  # 10MB
    BACKUP_COUNT = 5
    DEFAULT_LEVEL = "INFO"
    DEFAULT_FILE_PATH = "logs/chaintable.log"
    DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
    DEFAULT_ENCODING = "utf-8"
