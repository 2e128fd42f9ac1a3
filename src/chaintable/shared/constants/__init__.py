"""
chaintable Constants Module

This module provides centralized constants for the chaintable package.
Sizing defaults, hashing constants and logging configuration are defined
here so that the engine, configuration models and logging setup agree.
"""

from .hash_table import HashConstants, HashTableDefaults, TableLogMessages
from .system import BASE_FILE_SIZE, FileSystem, Logging

__all__ = [
    "BASE_FILE_SIZE",
    "FileSystem",
    "HashConstants",
    "HashTableDefaults",
    "Logging",
    "TableLogMessages",
]
