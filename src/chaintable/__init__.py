"""
chaintable - Separate-chaining hash map

A key/value container built from first principles: a resizable list of
bucket chains, a deterministic non-negative key hash, and in-place
updates of existing entries.
"""

__version__ = "0.1.0"

from .core import HashMap, HashNode, TableStats
from .shared.errors import ChainTableError, InvalidArgumentError

__all__ = [
    "ChainTableError",
    "HashMap",
    "HashNode",
    "InvalidArgumentError",
    "TableStats",
]
