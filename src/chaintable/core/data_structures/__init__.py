"""Data structures module for chaintable.

This module contains the chaining hash map and its hashing helpers.
"""

from .hash_map import HashMap, HashNode, TableStats
from .hashing import bucket_index, spread_hash, string_hash

__all__ = [
    "HashMap",
    "HashNode",
    "TableStats",
    "bucket_index",
    "spread_hash",
    "string_hash",
]
