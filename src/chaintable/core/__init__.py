"""Core components of chaintable."""

from .data_structures import HashMap, HashNode, TableStats

__all__ = ["HashMap", "HashNode", "TableStats"]
