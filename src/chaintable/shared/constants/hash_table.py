"""
Hash Table Constants

Sizing and hashing constants for the chaining hash map. The table sizes
itself from these unless a TableSettings instance overrides them.
"""


class HashTableDefaults:
    """Default sizing policy for HashMap."""

    DEFAULT_CAPACITY = 16
    LOAD_FACTOR = 0.75  # resize before size / capacity reaches this
    GROWTH_FACTOR = 2
    MIN_GROWN_CAPACITY = 1  # capacity an empty (zero-slot) table grows to


class HashConstants:
    """Constants for the key spreading function."""

    SEED = 31
    MULTIPLIER = 17

    # Classic polynomial string hash, wrapped to signed 32-bit
    STRING_HASH_BASE = 31
    INT32_MASK = 0xFFFFFFFF
    INT32_SIGN_BIT = 0x80000000
    INT32_RANGE = 1 << 32


class TableLogMessages:
    """Log message templates for table lifecycle events."""

    RESIZED = "Resized hash table from {old} to {new} buckets ({size} entries)"
    BULK_LOADED = "Bulk loaded {count} entries into hash table ({size} total)"
    NEGATIVE_CAPACITY = "Rejected negative hash table capacity: {capacity}"
