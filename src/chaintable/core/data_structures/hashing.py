"""Key hashing for the chaining hash map.

Bucket placement depends only on the key's own ``hash()``: the seed and
multiplier are folded in as a constant offset and the result is made
non-negative. Two keys whose ``hash()`` values are equal therefore always
share a bucket, and chain traversal with ``==`` tells them apart.
"""

from __future__ import annotations

from collections.abc import Hashable

from chaintable.shared.constants import HashConstants


def spread_hash(
    key: Hashable,
    seed: int = HashConstants.SEED,
    multiplier: int = HashConstants.MULTIPLIER,
) -> int:
    """Return a non-negative hash for ``key``.

    Computes ``abs(seed * multiplier + hash(key))``. Python integers do not
    overflow, so the absolute value is always non-negative.

    Args:
        key: Any hashable object
        seed: Starting value combined with the key's hash
        multiplier: Factor applied to the seed

    Returns:
        Non-negative integer suitable for modulo indexing

    Raises:
        TypeError: If ``key`` is unhashable
    """
    return abs(seed * multiplier + hash(key))


def bucket_index(
    key: Hashable,
    capacity: int,
    seed: int = HashConstants.SEED,
    multiplier: int = HashConstants.MULTIPLIER,
) -> int:
    """Return the bucket slot for ``key`` in a table of ``capacity`` buckets."""
    return spread_hash(key, seed, multiplier) % capacity


def string_hash(text: str) -> int:
    """Polynomial 32-bit string hash (``h = 31 * h + ord(ch)``).

    This is the classic signed 32-bit string hash, under which ``"FB"`` and
    ``"Ea"`` collide. It is not used for bucket placement; callers use it
    to build keys with known collisions.

    >>> string_hash("FB") == string_hash("Ea") == 2236
    True
    """
    h = 0
    for ch in text:
        h = (HashConstants.STRING_HASH_BASE * h + ord(ch)) & HashConstants.INT32_MASK
    if h & HashConstants.INT32_SIGN_BIT:
        h -= HashConstants.INT32_RANGE
    return h
