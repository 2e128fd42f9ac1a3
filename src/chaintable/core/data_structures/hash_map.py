"""HashMap implementation using separate chaining.

This module provides a hash map built from first principles: a list of
buckets, each holding the head of a singly linked chain of HashNode
entries. No built-in ``dict`` backs the storage.

Key Features:
- O(1) expected time for put, get, and remove; O(n) under heavy collision
- Resize (capacity doubling) before an insertion would push the load
  factor to 0.75
- Entries are relinked, never recreated, when the table grows
- Snapshot views: key_set, values, entry_set, iterator

The table is not thread-safe. Mutating it while an iterator from
``iterator()`` is being consumed gives undefined traversal results; the
modification is not detected.

Example:
    >>> table = HashMap()
    >>> table.put("key1", "value1")
    >>> table.put("key1", "value2")
    'value1'
    >>> table.get("key1")
    'value2'
    >>> len(table)
    1
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from chaintable.config import TableSettings
from chaintable.core.data_structures.hashing import bucket_index
from chaintable.shared.constants import HashTableDefaults, TableLogMessages
from chaintable.shared.errors import create_invalid_argument_error

logger = logging.getLogger(__name__)

K = TypeVar("K")
V = TypeVar("V")


class HashNode(Generic[K, V]):
    """A key/value entry and the link to the next entry in its bucket.

    Two nodes are equal when their keys and values are equal. The hash
    covers the key only, so a set of nodes collapses equal pairs while
    values stay free to be unhashable (lists, dicts).
    """

    __slots__ = ("_key", "next_in_bucket", "value")

    def __init__(
        self,
        key: K,
        value: V,
        next_in_bucket: HashNode[K, V] | None = None,
    ) -> None:
        self._key = key
        self.value = value
        self.next_in_bucket = next_in_bucket

    @property
    def key(self) -> K:
        """The key stored in this node. Fixed once the node exists."""
        return self._key

    def get_key(self) -> K:
        return self._key

    def get_value(self) -> V:
        return self.value

    def set_value(self, value: V) -> V:
        """Replace the stored value and return the old one."""
        old_value = self.value
        self.value = value
        return old_value

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, HashNode):
            return NotImplemented
        return self._key == other._key and self.value == other.value

    def __hash__(self) -> int:
        return hash(self._key)

    def __repr__(self) -> str:
        return f"HashNode(key={self._key!r}, value={self.value!r})"


@dataclass
class TableStats:
    """Occupancy statistics for a HashMap."""

    size: int
    capacity: int
    load: float
    used_buckets: int
    longest_chain: int
    resize_count: int


PairSource = Union["HashMap[K, V]", Mapping[K, V], Iterable[tuple[K, V]]]


class HashMap(Generic[K, V]):
    """Hash map with separate chaining and load-factor driven growth.

    Each bucket holds ``None`` or the head of a chain. New keys are
    prepended to their chain, so the most recently inserted key of a
    bucket is found first. Re-inserting an existing key updates the
    node's value in place.

    Args:
        initial_capacity: Number of buckets to start with. Defaults to
            ``settings.default_capacity`` (16). Zero is accepted; the
            table grows on first insertion.
        settings: Sizing and hashing settings. Defaults to
            ``TableSettings()``; pass ``get_config().table`` to opt in to
            file and environment configuration.

    Raises:
        InvalidArgumentError: If ``initial_capacity`` is negative

    Example:
        >>> table = HashMap.from_mapping({1: "one", 2: "two"})
        >>> sorted(table.key_set())
        [1, 2]
        >>> table.remove(1)
        'one'
        >>> 1 in table
        False
    """

    def __init__(
        self,
        initial_capacity: int | None = None,
        *,
        settings: TableSettings | None = None,
    ) -> None:
        if settings is None:
            settings = TableSettings()
        if initial_capacity is None:
            initial_capacity = settings.default_capacity

        if initial_capacity < 0:
            logger.warning(TableLogMessages.NEGATIVE_CAPACITY.format(capacity=initial_capacity))
            raise create_invalid_argument_error(
                "Capacity can't be negative",
                argument="initial_capacity",
                value=initial_capacity,
                operation="HashMap.__init__",
            )

        self._load_factor = settings.load_factor
        self._seed = settings.hash_seed
        self._multiplier = settings.hash_multiplier
        self._capacity = initial_capacity
        self._size = 0
        self._resize_count = 0
        self._buckets: list[HashNode[K, V] | None] = [None] * initial_capacity

    @classmethod
    def from_mapping(
        cls,
        source: PairSource[K, V],
        *,
        settings: TableSettings | None = None,
    ) -> HashMap[K, V]:
        """Build a default-capacity table holding every pair of ``source``."""
        table: HashMap[K, V] = cls(settings=settings)
        table.put_all(source)
        return table

    def _index(self, key: Hashable, capacity: int) -> int:
        return bucket_index(key, capacity, self._seed, self._multiplier)

    def _find_node(self, key: K) -> HashNode[K, V] | None:
        if self._size == 0:
            return None

        current = self._buckets[self._index(key, self._capacity)]
        while current is not None:
            if current.key == key:
                return current
            current = current.next_in_bucket
        return None

    def _needs_resize(self) -> bool:
        # Counts the pending entry even when the key turns out to exist
        return self._capacity == 0 or (self._size + 1) / self._capacity >= self._load_factor

    def get(self, key: K, default: V | None = None) -> V | None:
        """Return the value stored under ``key``, or ``default`` if absent."""
        node = self._find_node(key)
        if node is None:
            return default
        return node.value

    def contains_key(self, key: K) -> bool:
        """Return True if ``key`` is stored, even when mapped to None."""
        return self._find_node(key) is not None

    def contains_value(self, value: Any) -> bool:
        """Return True if any entry's value equals ``value``.

        Scans every bucket and chain; there is no value index.
        """
        return any(node.value == value for node in self._walk(self._buckets))

    def put(self, key: K, value: V) -> V | None:
        """Insert or update a key/value pair.

        The resize check runs before the bucket is located, on every call,
        including updates of keys that are already present.

        Args:
            key: Hashable key to insert or update
            value: Value to associate with the key

        Returns:
            Previous value if the key existed, None otherwise

        Raises:
            TypeError: If ``key`` is unhashable. Nothing is modified.
        """
        # Unhashable keys fail here, before any resize
        hash(key)

        while self._needs_resize():
            self._resize()

        index = self._index(key, self._capacity)
        head = self._buckets[index]

        current = head
        while current is not None:
            if current.key == key:
                return current.set_value(value)
            current = current.next_in_bucket

        self._buckets[index] = HashNode(key, value, head)
        self._size += 1
        return None

    def _unlink(self, key: K) -> HashNode[K, V] | None:
        if self._size == 0:
            return None

        index = self._index(key, self._capacity)
        current = self._buckets[index]
        prev = None

        while current is not None:
            if current.key == key:
                if prev is None:
                    self._buckets[index] = current.next_in_bucket
                else:
                    prev.next_in_bucket = current.next_in_bucket
                current.next_in_bucket = None
                self._size -= 1
                return current

            prev = current
            current = current.next_in_bucket

        return None

    def remove(self, key: K) -> V | None:
        """Remove ``key`` and return its value, or None if it was absent.

        Capacity never shrinks.
        """
        node = self._unlink(key)
        if node is None:
            return None
        return node.value

    def _resize(self) -> None:
        """Double the bucket count and relink every node into it.

        Nodes are visited bucket by bucket, head to tail, and prepended to
        their new chains, so nodes that stay together end up in reverse
        order. The new bucket list is installed only once every node has
        been relinked.
        """
        old_capacity = self._capacity
        if old_capacity:
            new_capacity = old_capacity * HashTableDefaults.GROWTH_FACTOR
        else:
            new_capacity = HashTableDefaults.MIN_GROWN_CAPACITY
        new_buckets: list[HashNode[K, V] | None] = [None] * new_capacity

        for head in self._buckets:
            current = head
            while current is not None:
                next_node = current.next_in_bucket
                index = self._index(current.key, new_capacity)
                current.next_in_bucket = new_buckets[index]
                new_buckets[index] = current
                current = next_node

        self._buckets = new_buckets
        self._capacity = new_capacity
        self._resize_count += 1

        logger.debug(
            TableLogMessages.RESIZED.format(old=old_capacity, new=new_capacity, size=self._size)
        )

    def put_all(self, source: PairSource[K, V]) -> None:
        """Put every pair of ``source`` in its iteration order.

        ``source`` may be another HashMap, any Mapping, or an iterable of
        ``(key, value)`` pairs. An empty source changes nothing, not even
        the capacity.
        """
        if isinstance(source, HashMap):
            # Snapshot so that put_all(self) cannot walk a resized table
            pairs: Iterable[tuple[K, V]] = list(source.items())
        elif isinstance(source, Mapping):
            pairs = source.items()
        else:
            pairs = source

        count = 0
        for key, value in pairs:
            self.put(key, value)
            count += 1

        if count:
            logger.debug(TableLogMessages.BULK_LOADED.format(count=count, size=self._size))

    def clear(self) -> None:
        """Drop every entry. Capacity is kept."""
        self._buckets = [None] * self._capacity
        self._size = 0

    @staticmethod
    def _walk(buckets: list[HashNode[K, V] | None]) -> Iterator[HashNode[K, V]]:
        for head in buckets:
            current = head
            while current is not None:
                yield current
                current = current.next_in_bucket

    def key_set(self) -> set[K]:
        """Return a new set of every live key."""
        return {node.key for node in self._walk(self._buckets)}

    def values(self) -> list[V]:
        """Return every live value in bucket order, duplicates included."""
        return [node.value for node in self._walk(self._buckets)]

    def entry_set(self) -> set[HashNode[K, V]]:
        """Return a new set of the live entries.

        Entries with equal key and value count once. The members are the
        table's own nodes, so changing a member's value through
        ``set_value`` changes the table.
        """
        return set(self._walk(self._buckets))

    def iterator(self) -> Iterator[HashNode[K, V]]:
        """Return a one-shot iterator over the live entries.

        The bucket list is captured when this method is called.
        """
        return self._walk(self._buckets)

    def items(self) -> Iterator[tuple[K, V]]:
        """Iterate over ``(key, value)`` tuples in bucket order."""
        for node in self._walk(self._buckets):
            yield node.key, node.value

    def is_empty(self) -> bool:
        return self._size == 0

    def stats(self) -> TableStats:
        """Return occupancy statistics, computed by scanning the buckets."""
        used_buckets = 0
        longest_chain = 0
        for head in self._buckets:
            length = 0
            current = head
            while current is not None:
                length += 1
                current = current.next_in_bucket
            if length:
                used_buckets += 1
                longest_chain = max(longest_chain, length)

        return TableStats(
            size=self._size,
            capacity=self._capacity,
            load=self._size / self._capacity if self._capacity else 0.0,
            used_buckets=used_buckets,
            longest_chain=longest_chain,
            resize_count=self._resize_count,
        )

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        return self.contains_key(key)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[HashNode[K, V]]:
        return self.iterator()

    def __getitem__(self, key: K) -> V:
        node = self._find_node(key)
        if node is None:
            raise KeyError(key)
        return node.value

    def __setitem__(self, key: K, value: V) -> None:
        self.put(key, value)

    def __delitem__(self, key: K) -> None:
        if self._unlink(key) is None:
            raise KeyError(key)

    def __eq__(self, other: object) -> bool:
        """Equal when both hold the same keys mapped to equal values."""
        if self is other:
            return True

        if isinstance(other, HashMap):
            if other.size != self._size:
                return False
            for node in self._walk(self._buckets):
                match = other._find_node(node.key)
                if match is None or match.value != node.value:
                    return False
            return True

        if isinstance(other, Mapping):
            if len(other) != self._size:
                return False
            for node in self._walk(self._buckets):
                if node.key not in other or other[node.key] != node.value:
                    return False
            return True

        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        if self._size == 0:
            return "HashMap({})"
        items = ", ".join(f"{node.key!r}: {node.value!r}" for node in self._walk(self._buckets))
        return f"HashMap({{{items}}})"

    def __repr__(self) -> str:
        return (
            f"HashMap(capacity={self._capacity}, "
            f"size={self._size}, load_factor={self._load_factor})"
        )

    @property
    def size(self) -> int:
        """Get the current number of entries in the table."""
        return self._size

    @property
    def capacity(self) -> int:
        """Get the current number of buckets."""
        return self._capacity

    @property
    def load_factor(self) -> float:
        """Get the load factor threshold that triggers a resize."""
        return self._load_factor
