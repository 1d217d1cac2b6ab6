"""Dictionary stored in an open-addressing hash table with linear probing."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Optional

_MASK64 = (1 << 64) - 1


def string_hash(key: str) -> int:
    """Hash a string as ``h = 5 * h + code`` over its characters, on 64 bits."""
    value = 0
    for char in key:
        value = (5 * value + ord(char)) & _MASK64
    return value


class HashTable:
    """A fixed-size table of key/value pairs.

    Collisions are resolved by probing the following buckets in turn.
    Inserting into a full table is ignored; inserting a key that is already
    present leaves its value unchanged.
    """

    def __init__(self, divisor: int = 100) -> None:
        if divisor < 1:
            raise ValueError("divisor must be at least 1")
        self._table: list[Optional[tuple[Any, Any]]] = [None] * divisor
        self._size = 0

    def _home(self, key: Any) -> int:
        code = string_hash(key) if isinstance(key, str) else hash(key)
        return code % len(self._table)

    def _pairs(self) -> Iterator[tuple[Any, Any]]:
        return (pair for pair in self._table if pair is not None)

    def search(self, key: Any) -> int:
        """Return the bucket holding ``key``, or the first free bucket on its
        probe sequence, or its home bucket if the table is full."""
        home = self._home(key)
        buckets = len(self._table)
        for offset in range(buckets):
            index = (home + offset) % buckets
            pair = self._table[index]
            if pair is None or pair[0] == key:
                return index
        return home

    def find(self, key: Any) -> Optional[tuple[Any, Any]]:
        """Return the ``(key, value)`` pair for ``key``, or None."""
        pair = self._table[self.search(key)]
        if pair is None or pair[0] != key:
            return None
        return pair

    def insert(self, key: Any, value: Any) -> None:
        """Add the pair if ``key`` is absent and there is a free bucket."""
        if key in self:
            return
        index = self.search(key)
        if self._table[index] is None:
            self._table[index] = (key, value)
            self._size += 1

    def remove(self, key: Any) -> None:
        """Remove the pair with ``key``; do nothing if absent."""
        if key in self:
            self._table[self.search(key)] = None
            self._size -= 1

    def modify(self, key: Any, value: Any) -> None:
        """Replace the value of ``key``; raise KeyError if absent."""
        if key not in self:
            raise KeyError(key)
        self._table[self.search(key)] = (key, value)

    def retrieve(self, key: Any) -> Any:
        """Return the value of ``key``; raise KeyError if absent."""
        pair = self.find(key)
        if pair is None:
            raise KeyError(key)
        return pair[1]

    def contains_value(self, value: Any) -> bool:
        """Return True if some key maps to ``value``."""
        return any(pair[1] == value for pair in self._pairs())

    def contains_pair(self, key: Any, value: Any) -> bool:
        """Return True if the table holds exactly this pair."""
        return any(pair == (key, value) for pair in self._pairs())

    def keys(self) -> list[Any]:
        """Return the keys in bucket order."""
        return [pair[0] for pair in self._pairs()]

    def values(self) -> list[Any]:
        """Return the values in bucket order."""
        return [pair[1] for pair in self._pairs()]

    def items(self) -> list[tuple[Any, Any]]:
        """Return the pairs in bucket order."""
        return list(self._pairs())

    def resize(self) -> None:
        """Double the number of buckets, keeping every pair."""
        pairs = self.items()
        self._table = [None] * (2 * len(self._table))
        self._size = 0
        for key, value in pairs:
            self.insert(key, value)

    def is_subset(self, other: HashTable) -> bool:
        """Return True if every pair of this table is also in ``other``."""
        return all(other.find(key) == (key, value) for key, value in self._pairs())

    def divisor(self) -> int:
        """Return the number of buckets."""
        return len(self._table)

    def __contains__(self, key: Any) -> bool:
        return self.find(key) is not None

    def __len__(self) -> int:
        return self._size

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HashTable):
            return NotImplemented
        return len(self) == len(other) and self.items() == other.items()