"""Set that keeps its elements in insertion order."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Optional


class LinkedSet:
    """A set of distinct elements compared with ``==``, in insertion order."""

    def __init__(self, iterable: Optional[Iterable[Any]] = None) -> None:
        self._items: list[Any] = []
        if iterable is not None:
            for value in iterable:
                self.insert(value)

    def insert(self, value: Any) -> None:
        """Append ``value`` unless it is already a member."""
        if value not in self:
            self._items.append(value)

    def remove(self, value: Any) -> None:
        """Remove ``value``; do nothing if it is not a member."""
        for index, item in enumerate(self._items):
            if item == value:
                del self._items[index]
                return

    def union(self, other: LinkedSet) -> LinkedSet:
        """Return the elements of this set followed by the new ones of ``other``."""
        result = LinkedSet(self)
        for value in other:
            result.insert(value)
        return result

    def intersection(self, other: LinkedSet) -> LinkedSet:
        """Return the elements common to both sets."""
        result = LinkedSet(value for value in self if value in other)
        for value in other:
            if value in self:
                result.insert(value)
        return result

    def difference(self, other: LinkedSet) -> LinkedSet:
        """Return the elements of this set that are not in ``other``."""
        return LinkedSet(value for value in self if value not in other)

    def copy(self) -> LinkedSet:
        """Return an independent set with the same elements."""
        return LinkedSet(self)

    def __contains__(self, value: Any) -> bool:
        return any(item == value for item in self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        """True when no element of this set is missing from ``other``."""
        if not isinstance(other, LinkedSet):
            return NotImplemented
        return not len(self.difference(other))

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "[" + "".join(f" {value} " for value in self._items) + "]"