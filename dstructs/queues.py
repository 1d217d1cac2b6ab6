"""FIFO queues: an unbounded linked queue and a bounded circular array queue."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from typing import Any, Optional


class LinkedQueue:
    """An unbounded first-in, first-out queue."""

    def __init__(self, iterable: Optional[Iterable[Any]] = None) -> None:
        self._items: deque[Any] = deque()
        if iterable is not None:
            for value in iterable:
                self.enqueue(value)

    def enqueue(self, value: Any) -> None:
        """Append ``value`` at the tail."""
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the head element; do nothing on an empty queue."""
        if not self._items:
            return None
        return self._items.popleft()

    def top(self) -> Any:
        """Return the head element without removing it."""
        if not self._items:
            raise IndexError("top of an empty queue")
        return self._items[0]

    def positive(self) -> LinkedQueue:
        """Return a new queue holding the non-negative elements, in order."""
        return LinkedQueue(value for value in self._items if value >= 0)

    def copy(self) -> LinkedQueue:
        """Return an independent queue with the same elements."""
        return LinkedQueue(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __str__(self) -> str:
        return "".join(f" {value} " for value in self._items)


class ArrayQueue:
    """A bounded queue stored in a circular buffer.

    Enqueueing onto a full queue is ignored.
    """

    def __init__(self, capacity: int = 100) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._slots: list[Any] = [None] * capacity
        self._head = 0
        self._length = 0

    def enqueue(self, value: Any) -> None:
        """Append ``value`` at the tail if there is room."""
        if self._length < len(self._slots):
            self._slots[(self._head + self._length) % len(self._slots)] = value
            self._length += 1

    def dequeue(self) -> Any:
        """Remove and return the head element; do nothing on an empty queue."""
        if not self._length:
            return None
        value = self._slots[self._head]
        self._slots[self._head] = None
        self._head = (self._head + 1) % len(self._slots)
        self._length -= 1
        return value

    def top(self) -> Any:
        """Return the head element without removing it."""
        if not self._length:
            raise IndexError("top of an empty queue")
        return self._slots[self._head]

    def __iter__(self) -> Iterator[Any]:
        capacity = len(self._slots)
        for offset in range(self._length):
            yield self._slots[(self._head + offset) % capacity]

    def __len__(self) -> int:
        return self._length