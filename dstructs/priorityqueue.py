"""Bounded min-priority queue on a binary heap, and heapsort built on it."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class PriorityQueue:
    """A min-heap with a fixed capacity."""

    def __init__(self, capacity: int = 100) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._heap: list[Any] = []

    def insert(self, value: Any) -> None:
        """Add ``value``; raise IndexError if the queue is full."""
        if len(self._heap) >= self._capacity:
            raise IndexError("priority queue is full")
        self._heap.append(value)
        self._fix_up()

    def min(self) -> Any:
        """Return the smallest element."""
        if not self._heap:
            raise IndexError("min of an empty priority queue")
        return self._heap[0]

    def delete_min(self) -> None:
        """Remove the smallest element."""
        if not self._heap:
            raise IndexError("delete_min on an empty priority queue")
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._fix_down(1, len(self._heap))

    def _fix_up(self) -> None:
        heap = self._heap
        k = len(heap)
        while k > 1 and heap[k - 1] < heap[k // 2 - 1]:
            heap[k - 1], heap[k // 2 - 1] = heap[k // 2 - 1], heap[k - 1]
            k //= 2

    def _fix_down(self, k: int, n: int) -> None:
        heap = self._heap
        while k <= n // 2:
            j = 2 * k
            if j < n and heap[j - 1] > heap[j]:
                j += 1
            if not heap[j - 1] < heap[k - 1]:
                break
            heap[k - 1], heap[j - 1] = heap[j - 1], heap[k - 1]
            k = j

    def __iter__(self) -> Iterator[Any]:
        """Yield the elements in heap order."""
        return iter(self._heap)

    def __len__(self) -> int:
        return len(self._heap)

    def __str__(self) -> str:
        parts = [
            str(value) if i % 2 == 0 else f"\t{value} - "
            for i, value in enumerate(self._heap)
        ]
        return "[ " + "".join(parts) + " ]"


def heapsort(values: Iterable[Any]) -> list[Any]:
    """Return the values in ascending order, sorted through a PriorityQueue."""
    items = list(values)
    queue = PriorityQueue(len(items))
    for value in items:
        queue.insert(value)
    result = []
    while len(queue):
        result.append(queue.min())
        queue.delete_min()
    return result