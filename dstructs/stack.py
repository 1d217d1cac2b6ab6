"""Linked stack and a fixed group of independent stacks."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Optional


class LinkedStack:
    """A last-in, first-out stack."""

    def __init__(self, iterable: Optional[Iterable[Any]] = None) -> None:
        self._items: list[Any] = []
        if iterable is not None:
            for value in iterable:
                self.push(value)

    def push(self, value: Any, unique: bool = False) -> None:
        """Put ``value`` on top; with ``unique`` skip it if already present."""
        if unique and value in self:
            return
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top element; do nothing on an empty stack."""
        if not self._items:
            return None
        return self._items.pop()

    def top(self) -> Any:
        """Return the top element without removing it."""
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[-1]

    def __contains__(self, value: Any) -> bool:
        return any(item == value for item in self._items)

    def __iter__(self) -> Iterator[Any]:
        """Yield the elements from the top down."""
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __str__(self) -> str:
        return "".join(f" {value} " for value in self)


class MultipleStack:
    """A fixed number of independent stacks addressed by index.

    Pushes and pops on an index outside the range are ignored.
    """

    def __init__(self, count: int) -> None:
        if count < 0:
            raise ValueError("count must not be negative")
        self._stacks = [LinkedStack() for _ in range(count)]

    def _valid(self, index: int) -> bool:
        return 0 <= index < len(self._stacks)

    def push(self, value: Any, index: int) -> None:
        """Push ``value`` on stack ``index``."""
        if self._valid(index):
            self._stacks[index].push(value)

    def pop(self, index: int) -> Any:
        """Pop from stack ``index`` and return the removed value, if any."""
        if self._valid(index):
            return self._stacks[index].pop()
        return None

    def stack(self, index: int) -> LinkedStack:
        """Return stack ``index``."""
        if not self._valid(index):
            raise IndexError(f"no stack at index {index}")
        return self._stacks[index]

    def __len__(self) -> int:
        return len(self._stacks)

    def __str__(self) -> str:
        return "".join(f"{stack}\n" for stack in self._stacks)