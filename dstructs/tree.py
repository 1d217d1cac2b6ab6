"""Abstract ordered tree navigated by first child and next sibling."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any


class Tree(ABC):
    """An ordered tree of any arity.

    Implementations return None from ``parent`` for the root, from
    ``first_child`` for a leaf and from ``next_sibling`` for a last sibling.
    """

    @abstractmethod
    def is_empty(self) -> bool:
        """Return True if the tree has no nodes."""

    @abstractmethod
    def root(self) -> Any:
        """Return the root node."""

    @abstractmethod
    def parent(self, node: Any) -> Any:
        """Return the parent of ``node``."""

    @abstractmethod
    def is_leaf(self, node: Any) -> bool:
        """Return True if ``node`` has no children."""

    @abstractmethod
    def first_child(self, node: Any) -> Any:
        """Return the first child of ``node``."""

    @abstractmethod
    def is_last_sibling(self, node: Any) -> bool:
        """Return True if ``node`` has no following sibling."""

    @abstractmethod
    def next_sibling(self, node: Any) -> Any:
        """Return the sibling after ``node``."""

    @abstractmethod
    def read(self, node: Any) -> Any:
        """Return the value stored at ``node``."""

    @abstractmethod
    def write(self, node: Any, value: Any) -> None:
        """Store ``value`` at ``node``."""

    def children(self, node: Any) -> Iterator[Any]:
        """Yield the children of ``node`` from first to last."""
        if self.is_leaf(node):
            return
        child = self.first_child(node)
        while True:
            yield child
            if self.is_last_sibling(child):
                return
            child = self.next_sibling(child)

    def depth(self) -> int:
        """Return the depth of the deepest leaf, or -1 for an empty tree."""
        if self.is_empty():
            return -1
        return self._depth(self.root())

    def _depth(self, node: Any) -> int:
        return max((self._depth(child) + 1 for child in self.children(node)), default=0)

    def width(self) -> int:
        """Return the largest number of children among the nodes on the
        first-child chain from the root; 1 for a lone root, 0 if empty."""
        if self.is_empty():
            return 0
        widest = 1
        node = self.root()
        while not self.is_leaf(node):
            widest = max(widest, sum(1 for _ in self.children(node)))
            node = self.first_child(node)
        return widest