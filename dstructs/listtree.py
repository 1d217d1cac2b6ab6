"""Ordered tree stored in a fixed table of slots, each holding its child list."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, Optional

from .tree import Tree


@dataclass
class _Slot:
    value: Any = None
    used: bool = False
    parent: Optional[int] = None
    children: list[int] = field(default_factory=list)


class ListTree(Tree):
    """An ordered tree whose nodes are integer slots in a table of fixed size.

    The root always occupies slot 0.  New nodes take the lowest free slot;
    insertions into a full table are ignored.
    """

    def __init__(self, capacity: int = 100) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._slots = [_Slot() for _ in range(capacity)]
        self._root: Optional[int] = None
        self._count = 0

    def _slot(self, node: int) -> _Slot:
        if not isinstance(node, int) or not 0 <= node < len(self._slots):
            raise ValueError(f"no node {node!r}")
        slot = self._slots[node]
        if not slot.used:
            raise ValueError(f"no node {node!r}")
        return slot

    def _allocate(self, value: Any, parent: int) -> Optional[int]:
        for index, slot in enumerate(self._slots):
            if not slot.used:
                self._slots[index] = _Slot(value, True, parent)
                self._count += 1
                return index
        return None

    def is_empty(self) -> bool:
        return self._count == 0

    def insert_root(self, value: Any = None) -> None:
        """Create the root in slot 0 holding ``value`` if the tree is empty."""
        if self.is_empty():
            self._slots[0] = _Slot(value, True)
            self._root = 0
            self._count = 1

    def root(self) -> Optional[int]:
        return self._root

    def parent(self, node: int) -> Optional[int]:
        return self._slot(node).parent

    def is_leaf(self, node: int) -> bool:
        return not self._slot(node).children

    def first_child(self, node: int) -> Optional[int]:
        children = self._slot(node).children
        return children[0] if children else None

    def is_last_sibling(self, node: int) -> bool:
        parent = self.parent(node)
        if parent is None:
            return True
        return self._slots[parent].children[-1] == node

    def next_sibling(self, node: int) -> Optional[int]:
        parent = self.parent(node)
        if parent is None:
            return None
        siblings = self._slots[parent].children
        index = siblings.index(node) + 1
        return siblings[index] if index < len(siblings) else None

    def children(self, node: int) -> Iterator[int]:
        yield from list(self._slot(node).children)

    def insert_first_child(self, node: int, value: Any) -> None:
        """Add ``value`` as the new first child of ``node``."""
        slot = self._slot(node)
        child = self._allocate(value, node)
        if child is not None:
            slot.children.insert(0, child)

    def insert_next_sibling(self, node: int, value: Any) -> None:
        """Add ``value`` right after ``node``; ignored for the root."""
        parent = self.parent(node)
        if parent is None:
            return
        sibling = self._allocate(value, parent)
        if sibling is not None:
            siblings = self._slots[parent].children
            siblings.insert(siblings.index(node) + 1, sibling)

    def remove_subtree(self, node: int) -> None:
        """Remove ``node`` and all its descendants, freeing their slots."""
        slot = self._slot(node)
        for child in list(slot.children):
            self.remove_subtree(child)
        if slot.parent is not None:
            self._slots[slot.parent].children.remove(node)
        else:
            self._root = None
        self._slots[node] = _Slot()
        self._count -= 1

    def read(self, node: int) -> Any:
        return self._slot(node).value

    def write(self, node: int, value: Any) -> None:
        self._slot(node).value = value

    def __len__(self) -> int:
        return self._count

    def __str__(self) -> str:
        lines = [
            f"\n {slot.value}: "
            + "".join(f"{self._slots[child].value} " for child in slot.children)
            for slot in self._slots
            if slot.used
        ]
        return "{" + "".join(lines) + "\n}"