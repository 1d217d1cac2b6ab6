"""Ordered tree of linked nodes with first-child and next-sibling links."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, Optional

from .tree import Tree


@dataclass(eq=False)
class TreeNode:
    """A node of a LinkedTree; ``level`` counts the edges from the root."""

    value: Any = None
    level: int = 0
    parent: Optional[TreeNode] = field(default=None, repr=False)
    first: Optional[TreeNode] = field(default=None, repr=False)
    next: Optional[TreeNode] = field(default=None, repr=False)


class LinkedTree(Tree):
    """An ordered tree whose nodes link to their parent, first child and next sibling."""

    def __init__(self) -> None:
        self._root: Optional[TreeNode] = None

    def is_empty(self) -> bool:
        return self._root is None

    def insert_root(self, value: Any = None) -> None:
        """Create the root holding ``value`` if the tree is empty."""
        if self._root is None:
            self._root = TreeNode(value)

    def insert_first_child(self, node: TreeNode, value: Any) -> None:
        """Add ``value`` as the new first child of ``node``; ignored if empty."""
        if self.is_empty():
            return
        if node is None:
            raise ValueError("cannot add a child to no node")
        node.first = TreeNode(value, node.level + 1, parent=node, next=node.first)

    def insert_next_sibling(self, node: TreeNode, value: Any) -> None:
        """Add ``value`` right after ``node``; ignored for the root."""
        if node is None or node is self._root:
            return
        node.next = TreeNode(value, node.level, parent=node.parent, next=node.next)

    def root(self) -> Optional[TreeNode]:
        return self._root

    def parent(self, node: TreeNode) -> Optional[TreeNode]:
        return None if node is self._root else node.parent

    def is_leaf(self, node: TreeNode) -> bool:
        return node.first is None

    def first_child(self, node: TreeNode) -> Optional[TreeNode]:
        return node.first

    def is_last_sibling(self, node: TreeNode) -> bool:
        return node.next is None

    def next_sibling(self, node: TreeNode) -> Optional[TreeNode]:
        return node.next

    def insert_first_subtree(self, node: TreeNode, tree: LinkedTree) -> None:
        """Move the whole of ``tree`` in as the first child of ``node``."""
        if self.is_empty() or tree.is_empty():
            return
        if node is None:
            raise ValueError("cannot graft a subtree onto no node")
        grafted = tree._root
        assert grafted is not None
        grafted.parent = node
        grafted.next = node.first
        node.first = grafted
        tree._root = None

    def insert_subtree(self, node: TreeNode, tree: LinkedTree) -> None:
        """Move the whole of ``tree`` in as the sibling after ``node``."""
        if self.is_empty() or tree.is_empty() or node is None or node is self._root:
            return
        grafted = tree._root
        assert grafted is not None
        grafted.parent = node.parent
        grafted.next = node.next
        node.next = grafted
        tree._root = None

    def remove_subtree(self, node: Optional[TreeNode]) -> None:
        """Detach and discard the subtree rooted at ``node``."""
        if node is None:
            return
        if node is self._root:
            self._root = None
        else:
            parent = node.parent
            assert parent is not None
            if parent.first is node:
                parent.first = node.next
            else:
                sibling = parent.first
                while sibling is not None and sibling.next is not node:
                    sibling = sibling.next
                if sibling is not None:
                    sibling.next = node.next
        node.parent = None
        node.next = None

    def read(self, node: TreeNode) -> Any:
        if node is None:
            raise ValueError("cannot read no node")
        return node.value

    def write(self, node: TreeNode, value: Any) -> None:
        if node is None:
            raise ValueError("cannot write no node")
        node.value = value

    def _start(self, node: Optional[TreeNode]) -> Optional[TreeNode]:
        return self._root if node is None else node

    def preorder(self, node: Optional[TreeNode] = None) -> Iterator[Any]:
        """Yield the values under ``node`` (default: root), parents first."""
        start = self._start(node)
        if start is not None:
            yield from self._preorder(start)

    def _preorder(self, node: TreeNode) -> Iterator[Any]:
        yield node.value
        for child in self.children(node):
            yield from self._preorder(child)

    def postorder(self, node: Optional[TreeNode] = None) -> Iterator[Any]:
        """Yield the values under ``node`` (default: root), children first."""
        start = self._start(node)
        if start is not None:
            yield from self._postorder(start)

    def _postorder(self, node: TreeNode) -> Iterator[Any]:
        for child in self.children(node):
            yield from self._postorder(child)
        yield node.value

    def bfs(self, node: Optional[TreeNode] = None) -> Iterator[Any]:
        """Yield the values under ``node`` (default: root) level by level."""
        start = self._start(node)
        if start is None:
            return
        pending = deque([start])
        while pending:
            current = pending.popleft()
            yield current.value
            pending.extend(self.children(current))

    def format(self, node: Optional[TreeNode] = None) -> str:
        """Return one line per node, ``value: child child ...``, in preorder."""
        start = self._start(node)
        if start is None:
            return ""
        lines: list[str] = []
        self._format(start, lines)
        return "".join(lines)

    def _format(self, node: TreeNode, lines: list[str]) -> None:
        children = list(self.children(node))
        lines.append(f"{node.value}:" + "".join(f" {c.value}" for c in children) + "\n")
        for child in children:
            self._format(child, lines)