"""Binary search tree of key/label pairs with parent links."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(eq=False)
class BSTNode:
    """A node of a BinarySearchTree, holding a key and its label."""

    key: Any
    label: Any = None
    parent: Optional[BSTNode] = field(default=None, repr=False)
    left: Optional[BSTNode] = field(default=None, repr=False)
    right: Optional[BSTNode] = field(default=None, repr=False)

    @property
    def is_leaf(self) -> bool:
        """True if the node has no children."""
        return self.left is None and self.right is None


class BinarySearchTree:
    """An unbalanced binary search tree with unique keys.

    Inserting a key that is already present replaces its label.
    """

    def __init__(self) -> None:
        self._root: Optional[BSTNode] = None

    def __bool__(self) -> bool:
        return self._root is not None

    def root(self) -> Optional[BSTNode]:
        """Return the root node, or None for an empty tree."""
        return self._root

    def insert_root(self, key: Any, label: Any = None) -> None:
        """Create the root with ``key`` and ``label`` if the tree is empty."""
        if self._root is None:
            self._root = BSTNode(key, label)

    def insert(self, key: Any, label: Any = None) -> None:
        """Add ``key`` with ``label``, or replace the label of an existing key."""
        parent: Optional[BSTNode] = None
        node = self._root
        while node is not None and node.key != key:
            parent = node
            node = node.left if key < node.key else node.right
        if node is not None:
            node.label = label
            return
        node = BSTNode(key, label, parent=parent)
        if parent is None:
            self._root = node
        elif key < parent.key:
            parent.left = node
        else:
            parent.right = node

    def modify(self, key: Any, label: Any) -> None:
        """Replace the label of ``key``; do nothing if the key is absent."""
        node = self.search(key)
        if node is not None:
            node.label = label

    def _replace_child(self, node: BSTNode, child: Optional[BSTNode]) -> None:
        parent = node.parent
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        if child is not None:
            child.parent = parent
        node.parent = None

    def _erase_node(self, node: BSTNode) -> None:
        if node.left is not None and node.right is not None:
            successor = self.minimum(node.right)
            assert successor is not None
            key, label = successor.key, successor.label
            self._erase_node(successor)
            node.key, node.label = key, label
            return
        child = node.left if node.left is not None else node.right
        self._replace_child(node, child)
        node.left = node.right = None

    def erase(self, key: Any) -> None:
        """Remove ``key``; do nothing if it is absent."""
        node = self.search(key)
        if node is not None:
            self._erase_node(node)

    def erase_subtree(self, node: Optional[BSTNode]) -> None:
        """Detach and discard the whole subtree rooted at ``node``."""
        if node is not None:
            self._replace_child(node, None)

    def search(self, key: Any) -> Optional[BSTNode]:
        """Return the node holding ``key``, or None."""
        node = self._root
        while node is not None and node.key != key:
            node = node.left if key < node.key else node.right
        return node

    def minimum(self, node: Optional[BSTNode] = None) -> Optional[BSTNode]:
        """Return the node with the smallest key under ``node`` (default: root)."""
        node = self._root if node is None else node
        if node is None:
            return None
        while node.left is not None:
            node = node.left
        return node

    def maximum(self, node: Optional[BSTNode] = None) -> Optional[BSTNode]:
        """Return the node with the largest key under ``node`` (default: root)."""
        node = self._root if node is None else node
        if node is None:
            return None
        while node.right is not None:
            node = node.right
        return node

    def successor(self, node: Optional[BSTNode]) -> Optional[BSTNode]:
        """Return the node with the next larger key, or None."""
        if node is None:
            return None
        if node.right is not None:
            return self.minimum(node.right)
        parent = node.parent
        while parent is not None and node is parent.right:
            node, parent = parent, parent.parent
        return parent

    def predecessor(self, node: Optional[BSTNode]) -> Optional[BSTNode]:
        """Return the node with the next smaller key, or None."""
        if node is None:
            return None
        if node.left is not None:
            return self.maximum(node.left)
        parent = node.parent
        while parent is not None and node is parent.left:
            node, parent = parent, parent.parent
        return parent

    def inorder(self, node: Optional[BSTNode] = None) -> Iterator[Any]:
        """Yield the keys under ``node`` (default: root) in ascending order."""
        start = self._root if node is None else node
        yield from self._inorder(start)

    def _inorder(self, node: Optional[BSTNode]) -> Iterator[Any]:
        if node is None:
            return
        yield from self._inorder(node.left)
        yield node.key
        yield from self._inorder(node.right)