"""Binary tree of linked nodes with parent links and node levels."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(eq=False)
class BinTreeNode:
    """A node of a BinaryTree; ``level`` counts the edges from the root."""

    value: Any = None
    level: int = 0
    parent: Optional[BinTreeNode] = field(default=None, repr=False)
    left: Optional[BinTreeNode] = field(default=None, repr=False)
    right: Optional[BinTreeNode] = field(default=None, repr=False)

    @property
    def is_leaf(self) -> bool:
        """True if the node has no children."""
        return self.left is None and self.right is None


def _shift_levels(node: Optional[BinTreeNode], delta: int) -> None:
    if node is None:
        return
    node.level += delta
    _shift_levels(node.left, delta)
    _shift_levels(node.right, delta)


def _copy(node: Optional[BinTreeNode], parent: Optional[BinTreeNode]) -> Optional[BinTreeNode]:
    if node is None:
        return None
    clone = BinTreeNode(node.value, node.level, parent)
    clone.left = _copy(node.left, clone)
    clone.right = _copy(node.right, clone)
    return clone


def _same(a: Optional[BinTreeNode], b: Optional[BinTreeNode]) -> bool:
    if a is None or b is None:
        return a is b
    return a.value == b.value and _same(a.left, b.left) and _same(a.right, b.right)


class BinaryTree:
    """A binary tree whose nodes are reached from the root through left and right links."""

    def __init__(self) -> None:
        self._root: Optional[BinTreeNode] = None

    def is_empty(self) -> bool:
        """Return True if the tree has no nodes."""
        return self._root is None

    def root(self) -> Optional[BinTreeNode]:
        """Return the root node, or None."""
        return self._root

    def parent(self, node: BinTreeNode) -> Optional[BinTreeNode]:
        """Return the parent of ``node``; None for the root."""
        return None if node is self._root else node.parent

    def left(self, node: BinTreeNode) -> Optional[BinTreeNode]:
        """Return the left child of ``node``."""
        return node.left

    def right(self, node: BinTreeNode) -> Optional[BinTreeNode]:
        """Return the right child of ``node``."""
        return node.right

    def is_leaf(self, node: BinTreeNode) -> bool:
        """Return True if ``node`` has no children."""
        return node.is_leaf

    def read(self, node: BinTreeNode) -> Any:
        """Return the value stored at ``node``."""
        if node is None:
            raise ValueError("cannot read no node")
        return node.value

    def write(self, node: BinTreeNode, value: Any) -> None:
        """Store ``value`` at ``node``; ignored for no node."""
        if node is not None:
            node.value = value

    def insert_root(self, value: Any = None) -> None:
        """Create the root holding ``value`` if the tree is empty."""
        if self._root is None:
            self._root = BinTreeNode(value)

    def _insert_child(self, node: BinTreeNode, value: Any, side: str) -> None:
        if self.is_empty() or node is None:
            return
        child = getattr(node, side)
        if child is None:
            setattr(node, side, BinTreeNode(value, node.level + 1, node))
        else:
            child.value = value

    def insert_left(self, node: BinTreeNode, value: Any) -> None:
        """Add a left child holding ``value``, or overwrite the existing one's value."""
        self._insert_child(node, value, "left")

    def insert_right(self, node: BinTreeNode, value: Any) -> None:
        """Add a right child holding ``value``, or overwrite the existing one's value."""
        self._insert_child(node, value, "right")

    def _insert_subtree(self, node: BinTreeNode, tree: BinaryTree, side: str) -> None:
        if self.is_empty() or node is None or tree.is_empty():
            return
        if getattr(node, side) is not None:
            return
        grafted = tree._root
        assert grafted is not None
        _shift_levels(grafted, 1)
        setattr(node, side, grafted)
        grafted.parent = node
        tree._root = None

    def insert_left_subtree(self, node: BinTreeNode, tree: BinaryTree) -> None:
        """Move the whole of ``tree`` in as the left child of ``node`` if that is free."""
        self._insert_subtree(node, tree, "left")

    def insert_right_subtree(self, node: BinTreeNode, tree: BinaryTree) -> None:
        """Move the whole of ``tree`` in as the right child of ``node`` if that is free."""
        self._insert_subtree(node, tree, "right")

    def erase(self, node: Optional[BinTreeNode]) -> None:
        """Detach and discard the subtree rooted at ``node``."""
        if node is None or self.is_empty():
            return
        if node is self._root:
            self._root = None
        else:
            parent = node.parent
            if parent is not None:
                if parent.left is node:
                    parent.left = None
                else:
                    parent.right = None
        node.parent = None

    def _start(self, node: Optional[BinTreeNode]) -> Optional[BinTreeNode]:
        return self._root if node is None else node

    def preorder(self, node: Optional[BinTreeNode] = None) -> Iterator[Any]:
        """Yield the values under ``node`` (default: root): node, left, right."""
        yield from self._preorder(self._start(node))

    def _preorder(self, node: Optional[BinTreeNode]) -> Iterator[Any]:
        if node is not None:
            yield node.value
            yield from self._preorder(node.left)
            yield from self._preorder(node.right)

    def inorder(self, node: Optional[BinTreeNode] = None) -> Iterator[Any]:
        """Yield the values under ``node`` (default: root): left, node, right."""
        yield from self._inorder(self._start(node))

    def _inorder(self, node: Optional[BinTreeNode]) -> Iterator[Any]:
        if node is not None:
            yield from self._inorder(node.left)
            yield node.value
            yield from self._inorder(node.right)

    def postorder(self, node: Optional[BinTreeNode] = None) -> Iterator[Any]:
        """Yield the values under ``node`` (default: root): left, right, node."""
        yield from self._postorder(self._start(node))

    def _postorder(self, node: Optional[BinTreeNode]) -> Iterator[Any]:
        if node is not None:
            yield from self._postorder(node.left)
            yield from self._postorder(node.right)
            yield node.value

    def remove_even_leaves(self, node: Optional[BinTreeNode] = None) -> None:
        """Remove leaves with even integer values, bottom up, under ``node`` (default: root).

        A node whose children are all removed becomes a leaf and is removed
        too if its own value is even.
        """
        self._remove_even(self._start(node))

    def _remove_even(self, node: Optional[BinTreeNode]) -> None:
        if node is None:
            return
        if not node.is_leaf:
            left, right = node.left, node.right
            self._remove_even(left)
            self._remove_even(right)
        if node.is_leaf and node.value % 2 == 0:
            self.erase(node)

    def depth(self, node: Optional[BinTreeNode] = None) -> int:
        """Return the height of the subtree at ``node`` (default: root); -1 if empty."""
        return self._depth(self._start(node))

    def _depth(self, node: Optional[BinTreeNode]) -> int:
        if node is None:
            return -1
        return max(self._depth(node.left), self._depth(node.right)) + 1

    def join(self, other: BinaryTree) -> None:
        """Make a new valueless root with this tree on the left and ``other`` on the right.

        ``other`` is left empty.
        """
        new_root = BinTreeNode()
        for subtree, side in ((self._root, "left"), (other._root, "right")):
            if subtree is not None:
                _shift_levels(subtree, 1)
                subtree.parent = new_root
                setattr(new_root, side, subtree)
        self._root = new_root
        other._root = None

    def level(self, node: Optional[BinTreeNode]) -> int:
        """Return the level of ``node``; -1 for an empty tree, 0 for no node."""
        if self.is_empty():
            return -1
        if node is None:
            return 0
        return node.level

    def copy(self) -> BinaryTree:
        """Return an independent tree with the same shape, values and levels."""
        tree = BinaryTree()
        tree._root = _copy(self._root, None)
        return tree

    def mutation(self, u: BinTreeNode, v: BinTreeNode, other: BinaryTree) -> None:
        """Swap the subtree at ``u`` in this tree with the one at ``v`` in ``other``.

        Nothing happens if either node is the root of its tree.
        """
        if u is None or v is None or u is self._root or v is other._root:
            return
        pu, pv = u.parent, v.parent
        if pu is None or pv is None:
            return
        u_left = pu.left is u
        v_left = pv.left is v
        if u_left:
            pu.left = v
        else:
            pu.right = v
        if v_left:
            pv.left = u
        else:
            pv.right = u
        u.parent, v.parent = pv, pu

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BinaryTree):
            return NotImplemented
        return _same(self._root, other._root)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        if self._root is None:
            return "[]"
        return self._format(self._root)

    def _format(self, node: BinTreeNode) -> str:
        left = "NIL" if node.left is None else self._format(node.left)
        right = "NIL" if node.right is None else self._format(node.right)
        return f"[{node.value}, {left}, {right} ]"