"""Directed graph stored in an adjacency matrix of fixed dimension."""

from __future__ import annotations

from typing import Any

from .graph import Graph

_NO_ARC = object()


class MatrixGraph(Graph):
    """A graph of at most ``dimension`` nodes kept in a square matrix.

    New nodes take the lowest free slot.  Labels default to the empty string.
    """

    def __init__(self, dimension: int = 100) -> None:
        if dimension < 1:
            raise ValueError("dimension must be at least 1")
        self._used = [False] * dimension
        self._labels: list[Any] = [""] * dimension
        self._matrix: list[list[Any]] = [[_NO_ARC] * dimension for _ in range(dimension)]
        self._nodes = 0
        self._arcs = 0

    def _check(self, *nodes: int) -> None:
        for node in nodes:
            if not self.is_node(node):
                raise ValueError(f"no node {node!r}")

    def _check_arc(self, source: int, target: int) -> None:
        if not self.is_arc(source, target):
            raise KeyError((source, target))

    def is_empty(self) -> bool:
        return self._nodes == 0

    def add_node(self) -> int:
        """Occupy the lowest free slot and return it; IndexError if full."""
        for index, used in enumerate(self._used):
            if not used:
                self._used[index] = True
                self._labels[index] = ""
                self._nodes += 1
                return index
        raise IndexError("graph is full")

    def add_arc(self, source: int, target: int, weight: Any) -> None:
        """Add or overwrite the arc ``source -> target``."""
        self._check(source, target)
        if self._matrix[source][target] is _NO_ARC:
            self._arcs += 1
        self._matrix[source][target] = weight

    def remove_node(self, node: int) -> None:
        """Remove ``node``; ValueError if it still has arcs in or out."""
        self._check(node)
        if self.out_degree(node) or self.in_degree(node):
            raise ValueError(f"node {node} still has arcs")
        self._used[node] = False
        self._labels[node] = ""
        self._nodes -= 1

    def remove_arc(self, source: int, target: int) -> None:
        """Remove the arc ``source -> target``; KeyError if absent."""
        self._check_arc(source, target)
        self._matrix[source][target] = _NO_ARC
        self._arcs -= 1

    def is_node(self, node: int) -> bool:
        return isinstance(node, int) and 0 <= node < len(self._used) and self._used[node]

    def is_arc(self, source: int, target: int) -> bool:
        return (
            self.is_node(source)
            and self.is_node(target)
            and self._matrix[source][target] is not _NO_ARC
        )

    def adjacent(self, node: int) -> list[int]:
        self._check(node)
        return [
            target
            for target, cell in enumerate(self._matrix[node])
            if cell is not _NO_ARC
        ]

    def nodes(self) -> list[int]:
        return [index for index, used in enumerate(self._used) if used]

    def read_label(self, node: int) -> Any:
        self._check(node)
        return self._labels[node]

    def write_label(self, node: int, label: Any) -> None:
        self._check(node)
        self._labels[node] = label

    def read_weight(self, source: int, target: int) -> Any:
        self._check_arc(source, target)
        return self._matrix[source][target]

    def write_weight(self, source: int, target: int, weight: Any) -> None:
        self._check_arc(source, target)
        self._matrix[source][target] = weight

    def node_count(self) -> int:
        return self._nodes

    def arc_count(self) -> int:
        return self._arcs

    def adjacency_matrix(self) -> list[list[int]]:
        """Return the matrix with 1 where an arc exists and 0 elsewhere."""
        return [[int(cell is not _NO_ARC) for cell in row] for row in self._matrix]

    def in_degree(self, node: int) -> int:
        """Return the number of arcs entering ``node``."""
        self._check(node)
        return sum(1 for row in self._matrix if row[node] is not _NO_ARC)

    def out_degree(self, node: int) -> int:
        """Return the number of arcs leaving ``node``."""
        self._check(node)
        return sum(1 for cell in self._matrix[node] if cell is not _NO_ARC)

    def mean_out_degree(self) -> float:
        """Return the average out-degree over the nodes; 0.0 if empty."""
        if self.is_empty():
            return 0.0
        return sum(self.out_degree(node) for node in self.nodes()) / self._nodes

    def has_path(self, source: int, target: int) -> bool:
        """Return True if ``target`` is reached from ``source`` by at least one arc."""
        self._check(source, target)
        return self._reaches(source, target, set())

    def _reaches(self, node: int, target: int, visited: set[int]) -> bool:
        visited.add(node)
        for nxt in self.adjacent(node):
            if nxt == target:
                return True
            if nxt not in visited and self._reaches(nxt, target, visited):
                return True
        return False

    def find_path(self, source: int, target: int) -> list[int] | None:
        """Return the nodes a depth-first search from ``source`` visits until it
        steps onto ``target`` (which ends the list), or None if unreachable."""
        if not self.has_path(source, target):
            return None
        walk: list[int] = []
        self._walk(source, target, set(), walk)
        return walk

    def _walk(self, node: int, target: int, visited: set[int], walk: list[int]) -> bool:
        walk.append(node)
        visited.add(node)
        for nxt in self.adjacent(node):
            if nxt == target:
                walk.append(target)
                return True
            if nxt not in visited and self._walk(nxt, target, visited, walk):
                return True
        return False