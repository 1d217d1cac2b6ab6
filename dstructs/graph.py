"""Abstract directed, weighted, labelled graph and the traversals built on it."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Arc:
    """A directed arc from ``source`` to ``target`` carrying ``weight``."""

    source: int
    target: int
    weight: Any


class Graph(ABC):
    """A directed graph whose nodes are integer identifiers.

    Every node carries a label and every arc a weight.  Implementations
    supply storage; traversals are defined here on top of ``adjacent``.
    """

    @abstractmethod
    def is_empty(self) -> bool:
        """Return True if the graph has no nodes."""

    @abstractmethod
    def add_node(self) -> int:
        """Create a node and return its identifier."""

    @abstractmethod
    def add_arc(self, source: int, target: int, weight: Any) -> None:
        """Add the arc ``source -> target`` with ``weight``."""

    @abstractmethod
    def remove_node(self, node: int) -> None:
        """Remove ``node``, which must have no arcs."""

    @abstractmethod
    def remove_arc(self, source: int, target: int) -> None:
        """Remove the arc ``source -> target``."""

    @abstractmethod
    def is_node(self, node: int) -> bool:
        """Return True if ``node`` belongs to the graph."""

    @abstractmethod
    def is_arc(self, source: int, target: int) -> bool:
        """Return True if the arc ``source -> target`` exists."""

    @abstractmethod
    def adjacent(self, node: int) -> list[int]:
        """Return the targets of the arcs leaving ``node``."""

    @abstractmethod
    def nodes(self) -> list[int]:
        """Return every node of the graph."""

    @abstractmethod
    def read_label(self, node: int) -> Any:
        """Return the label of ``node``."""

    @abstractmethod
    def write_label(self, node: int, label: Any) -> None:
        """Set the label of ``node``."""

    @abstractmethod
    def read_weight(self, source: int, target: int) -> Any:
        """Return the weight of the arc ``source -> target``."""

    @abstractmethod
    def write_weight(self, source: int, target: int, weight: Any) -> None:
        """Set the weight of the arc ``source -> target``."""

    @abstractmethod
    def node_count(self) -> int:
        """Return the number of nodes."""

    @abstractmethod
    def arc_count(self) -> int:
        """Return the number of arcs."""

    def arcs(self) -> list[Arc]:
        """Return every arc, grouped by source in node order."""
        return [
            Arc(source, target, self.read_weight(source, target))
            for source in self.nodes()
            for target in self.adjacent(source)
        ]

    def dfs(self, node: int) -> Iterator[int]:
        """Yield the nodes reachable from ``node`` in depth-first order."""
        if not self.is_node(node):
            return
        yield from self._dfs(node, set())

    def _dfs(self, node: int, visited: set[int]) -> Iterator[int]:
        visited.add(node)
        yield node
        for target in self.adjacent(node):
            if target not in visited:
                yield from self._dfs(target, visited)

    def bfs(self, node: int) -> Iterator[int]:
        """Yield the nodes reachable from ``node`` in breadth-first order."""
        if not self.is_node(node):
            return
        visited = {node}
        pending = deque([node])
        while pending:
            current = pending.popleft()
            yield current
            for target in self.adjacent(current):
                if target not in visited:
                    visited.add(target)
                    pending.append(target)