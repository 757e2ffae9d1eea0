"""A directed graph stored as adjacency lists."""

from __future__ import annotations

from collections.abc import Callable, Hashable
from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T", bound=Hashable)

Condition = Callable[[T, T], bool]


@dataclass
class Graph(Generic[T]):
    """Directed graph with optional lists of head and tail nodes."""

    nodes: dict[T, list[T]] = field(default_factory=dict)
    heads: list[T] = field(default_factory=list)
    tails: list[T] = field(default_factory=list)

    def add_node(self, value: T) -> None:
        """Add ``value`` as a node if it is not present yet."""
        self.nodes.setdefault(value, [])

    def add_head(self, value: T) -> None:
        self.heads.append(value)

    def add_tail(self, value: T) -> None:
        self.tails.append(value)

    def add_edge(self, source: T, target: T) -> None:
        """Add an edge from ``source`` to ``target``, creating both nodes."""
        self.nodes.setdefault(source, []).append(target)
        self.nodes.setdefault(target, [])

    def add_bidirectional_edge(self, source: T, target: T) -> None:
        self.add_edge(source, target)
        self.add_edge(target, source)

    def outgoing_neighbors(self, node: T) -> list[T] | None:
        """Return the neighbours of ``node``, or ``None`` if it is unknown."""
        return self.nodes.get(node)

    def has_node(self, node: T) -> bool:
        return node in self.nodes

    def find_node(self, node: T) -> T | None:
        """Return ``node`` if the graph holds it, otherwise ``None``."""
        return node if node in self.nodes else None

    def dfs_with_condition(
        self,
        start: T,
        end: T,
        condition: Condition,
        visited: set[T] | None = None,
    ) -> bool:
        """Tell whether ``end`` is reachable from ``start``.

        Only edges for which ``condition(from, to)`` holds are followed.
        Nodes entered are recorded in ``visited`` and never entered twice.
        """
        if visited is None:
            visited = set()
        if start in visited:
            return False
        visited.add(start)
        if start == end:
            return True
        return any(
            self.dfs_with_condition(neighbor, end, condition, visited)
            for neighbor in self.nodes.get(start, ())
            if condition(start, neighbor)
        )

    def count_distinct_paths_with_condition(
        self, start: T, end: T, condition: Condition
    ) -> int:
        """Count paths from ``start`` to ``end`` along edges meeting ``condition``.

        The graph reachable this way must be acyclic.
        """
        if start == end:
            return 1
        return sum(
            self.count_distinct_paths_with_condition(neighbor, end, condition)
            for neighbor in self.nodes.get(start, ())
            if condition(start, neighbor)
        )

    def concat(self, other: Graph[T]) -> None:
        """Merge ``other`` into this graph; its adjacency lists win on overlap."""
        self.nodes.update({node: list(edges) for node, edges in other.nodes.items()})
        self.heads.extend(other.heads)
        self.tails.extend(other.tails)

    def __len__(self) -> int:
        return len(self.nodes)