"""Day eight: joining junction boxes into circuits, closest pairs first."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

_DEFAULT_LIMIT = 1000


@dataclass(frozen=True)
class Point:
    """A junction box position in space."""

    x: int
    y: int
    z: int

    @classmethod
    def parse(cls, text: str) -> Point:
        """Read ``x,y,z`` from ``text``; any further values are ignored."""
        coords = [int(part) for part in text.strip().split(",")]
        if len(coords) < 3:
            raise ValueError(f"expected three coordinates: {text!r}")
        return cls(coords[0], coords[1], coords[2])

    def dist(self, other: Point) -> float:
        """Return the straight-line distance to ``other``."""
        return math.sqrt(
            (self.x - other.x) ** 2 + (self.y - other.y) ** 2 + (self.z - other.z) ** 2
        )


class UnionFind:
    """Disjoint sets over ``0..count`` with union by size."""

    def __init__(self, count: int) -> None:
        self.parent = list(range(count))
        self.size = [1] * count

    def find(self, i: int) -> int:
        """Return the root of ``i``'s set, compressing the path to it."""
        root = i
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[i] != root:
            self.parent[i], i = root, self.parent[i]
        return root

    def union(self, i: int, j: int) -> None:
        root_i = self.find(i)
        root_j = self.find(j)
        if root_i == root_j:
            return
        if self.size[root_i] < self.size[root_j]:
            self.parent[root_i] = root_j
            self.size[root_j] += self.size[root_i]
        else:
            self.parent[root_j] = root_i
            self.size[root_i] += self.size[root_j]

    def all_connected(self) -> bool:
        """Tell whether every element is in one set."""
        return self.size[self.find(0)] == len(self.parent)


def _sorted_edges(points: list[Point]) -> list[tuple[int, int]]:
    pairs = [
        (i, j)
        for i in range(len(points))
        for j in range(i + 1, len(points))
    ]
    pairs.sort(key=lambda pair: points[pair[0]].dist(points[pair[1]]))
    return pairs


def part1(data: Iterable[str], limit: int = _DEFAULT_LIMIT) -> int:
    """Join the ``limit`` closest pairs; multiply the three largest circuit sizes."""
    points = [Point.parse(line) for line in data]
    if not points:
        return 0
    circuits = UnionFind(len(points))
    for i, j in _sorted_edges(points)[:limit]:
        circuits.union(i, j)
    roots = {circuits.find(i) for i in range(len(points))}
    sizes = sorted((circuits.size[root] for root in roots), reverse=True)
    return math.prod(sizes[:3])


def part2(data: Iterable[str]) -> int:
    """Multiply the x coordinates of the pair whose joining makes one circuit."""
    points = [Point.parse(line) for line in data]
    if not points:
        return 0
    circuits = UnionFind(len(points))
    for i, j in _sorted_edges(points):
        if circuits.find(i) == circuits.find(j):
            continue
        circuits.union(i, j)
        if circuits.all_connected():
            return points[i].x * points[j].x
    return 0