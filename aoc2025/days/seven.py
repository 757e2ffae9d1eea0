"""Day seven: a tachyon beam split by splitters on its way down."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

_SPLITTER = "^"
_BEAM = "|"
_EMITTERS = frozenset("S|")


def _grid(data: Iterable[str]) -> list[list[str]]:
    grid = [list(row) for row in data]
    if not grid:
        raise ValueError("no input")
    width = len(grid[0])
    if any(len(row) < width for row in grid):
        raise ValueError("rows are shorter than the first row")
    return grid


def part1(data: Iterable[str]) -> int:
    """Count the splitters that a beam reaches."""
    grid = _grid(data)
    width = len(grid[0])
    splits: set[tuple[int, int]] = set()
    for y, (row, below) in enumerate(zip(grid, grid[1:])):
        for x, cell in enumerate(row[:width]):
            if cell not in _EMITTERS:
                continue
            if below[x] != _SPLITTER:
                below[x] = _BEAM
                continue
            if x != 0:
                below[x - 1] = _BEAM
                splits.add((x, y + 1))
            if x != width - 1:
                below[x + 1] = _BEAM
                splits.add((x, y + 1))
    return len(splits)


def part2(data: Iterable[str]) -> int:
    """Count the distinct timelines a single particle can end up in."""
    grid = _grid(data)
    width = len(grid[0])
    counts = Counter(x for x, cell in enumerate(grid[0]) if cell in _EMITTERS)
    for below in grid[1:]:
        following: Counter[int] = Counter()
        for x, paths in counts.items():
            if below[x] != _SPLITTER:
                following[x] += paths
                continue
            if x > 0:
                following[x - 1] += paths
            if x < width - 1:
                following[x + 1] += paths
        counts = following
        if not counts:
            break
    return sum(counts.values())