"""Day four: paper rolls that a forklift can reach."""

from __future__ import annotations

from collections.abc import Iterable

_ROLL = "@"
_EMPTY = "."
_MAX_NEIGHBOURS = 3


def _grid(data: Iterable[str]) -> list[list[str]]:
    grid = [list(row) for row in data]
    if grid:
        width = len(grid[0])
        if any(len(row) < width for row in grid):
            raise ValueError("grid rows are shorter than the first row")
    return grid


def _is_crowded(grid: list[list[str]], x: int, y: int) -> bool:
    """Tell whether more than three rolls surround the cell at ``(x, y)``.

    Whether the row below is looked at depends on the grid's width, so a grid
    with fewer rows than columns cannot be checked on its last row.
    """
    width = len(grid[0])
    rows = [y]
    if y != 0:
        rows.append(y - 1)
    if y < width - 1:
        if y + 1 >= len(grid):
            raise ValueError("grid has fewer rows than columns")
        rows.append(y + 1)
    columns = [c for c in (x - 1, x, x + 1) if 0 <= c < width]
    neighbours = sum(
        grid[r][c] == _ROLL for r in rows for c in columns if (r, c) != (y, x)
    )
    return neighbours > _MAX_NEIGHBOURS


def _accessible(grid: list[list[str]], x: int, y: int) -> bool:
    return grid[y][x] == _ROLL and not _is_crowded(grid, x, y)


def part1(data: Iterable[str]) -> int:
    """Count the rolls with fewer than four rolls around them."""
    grid = _grid(data)
    if not grid:
        return 0
    width = len(grid[0])
    return sum(
        _accessible(grid, x, y)
        for y in range(len(grid))
        for x in range(width)
    )


def part2(data: Iterable[str]) -> int:
    """Keep removing accessible rolls until none is left; count the removals."""
    grid = _grid(data)
    if not grid:
        return 0
    width = len(grid[0])
    removed = 0
    changed = True
    while changed:
        changed = False
        for y, row in enumerate(grid):
            for x in range(width):
                if _accessible(grid, x, y):
                    row[x] = _EMPTY
                    removed += 1
                    changed = True
    return removed