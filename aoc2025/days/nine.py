"""Day nine: the largest rectangle spanned by two red tiles."""

from __future__ import annotations

import itertools
from collections.abc import Iterable, Iterator

Tile = tuple[int, int]


def _parse(text: str) -> Tile:
    parts = [int(value) for value in text.strip().split(",")]
    if len(parts) < 2:
        raise ValueError(f"expected two coordinates: {text!r}")
    x, y = parts[0], parts[1]
    if x < 0 or y < 0:
        raise ValueError(f"coordinates must not be negative: {text!r}")
    return x, y


def _area(a: Tile, b: Tile) -> int:
    return (abs(a[0] - b[0]) + 1) * (abs(a[1] - b[1]) + 1)


def _tiles_between(a: Tile, b: Tile) -> Iterator[Tile]:
    """Yield every tile of the box whose opposite corners are ``a`` and ``b``."""
    xs = range(min(a[0], b[0]), max(a[0], b[0]) + 1)
    ys = range(min(a[1], b[1]), max(a[1], b[1]) + 1)
    return itertools.product(xs, ys)


def part1(data: Iterable[str]) -> int:
    """Return the largest area of a rectangle with red tiles at two corners."""
    tiles = [_parse(line) for line in data]
    areas = [_area(a, b) for a, b in itertools.combinations(tiles, 2)]
    if not areas:
        raise ValueError("at least two tiles are needed")
    return max(areas)


def part2(data: Iterable[str]) -> int:
    """Return the largest such rectangle lying wholly on red or green tiles.

    The red tiles, in order and closing back to the first, outline a loop;
    the loop and everything inside it is green.
    """
    tiles = [_parse(line) for line in data]
    if len(tiles) < 2:
        return 0

    boundary: set[Tile] = set()
    for a, b in zip(tiles, tiles[1:]):
        boundary.update(_tiles_between(a, b))
    boundary.update(_tiles_between(tiles[0], tiles[-1]))

    min_x = min(x for x, _ in boundary)
    max_x = max(x for x, _ in boundary)
    min_y = min(y for _, y in boundary)
    max_y = max(y for _, y in boundary)
    width = max_x - min_x + 1
    height = max_y - min_y + 1

    # prefix[r][c] counts green tiles in rows < r and columns < c.
    prefix = [[0] * (width + 1) for _ in range(height + 1)]
    for y in range(height):
        global_y = min_y + y
        above, current = prefix[y], prefix[y + 1]
        inside = False
        row_sum = 0
        for x in range(width):
            global_x = min_x + x
            if (global_x, global_y) in boundary:
                green = 1
                if (global_x, global_y + 1) in boundary:
                    inside = not inside
            else:
                green = 1 if inside else 0
            row_sum += green
            current[x + 1] = row_sum + above[x + 1]

    def greens(x1: int, y1: int, x2: int, y2: int) -> int:
        c1, r1 = x1 - min_x, y1 - min_y
        c2, r2 = x2 - min_x, y2 - min_y
        return (
            prefix[r2 + 1][c2 + 1]
            - prefix[r2 + 1][c1]
            - prefix[r1][c2 + 1]
            + prefix[r1][c1]
        )

    best = 0
    for a, b in itertools.combinations(tiles, 2):
        x1, x2 = sorted((a[0], b[0]))
        y1, y2 = sorted((a[1], b[1]))
        area = (x2 - x1 + 1) * (y2 - y1 + 1)
        if area > best and greens(x1, y1, x2, y2) == area:
            best = area
    return best