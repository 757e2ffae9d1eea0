"""Day one: a dial with positions 0 to 99 turned left and right."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator

_DIAL_SIZE = 100
_START = 50
_MOVE_RE = re.compile(r"(\D)(\d+)")


def _moves(data: Iterable[str]) -> Iterator[tuple[bool, int]]:
    """Yield ``(turns_right, clicks)`` for every move in the input."""
    for line in data:
        for match in _MOVE_RE.finditer(line):
            yield match.group(1) == "R", int(match.group(2))


def part1(data: Iterable[str]) -> int:
    """Count the moves that leave the dial pointing at zero."""
    position = _START
    count = 0
    for right, clicks in _moves(data):
        position = (position + clicks if right else position - clicks) % _DIAL_SIZE
        if position == 0:
            count += 1
    return count


def part2(data: Iterable[str]) -> int:
    """Count every click that lands the dial on zero."""
    position = _START
    count = 0
    for right, clicks in _moves(data):
        if right:
            count += (position + clicks) // _DIAL_SIZE
            position = (position + clicks) % _DIAL_SIZE
        else:
            count += ((-position) % _DIAL_SIZE + clicks) // _DIAL_SIZE
            position = (position - clicks) % _DIAL_SIZE
    return count