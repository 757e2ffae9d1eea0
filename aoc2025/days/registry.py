"""Lookup of the puzzle solutions by day number or name."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from aoc2025.days import eight, five, four, nine, one, seven, six, three, two

Part = Callable[[Sequence[str]], int]


@dataclass(frozen=True)
class Day:
    """The two solution functions of one day; either may be missing."""

    part1: Part | None = None
    part2: Part | None = None


_NAMES = ("one", "two", "three", "four", "five", "six", "seven", "eight", "nine")

_DAYS = {
    1: Day(one.part1, one.part2),
    2: Day(two.part1, two.part2),
    3: Day(three.part1, three.part2),
    4: Day(four.part1, four.part2),
    5: Day(five.part1, five.part2),
    6: Day(six.part1, six.part2),
    7: Day(seven.part1, seven.part2),
    8: Day(eight.part1, eight.part2),
    9: Day(nine.part1, nine.part2),
}


def get_day_str(day: int) -> str | None:
    """Return the spelled-out name of ``day``, or ``None`` if it is unsupported."""
    if 1 <= day <= len(_NAMES):
        return _NAMES[day - 1]
    return None


def get_day_from_str(name: str) -> int | None:
    """Return the number of the day spelled ``name``, or ``None``."""
    try:
        return _NAMES.index(name) + 1
    except ValueError:
        return None


def get_day(day: int) -> Day | None:
    """Return the solutions for ``day``, or ``None`` if it is unsupported."""
    return _DAYS.get(day)