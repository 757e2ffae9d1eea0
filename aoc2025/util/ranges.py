"""Inclusive integer ranges written as ``low-high``."""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass, field

Validator = Callable[[int], bool]

_RANGE_RE = re.compile(r"(\d+)-(\d+)")


@dataclass
class Range:
    """An inclusive range ``low..=high`` with an optional number filter.

    Two ranges are equal when their bounds are; the validator is ignored.
    """

    low: int
    high: int
    validator: Validator | None = field(default=None, compare=False)

    @classmethod
    def parse(cls, text: str, validator: Validator | None = None) -> Range:
        """Build a range from the last ``low-high`` pair in ``text``.

        Text without such a pair gives the range ``0-0``.
        """
        low = high = 0
        for match in _RANGE_RE.finditer(text):
            low, high = int(match.group(1)), int(match.group(2))
        return cls(low, high, validator)

    def find_duplicates(self) -> list[int]:
        """Return every number in the range accepted by the validator."""
        numbers = range(self.low, self.high + 1)
        if self.validator is None:
            return list(numbers)
        return [n for n in numbers if self.validator(n)]