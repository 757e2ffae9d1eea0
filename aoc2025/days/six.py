"""Day six: columns of numbers combined by sums and products."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable, Sequence

_NUMBER_RE = re.compile(r"\d+")
_OPERATOR_RE = re.compile(r"[+*]")
_DIGITS = "0123456789"
_OPERATORS = "+*"


def handle_operation(numbers: Iterable[int], op: str) -> int:
    """Add or multiply ``numbers`` according to ``op``; any other op gives 0."""
    if op == "+":
        return sum(numbers)
    if op == "*":
        return math.prod(numbers)
    return 0


def part1(data: Sequence[str]) -> int:
    """Combine the numbers of each whitespace-separated column by its operator."""
    lines = list(data)
    if not lines:
        raise ValueError("no input")
    columns: list[list[int]] = [[] for _ in _NUMBER_RE.finditer(lines[0])]
    for line in lines:
        for column, match in zip(columns, _NUMBER_RE.finditer(line)):
            column.append(int(match.group()))
    ops = _OPERATOR_RE.findall(lines[-1])
    if len(ops) < len(columns):
        raise ValueError("fewer operators than columns")
    return sum(handle_operation(column, op) for column, op in zip(columns, ops))


def part2(data: Sequence[str]) -> int:
    """Read numbers down each character column and combine them per problem.

    Problems are separated by columns of spaces.
    """
    lines = list(data)
    if not lines:
        raise ValueError("no input")
    width = len(lines[0])
    if any(len(line) < width for line in lines):
        raise ValueError("rows are shorter than the first row")
    total = 0
    numbers: list[int] = []
    operator = "+"
    for column in zip(*(line[:width] for line in lines)):
        if all(char == " " for char in column):
            total += handle_operation(numbers, operator)
            numbers = []
            continue
        digits = ""
        for char in column:
            if char in _DIGITS:
                digits += char
                continue
            if char in _OPERATORS:
                operator = char
            if digits:
                numbers.append(int(digits))
                digits = ""
    return total + handle_operation(numbers, operator)