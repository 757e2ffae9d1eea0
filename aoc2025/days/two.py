"""Day two: product IDs made of repeated digit sequences."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from aoc2025.util.ranges import Range


def get_factors(n: int) -> list[int]:
    """Return the proper divisors of ``n`` (every divisor below ``n``)."""
    return [i for i in range(1, n) if n % i == 0]


def split_into_chunks(text: str, size: int) -> list[str]:
    """Cut ``text`` into pieces of ``size`` characters; the last may be shorter."""
    if size <= 0:
        raise ValueError("chunk size must be positive")
    return [text[i:i + size] for i in range(0, len(text), size)]


def is_invalid(n: int) -> bool:
    """Tell whether the digits of ``n`` are one sequence written twice."""
    digits = str(n)
    half, odd = divmod(len(digits), 2)
    return not odd and digits[:half] == digits[half:]


def is_invalid_p2(n: int) -> bool:
    """Tell whether the digits of ``n`` are one sequence repeated at least twice."""
    digits = str(n)
    return any(
        len(set(split_into_chunks(digits, size))) == 1
        for size in get_factors(len(digits))
    )


def _sum_matching(data: Iterable[str], validator: Callable[[int], bool]) -> int:
    return sum(
        sum(Range.parse(entry, validator).find_duplicates())
        for line in data
        for entry in line.split(",")
    )


def part1(data: Iterable[str]) -> int:
    """Sum the IDs in all ranges that are a sequence repeated twice."""
    return _sum_matching(data, is_invalid)


def part2(data: Iterable[str]) -> int:
    """Sum the IDs in all ranges that are a sequence repeated any number of times."""
    return _sum_matching(data, is_invalid_p2)