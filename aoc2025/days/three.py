"""Day three: the largest number formed by picking digits from a battery bank."""

from __future__ import annotations

from collections.abc import Iterable

_DIGITS = "0123456789"


def _digit(char: str) -> int:
    index = _DIGITS.find(char)
    if len(char) != 1 or index < 0:
        raise ValueError(f"not a decimal digit: {char!r}")
    return index


def _best_digit(bank: str, start: int, stop: int) -> tuple[int, int]:
    """Return the first largest digit in ``bank[start:stop]`` and its index."""
    best, best_index = 0, 0
    for index in range(start, stop):
        value = _digit(bank[index])
        if value > best:
            best, best_index = value, index
    return best, best_index


def get_joltage(bank: str, digits: int) -> int:
    """Return the largest number made of ``digits`` digits of ``bank`` kept in order."""
    if digits < 1:
        raise ValueError("at least one digit must be picked")
    if len(bank) < digits:
        raise ValueError(f"bank {bank!r} has fewer than {digits} digits")
    picked = []
    position = 0
    for taken in range(digits):
        stop = len(bank) - (digits - taken) + 1
        value, index = _best_digit(bank, position, stop)
        picked.append(str(value))
        position = index + 1
    return int("".join(picked))


def part1(data: Iterable[str]) -> int:
    """Sum the best two-digit joltage of every bank."""
    return sum(get_joltage(bank, 2) for bank in data)


def part2(data: Iterable[str]) -> int:
    """Sum the best twelve-digit joltage of every bank."""
    return sum(get_joltage(bank, 12) for bank in data)