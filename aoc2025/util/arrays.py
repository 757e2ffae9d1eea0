"""Small helpers for working with lists and grids."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def remove_element(arr: Sequence[T], index: int) -> tuple[T | None, list[T]]:
    """Return the element at ``index`` and a copy of ``arr`` without it.

    When ``index`` is out of range the element is ``None`` and the copy is
    unchanged. The input sequence is never modified.
    """
    remaining = list(arr)
    if 0 <= index < len(remaining):
        return remaining.pop(index), remaining
    return None, remaining


def rotate_90_clockwise(matrix: Sequence[Sequence[T]]) -> list[list[T]]:
    """Return a new grid that is ``matrix`` turned a quarter turn clockwise."""
    if not matrix or not matrix[0]:
        raise ValueError("cannot rotate an empty matrix")
    return [list(column) for column in zip(*reversed(matrix))]


def convert_str_to_vec(text: str) -> list[str]:
    """Split a string into a list of its characters."""
    return list(text)