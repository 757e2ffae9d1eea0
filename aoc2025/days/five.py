"""Day five: fresh ingredient ID ranges."""

from __future__ import annotations

from collections.abc import Iterable

from aoc2025.util.linked_list import LinkedList, LinkedListNode
from aoc2025.util.ranges import Range


def insert_range(ranges: LinkedList[Range], new_range: Range) -> None:
    """Insert ``new_range`` into a sorted list, merging it with ranges it touches.

    A range that ends just before the next one starts is kept apart when
    inserted, but ranges that become adjacent after a merge are joined.
    """
    value = Range(new_range.low, new_range.high, new_range.validator)
    previous: LinkedListNode[Range] | None = None
    node = ranges.head
    while node is not None:
        current = node.value
        if value.high < current.low:
            break
        if value.low > current.high:
            previous, node = node, node.next
            continue
        current.low = min(current.low, value.low)
        current.high = max(current.high, value.high)
        while node.next is not None and current.high >= node.next.value.low - 1:
            current.high = max(current.high, node.next.value.high)
            node.next = node.next.next
        return
    fresh = LinkedListNode(value, node)
    if previous is None:
        ranges.head = fresh
    else:
        previous.next = fresh


def _sections(data: Iterable[str]) -> tuple[list[str], list[str]]:
    lines = list(data)
    if "" in lines:
        blank = lines.index("")
        return lines[:blank], lines[blank + 1:]
    return lines, []


def part1(data: Iterable[str]) -> int:
    """Count the listed IDs that fall in at least one fresh range."""
    range_lines, id_lines = _sections(data)
    ranges = [Range.parse(line) for line in range_lines]
    return sum(
        any(r.low <= ident <= r.high for r in ranges)
        for ident in (int(line) for line in id_lines)
    )


def part2(data: Iterable[str]) -> int:
    """Count every ID covered by the fresh ranges."""
    range_lines, _ = _sections(data)
    merged: LinkedList[Range] = LinkedList()
    for line in range_lines:
        insert_range(merged, Range.parse(line))
    return sum(r.high - r.low + 1 for r in merged)