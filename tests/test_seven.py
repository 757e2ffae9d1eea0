import pytest

from aoc2025.days.seven import part1, part2

EXAMPLE = [
    ".......S.......",
    "...............",
    ".......^.......",
    "...............",
    "......^.^......",
    "...............",
    ".....^.^.^.....",
    "...............",
    "....^.^...^....",
    "...............",
    "...^.^...^.^...",
    "...............",
    "..^...^.....^..",
    "...............",
    ".^.^.^.^.^...^.",
    "...............",
]


def test_part1_example():
    assert part1(EXAMPLE) == 21


def test_part2_example():
    assert part2(EXAMPLE) == 40


def test_no_splitters():
    grid = ["S", ".", "."]
    assert part1(grid) == 0
    assert part2(grid) == 1


def test_splitter_at_left_edge():
    grid = ["S.", "^."]
    assert part1(grid) == 1
    assert part2(grid) == part1(grid)


def test_part1_does_not_change_input():
    grid = list(EXAMPLE)
    part1(grid)
    assert grid == EXAMPLE


def test_more_splitters_more_timelines():
    simple = ["..S..", ".....", "..^..", "....."]
    assert part2(simple) > part2(["..S..", ".....", ".....", "....."])


def test_empty_input():
    with pytest.raises(ValueError):
        part1([])
    with pytest.raises(ValueError):
        part2([])


def test_ragged_input():
    with pytest.raises(ValueError):
        part2(["..S..", ".."])