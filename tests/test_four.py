import pytest

from aoc2025.days.four import part1, part2

FULL_3X3 = ["@@@", "@@@", "@@@"]


def _rolls(grid):
    return sum(row.count("@") for row in grid)


def test_part1_full_square_only_corners_accessible():
    assert part1(FULL_3X3) == 4


def test_part2_full_square_removes_everything():
    assert part2(FULL_3X3) == _rolls(FULL_3X3)


def test_small_block_all_accessible():
    grid = ["@@", "@@"]
    assert part1(grid) == _rolls(grid)
    assert part2(grid) == _rolls(grid)


def test_single_roll():
    assert part1(["@"]) == 1


def test_no_rolls():
    grid = ["...", "...", "..."]
    assert part1(grid) == 0
    assert part2(grid) == 0


def test_empty_input():
    assert part1([]) == 0
    assert part2([]) == 0


@pytest.mark.parametrize(
    "grid",
    [
        ["@@@@@", "@@.@@", "@@@@@", ".@@@.", "@@@@@"],
        ["@.@", ".@.", "@.@"],
        ["@@@@", "@@@@", "@@@@", "@@@@"],
    ],
)
def test_part2_bounds(grid):
    first = part1(grid)
    total = part2(grid)
    assert first <= total <= _rolls(grid)


def test_fewer_rows_than_columns_is_rejected():
    with pytest.raises(ValueError):
        part1(["@@"])


def test_ragged_grid_is_rejected():
    with pytest.raises(ValueError):
        part1(["@@@", "@", "@@@"])