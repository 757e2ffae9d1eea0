import pytest

from aoc2025.days import three

EXAMPLE = [
    "987654321111111",
    "811111111111119",
    "234234234234278",
    "818181911112111",
]


def test_part1_example():
    assert three.part1(EXAMPLE) == 357


def test_part2_example():
    assert three.part2(EXAMPLE) == 3121910778619


def test_first_bank_two_digits():
    assert three.get_joltage("987654321111111", 2) == 98


@pytest.mark.parametrize("bank", EXAMPLE)
@pytest.mark.parametrize("digits", [1, 2, 5, 12])
def test_result_has_requested_length(bank, digits):
    assert len(str(three.get_joltage(bank, digits))) == digits


@pytest.mark.parametrize("bank", EXAMPLE)
def test_one_digit_is_the_maximum(bank):
    assert three.get_joltage(bank, 1) == max(int(c) for c in bank)


@pytest.mark.parametrize("bank", EXAMPLE)
def test_all_digits_returns_bank(bank):
    assert three.get_joltage(bank, len(bank)) == int(bank)


def test_empty_input():
    assert three.part1([]) == 0


def test_too_short_bank_raises():
    with pytest.raises(ValueError):
        three.get_joltage("12", 3)


def test_non_digit_raises():
    with pytest.raises(ValueError):
        three.get_joltage("12a4", 2)


def test_zero_digits_raises():
    with pytest.raises(ValueError):
        three.get_joltage("1234", 0)