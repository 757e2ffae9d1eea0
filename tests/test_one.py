from aoc2025.days import one

EXAMPLE = ["L68", "L30", "R48", "L5", "R60", "L55", "L1", "L99", "R14", "L82"]


def test_part1_example():
    assert one.part1(EXAMPLE) == 3


def test_part2_example():
    assert one.part2(EXAMPLE) == 6


def test_part2_counts_at_least_part1():
    assert one.part2(EXAMPLE) >= one.part1(EXAMPLE)


def test_empty_input():
    assert one.part1([]) == 0
    assert one.part2([]) == 0


def test_full_turn_passes_zero_once():
    assert one.part2(["R100"]) == 1
    assert one.part2(["L100"]) == 1


def test_part1_ignores_full_turns():
    assert one.part1(["R100"]) == one.part1([])


def test_moves_on_one_line():
    assert one.part1(["L68 L30 R48 L5 R60 L55 L1 L99 R14 L82"]) == one.part1(EXAMPLE)
    assert one.part2(["L68 L30 R48 L5 R60 L55 L1 L99 R14 L82"]) == one.part2(EXAMPLE)


def test_part2_matches_single_clicks():
    big = ["R250", "L310", "R7"]
    clicks = [f"{line[0]}1" for line in big for _ in range(int(line[1:]))]
    assert one.part2(big) == one.part1(clicks)