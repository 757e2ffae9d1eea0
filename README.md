# aoc2025

Solutions to nine daily programming puzzles, each with two parts, and a
small command that runs one part of one day against a data file. It has no
dependencies outside the standard library.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running a puzzle

```
aoc2025 DAY PART [--test]
```

`DAY` is a number from 1 to 9 and `PART` is 1 or 2. The input is read from
`src/days/<day name>/data/input.txt`, relative to the current directory,
where the day name is spelled out (`one`, `two`, … `nine`). With `--test`
(or `-t`) the command reads `test.txt` from the same directory instead.

The command prints the answer, then the time it took:

```
$ aoc2025 3 1 --test
day 3, part 1: <answer>
Execution time: 0.01 seconds
```

A day outside 1–9, or a data file that cannot be opened, is reported on
standard error and the command exits with status 1. A part other than 1 or 2
prints no answer, only the execution time.

## What it does not include

The package holds no puzzle input. The data files the command reads must be
put in place by you, under the directory layout shown above.

## Using the solutions from Python

Each day lives in its own module under `aoc2025.days` (`one` to `nine`) and
exposes `part1(data)` and `part2(data)`, which take the input as a list of
lines and return an integer. `aoc2025.days.eight.part1` also accepts a
`limit` argument, the number of closest pairs to join (1000 by default).

```python
from aoc2025.days import three
from aoc2025.util.files import read_lines

lines = read_lines("src/days/three/data/input.txt")
print(three.part1(lines), three.part2(lines))
```

`read_lines` returns the lines of a UTF-8 file without their line endings.

Days can also be looked up through `aoc2025.days.registry`:

```python
from aoc2025.days.registry import get_day, get_day_from_str, get_day_str

day = get_day(5)           # a Day with part1 and part2, or None
print(get_day_str(5))      # "five"
print(get_day_from_str("five"))  # 5
print(day.part1(lines))
```

Some days expose smaller helpers as well, for example
`aoc2025.days.two.is_invalid` and `is_invalid_p2`,
`aoc2025.days.three.get_joltage`, `aoc2025.days.five.insert_range`,
`aoc2025.days.six.handle_operation`, and `Point` and `UnionFind` in
`aoc2025.days.eight`.

## Helpers

The `aoc2025.util` package holds the helpers the solutions share:

- `graph.Graph`: a directed graph of adjacency lists, with
  `dfs_with_condition` to test reachability along edges that satisfy a
  condition and `count_distinct_paths_with_condition` to count such paths.
- `linked_list.LinkedList` and `LinkedListNode`: a singly linked list that
  iterates over its values.
- `ranges.Range`: an inclusive range parsed from text such as `"11-22"` by
  `Range.parse`, with an optional validator used by `find_duplicates`.
- `arrays`: `remove_element`, `rotate_90_clockwise` and `convert_str_to_vec`.