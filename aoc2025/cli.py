"""Command line entry point: run one part of one day's puzzle."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Sequence
from pathlib import Path

from aoc2025.days.registry import get_day, get_day_str
from aoc2025.util.files import read_lines


def _u8(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {text!r}") from None
    if not 0 <= value <= 255:
        raise argparse.ArgumentTypeError(f"{value} is not in 0..=255")
    return value


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="aoc2025", description=__doc__)
    parser.add_argument("day", type=_u8)
    parser.add_argument("part", type=_u8)
    parser.add_argument(
        "-t", "--test", action="store_true", help="use the example input"
    )
    return parser


def _data_path(name: str, test: bool) -> Path:
    file_name = "test" if test else "input"
    return Path("src") / "days" / name / "data" / f"{file_name}.txt"


def main(argv: Sequence[str] | None = None) -> int:
    """Run the requested part and print its answer and the time taken."""
    start = time.perf_counter()
    args = _parser().parse_args(argv)

    name = get_day_str(args.day)
    if name is None:
        print(f"Day {args.day} is not supported.", file=sys.stderr)
        return 1
    try:
        data = read_lines(_data_path(name, args.test))
    except OSError as exc:
        print(f"Failed to open file: {exc}", file=sys.stderr)
        return 1

    day = get_day(args.day)
    if day is None:
        print(f"Day {args.day} is not supported.")
    else:
        parts = {1: day.part1, 2: day.part2}
        if args.part in parts:
            solve = parts[args.part]
            if solve is None:
                print(f"part{args.part} is not defined for day {args.day}.")
            else:
                print(f"day {args.day}, part {args.part}: {solve(list(data))}")

    elapsed = time.perf_counter() - start
    print(f"Execution time: {elapsed:.2f} seconds")
    return 0


if __name__ == "__main__":
    sys.exit(main())