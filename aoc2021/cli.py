"""Command line entry point that runs a day's puzzle solver on an input file."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from aoc2021 import (
    day01,
    day02,
    day03,
    day04,
    day05,
    day06,
    day07,
    day08,
    day09,
    day10,
    day11,
    day12,
    day13,
)

FIRST_DAY = 1
LAST_DAY = 25
PARTS = (1, 2)
BOTH_PARTS = -1

_SOLVERS = {
    1: day01,
    2: day02,
    3: day03,
    4: day04,
    5: day05,
    6: day06,
    7: day07,
    8: day08,
    9: day09,
    10: day10,
    11: day11,
    12: day12,
    13: day13,
}


def validate_day(day: int) -> None:
    """Raise ValueError unless the day is between 1 and 25."""
    if not FIRST_DAY <= day <= LAST_DAY:
        raise ValueError(
            f"{day} is outside the accepted day range of 1 to 25 (inclusive)"
        )


def validate_part(part: int) -> None:
    """Raise ValueError unless the part is 1, 2, or -1 for both."""
    if part == BOTH_PARTS:
        return
    if part not in PARTS:
        raise ValueError(
            f"{part} is outside the accepted part range of 1 to 2 (inclusive)"
        )


def validate_input_file_path(input_file_path: str) -> None:
    """Raise ValueError if no input file path was given."""
    if not input_file_path:
        raise ValueError("input file path must be specified")


def run(day: int, part: int, reader) -> int:
    """Run one part of one day's solver on a text stream."""
    if part not in PARTS or not FIRST_DAY <= day <= LAST_DAY:
        raise ValueError("problem running")
    solver = _SOLVERS.get(day)
    if solver is None:
        raise ValueError(f"there is no solver for day {day}")
    return solver.part_one(reader) if part == 1 else solver.part_two(reader)


def load_file_and_run(input_file_path: str, day: int, part: int) -> int:
    """Run a solver on a file, print the answer and return it."""
    with open(input_file_path, encoding="utf-8") as reader:
        result = run(day, part, reader)
    print(
        f'Answer day {day} part {part} (from input "{input_file_path}"):\n{result}'
    )
    return result


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aoc2021", description="Run a puzzle solver on an input file."
    )
    parser.add_argument(
        "-day", "--day", type=int, default=1,
        help="[1-25] the day number to run, without leading 0",
    )
    parser.add_argument(
        "-part", "--part", type=int, default=BOTH_PARTS,
        help="[1-2] the part number to run; both when omitted",
    )
    parser.add_argument(
        "-inputFilePath", "--inputFilePath", "--input-file-path",
        dest="input_file_path", default="", help="the input file path",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse arguments, run the requested parts and return an exit status."""
    args = _parser().parse_args(argv)
    try:
        validate_day(args.day)
        validate_part(args.part)
        validate_input_file_path(args.input_file_path)
        parts = PARTS if args.part == BOTH_PARTS else (args.part,)
        for part in parts:
            load_file_and_run(args.input_file_path, args.day, part)
    except (OSError, ValueError) as err:
        print(f"error: {err}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())