"""Day 1: counting depth increases."""

from typing import Iterable

from aoc2021.util import load_lines


def _depths(reader: Iterable[str]) -> list[int]:
    return [int(line) for line in load_lines(reader)]


def _count_increases(values: list[int]) -> int:
    return sum(1 for previous, current in zip(values, values[1:]) if previous < current)


def part_one(reader: Iterable[str]) -> int:
    """Count measurements larger than the one before."""
    return _count_increases(_depths(reader))


def part_two(reader: Iterable[str]) -> int:
    """Count three-measurement window sums larger than the one before."""
    depths = _depths(reader)
    windows = [sum(window) for window in zip(depths, depths[1:], depths[2:])]
    return _count_increases(windows)