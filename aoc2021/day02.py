"""Day 2: steering the submarine."""

from contextlib import suppress
from dataclasses import dataclass
from typing import Iterable

from aoc2021.util import load_lines


def _parse_step(step: str) -> tuple[str, int]:
    parts = step.split()
    if len(parts) != 2:
        raise ValueError(f"unexpected step format: {step}")
    direction, magnitude = parts
    return direction, int(magnitude)


@dataclass
class Submarine:
    """Position and aim of the submarine."""

    aim: int = 0
    x: int = 0
    depth: int = 0

    def mult(self) -> int:
        """Return horizontal position times depth."""
        return self.x * self.depth

    def advance_without_aim(self, step: str) -> None:
        """Apply a step where up and down change depth directly."""
        direction, magnitude = _parse_step(step)
        if direction == "forward":
            self.x += magnitude
        elif direction == "down":
            self.depth += magnitude
        elif direction == "up":
            self.depth -= magnitude
        else:
            raise ValueError(f"unknown direction: {direction}")

    def advance_with_aim(self, step: str) -> None:
        """Apply a step where up and down change the aim."""
        direction, magnitude = _parse_step(step)
        if direction == "forward":
            self.x += magnitude
            self.depth += self.aim * magnitude
        elif direction == "down":
            self.aim += magnitude
        elif direction == "up":
            self.aim -= magnitude
        else:
            raise ValueError(f"unknown direction: {direction}")


def part_one(reader: Iterable[str]) -> int:
    """Follow the course without aim; malformed steps are skipped."""
    sub = Submarine()
    for line in load_lines(reader):
        with suppress(ValueError):
            sub.advance_without_aim(line)
    return sub.mult()


def part_two(reader: Iterable[str]) -> int:
    """Follow the course with aim; malformed steps are skipped."""
    sub = Submarine()
    for line in load_lines(reader):
        with suppress(ValueError):
            sub.advance_with_aim(line)
    return sub.mult()