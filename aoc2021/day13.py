"""Day 13: folding transparent paper."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from aoc2021.util import load_lines

DOT = "#"
EMPTY = "."


@dataclass(frozen=True)
class Instruction:
    """A fold line: 'left' folds along x, 'up' folds along y."""

    raw: str
    direction: str
    value: int

    @classmethod
    def from_line(cls, line: str) -> Instruction:
        """Parse a line such as 'fold along y=7'."""
        parts = line.split("=")
        if len(parts) < 2:
            raise ValueError(f"unexpected instruction format: {line}")
        value = int(parts[1])
        direction = "left" if "x" in line else "up"
        return cls(line, direction, value)


def load_instructions(lines: Iterable[str]) -> list[Instruction]:
    """Parse one fold instruction per line."""
    return [Instruction.from_line(line) for line in lines]


class TransparentPaper:
    """A grid of dots, indexed by row then column."""

    def __init__(self, rows: list[list[str]]):
        self.rows = rows

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> TransparentPaper:
        """Parse lines of 'x,y' dot coordinates into a grid."""
        coordinates = []
        for line in lines:
            parts = line.split(",")
            if len(parts) < 2:
                raise ValueError(f"unexpected coordinate format: {line}")
            x, y = int(parts[0]), int(parts[1])
            if x < 0 or y < 0:
                raise ValueError(f"negative coordinate: {line}")
            coordinates.append((x, y))

        max_x = max((x for x, _ in coordinates), default=0)
        max_y = max((y for _, y in coordinates), default=0)
        rows = [[EMPTY] * (max_x + 1) for _ in range(max_y + 1)]
        for x, y in coordinates:
            rows[y][x] = DOT
        return cls(rows)

    @property
    def max_x(self) -> int:
        """Number of columns."""
        return len(self.rows[0]) if self.rows else 0

    @property
    def max_y(self) -> int:
        """Number of rows."""
        return len(self.rows)

    def dots_visible(self) -> int:
        """Count the dots on the paper."""
        return sum(row.count(DOT) for row in self.rows)

    def apply(self, instruction: Instruction) -> None:
        """Fold the paper as the instruction says."""
        if instruction.direction == "left":
            self.fold_left_at(instruction.value)
        else:
            self.fold_up_at(instruction.value)

    def fold_up_at(self, y: int) -> None:
        """Fold the part below row y up onto the part above it."""
        if not 0 <= y < len(self.rows):
            raise ValueError(f"fold line y={y} is outside the paper")
        top, bottom = self.rows[:y], self.rows[y + 1:]
        if len(bottom) > len(top):
            raise ValueError(f"fold at y={y} reaches past the top edge")
        for k, row in enumerate(bottom):
            target = top[y - 1 - k]
            for x, mark in enumerate(row):
                if mark == DOT:
                    target[x] = DOT
        self.rows = top

    def fold_left_at(self, x: int) -> None:
        """Fold the part right of column x left onto the part beside it."""
        if not 0 <= x < self.max_x:
            raise ValueError(f"fold line x={x} is outside the paper")
        if self.max_x - x - 1 > x:
            raise ValueError(f"fold at x={x} reaches past the left edge")
        folded = []
        for row in self.rows:
            left, right = row[:x], row[x + 1:]
            for i, mark in enumerate(right):
                if mark == DOT:
                    left[x - 1 - i] = DOT
            folded.append(left)
        self.rows = folded

    def __str__(self) -> str:
        return "".join("".join(row) + "\n" for row in self.rows)


def load(reader: Iterable[str]) -> tuple[TransparentPaper, list[Instruction]]:
    """Read the dots and, after a blank line, the fold instructions."""
    paper_lines: list[str] = []
    instruction_lines: list[str] = []
    seen_blank = False
    for line in load_lines(reader):
        if line == "":
            seen_blank = True
            continue
        (instruction_lines if seen_blank else paper_lines).append(line)
    return TransparentPaper.from_lines(paper_lines), load_instructions(instruction_lines)


def part_one(reader: Iterable[str]) -> int:
    """Return the dots visible after the first fold."""
    paper, instructions = load(reader)
    if not instructions:
        raise ValueError("no fold instructions")
    paper.apply(instructions[0])
    return paper.dots_visible()


def part_two(reader: Iterable[str]) -> int:
    """Apply every fold and print the paper; the answer is read from the print.

    Returns -1, as the code is letters rather than a number.
    """
    paper, instructions = load(reader)
    for instruction in instructions:
        paper.apply(instruction)
    print(paper)
    return -1