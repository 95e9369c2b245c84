"""Day 5: hydrothermal vent lines."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from aoc2021.util import load_lines


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


@dataclass(frozen=True)
class Coord:
    """A point on the ocean floor."""

    x: int
    y: int

    def __str__(self) -> str:
        return f"{self.x},{self.y}"


@dataclass(frozen=True)
class VentLine:
    """A line of vents between two points."""

    start: Coord
    end: Coord

    def is_diagonal(self) -> bool:
        """Return whether the line is neither horizontal nor vertical."""
        return self.start.x != self.end.x and self.start.y != self.end.y

    def max_x(self) -> int:
        """Return the larger x of the two end points."""
        return max(self.start.x, self.end.x)

    def max_y(self) -> int:
        """Return the larger y of the two end points."""
        return max(self.start.y, self.end.y)

    def coords(self) -> list[Coord]:
        """Return every whole point the line covers, from start to end."""
        if self.start == self.end:
            return [self.start]
        dx = _sign(self.end.x - self.start.x)
        dy = _sign(self.end.y - self.start.y)
        x, y = self.start.x, self.start.y
        points = []
        while (x - self.end.x) * dx <= 0 and (y - self.end.y) * dy <= 0:
            points.append(Coord(x, y))
            x += dx
            y += dy
        return points

    def __str__(self) -> str:
        return f"{self.start} -> {self.end}"


class Grid:
    """Counts of vent lines crossing each point."""

    def __init__(self, max_x: int, max_y: int, readings: list[list[int]]):
        self.max_x = max_x
        self.max_y = max_y
        self.readings = readings

    @classmethod
    def build(cls, vent_lines: Iterable[VentLine], skip_diagonals: bool) -> Grid:
        """Lay the vent lines on a grid, optionally ignoring diagonal ones."""
        lines = [vl for vl in vent_lines if not (skip_diagonals and vl.is_diagonal())]
        max_x = max((vl.max_x() for vl in lines), default=0)
        max_y = max((vl.max_y() for vl in lines), default=0)
        max_x = max(max_x, 0)
        max_y = max(max_y, 0)

        readings = [[0] * (max_x + 1) for _ in range(max_y + 1)]
        for vl in lines:
            for coord in vl.coords():
                readings[coord.y][coord.x] += 1
        return cls(max_x, max_y, readings)

    def num_overlapping_at_least(self, minimum: int) -> int:
        """Count points crossed by at least `minimum` lines."""
        return sum(1 for row in self.readings for n in row if minimum <= n)

    def __str__(self) -> str:
        rows = (
            "".join("   . " if n == 0 else f"{n:4d} " for n in row)
            for row in self.readings
        )
        return "\n" + "".join(f"{row}\n" for row in rows)


def grid_without_diagonals(vent_lines: Iterable[VentLine]) -> Grid:
    """Build a grid from horizontal and vertical lines only."""
    return Grid.build(vent_lines, True)


def grid_with_diagonals(vent_lines: Iterable[VentLine]) -> Grid:
    """Build a grid from all lines."""
    return Grid.build(vent_lines, False)


def _parse_coord(text: str) -> Coord:
    x, y = text.split(",")[:2]
    return Coord(int(x), int(y))


def parse_vent_lines(lines: Iterable[str]) -> list[VentLine]:
    """Parse lines of the form 'x1,y1 -> x2,y2'."""
    vent_lines = []
    for line in lines:
        parts = line.split(" -> ")
        if len(parts) < 2:
            raise ValueError(f"unexpected vent line format: {line}")
        vent_lines.append(VentLine(_parse_coord(parts[0]), _parse_coord(parts[1])))
    return vent_lines


def part_one(reader: Iterable[str]) -> int:
    """Count points where at least two straight lines overlap."""
    grid = grid_without_diagonals(parse_vent_lines(load_lines(reader)))
    return grid.num_overlapping_at_least(2)


def part_two(reader: Iterable[str]) -> int:
    """Count points where at least two lines, diagonals included, overlap."""
    grid = grid_with_diagonals(parse_vent_lines(load_lines(reader)))
    return grid.num_overlapping_at_least(2)