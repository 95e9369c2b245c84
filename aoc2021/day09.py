"""Day 9: smoke basins on a height map."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

from aoc2021.util import load_lines

_BASIN_WALL = 9


@dataclass(frozen=True)
class Coordinate:
    """A position on the height map."""

    x: int
    y: int

    def adjacent_coordinates(self) -> list[Coordinate]:
        """Return the neighbours in north, west, south, east order."""
        return [self.north(), self.west(), self.south(), self.east()]

    def north(self) -> Coordinate:
        return Coordinate(self.x, self.y - 1)

    def west(self) -> Coordinate:
        return Coordinate(self.x - 1, self.y)

    def south(self) -> Coordinate:
        return Coordinate(self.x, self.y + 1)

    def east(self) -> Coordinate:
        return Coordinate(self.x + 1, self.y)

    def __str__(self) -> str:
        return f"({self.x},{self.y})"


def risk(height: int) -> int:
    """Return the risk level of a height."""
    return height + 1


class HeightMap:
    """A grid of heights, indexed by row then column."""

    def __init__(self, rows: list[list[int]]):
        self.rows = rows

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> HeightMap:
        """Parse one digit per cell."""
        return cls([[int(char) for char in line] for line in lines])

    def sum_risk(self) -> int:
        """Sum the risk levels of all low points."""
        return sum(risk(h) for h in self.low_point_heights())

    def basin_sizes(self) -> list[int]:
        """Return the size of the basin around each low point."""
        return [self.walk_all_adjacent(c, set()) for c in self.low_point_coordinates()]

    def walk_all_adjacent(self, coordinate: Coordinate, visited: set[Coordinate]) -> int:
        """Count unvisited cells reachable without crossing a 9, marking them visited."""
        count = 0
        stack = [coordinate]
        while stack:
            c = stack.pop()
            if c in visited or self.rows[c.y][c.x] == _BASIN_WALL:
                continue
            visited.add(c)
            count += 1
            stack.extend(self.adjacent_coordinates(c.x, c.y))
        return count

    def low_point_heights(self) -> list[int]:
        """Return the heights of all low points."""
        return [self.rows[c.y][c.x] for c in self.low_point_coordinates()]

    def low_point_coordinates(self) -> list[Coordinate]:
        """Return cells lower than every neighbour, row by row."""
        return [
            Coordinate(x, y)
            for y, row in enumerate(self.rows)
            for x, h in enumerate(row)
            if all(h < ah for ah in self.adjacent_heights(x, y))
        ]

    def adjacent_heights(self, x: int, y: int) -> list[int]:
        """Return the heights of the neighbours inside the map."""
        return [self.rows[c.y][c.x] for c in self.adjacent_coordinates(x, y)]

    def adjacent_coordinates(self, x: int, y: int) -> list[Coordinate]:
        """Return the neighbours of (x, y) that lie inside the map."""
        return [
            c
            for c in Coordinate(x, y).adjacent_coordinates()
            if 0 <= c.y < len(self.rows) and 0 <= c.x < len(self.rows[c.y])
        ]


def part_one(reader: Iterable[str]) -> int:
    """Return the summed risk of all low points."""
    return HeightMap.from_lines(load_lines(reader)).sum_risk()


def part_two(reader: Iterable[str]) -> int:
    """Return the product of the three largest basin sizes."""
    sizes = sorted(HeightMap.from_lines(load_lines(reader)).basin_sizes(), reverse=True)
    if len(sizes) < 3:
        raise ValueError(f"need at least three basins, found {len(sizes)}")
    return math.prod(sizes[:3])