"""Day 11: flashing dumbo octopuses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from aoc2021.util import load_lines

_FLASH_THRESHOLD = 9

_NEIGHBOUR_OFFSETS = (
    (0, -1),
    (1, -1),
    (1, 0),
    (1, 1),
    (0, 1),
    (-1, 1),
    (-1, 0),
    (-1, -1),
)


@dataclass
class Octopus:
    """An octopus's energy level and whether it flashed this step."""

    energy_level: int = 0
    has_flashed: bool = False

    def can_flash(self) -> bool:
        """Return whether the octopus has enough energy and has not yet flashed."""
        return self.energy_level > _FLASH_THRESHOLD and not self.has_flashed

    def increment(self) -> None:
        """Raise the energy level by one."""
        self.energy_level += 1

    def flash(self) -> None:
        """Mark the octopus as flashed."""
        self.has_flashed = True

    def smart_reset(self) -> None:
        """Drain the energy of an octopus that flashed and clear its flag."""
        if self.has_flashed:
            self.reset()

    def reset(self) -> None:
        """Clear the flash flag and the energy level."""
        self.has_flashed = False
        self.energy_level = 0

    def __str__(self) -> str:
        return str(self.energy_level)


class Cavern:
    """A square grid of octopuses."""

    def __init__(self, grid: list[list[Octopus]]):
        self.grid = grid
        self.total_flash_count = 0
        self.step_count = 0

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> Cavern:
        """Parse a square grid with one energy digit per octopus."""
        rows = list(lines)
        size = len(rows)
        grid = []
        for line in rows:
            if len(line) != size:
                raise ValueError(f"cavern must be square: {line!r}")
            grid.append([Octopus(int(char)) for char in line])
        return cls(grid)

    def _octopuses(self) -> Iterator[Octopus]:
        for row in self.grid:
            yield from row

    def first_synchronize_step(self) -> int:
        """Step until every octopus flashes at once; return the step count."""
        while True:
            self.step()
            if all(o.energy_level == 0 for o in self._octopuses()):
                return self.step_count

    def advance(self, steps: int) -> int:
        """Run several steps and return the flashes during them."""
        return sum(self.step() for _ in range(steps))

    def step(self) -> int:
        """Run one step and return the number of flashes in it."""
        for o in self._octopuses():
            o.increment()

        flash_count = 0
        while True:
            flashes = 0
            for y, row in enumerate(self.grid):
                for x, o in enumerate(row):
                    if o.can_flash():
                        o.flash()
                        self.flash(x, y)
                        flashes += 1
            flash_count += flashes
            if flashes == 0:
                break

        for o in self._octopuses():
            o.smart_reset()

        self.step_count += 1
        self.total_flash_count += flash_count
        return flash_count

    def flash(self, x: int, y: int) -> None:
        """Raise the energy of every neighbour of (x, y)."""
        for o in self.adjacent(x, y):
            o.increment()

    def adjacent(self, x: int, y: int) -> list[Octopus]:
        """Return the up to eight neighbours, clockwise from north."""
        neighbours = (self.get(x + dx, y + dy) for dx, dy in _NEIGHBOUR_OFFSETS)
        return [o for o in neighbours if o is not None]

    def get(self, x: int, y: int) -> Optional[Octopus]:
        """Return the octopus at (x, y), or None outside the grid."""
        if not 0 <= y < len(self.grid):
            return None
        row = self.grid[y]
        if not 0 <= x < len(row):
            return None
        return row[x]

    def __str__(self) -> str:
        return "".join("".join(str(o) for o in row) + "\n" for row in self.grid)


def part_one(reader: Iterable[str]) -> int:
    """Count flashes over 100 steps."""
    return Cavern.from_lines(load_lines(reader)).advance(100)


def part_two(reader: Iterable[str]) -> int:
    """Return the first step at which all octopuses flash together."""
    return Cavern.from_lines(load_lines(reader)).first_synchronize_step()