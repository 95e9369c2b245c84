"""Day 6: lanternfish population growth."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from aoc2021.util import load_lines

_NEW_TIMER = 8
_RESET_TIMER = 6
_CYCLE = 7


@dataclass
class LanternFish:
    """A fish with days left until it spawns."""

    spawn_timer: int

    def advance(self) -> Optional[LanternFish]:
        """Pass one day; return the newborn fish if one was spawned."""
        if self.spawn_timer == 0:
            self.spawn_timer = _RESET_TIMER
            return LanternFish(_NEW_TIMER)
        self.spawn_timer -= 1
        return None

    def all_descendants_after(self, day: int, memo: dict[tuple[int, int], int]) -> int:
        """Count all descendants produced within `day` days, caching in `memo`."""
        key = (self.spawn_timer, day)
        if key in memo:
            return memo[key]

        total = 0
        spawn_day = day - (self.spawn_timer + 1)
        for _ in range(self.direct_descendants_after(day)):
            total += 1 + LanternFish(_NEW_TIMER).all_descendants_after(spawn_day, memo)
            spawn_day -= _CYCLE

        memo[key] = total
        return total

    def direct_descendants_after(self, day: int) -> int:
        """Count the children this fish spawns within `day` days."""
        actual_days = day - (self.spawn_timer + 1)
        if actual_days < 0:
            return 0
        return 1 + actual_days // _CYCLE

    def __str__(self) -> str:
        return str(self.spawn_timer)


def school_size_after(day: int, school: Iterable[LanternFish]) -> int:
    """Return the size of the school after `day` days."""
    memo: dict[tuple[int, int], int] = {}
    return sum(1 + fish.all_descendants_after(day, memo) for fish in school)


def parse_school(lines: Iterable[str]) -> list[LanternFish]:
    """Parse comma-separated spawn timers."""
    return [
        LanternFish(int(timer)) for line in lines for timer in line.split(",")
    ]


def part_one(reader: Iterable[str]) -> int:
    """Simulate 80 days fish by fish and return the school size."""
    school = parse_school(load_lines(reader))
    for _ in range(80):
        newborn = [child for fish in school if (child := fish.advance()) is not None]
        school.extend(newborn)
    return len(school)


def part_two(reader: Iterable[str]) -> int:
    """Return the school size after 256 days."""
    return school_size_after(256, parse_school(load_lines(reader)))