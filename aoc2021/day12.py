"""Day 12: counting paths through a cave system."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from aoc2021.util import load_lines

_START = "start"
_END = "end"


@dataclass(frozen=True)
class Cave:
    """A cave; small caves have all-lower-case names."""

    name: str
    is_big_cave: bool

    @classmethod
    def named(cls, name: str) -> Cave:
        """Create a cave, big unless every letter of its name is lower case."""
        return cls(name, not all(char.islower() for char in name))

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Tunnel:
    """A one-way passage from one cave to another."""

    start: Cave
    end: Cave


@dataclass
class CaveNetwork:
    """Caves by name and the tunnels between them, both directions listed."""

    caves: dict[str, Cave] = field(default_factory=dict)
    tunnels: list[Tunnel] = field(default_factory=list)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> CaveNetwork:
        """Parse lines of the form 'a-b' into caves and two-way tunnels."""
        network = cls()
        for line in lines:
            names = line.split("-")
            if len(names) < 2:
                raise ValueError(f"unexpected tunnel format: {line}")
            for name in names:
                if name not in network.caves:
                    network.caves[name] = Cave.named(name)
            cave_a = network.caves[names[0]]
            cave_b = network.caves[names[1]]
            network.tunnels.append(Tunnel(cave_a, cave_b))
            network.tunnels.append(Tunnel(cave_b, cave_a))
        return network

    def all_paths(self, allow_double: bool) -> list[list[str]]:
        """Return every path from start to end."""
        return self.walk_all(_START, _END, allow_double)

    def walk_all(self, start_name: str, end_name: str, allow_double: bool) -> list[list[str]]:
        """Return every path between two caves under the visiting rules."""
        if start_name == end_name:
            return [[start_name]]
        visited = {start_name: 1}
        available = self.available(start_name, visited, allow_double)
        return self._walk(end_name, available, [start_name], visited, allow_double)

    def _walk(
        self,
        end_name: str,
        available: list[Cave],
        path: list[str],
        visited: dict[str, int],
        allow_double: bool,
    ) -> list[list[str]]:
        paths = []
        for cave in available:
            next_path = [*path, cave.name]
            if cave.name == end_name:
                paths.append(next_path)
                continue
            next_visited = dict(visited)
            next_visited[cave.name] = next_visited.get(cave.name, 0) + 1
            next_available = self.available(cave.name, next_visited, allow_double)
            if next_available:
                paths.extend(
                    self._walk(end_name, next_available, next_path, next_visited, allow_double)
                )
        return paths

    def _is_small(self, name: str) -> bool:
        cave = self.caves.get(name)
        return cave is None or not cave.is_big_cave

    def available(
        self, from_cave_name: str, visited: dict[str, int], allow_double: bool
    ) -> list[Cave]:
        """Return the caves reachable next from a cave, given the visits so far."""
        adjacent = [
            t.end
            for t in self.tunnels
            if t.start.name == from_cave_name and t.end.name != _START
        ]
        seen_double = allow_double and any(
            count == 2 and self._is_small(name) for name, count in visited.items()
        )
        caves = []
        for cave in adjacent:
            if cave.is_big_cave:
                caves.append(cave)
            elif allow_double and not seen_double:
                caves.append(cave)
            elif visited.get(cave.name, 0) == 0:
                caves.append(cave)
        return caves


def part_one(reader: Iterable[str]) -> int:
    """Count paths visiting each small cave at most once."""
    return len(CaveNetwork.from_lines(load_lines(reader)).all_paths(False))


def part_two(reader: Iterable[str]) -> int:
    """Count paths where one small cave may be visited twice."""
    return len(CaveNetwork.from_lines(load_lines(reader)).all_paths(True))