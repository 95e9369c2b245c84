"""Day 7: aligning crab submarines."""

from typing import Iterable, Sequence

from aoc2021.util import load_lines


def min_max(values: Sequence[int]) -> tuple[int, int]:
    """Return the smallest and largest value."""
    if not values:
        raise ValueError("empty sequence")
    return min(values), max(values)


def _check_alignment(positions: Sequence[int], alignment_position: int) -> None:
    low, high = min_max(positions)
    if alignment_position < low:
        raise ValueError("alignment position too low")
    if high < alignment_position:
        raise ValueError("alignment position too high")


def fuel_cost_part_one(positions: Sequence[int], alignment_position: int) -> int:
    """Fuel to align all positions when each step costs one."""
    _check_alignment(positions, alignment_position)
    return sum(abs(p - alignment_position) for p in positions)


def fuel_cost_part_two(positions: Sequence[int], alignment_position: int) -> int:
    """Fuel to align all positions when each further step costs one more."""
    _check_alignment(positions, alignment_position)
    return sum(fuel_cost_to_move(abs(p - alignment_position)) for p in positions)


def fuel_cost_to_move(num_positions: int) -> int:
    """Return 1 + 2 + ... + num_positions."""
    if num_positions <= 0:
        return 0
    return num_positions * (num_positions + 1) // 2


def _find_min(positions: Sequence[int], cost) -> int:
    low, high = min_max(positions)
    return min(cost(positions, target) for target in range(low, high + 1))


def find_min_fuel_cost_part_one(positions: Sequence[int]) -> int:
    """Return the cheapest alignment cost with constant step cost."""
    return _find_min(positions, fuel_cost_part_one)


def find_min_fuel_cost_part_two(positions: Sequence[int]) -> int:
    """Return the cheapest alignment cost with increasing step cost."""
    return _find_min(positions, fuel_cost_part_two)


def parse_positions(lines: Iterable[str]) -> list[int]:
    """Parse comma-separated horizontal positions."""
    return [int(pos) for line in lines for pos in line.split(",")]


def part_one(reader: Iterable[str]) -> int:
    """Return the minimal fuel cost with constant step cost."""
    return find_min_fuel_cost_part_one(parse_positions(load_lines(reader)))


def part_two(reader: Iterable[str]) -> int:
    """Return the minimal fuel cost with increasing step cost."""
    return find_min_fuel_cost_part_two(parse_positions(load_lines(reader)))