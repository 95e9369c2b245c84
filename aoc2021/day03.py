"""Day 3: binary diagnostic report."""

from typing import Iterable, Sequence

from aoc2021.util import load_lines


def _bits_to_int(bits: Sequence[int]) -> int:
    return int("".join(str(bit) for bit in bits), 2)


def part_one(reader: Iterable[str]) -> int:
    """Return gamma rate times epsilon rate."""
    rows = [[int(char) for char in line] for line in load_lines(reader)]

    columns: list[list[int]] = []
    for row in rows:
        for x, bit in enumerate(row):
            if len(columns) <= x:
                columns.append([])
            columns[x].append(bit)

    gamma_bits = []
    for column in columns:
        zeros = sum(1 for bit in column if bit == 0)
        ones = len(column) - zeros
        if ones == zeros:
            raise ValueError("equal number of ones and zeros in a column")
        gamma_bits.append(1 if ones > zeros else 0)

    epsilon_bits = [1 - bit for bit in gamma_bits]
    return _bits_to_int(gamma_bits) * _bits_to_int(epsilon_bits)


def _filter(rows: Sequence[Sequence[int]], keep_most_common: bool) -> Sequence[int]:
    candidates = list(rows)
    pos = 0
    while len(candidates) != 1:
        if not candidates:
            raise ValueError("no candidates remain")
        ones = sum(1 for row in candidates if row[pos] != 0)
        zeros = len(candidates) - ones
        most_common = 1 if ones >= zeros else 0
        wanted = most_common if keep_most_common else 1 - most_common
        candidates = [row for row in candidates if row[pos] == wanted]
        pos += 1
    return candidates[0]


def find_oxygen(grid: Sequence[Sequence[int]]) -> int:
    """Return the oxygen generator rating of the rows in the grid."""
    return _bits_to_int(_filter(grid, keep_most_common=True))


def find_co2(grid: Sequence[Sequence[int]]) -> int:
    """Return the CO2 scrubber rating of the rows in the grid."""
    return _bits_to_int(_filter(grid, keep_most_common=False))


def part_two(reader: Iterable[str]) -> int:
    """Return the life support rating."""
    grid = [[int(char) for char in line] for line in load_lines(reader)]
    return find_oxygen(grid) * find_co2(grid)