import io

import pytest

from aoc2021.day05 import (
    Coord,
    Grid,
    VentLine,
    grid_with_diagonals,
    grid_without_diagonals,
    parse_vent_lines,
    part_one,
    part_two,
)

TEST_INPUT = """0,9 -> 5,9
8,0 -> 0,8
9,4 -> 3,4
2,2 -> 2,1
7,0 -> 7,4
6,4 -> 2,0
0,9 -> 2,9
3,4 -> 1,4
0,0 -> 8,8
5,5 -> 8,2
"""


def test_part_one():
    assert part_one(io.StringIO(TEST_INPUT)) == 5


def test_part_two():
    assert part_two(io.StringIO(TEST_INPUT)) == 12


def test_parse_vent_lines():
    lines = parse_vent_lines(["0,9 -> 5,9", "8,0 -> 0,8"])
    assert lines == [
        VentLine(Coord(0, 9), Coord(5, 9)),
        VentLine(Coord(8, 0), Coord(0, 8)),
    ]


def test_parse_vent_lines_rejects_bad_input():
    with pytest.raises(ValueError):
        parse_vent_lines(["0,9 5,9"])


def test_is_diagonal():
    assert VentLine(Coord(8, 0), Coord(0, 8)).is_diagonal()
    assert not VentLine(Coord(0, 9), Coord(5, 9)).is_diagonal()
    assert not VentLine(Coord(2, 2), Coord(2, 1)).is_diagonal()


def test_max_x_and_max_y():
    vl = VentLine(Coord(9, 4), Coord(3, 7))
    assert vl.max_x() == 9
    assert vl.max_y() == 7


def test_coords_horizontal_reversed():
    vl = VentLine(Coord(9, 4), Coord(7, 4))
    assert vl.coords() == [Coord(9, 4), Coord(8, 4), Coord(7, 4)]


def test_coords_vertical():
    vl = VentLine(Coord(2, 1), Coord(2, 3))
    assert vl.coords() == [Coord(2, 1), Coord(2, 2), Coord(2, 3)]


def test_coords_diagonal():
    vl = VentLine(Coord(5, 5), Coord(8, 2))
    assert vl.coords() == [Coord(5, 5), Coord(6, 4), Coord(7, 3), Coord(8, 2)]


def test_coords_single_point():
    assert VentLine(Coord(3, 3), Coord(3, 3)).coords() == [Coord(3, 3)]


def test_str():
    assert str(VentLine(Coord(0, 9), Coord(5, 9))) == "0,9 -> 5,9"


def test_grid_string():
    grid = Grid.build([VentLine(Coord(0, 0), Coord(1, 0))], True)
    assert str(grid) == "\n   1    1 \n"


def test_grid_skips_diagonals():
    lines = [VentLine(Coord(0, 0), Coord(2, 2)), VentLine(Coord(0, 0), Coord(0, 2))]
    without = grid_without_diagonals(lines)
    with_diag = grid_with_diagonals(lines)
    assert without.num_overlapping_at_least(2) == 0
    assert with_diag.num_overlapping_at_least(2) == 1
    assert without.num_overlapping_at_least(1) == 3
    assert with_diag.num_overlapping_at_least(1) == 5