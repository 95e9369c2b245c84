import io

import pytest

from aoc2021.day07 import (
    find_min_fuel_cost_part_one,
    find_min_fuel_cost_part_two,
    fuel_cost_part_one,
    fuel_cost_part_two,
    fuel_cost_to_move,
    min_max,
    parse_positions,
    part_one,
    part_two,
)

TEST_INPUT = "16,1,2,0,4,2,7,1,2,14\n"
POSITIONS = [16, 1, 2, 0, 4, 2, 7, 1, 2, 14]


def test_part_one():
    assert part_one(io.StringIO(TEST_INPUT)) == 37


def test_part_two():
    assert part_two(io.StringIO(TEST_INPUT)) == 168


def test_parse_positions():
    assert parse_positions(["16,1,2,0,4,2,7,1,2,14"]) == POSITIONS


def test_min_max():
    assert min_max(POSITIONS) == (0, 16)


def test_min_max_empty():
    with pytest.raises(ValueError):
        min_max([])


@pytest.mark.parametrize("target,cost", [(2, 37), (1, 41), (3, 39), (10, 71)])
def test_fuel_cost_part_one(target, cost):
    assert fuel_cost_part_one(POSITIONS, target) == cost


@pytest.mark.parametrize("target,cost", [(5, 168), (2, 206)])
def test_fuel_cost_part_two(target, cost):
    assert fuel_cost_part_two(POSITIONS, target) == cost


@pytest.mark.parametrize("target", [-1, 17])
def test_alignment_out_of_range(target):
    with pytest.raises(ValueError):
        fuel_cost_part_one(POSITIONS, target)
    with pytest.raises(ValueError):
        fuel_cost_part_two(POSITIONS, target)


def test_fuel_cost_empty_positions():
    with pytest.raises(ValueError):
        fuel_cost_part_one([], 0)


def test_fuel_cost_to_move():
    assert fuel_cost_to_move(0) == 0
    assert fuel_cost_to_move(1) == 1
    assert fuel_cost_to_move(11) == 66


def test_find_min():
    assert find_min_fuel_cost_part_one(POSITIONS) == 37
    assert find_min_fuel_cost_part_two(POSITIONS) == 168