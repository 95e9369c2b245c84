import io

import pytest

from aoc2021.day11 import Cavern, Octopus, part_one, part_two
from aoc2021.util import load_lines

FLASHES_INITIAL = """11111
19991
19191
19991
11111
"""

FLASHES_AFTER_STEP_1 = """34543
40004
50005
40004
34543
"""

FLASHES_AFTER_STEP_2 = """45654
51115
61116
51115
45654
"""

COUNTS = """5483143223
2745854711
5264556173
6141336146
6357385478
4167524645
2176841721
6882881134
4846848554
5283751526
"""


def _cavern(text):
    return Cavern.from_lines(load_lines(io.StringIO(text)))


def test_flash_logic():
    cavern = _cavern(FLASHES_INITIAL)
    assert str(cavern) == FLASHES_INITIAL
    cavern.step()
    assert str(cavern) == FLASHES_AFTER_STEP_1
    cavern.step()
    assert str(cavern) == FLASHES_AFTER_STEP_2


def test_counts():
    cavern = _cavern(COUNTS)
    flash_count = cavern.advance(10)
    assert cavern.step_count == 10
    assert flash_count == 204
    assert cavern.total_flash_count == 204

    cavern.advance(90)
    assert cavern.step_count == 100
    assert cavern.total_flash_count == 1656


def test_first_synchronize_step():
    assert _cavern(COUNTS).first_synchronize_step() == 195


def test_part_one():
    assert part_one(io.StringIO(COUNTS)) == 1656


def test_part_two():
    assert part_two(io.StringIO(COUNTS)) == 195


def test_non_square_grid_rejected():
    with pytest.raises(ValueError):
        Cavern.from_lines(["123", "456"])


def test_adjacent_corner_and_centre():
    cavern = _cavern(FLASHES_INITIAL)
    assert len(cavern.adjacent(0, 0)) == 3
    assert len(cavern.adjacent(2, 2)) == 8
    assert cavern.get(-1, 0) is None
    assert cavern.get(5, 0) is None


def test_octopus_flash_cycle():
    octopus = Octopus(9)
    assert octopus.can_flash() is False
    octopus.increment()
    assert octopus.can_flash() is True
    octopus.flash()
    assert octopus.can_flash() is False
    octopus.smart_reset()
    assert (octopus.energy_level, octopus.has_flashed) == (0, False)


def test_smart_reset_keeps_energy_when_not_flashed():
    octopus = Octopus(7)
    octopus.smart_reset()
    assert octopus.energy_level == 7