import io

import pytest

from aoc2021.cli import (
    load_file_and_run,
    main,
    run,
    validate_day,
    validate_input_file_path,
    validate_part,
)

DAY01_INPUT = """199
200
208
210
200
207
240
269
260
263
"""


@pytest.fixture
def day01_file(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text(DAY01_INPUT, encoding="utf-8")
    return path


@pytest.mark.parametrize("day", [0, 26, -3])
def test_validate_day_rejects_out_of_range(day):
    with pytest.raises(ValueError, match="outside the accepted day range of 1 to 25"):
        validate_day(day)


@pytest.mark.parametrize("part", [0, 3, -2])
def test_validate_part_rejects_out_of_range(part):
    with pytest.raises(ValueError, match="outside the accepted part range of 1 to 2"):
        validate_part(part)


def test_validate_input_file_path_requires_path():
    with pytest.raises(ValueError, match="input file path must be specified"):
        validate_input_file_path("")


def test_run_dispatches_to_day_and_part():
    assert run(1, 1, io.StringIO(DAY01_INPUT)) == 7
    assert run(1, 2, io.StringIO(DAY01_INPUT)) == 5


def test_run_rejects_unknown_part():
    with pytest.raises(ValueError, match="problem running"):
        run(1, 3, io.StringIO(DAY01_INPUT))


def test_run_rejects_unknown_day():
    with pytest.raises(ValueError, match="problem running"):
        run(26, 1, io.StringIO(DAY01_INPUT))


def test_run_day_without_solver_raises():
    with pytest.raises(ValueError, match="no solver for day 14"):
        run(14, 1, io.StringIO(DAY01_INPUT))


def test_load_file_and_run_prints_answer(day01_file, capsys):
    assert load_file_and_run(str(day01_file), 1, 1) == 7
    out = capsys.readouterr().out
    assert out == f'Answer day 1 part 1 (from input "{day01_file}"):\n7\n'


def test_main_runs_both_parts_by_default(day01_file, capsys):
    assert main(["-day", "1", "-inputFilePath", str(day01_file)]) == 0
    out = capsys.readouterr().out
    assert "Answer day 1 part 1" in out
    assert "Answer day 1 part 2" in out
    assert out.splitlines()[1] == "7"
    assert out.splitlines()[3] == "5"


def test_main_single_part(day01_file, capsys):
    assert main(["--day", "1", "--part", "2", "--inputFilePath", str(day01_file)]) == 0
    out = capsys.readouterr().out
    assert "part 1" not in out
    assert out.splitlines()[1] == "5"


def test_main_rejects_bad_day(day01_file, capsys):
    assert main(["-day", "30", "-inputFilePath", str(day01_file)]) == 1
    err = capsys.readouterr().err
    assert "error: 30 is outside the accepted day range" in err


def test_main_requires_input_path(capsys):
    assert main(["-day", "1"]) == 1
    assert "input file path must be specified" in capsys.readouterr().err


def test_main_missing_file(tmp_path, capsys):
    missing = tmp_path / "missing.txt"
    assert main(["-day", "1", "-part", "1", "-inputFilePath", str(missing)]) == 1
    assert capsys.readouterr().err.startswith("error:")