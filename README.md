# aoc2021

Solvers for the 2021 Advent of Code puzzles, days 1 to 13.

## Installation

```
pip install .
```

## Command line

```
aoc2021 --day 6 --part 2 --inputFilePath input.txt
```

- `--day` (or `-day`): the day to run, 1 to 25 (default 1).
- `--part` (or `-part`): the part to run, 1 or 2. If you leave it out, both
  parts run, part 1 first.
- `--inputFilePath` (or `-inputFilePath`, `--input-file-path`): the puzzle
  input file. You must give this option.

Each answer is printed like this:

```
Answer day 6 part 2 (from input "input.txt"):
26984457539
```

If the day, part or input path is invalid, the input file cannot be opened,
or a solver rejects its input, the command prints `error: ...` to standard
error and exits with status 1.

For day 13 part 2 the folded paper is printed so you can read the code on it;
the reported answer is then `-1`.

## Library use

Each day is in its own module, `aoc2021.day01` to `aoc2021.day13`. Every day
module has `part_one(reader)` and `part_two(reader)`, which take an open text
stream and return the answer as an integer:

```python
import io
from aoc2021 import day01

print(day01.part_one(io.StringIO("199\n200\n208\n")))
```

The building blocks are public too, for example `day04.BingoBoard`,
`day05.VentLine`, `day09.HeightMap`, `day11.Cavern`, `day12.CaveNetwork` and
`day13.TransparentPaper`.

`aoc2021.cli.run(day, part, reader)` sends a stream to the right solver, and
`aoc2021.cli.load_file_and_run(path, day, part)` reads a file, prints the
answer and returns it. `aoc2021.util.load_lines(reader)` returns the lines of
a stream without their line endings.

## What it does not do

There are no solvers for days 14 to 25. The command accepts those day numbers,
but then reports `error: there is no solver for day N` and exits with status 1.

## Tests

```
pip install .[test]
pytest
```