"""Day 8: decoding scrambled seven-segment displays."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping, Sequence

from aoc2021.util import load_lines

SIGNAL_VALUE_LOOKUP: dict[str, int] = {
    "abcefg": 0,
    "cf": 1,
    "acdeg": 2,
    "acdfg": 3,
    "bcdf": 4,
    "abdfg": 5,
    "abdefg": 6,
    "acf": 7,
    "abcdefg": 8,
    "abcdfg": 9,
}

SEGMENTS = "abcdefg"

_UNIQUE_LENGTH_VALUES = {2: 1, 3: 7, 4: 4, 7: 8}


def _sort_signal(signal: str) -> str:
    return "".join(sorted(signal))


@dataclass(frozen=True)
class Digit:
    """A lit pattern, as sorted segment letters and as one flag per segment."""

    input_signal: str
    wire_signal: tuple[int, ...]

    @classmethod
    def from_input(cls, input_signal: str) -> Digit:
        """Build a digit from segment letters in any order."""
        wire = tuple(1 if segment in input_signal else 0 for segment in SEGMENTS)
        return cls(_sort_signal(input_signal), wire)

    @classmethod
    def from_wire(cls, wire_signal: Sequence[int]) -> Digit:
        """Build a digit from one on/off flag per segment."""
        wire = tuple(wire_signal)
        letters = "".join(
            segment for segment, flag in zip(SEGMENTS, wire) if flag == 1
        )
        return cls(letters, wire)

    def raw_input_signals(self) -> list[str]:
        """Return the segment letters one by one."""
        return list(self.input_signal)

    def subtract(self, other: Digit) -> Digit:
        """Return the segments lit here but not in `other`."""
        wire = [
            0 if theirs != 0 else mine
            for mine, theirs in zip(self.wire_signal, other.wire_signal)
        ]
        return Digit.from_wire(wire)

    def intersect(self, other: Digit) -> Digit:
        """Return the segments lit both here and in `other`."""
        wire = [
            1 if mine == 1 and theirs == 1 else 0
            for mine, theirs in zip(self.wire_signal, other.wire_signal)
        ]
        return Digit.from_wire(wire)

    def value(self) -> int:
        """Return the digit shown, judged by length or by the segment table."""
        unique = _UNIQUE_LENGTH_VALUES.get(len(self.input_signal))
        if unique is not None:
            return unique
        return SIGNAL_VALUE_LOOKUP.get(self.input_signal, 0)


@dataclass
class Display:
    """A four-digit display showing decoded signals."""

    input_signals: list[str]

    def output_value(self) -> int:
        """Return the number the display shows."""
        text = "".join(str(Digit.from_input(s).value()) for s in self.input_signals)
        if not text:
            raise ValueError("display shows no digits")
        return int(text)


@dataclass
class Reading:
    """The ten unique patterns and four output patterns of one display."""

    unique_signals: list[str]
    output_signals: list[str]

    @classmethod
    def from_signals(cls, unique: Iterable[str], output: Iterable[str]) -> Reading:
        """Build a reading with every pattern's letters sorted."""
        return cls(
            [_sort_signal(s) for s in unique],
            [_sort_signal(s) for s in output],
        )

    def signals_of_length(self, length: int) -> list[str]:
        """Return the unique patterns with the given number of segments."""
        return [s for s in self.unique_signals if len(s) == length]

    def _first_of_length(self, length: int) -> str:
        matches = self.signals_of_length(length)
        if not matches:
            raise ValueError(f"no signal of length {length}")
        return matches[0]

    def input_signal_1(self) -> str:
        """Return the pattern for 1."""
        return self._first_of_length(2)

    def input_signal_4(self) -> str:
        """Return the pattern for 4."""
        return self._first_of_length(4)

    def input_signal_7(self) -> str:
        """Return the pattern for 7."""
        return self._first_of_length(3)

    def input_signal_8(self) -> str:
        """Return the pattern for 8."""
        return self._first_of_length(7)


def _assign_by_six_count(
    candidates: Digit,
    sixes: Sequence[Digit],
    mapping: dict[str, str],
    on_two: str,
    on_three: str,
) -> None:
    for maybe in candidates.raw_input_signals():
        count = sum(1 for d in sixes if maybe in d.input_signal)
        if count == 2:
            mapping[maybe] = on_two
        elif count == 3:
            mapping[maybe] = on_three


def generate_transform(reading: Reading) -> dict[str, str]:
    """Work out which scrambled wire drives which real segment."""
    mapping: dict[str, str] = {}

    d1 = Digit.from_input(reading.input_signal_1())
    d4 = Digit.from_input(reading.input_signal_4())
    d7 = Digit.from_input(reading.input_signal_7())
    d8 = Digit.from_input(reading.input_signal_8())

    mapping[d7.subtract(d1).input_signal] = "a"

    # 0, 6 and 9 each miss one segment; how often a wire appears among them
    # tells the candidate pairs apart.
    sixes = [Digit.from_input(s) for s in reading.signals_of_length(6)]

    _assign_by_six_count(d4.subtract(d1), sixes, mapping, "d", "b")
    _assign_by_six_count(d7.intersect(d1), sixes, mapping, "c", "f")

    known = Digit.from_input("".join(mapping))
    _assign_by_six_count(d8.subtract(known), sixes, mapping, "e", "g")

    return mapping


def transform(output_signals: Iterable[str], mapping: Mapping[str, str]) -> list[str]:
    """Rewrite each signal through the wire mapping."""
    return ["".join(mapping.get(c, "") for c in signal) for signal in output_signals]


def parse_readings(lines: Iterable[str]) -> list[Reading]:
    """Parse lines of the form 'patterns | outputs'."""
    readings = []
    for line in lines:
        parts = line.split("|")
        if len(parts) < 2:
            raise ValueError(f"unexpected reading format: {line}")
        readings.append(Reading.from_signals(parts[0].split(), parts[1].split()))
    return readings


def part_one(reader: Iterable[str]) -> int:
    """Count output digits that are 1, 4, 7 or 8."""
    readings = parse_readings(load_lines(reader))
    return sum(
        1
        for reading in readings
        for signal in reading.output_signals
        if Digit.from_input(signal).value() in (1, 4, 7, 8)
    )


def part_two(reader: Iterable[str]) -> int:
    """Decode every display and sum the output values."""
    total = 0
    for reading in parse_readings(load_lines(reader)):
        mapping = generate_transform(reading)
        total += Display(transform(reading.output_signals, mapping)).output_value()
    return total