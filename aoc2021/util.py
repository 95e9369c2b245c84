"""Helpers shared by the daily puzzle solvers."""

from typing import Iterable


def load_lines(reader: Iterable[str]) -> list[str]:
    """Return the lines of a text stream without their line terminators."""
    lines = []
    for line in reader:
        line = line.removesuffix("\n").removesuffix("\r")
        lines.append(line)
    return lines