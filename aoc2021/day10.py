"""Day 10: syntax scoring of navigation subsystem lines."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence

from aoc2021.util import load_lines

_PAIRS = {"(": ")", "[": "]", "{": "}", "<": ">"}
_OPENERS = {close: open_ for open_, close in _PAIRS.items()}

_ILLEGAL_SCORES = {")": 3, "]": 57, "}": 1197, ">": 25137}
_COMPLETION_SCORES = {")": 1, "]": 2, "}": 3, ">": 4}


@dataclass
class Chunk:
    """An opened chunk and the complete chunks nested inside it."""

    open_char: str
    complete: bool = False
    chunks: list[Chunk] = field(default_factory=list)

    def __str__(self) -> str:
        return f"'{self.open_char}'"


class IllegalCharacter(ValueError):
    """A closing character that does not match the chunk it closes."""

    def __init__(self, char: str):
        super().__init__(char)
        self.char = char


def is_open(char: str) -> bool:
    """Return whether the character opens a chunk."""
    return char in _PAIRS


def parse(chars: Sequence[str]) -> list[Chunk]:
    """Parse a line and return the chunks still open at its end.

    Raises IllegalCharacter for a mismatched closing character and
    ValueError for an empty line or an unknown character.
    """
    if not chars:
        raise ValueError("cannot parse an empty line")

    stack: list[Chunk] = []
    for char in chars:
        if is_open(char):
            stack.append(Chunk(char))
            continue
        if not stack:
            raise IllegalCharacter(char)
        last = stack.pop()
        if char not in _OPENERS:
            raise ValueError(f"unknown character: {char}")
        if _OPENERS[char] != last.open_char:
            raise IllegalCharacter(char)
        last.complete = True
        if stack:
            stack[-1].chunks.append(last)
    return stack


def part_one(reader: Iterable[str]) -> int:
    """Sum the scores of the first illegal character of each corrupted line."""
    score = 0
    for line in load_lines(reader):
        try:
            parse(list(line))
        except IllegalCharacter as illegal:
            score += _ILLEGAL_SCORES[illegal.char]
    return score


def part_two(reader: Iterable[str]) -> int:
    """Return the middle completion score of the lines that are not corrupted."""
    scores = []
    for line in load_lines(reader):
        try:
            open_chunks = parse(list(line))
        except ValueError:
            continue
        score = 0
        for chunk in reversed(open_chunks):
            score = score * 5 + _COMPLETION_SCORES[_PAIRS[chunk.open_char]]
        scores.append(score)

    if not scores:
        raise ValueError("no incomplete lines to score")
    scores.sort(reverse=True)
    return scores[len(scores) // 2]