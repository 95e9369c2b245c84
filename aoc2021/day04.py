"""Day 4: bingo with a giant squid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

BOARD_SIZE = 5


@dataclass
class BingoSquare:
    """A number on a board and whether it has been drawn."""

    value: int
    is_marked: bool = False

    def __str__(self) -> str:
        return f"{self.value:2d}{chr(39) if self.is_marked else ' '}"


class BingoBoard:
    """A 5x5 bingo board."""

    def __init__(self, rows: list[list[BingoSquare]]):
        self.rows = rows

    @classmethod
    def from_text(cls, raw_data: str) -> BingoBoard:
        """Build a board from five lines of five whitespace-separated numbers."""
        rows = [
            [BingoSquare(int(field)) for field in line.split()]
            for line in raw_data.split("\n")
        ]
        if len(rows) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in rows):
            raise ValueError(f"a board must be {BOARD_SIZE}x{BOARD_SIZE}: {raw_data!r}")
        return cls(rows)

    def __str__(self) -> str:
        lines = ["".join(f"{square} " for square in row) for row in self.rows]
        return "\n" + "".join(f"{line}\n" for line in lines)

    def _squares(self) -> Iterable[BingoSquare]:
        for row in self.rows:
            yield from row

    def sum_unmarked(self) -> int:
        """Sum the values of all unmarked squares."""
        return sum(square.value for square in self._squares() if not square.is_marked)

    def reset(self) -> None:
        """Unmark every square."""
        for square in self._squares():
            square.is_marked = False

    def play(self, num: int) -> None:
        """Mark every square holding the drawn number."""
        for square in self._squares():
            if square.value == num:
                square.is_marked = True

    def is_winner(self) -> bool:
        """Return whether a full row or column is marked."""
        if any(all(square.is_marked for square in row) for row in self.rows):
            return True
        return any(all(square.is_marked for square in column) for column in zip(*self.rows))


def find_first_winner(game: Iterable[int], boards: list[BingoBoard]) -> int:
    """Return the score of the first board to win, or 0 if none does."""
    for n in game:
        for board in boards:
            board.play(n)
            if board.is_winner():
                return board.sum_unmarked() * n
    return 0


def find_last_winner(game: Iterable[int], boards: list[BingoBoard]) -> int:
    """Return the score of the last board to win, or 0 if not all boards win."""
    winner_count = 0
    for n in game:
        for board in boards:
            if board.is_winner():
                continue
            board.play(n)
            if board.is_winner():
                winner_count += 1
                if winner_count == len(boards):
                    return board.sum_unmarked() * n
    return 0


def load(reader) -> tuple[list[int], list[BingoBoard]]:
    """Read the drawn numbers and the boards from a text stream."""
    chunks = reader.read().split("\n\n")
    first, rest = chunks[0], chunks[1:]
    game = [int(x) for x in first.split(",")] if first else []
    boards = [BingoBoard.from_text(chunk.strip()) for chunk in rest if chunk.strip()]
    return game, boards


def part_one(reader) -> int:
    """Return the score of the first winning board."""
    game, boards = load(reader)
    return find_first_winner(game, boards)


def part_two(reader) -> int:
    """Return the score of the last winning board."""
    game, boards = load(reader)
    return find_last_winner(game, boards)