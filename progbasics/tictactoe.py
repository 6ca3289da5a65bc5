"""Tic-tac-toe on a 3x3 board: a human plays X against a computer playing O."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import TextIO

BOARD_DIMENSION = 3


class CellValue(Enum):
    """Content of a board cell."""

    EMPTY = 0
    X = 1
    O = 2

    def symbol(self) -> str:
        """The character used to draw this cell."""
        return _SYMBOLS[self]


_SYMBOLS = {
    CellValue.EMPTY: "_",
    CellValue.X: "X",
    CellValue.O: "O",
}


@dataclass(frozen=True)
class Position:
    """A cell address: ``x`` is the column, ``y`` the row."""

    x: int
    y: int


class Board:
    """A square grid of cells, all empty at the start."""

    def __init__(self) -> None:
        self._rows = [
            [CellValue.EMPTY] * BOARD_DIMENSION for _ in range(BOARD_DIMENSION)
        ]

    @staticmethod
    def _check(position: Position) -> None:
        if not (
            0 <= position.x < BOARD_DIMENSION and 0 <= position.y < BOARD_DIMENSION
        ):
            raise IndexError(f"position {position} is outside the board")

    def __getitem__(self, position: Position) -> CellValue:
        self._check(position)
        return self._rows[position.y][position.x]

    def __setitem__(self, position: Position, value: CellValue) -> None:
        self._check(position)
        self._rows[position.y][position.x] = value

    def first_empty(self) -> Position | None:
        """The first empty cell in row order, or None if there is none."""
        for y, row in enumerate(self._rows):
            for x, cell in enumerate(row):
                if cell is CellValue.EMPTY:
                    return Position(x, y)
        return None

    def is_full(self) -> bool:
        """Whether no empty cell is left."""
        return self.first_empty() is None

    def has_winning_line(self, move: Position) -> bool:
        """Whether a row, column or diagonal through ``move`` holds one value."""
        self._check(move)
        span = range(BOARD_DIMENSION)
        lines = [
            [Position(x, move.y) for x in span],
            [Position(move.x, y) for y in span],
        ]
        if move.x == move.y:
            lines.append([Position(i, i) for i in span])
        if move.x + move.y == BOARD_DIMENSION - 1:
            lines.append([Position(BOARD_DIMENSION - 1 - i, i) for i in span])
        return any(len({self[p] for p in line}) == 1 for line in lines)

    def render(self) -> str:
        """The board as text, one row per line, each symbol followed by a space."""
        return "".join(
            "".join(cell.symbol() + " " for cell in row) + "\n" for row in self._rows
        )


def parse_coordinate(text: str) -> int:
    """Parse one coordinate, raising ValueError with a message for the player."""
    try:
        value = int(text)
    except ValueError:
        raise ValueError("Invalid input.") from None
    if value < 0:
        raise ValueError("Position must be positive.")
    if value >= BOARD_DIMENSION:
        raise ValueError(f"Position must be less than {BOARD_DIMENSION}.")
    return value


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def _next_token(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise EOFError("input ended before the game finished") from None


def _ask_position(
    board: Board, value: CellValue, tokens: Iterator[str], output: TextIO
) -> Position:
    while True:
        output.write(f"Select position to put {value.symbol()}: \n")
        coordinates = []
        for axis in ("x", "y"):
            while True:
                output.write(f"{axis}: ")
                try:
                    coordinates.append(parse_coordinate(_next_token(tokens)))
                    break
                except ValueError as error:
                    output.write(f"{error}\n")
        position = Position(*coordinates)
        if board[position] is not CellValue.EMPTY:
            output.write("Input position not empty!\n")
            continue
        return position


def play(lines: Iterable[str], output: TextIO) -> CellValue | None:
    """Play one game, reading the human's moves from ``lines``.

    Returns the winner's value, or None on a tie. Raises EOFError if the
    input ends before the game does.
    """
    tokens = _tokens(lines)
    board = Board()
    output.write(board.render())

    players = (CellValue.X, CellValue.O)
    player_index = 0
    while True:
        value = players[player_index]
        if player_index == 0:
            move = _ask_position(board, value, tokens, output)
        else:
            found = board.first_empty()
            if found is None:
                raise RuntimeError("no empty cell left for the computer")
            move = found

        board[move] = value
        output.write(board.render())

        if board.has_winning_line(move):
            output.write(f"Player {player_index} won.\n")
            return value
        if board.is_full():
            output.write("It's a tie...\n")
            return None

        player_index = (player_index + 1) % len(players)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="tictactoe",
        description="Play tic-tac-toe against the computer; enter x and y for each move.",
    )
    parser.parse_args(argv)
    try:
        play(sys.stdin, sys.stdout)
    except EOFError:
        sys.stdout.write("\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())