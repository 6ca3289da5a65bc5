"""Text-mode snake: keyboard mapping, board rendering and the game loop."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Iterable
from typing import TextIO

from progbasics.snake_common import BoardDimensions, Direction
from progbasics.snake_logic import GameResult, GameState, next_direction

_KEY_DIRECTIONS = {
    "w": Direction.UP,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
}

_RESULT_MESSAGES = {
    GameResult.LOST: "Game over",
    GameResult.WON: "You won",
}


def direction_from_key(key: str) -> Direction | None:
    """The direction bound to a WASD key, in either case, or None."""
    if not key.isascii():
        return None
    return _KEY_DIRECTIONS.get(key.lower())


def render_board(state: GameState) -> str:
    """The board as text: '_' empty, '*' body, '@' head, 'o' apple."""
    dims = state.dimensions
    grid = [["_"] * dims.col for _ in range(dims.row)]
    body = state.snake.positions()[: state.snake.length]
    for part in body[1:]:
        grid[part.y][part.x] = "*"
    head = state.snake.head
    grid[head.y][head.x] = "@"
    grid[state.apple.y][state.apple.x] = "o"
    return "".join("".join(row) + "\n" for row in grid)


def play(state: GameState, keys: Iterable[str], output: TextIO) -> GameResult:
    """Run one game step per key until the game ends or the keys run out.

    Newlines are skipped; any other key advances the game, turning the
    snake first if it is a direction key.
    """
    for key in keys:
        if key == "\n":
            continue
        desired = direction_from_key(key)
        if desired is not None:
            state.direction = next_direction(state.direction, desired)

        result = state.step()
        message = _RESULT_MESSAGES.get(result)
        if message is not None:
            output.write(message + "\n")
        output.write(render_board(state) + "\n")

        if result is not GameResult.CONTINUE:
            return result
    return GameResult.CONTINUE


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="snake", description="Play snake on a 5x5 board with the WASD keys."
    )
    parser.add_argument("--seed", type=int, help="seed for apple placement")
    args = parser.parse_args(argv)

    rng = random.Random(args.seed) if args.seed is not None else None
    state = GameState(BoardDimensions(5, 5), rng)
    sys.stdout.write(render_board(state) + "\n")

    keys = iter(lambda: sys.stdin.read(1), "")
    play(state, keys, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())