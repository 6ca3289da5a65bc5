"""Rules of the snake game: the snake's body, movement, apples and the end of the game."""

from __future__ import annotations

import random
import time
from collections import deque
from enum import Enum
from itertools import islice

from progbasics.snake_common import BoardDimensions, Direction, Vector


class SnakeBody:
    """The cells occupied by the snake, head first.

    ``length`` is the number of cells the snake covers; raise it before
    calling :meth:`advance` to let the snake grow by one cell.
    """

    def __init__(self, dimensions: BoardDimensions, head: Vector) -> None:
        self.max_length = dimensions.total_cells
        self.length = 1
        self._cells: deque[Vector] = deque([head])

    @property
    def head(self) -> Vector:
        return self._cells[0]

    def contains(self, position: Vector, include_last: bool = True) -> bool:
        """Whether a body cell is at ``position``, optionally ignoring the tail."""
        count = self.length if include_last else self.length - 1
        return position in islice(self._cells, count)

    def advance(self, new_head: Vector) -> None:
        """Move the head to ``new_head``, dropping cells beyond ``length``."""
        if self.length > self.max_length:
            raise ValueError(
                f"snake length {self.length} exceeds board capacity {self.max_length}"
            )
        self._cells.appendleft(new_head)
        while len(self._cells) > self.length:
            self._cells.pop()

    def positions(self) -> list[Vector]:
        """Body cells from head to tail."""
        return list(self._cells)


class GameResult(Enum):
    """Outcome of one game step."""

    CONTINUE = "continue"
    LOST = "lost"
    WON = "won"


def next_direction(current: Direction, desired: Direction) -> Direction:
    """The direction to take next; turning straight back is ignored."""
    if current.opposite() == desired:
        return current
    return desired


class GameState:
    """A running game: the snake, its heading and the apple."""

    def __init__(
        self, dimensions: BoardDimensions, rng: random.Random | None = None
    ) -> None:
        self.dimensions = dimensions
        self.rng = rng if rng is not None else random.Random(time.time_ns())
        self.snake = SnakeBody(
            dimensions, Vector(dimensions.col // 2, dimensions.row // 2)
        )
        self.direction = Direction.DOWN
        self.apple = self._place_apple()

    def _place_apple(self) -> Vector:
        if self.snake.length >= self.dimensions.total_cells:
            raise ValueError("no free cell left for an apple")
        while True:
            cell = self.rng.randrange(self.dimensions.total_cells)
            position = Vector(cell % self.dimensions.col, cell // self.dimensions.col)
            if not self.snake.contains(position):
                return position

    def step(self) -> GameResult:
        """Advance the snake one cell, wrapping around the board edges."""
        offset = self.direction.as_vector()
        head = self.snake.head
        new_head = Vector(
            (head.x + offset.x) % self.dimensions.col,
            (head.y + offset.y) % self.dimensions.row,
        )

        apple_eaten = new_head == self.apple
        if apple_eaten:
            self.snake.length += 1
        elif self.snake.contains(new_head, include_last=False):
            return GameResult.LOST

        self.snake.advance(new_head)

        if apple_eaten:
            if self.snake.length == self.dimensions.total_cells:
                return GameResult.WON
            self.apple = self._place_apple()

        return GameResult.CONTINUE