"""Shared geometry for the snake game: positions, board size and directions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


@dataclass(frozen=True)
class Vector:
    """A cell position or a one-step offset on the board."""

    x: int
    y: int


@dataclass(frozen=True)
class BoardDimensions:
    """Width (columns) and height (rows) of the board."""

    col: int
    row: int

    def __post_init__(self) -> None:
        if self.col <= 0 or self.row <= 0:
            raise ValueError(
                f"board dimensions must be positive, got {self.col}x{self.row}"
            )

    @property
    def total_cells(self) -> int:
        """Number of cells on the board."""
        return self.col * self.row


class Direction(IntEnum):
    """Movement direction; opposite directions are two steps apart."""

    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    def opposite(self) -> Direction:
        """The direction pointing the other way."""
        return Direction((self + 2) % len(Direction))

    def as_vector(self) -> Vector:
        """The one-cell offset for a step in this direction."""
        return _DIRECTION_VECTORS[self]


_DIRECTION_VECTORS = {
    Direction.UP: Vector(0, -1),
    Direction.RIGHT: Vector(1, 0),
    Direction.LEFT: Vector(-1, 0),
    Direction.DOWN: Vector(0, 1),
}