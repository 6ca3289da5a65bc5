"""A two-dimensional integer vector, with operators and with plain functions."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Vector:
    """An immutable pair of integers."""

    x: int
    y: int

    def __add__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: object) -> Vector:
        if not isinstance(scalar, int) or isinstance(scalar, bool):
            return NotImplemented
        return Vector(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__


def add(a: Vector, b: Vector) -> Vector:
    """Component-wise sum."""
    return a + b


def subtract(a: Vector, b: Vector) -> Vector:
    """Component-wise difference."""
    return a - b


def scale(a: Vector, scalar: int) -> Vector:
    """Both components multiplied by ``scalar``."""
    return a * scalar