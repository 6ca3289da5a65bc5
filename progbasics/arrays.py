"""Summing fixed-size arrays, and a small recursive function."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable

ARRAY_LENGTH = 5


def sum_values(values: Iterable[int | float]) -> int | float:
    """The total of all values; zero for an empty collection."""
    return sum(values)


def filled_example(passes: int) -> list[int]:
    """A five-element array starting as ``[8, 0, 0, 0, 0]`` with 10 added per pass."""
    if passes < 0:
        raise ValueError(f"passes must not be negative, got {passes}")
    values = [0] * ARRAY_LENGTH
    values[0] = 8
    for _ in range(passes):
        values = [value + 10 for value in values]
    return values


def recurse(level: int) -> int:
    """Five at depth three, plus one for each level above it."""
    next_level = level + 1
    if next_level < 3:
        return recurse(next_level) + 1
    return 5


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="arrays", description="Sum sample arrays and show a recursive result."
    )
    parser.parse_args(argv)
    out = sys.stdout
    out.write(f"{sum_values(filled_example(1))}\n")
    out.write(f"{sum_values(filled_example(2))}\n")
    out.write(f"{recurse(0)}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())