"""Applying an operation to every number of a list or of a chain of chunks."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, MutableSequence
from dataclasses import dataclass
from typing import TextIO

ItemFunc = Callable[[float], "float | None"]

CHUNK_SIZE = 8


def create_test_buffer() -> list[list[float]]:
    """Four chunks of eight numbers: all ones, then ``i * j`` rows for i in 0..2."""
    chunks = [[1.0] * CHUNK_SIZE]
    for i in range(3):
        chunks.append([float(i * j) for j in range(CHUNK_SIZE)])
    return chunks


def for_each_item(items: MutableSequence[float], func: ItemFunc) -> None:
    """Call ``func`` on every item; a non-None result replaces that item."""
    for index, value in enumerate(items):
        result = func(value)
        if result is not None:
            items[index] = result


def for_each_in_chunks(chunks: Iterable[MutableSequence[float]], func: ItemFunc) -> None:
    """Apply :func:`for_each_item` to each chunk in order."""
    for chunk in chunks:
        for_each_item(chunk, func)


@dataclass
class Adder:
    """Adds a fixed amount to each value."""

    added_value: float

    def __call__(self, value: float) -> float:
        return value + self.added_value


@dataclass
class Multiplier:
    """Multiplies each value by a fixed factor."""

    factor: float

    def __call__(self, value: float) -> float:
        return value * self.factor


@dataclass
class SumProduct:
    """Accumulates the sum and product of the values it sees, leaving them as they are."""

    sum: float = 0.0
    product: float = 1.0

    def __call__(self, value: float) -> None:
        self.sum += value
        self.product *= value


def _format(value: float) -> str:
    return f"{value:g}"


def _printer(out: TextIO, separator: str) -> Callable[[float], None]:
    def write(value: float) -> None:
        out.write(_format(value) + separator)

    return write


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="item-ops", description="Apply operations to lists of numbers."
    )
    parser.parse_args(argv)
    out = sys.stdout

    chunks = create_test_buffer()
    for_each_in_chunks(chunks, _printer(out, ", "))
    out.write("\n")
    for_each_in_chunks(chunks, Adder(5))
    for_each_in_chunks(chunks, _printer(out, ", "))
    out.write("\n")

    values = [1.0, 2.0, 3.0]
    for_each_item(values, Adder(5.0))
    for_each_item(values, _printer(out, ""))
    for_each_item(values, Multiplier(2.0))
    for_each_item(values, _printer(out, ""))
    out.write("\n")
    # The factor is read from the list on each call, so it changes once the first item is updated.
    for_each_item(values, lambda value: value * values[0])

    items = [1.0, 2.0, 3.0, 4.0]
    for_each_item(items, Adder(5.0))
    result = SumProduct()
    for_each_item(items, result)
    out.write(f"{_format(result.product)}\n{_format(result.sum)}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())