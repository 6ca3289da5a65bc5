"""An array split into several fixed-size chunks, iterated as one sequence."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from itertools import chain

Position = tuple[int, int]


class ChunkedArray:
    """Integer items stored in chunks of given sizes, all starting at zero.

    Items are addressed by ``(chunk_index, item_index)``; iteration walks
    every chunk in order and skips empty ones.
    """

    def __init__(self, sizes: Iterable[int]) -> None:
        sizes = list(sizes)
        if any(size < 0 for size in sizes):
            raise ValueError(f"chunk sizes must not be negative: {sizes}")
        self._chunks: list[list[int]] = [[0] * size for size in sizes]

    def __iter__(self) -> Iterator[int]:
        return chain.from_iterable(self._chunks)

    def __len__(self) -> int:
        return sum(len(chunk) for chunk in self._chunks)

    def positions(self) -> Iterator[Position]:
        """Every item's position, in iteration order."""
        for chunk_index, chunk in enumerate(self._chunks):
            for item_index, _ in enumerate(chunk):
                yield chunk_index, item_index

    def _locate(self, position: Position) -> tuple[list[int], int]:
        chunk_index, item_index = position
        if not 0 <= chunk_index < len(self._chunks):
            raise IndexError(f"chunk index {chunk_index} out of range")
        chunk = self._chunks[chunk_index]
        if not 0 <= item_index < len(chunk):
            raise IndexError(f"item index {item_index} out of range")
        return chunk, item_index

    def __getitem__(self, position: Position) -> int:
        chunk, index = self._locate(position)
        return chunk[index]

    def __setitem__(self, position: Position, value: int) -> None:
        chunk, index = self._locate(position)
        chunk[index] = value


def copy_items(source: ChunkedArray, target: ChunkedArray) -> None:
    """Copy items in order until either array runs out."""
    for value, position in zip(source, target.positions()):
        target[position] = value


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="chunked", description="Number one chunked array and copy it into another."
    )
    parser.parse_args(argv)
    first = ChunkedArray([2, 3, 4, 3])
    second = ChunkedArray([3, 2, 4, 3])
    for number, position in enumerate(first.positions()):
        first[position] = number
    copy_items(first, second)
    sys.stdout.write("".join(f"{item}, " for item in second))
    return 0


if __name__ == "__main__":
    sys.exit(main())