"""Depth-first traversal of a small tree, recursively and with resumable iterators."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(eq=False)
class Node:
    """A tree node holding a value and its ordered children."""

    value: int
    children: list[Node] = field(default_factory=list)


def create_graph() -> Node:
    """The sample tree: 1 -> (2 -> (6 -> 7, 5), 3, 4)."""
    root = Node(1)
    a, b, c, d, e, f = (Node(value) for value in range(2, 8))
    root.children.extend([a, b, c])
    a.children.extend([e, d])
    e.children.append(f)
    return root


def dfs_values(node: Node) -> Iterator[int]:
    """Values of the tree in depth-first pre-order, by recursion."""
    yield node.value
    for child in node.children:
        yield from dfs_values(child)


class DepthFirstIterator:
    """A depth-first iterator whose state can be copied and compared.

    Created without a root it is the exhausted iterator, equal to any
    iterator that has run to its end.
    """

    def __init__(self, root: Node | None = None) -> None:
        self._stack: list[Node] = [] if root is None else [root]
        self._indices: list[int] = []

    def __iter__(self) -> DepthFirstIterator:
        return self

    def __next__(self) -> int:
        if not self._stack:
            raise StopIteration
        value = self._stack[-1].value
        self._advance()
        return value

    def _advance(self) -> None:
        node = self._stack[-1]
        if node.children:
            self._stack.append(node.children[0])
            self._indices.append(0)
            return
        while True:
            self._stack.pop()
            if not self._stack:
                return
            parent = self._stack[-1]
            next_index = self._indices.pop() + 1
            if next_index < len(parent.children):
                self._stack.append(parent.children[next_index])
                self._indices.append(next_index)
                return

    def copy(self) -> DepthFirstIterator:
        """An independent iterator resuming from the same point."""
        clone = DepthFirstIterator()
        clone._stack = list(self._stack)
        clone._indices = list(self._indices)
        return clone

    __copy__ = copy

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DepthFirstIterator):
            return NotImplemented
        return (
            len(self._stack) == len(other._stack)
            and all(a is b for a, b in zip(self._stack, other._stack))
            and self._indices == other._indices
        )

    __hash__ = None  # type: ignore[assignment]


class DepthFirstRange:
    """An iterable over a tree that starts a fresh traversal each time."""

    def __init__(self, root: Node) -> None:
        self.root = root

    def __iter__(self) -> DepthFirstIterator:
        return DepthFirstIterator(self.root)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="graph-iter", description="Walk the sample tree depth first."
    )
    parser.parse_args(argv)
    out = sys.stdout
    root = create_graph()

    for value in dfs_values(root):
        out.write(f"{value}\n")

    for value in DepthFirstRange(root):
        out.write(f"{value}\n")

    lockstep = sum(a + b for a, b in zip(DepthFirstIterator(root), DepthFirstIterator(root)))
    out.write(f"Lockstep sum: {lockstep}\n")

    first = DepthFirstIterator(root)
    for _ in range(3):
        next(first, None)
    second = first.copy()
    for value in first:
        out.write(f"{value}\n")
    out.write("Iterator 1 finished\n")
    out.write(f"Iterator 2 computed the sum: {sum(second)}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())