"""A sparse matrix stored as an orthogonal (cross-linked) list."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import islice
from typing import Optional, TextIO


@dataclass(eq=False, slots=True)
class _Node:
    row: int
    col: int
    value: int
    right: Optional[_Node] = None
    down: Optional[_Node] = None


class CrossListMatrix:
    """A ``rows`` by ``cols`` matrix holding only its explicitly given entries.

    Every entry sits on a row list ordered by column and a column list
    ordered by row. Positions without an entry read as ``default``.
    """

    def __init__(
        self,
        rows: int,
        cols: int,
        entries: Iterable[tuple[int, int, int]] = (),
        default: int = 0,
    ) -> None:
        if rows < 0 or cols < 0:
            raise ValueError("matrix dimensions must not be negative")
        self.rows = rows
        self.cols = cols
        self.default = default
        self.total = 0
        self._row_heads: list[Optional[_Node]] = [None] * rows
        self._col_heads: list[Optional[_Node]] = [None] * cols
        for i, j, value in entries:
            self._insert(_Node(i, j, value))

    def _check_position(self, i: int, j: int) -> None:
        if not 0 <= i < self.rows:
            raise IndexError(f"row {i} out of range")
        if not 0 <= j < self.cols:
            raise IndexError(f"column {j} out of range")

    def _insert(self, node: _Node) -> None:
        self._check_position(node.row, node.col)

        prev: Optional[_Node] = None
        cur = self._row_heads[node.row]
        while cur is not None and cur.col < node.col:
            prev, cur = cur, cur.right
        if cur is not None and cur.col == node.col:
            raise ValueError(f"duplicate entry at ({node.row}, {node.col})")
        node.right = cur
        if prev is None:
            self._row_heads[node.row] = node
        else:
            prev.right = node

        prev = None
        cur = self._col_heads[node.col]
        while cur is not None and cur.row < node.row:
            prev, cur = cur, cur.down
        node.down = cur
        if prev is None:
            self._col_heads[node.col] = node
        else:
            prev.down = node

        self.total += 1

    def get(self, i: int, j: int) -> int:
        """Value at row ``i``, column ``j``; the default where no entry is stored."""
        self._check_position(i, j)
        node = self._row_heads[i]
        while node is not None and node.col <= j:
            if node.col == j:
                return node.value
            node = node.right
        return self.default

    def entries(self) -> Iterator[tuple[int, int, int]]:
        """Yield stored entries as ``(i, j, value)`` row by row, left to right."""
        for head in self._row_heads:
            node = head
            while node is not None:
                yield node.row, node.col, node.value
                node = node.right

    def column(self, j: int) -> list[tuple[int, int]]:
        """Stored entries of column ``j`` as ``(i, value)`` from top to bottom."""
        if not 0 <= j < self.cols:
            raise IndexError(f"column {j} out of range")
        found: list[tuple[int, int]] = []
        node = self._col_heads[j]
        while node is not None:
            found.append((node.row, node.value))
            node = node.down
        return found

    def render(self) -> str:
        """One ``"i, j: value"`` line per stored entry, in row-major order."""
        return "".join(f"{i}, {j}: {value}\n" for i, j, value in self.entries())


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def read_matrix(stream: TextIO, prompt: Optional[TextIO] = None) -> CrossListMatrix:
    """Read rows, columns, entry count and then ``i j value`` triples from ``stream``.

    When ``prompt`` is given, a prompt is written to it before each group is read.
    Raises ValueError on malformed or truncated input.
    """
    tokens = _tokens(stream)

    def ask(message: str) -> tuple[int, int, int]:
        if prompt is not None:
            prompt.write(message)
            prompt.flush()
        words = list(islice(tokens, 3))
        if len(words) < 3:
            raise ValueError("input ended early")
        try:
            first, second, third = (int(word) for word in words)
        except ValueError:
            raise ValueError(f"expected integers, got {' '.join(words)!r}") from None
        return first, second, third

    rows, cols, total = ask("rows, columns and number of entries: ")
    if total < 0:
        raise ValueError("number of entries must not be negative")
    entries = [ask("entry (i, j, value): ") for _ in range(total)]
    return CrossListMatrix(rows, cols, entries)


def main(argv: Optional[list[str]] = None) -> int:
    """Read a matrix interactively from standard input and list its entries."""
    parser = argparse.ArgumentParser(
        description="Read a sparse matrix and print its stored entries."
    )
    parser.parse_args(argv)
    try:
        matrix = read_matrix(sys.stdin, sys.stdout)
    except (ValueError, IndexError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write("\n")
    sys.stdout.write(matrix.render())
    return 0


if __name__ == "__main__":
    sys.exit(main())