"""Dense matrix helpers: transpose, sparse triples and display."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def _rows(matrix: Iterable[Iterable[Any]]) -> list[list[Any]]:
    rows = [list(row) for row in matrix]
    if rows and any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("all rows must have the same length")
    return rows


def transpose(matrix: Iterable[Iterable[Any]]) -> list[list[Any]]:
    """Swap rows and columns."""
    return [list(column) for column in zip(*_rows(matrix))]


def to_sparse(matrix: Iterable[Iterable[Any]]) -> list[tuple[Any, Any, Any]]:
    """Triple form of a matrix.

    The first triple is (rows, columns, number of non-zero items); one
    (row, column, value) triple follows for each non-zero item, row by row.
    """
    rows = _rows(matrix)
    columns = len(rows[0]) if rows else 0
    entries = [
        (i, j, value)
        for i, row in enumerate(rows)
        for j, value in enumerate(row)
        if value != 0
    ]
    return [(len(rows), columns, len(entries)), *entries]


def format_matrix(matrix: Iterable[Iterable[Any]]) -> str:
    """Render each row with a space before every item, rows a blank line apart."""
    return "\n\n".join(" " + " ".join(map(str, row)) for row in _rows(matrix))