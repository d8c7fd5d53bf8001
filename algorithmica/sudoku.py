"""Backtracking sudoku solver."""

from __future__ import annotations

from collections.abc import Iterable

EMPTY = "."
DIGITS = "123456789"
SIZE = 9

Board = list[list[str]]


def is_valid_placement(board: Board, row: int, col: int, digit: str) -> bool:
    """Tell whether digit appears nowhere in the row, column or box of a cell."""
    box_row = 3 * (row // 3)
    box_col = 3 * (col // 3)
    for i in range(SIZE):
        if board[i][col] == digit or board[row][i] == digit:
            return False
        if board[box_row + i // 3][box_col + i % 3] == digit:
            return False
    return True


def _read_board(board: Iterable[Iterable[str]]) -> Board:
    rows = [[str(cell) for cell in row] for row in board]
    if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
        raise ValueError("a sudoku board must have 9 rows of 9 cells")
    for r, row in enumerate(rows):
        for c, cell in enumerate(row):
            if cell == EMPTY:
                continue
            if cell not in DIGITS or len(cell) != 1:
                raise ValueError(f"invalid cell {cell!r} at ({r}, {c})")
            row[c] = EMPTY
            conflict = not is_valid_placement(rows, r, c, cell)
            row[c] = cell
            if conflict:
                raise ValueError(f"digit {cell} at ({r}, {c}) repeats a given")
    return rows


def _solve(board: Board) -> bool:
    for row in range(SIZE):
        for col in range(SIZE):
            if board[row][col] != EMPTY:
                continue
            for digit in DIGITS:
                if is_valid_placement(board, row, col, digit):
                    board[row][col] = digit
                    if _solve(board):
                        return True
                    board[row][col] = EMPTY
            return False
    return True


def solve_sudoku(board: Iterable[Iterable[str]]) -> Board:
    """Return a solved copy of the board; empty cells are '.'.

    Raises ValueError if the board is malformed, its givens clash, or it
    has no solution.
    """
    grid = _read_board(board)
    if not _solve(grid):
        raise ValueError("the sudoku has no solution")
    return grid