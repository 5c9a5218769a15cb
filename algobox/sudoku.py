"""Backtracking Sudoku solver on a 9x9 board of characters, '.' for empty."""

from __future__ import annotations

EMPTY = "."
DIGITS = "123456789"


def can_place(board: list[list[str]], row: int, col: int, digit: str) -> bool:
    """True if digit appears in neither the row, the column nor the 3x3 box."""
    digit = str(digit)
    if digit in board[row]:
        return False
    if any(line[col] == digit for line in board):
        return False
    top = row - row % 3
    left = col - col % 3
    return all(
        board[r][c] != digit for r in range(top, top + 3) for c in range(left, left + 3)
    )


def _first_empty(board: list[list[str]]) -> tuple[int, int] | None:
    for r, line in enumerate(board):
        for c, cell in enumerate(line):
            if cell == EMPTY:
                return r, c
    return None


def _solve(board: list[list[str]]) -> bool:
    cell = _first_empty(board)
    if cell is None:
        return True
    row, col = cell
    for digit in DIGITS:
        if can_place(board, row, col, digit):
            board[row][col] = digit
            if _solve(board):
                return True
            board[row][col] = EMPTY
    return False


def solve_sudoku(board: list[list[str]]) -> bool:
    """Fill the empty cells in place; return whether a solution was found.

    Raises ValueError if the board is not 9x9.
    """
    if len(board) != 9 or any(len(line) != 9 for line in board):
        raise ValueError("the board must be 9x9")
    return _solve(board)