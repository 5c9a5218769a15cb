"""Grid patterns: spiral filling and the nested number square."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def spiral_fill(rows: int, cols: int, values: Iterable[int]) -> list[list[int]]:
    """A rows x cols grid filled clockwise from the top-left corner, inwards.

    values must hold exactly rows * cols items.
    """
    if rows < 0 or cols < 0:
        raise ValueError("dimensions must not be negative")
    items = list(values)
    if len(items) != rows * cols:
        raise ValueError(f"expected {rows * cols} values, got {len(items)}")
    grid = [[0] * cols for _ in range(rows)]
    feed = iter(items)
    top, left, bottom, right = 0, 0, rows, cols
    while top < bottom and left < right:
        for c in range(left, right):
            grid[top][c] = next(feed)
        top += 1
        for r in range(top, bottom):
            grid[r][right - 1] = next(feed)
        right -= 1
        if top < bottom:
            for c in range(right - 1, left - 1, -1):
                grid[bottom - 1][c] = next(feed)
            bottom -= 1
        if left < right:
            for r in range(bottom - 1, top - 1, -1):
                grid[r][left] = next(feed)
            left += 1
    return grid


def sorted_spiral(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """The matrix's values, sorted ascending and laid out as a clockwise spiral."""
    if not matrix:
        return []
    width = len(matrix[0])
    if any(len(row) != width for row in matrix):
        raise ValueError("all rows must have the same length")
    values = sorted(value for row in matrix for value in row)
    return spiral_fill(len(matrix), width, values)


def square_pattern(n: int) -> str:
    """Concentric square of numbers: n on the border down to 1 at the centre.

    Each number is followed by a space and each line by a newline; n below 1
    gives an empty string.
    """
    rows: list[list[int]] = []
    for i in range(n, 0, -1):
        rows.append(list(range(n, i, -1)) + [i] * (2 * i - 1) + list(range(i + 1, n + 1)))
    for a in range(1, n):
        rows.append(list(range(n, a + 1, -1)) + [a + 1] * (2 * a + 1) + list(range(a + 2, n + 1)))
    return "".join("".join(f"{value} " for value in row) + "\n" for row in rows)