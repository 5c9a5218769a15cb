"""Sparse matrices stored as sorted (row, column, value) triples."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Element:
    """One stored entry: row i, column j, value x."""

    i: int
    j: int
    x: int

    @property
    def position(self) -> tuple[int, int]:
        return (self.i, self.j)


@dataclass
class SparseMatrix:
    """An m-by-n matrix that stores only its listed entries, in row-major order."""

    m: int
    n: int
    elements: list[Element] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.m < 0 or self.n < 0:
            raise ValueError("dimensions must not be negative")
        for element in self.elements:
            if not (0 <= element.i < self.m and 0 <= element.j < self.n):
                raise ValueError(f"element at {element.position} lies outside {self.m}x{self.n}")
        self.elements = sorted(self.elements, key=lambda element: element.position)
        positions = [element.position for element in self.elements]
        if len(set(positions)) != len(positions):
            raise ValueError("two elements share a position")

    @property
    def num(self) -> int:
        """Number of stored entries."""
        return len(self.elements)

    @property
    def shape(self) -> tuple[int, int]:
        return (self.m, self.n)

    @classmethod
    def from_dense(cls, rows: Sequence[Sequence[int]]) -> SparseMatrix:
        """Build from a list of rows, keeping only the non-zero values."""
        width = len(rows[0]) if rows else 0
        if any(len(row) != width for row in rows):
            raise ValueError("all rows must have the same length")
        elements = [
            Element(i, j, value)
            for i, row in enumerate(rows)
            for j, value in enumerate(row)
            if value != 0
        ]
        return cls(len(rows), width, elements)

    def add(self, other: SparseMatrix) -> SparseMatrix:
        """Sum of two matrices of the same shape, merging their entries."""
        if self.shape != other.shape:
            raise ValueError(f"cannot add {self.m}x{self.n} and {other.m}x{other.n} matrices")
        merged: list[Element] = []
        left, right = self.elements, other.elements
        a = b = 0
        while a < len(left) and b < len(right):
            first, second = left[a], right[b]
            if first.position < second.position:
                merged.append(first)
                a += 1
            elif first.position > second.position:
                merged.append(second)
                b += 1
            else:
                merged.append(Element(first.i, first.j, first.x + second.x))
                a += 1
                b += 1
        merged.extend(left[a:])
        merged.extend(right[b:])
        return SparseMatrix(self.m, self.n, merged)

    def __add__(self, other: SparseMatrix) -> SparseMatrix:
        return self.add(other)

    def to_dense(self) -> list[list[int]]:
        """The full matrix as a list of rows."""
        dense = [[0] * self.n for _ in range(self.m)]
        for element in self.elements:
            dense[element.i][element.j] = element.x
        return dense

    def display(self) -> str:
        """Text of the full matrix: each value followed by a space, one row per line."""
        return "".join(
            "".join(f"{value} " for value in row) + "\n" for row in self.to_dense()
        )