"""Sorting a stack held as a Python list, top at the end."""

from __future__ import annotations

import bisect


def sorted_insert(stack: list[int], value: int) -> None:
    """Insert value into an ascending stack (largest on top), in place.

    The value goes beneath any equal values already on the stack.
    """
    bisect.insort_left(stack, value)


def sort_stack(stack: list[int]) -> None:
    """Sort the stack in place so that the largest value is on top."""
    items = stack[:]
    stack.clear()
    for value in items:
        sorted_insert(stack, value)