"""Classic array problems: subarray sums, triplets, mountains, lookups."""

from __future__ import annotations

import bisect
import math
from collections.abc import Sequence


def largest_subarray_sum(values: Sequence[int]) -> int:
    """Largest sum of a contiguous run, counting the empty run as 0."""
    current = 0
    best = 0
    for value in values:
        current = max(current + value, 0)
        best = max(best, current)
    return best


def max_subarray_sum(values: Sequence[int]) -> int:
    """Largest contiguous sum, never below 0 (an empty run is allowed)."""
    best = 0
    running = 0
    for value in values:
        running += value
        best = max(best, running)
        if running < 0:
            running = 0
    return best


def max_sum(values: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous run.

    Raises ValueError for an empty sequence.
    """
    iterator = iter(values)
    try:
        ending_here = best = next(iterator)
    except StopIteration:
        raise ValueError("max_sum() needs at least one value") from None
    for value in iterator:
        ending_here = max(ending_here + value, value)
        best = max(best, ending_here)
    return best


def increasing_triplet(nums: Sequence[int]) -> bool:
    """True if some i < j < k has nums[i] < nums[j] < nums[k]."""
    if len(nums) < 3:
        return False
    first = second = math.inf
    for value in nums:
        if value <= first:
            first = value
        elif value <= second:
            second = value
        else:
            return True
    return False


def longest_mountain(values: Sequence[int]) -> int:
    """Length of the longest strictly rising then strictly falling run, or 0."""
    n = len(values)
    if n < 3:
        return 0

    rising = [1] * n
    for i, (prev, cur) in enumerate(zip(values, values[1:]), start=1):
        if cur > prev:
            rising[i] += rising[i - 1]

    falling = [1] * n
    for i in reversed(range(n - 1)):
        if values[i] > values[i + 1]:
            falling[i] += falling[i + 1]

    return max(
        (up + down - 1 for up, down in zip(rising[1:-1], falling[1:-1]) if up > 1 and down > 1),
        default=0,
    )


def help_classmates(marks: Sequence[int]) -> list[int]:
    """For each mark, the first strictly smaller mark to its right, else -1."""
    result: list[int] = []
    stack: list[int] = []
    for mark in reversed(marks):
        while stack and stack[-1] >= mark:
            stack.pop()
        result.append(stack[-1] if stack else -1)
        stack.append(mark)
    result.reverse()
    return result


def _find_pivot(values: Sequence[int]) -> int:
    """Index of the last element before the rotation point, or -1."""
    start, end = 0, len(values) - 1
    while start <= end:
        mid = (start + end) // 2
        if mid + 1 < len(values) and values[mid] > values[mid + 1]:
            return mid
        if values[mid] >= values[start]:
            start = mid + 1
        else:
            end = mid - 1
    return -1


def search_rotated(values: Sequence[int], key: int) -> int:
    """Index of key in a rotated sorted sequence of distinct values, or -1."""
    if not values:
        return -1
    pivot = _find_pivot(values)
    if pivot == -1:
        lo, hi = 0, len(values)
    elif values[0] > key:
        lo, hi = pivot + 1, len(values)
    else:
        lo, hi = 0, pivot + 1
    index = bisect.bisect_left(values, key, lo, hi)
    if index < hi and values[index] == key:
        return index
    return -1