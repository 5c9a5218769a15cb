"""A max segment tree and its use for the longest increasing subsequence with bounded steps."""

from __future__ import annotations

from collections.abc import Iterable

_VALUE_LIMIT = 100_001


class MaxSegmentTree:
    """Range-maximum tree over positions 1..size, every position starting at 0."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("size must be at least 1")
        self.size = size
        self._tree = [0] * (2 * size)

    def update(self, index: int, value: int) -> None:
        """Set position index to value; positions outside 1..size are ignored."""
        if not 1 <= index <= self.size:
            return
        pos = index - 1 + self.size
        self._tree[pos] = value
        pos //= 2
        while pos >= 1:
            self._tree[pos] = max(self._tree[2 * pos], self._tree[2 * pos + 1])
            pos //= 2

    def query(self, left: int, right: int) -> int:
        """Maximum over positions left..right, clipped to the tree; 0 if nothing is left."""
        left = max(left, 1)
        right = min(right, self.size)
        if left > right:
            return 0
        lo = left - 1 + self.size
        hi = right + self.size
        best: int | None = None
        while lo < hi:
            if lo & 1:
                best = self._tree[lo] if best is None else max(best, self._tree[lo])
                lo += 1
            if hi & 1:
                hi -= 1
                best = self._tree[hi] if best is None else max(best, self._tree[hi])
            lo //= 2
            hi //= 2
        return 0 if best is None else best


def length_of_lis(nums: Iterable[int], k: int) -> int:
    """Longest strictly increasing subsequence whose neighbours differ by at most k.

    Values are expected to lie in 1..100001.
    """
    dp = MaxSegmentTree(_VALUE_LIMIT)
    for value in nums:
        extended = dp.query(value - k, value - 1) + 1
        if dp.query(value, value) < extended:
            dp.update(value, extended)
    return dp.query(1, _VALUE_LIMIT)