"""Top-k frequent values and greedy meeting selection."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Sequence


def top_k_frequent(values: Sequence[int], k: int) -> list[int]:
    """The k most frequent values, least frequent of them first.

    Ties in frequency are broken by value, the larger value ranking higher.
    """
    if k <= 0:
        return []
    ranked = heapq.nlargest(k, ((count, value) for value, count in Counter(values).items()))
    return [value for _, value in reversed(ranked)]


def maximum_meetings(start: Sequence[int], end: Sequence[int]) -> list[int]:
    """1-based ids of a largest set of meetings one room can hold.

    Meetings are taken greedily by earliest end, then lowest id; a meeting
    fits only if it starts strictly after the previous one ended.
    """
    if len(start) != len(end):
        raise ValueError("start and end must have the same length")
    meetings = sorted(
        ((finish, meet_id, begin) for meet_id, (begin, finish) in enumerate(zip(start, end), 1)),
    )
    chosen: list[int] = []
    current_end: int | None = None
    for finish, meet_id, begin in meetings:
        if current_end is None or begin > current_end:
            chosen.append(meet_id)
            current_end = finish
    return chosen