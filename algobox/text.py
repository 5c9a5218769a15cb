"""String problems: distinct-character substrings and the robot writer."""

from __future__ import annotations


def longest_unique_substring(text: str) -> int:
    """Length of the longest substring with no repeated character."""
    last_seen: dict[str, int] = {}
    start = 0
    best = 0
    for index, char in enumerate(text):
        previous = last_seen.get(char)
        if previous is not None and previous >= start:
            start = previous + 1
        last_seen[char] = index
        best = max(best, index - start + 1)
    return best


def robot_with_string(s: str) -> str:
    """Lexicographically smallest string a robot can write using one stack.

    Characters are taken from the front of s onto a stack; the top of the
    stack may be written out at any time.
    """
    suffix_min: list[str | None] = [None] * (len(s) + 1)
    for index in reversed(range(len(s))):
        later = suffix_min[index + 1]
        suffix_min[index] = s[index] if later is None else min(s[index], later)

    stack: list[str] = []
    written: list[str] = []
    for index, char in enumerate(s):
        stack.append(char)
        remaining_min = suffix_min[index + 1]
        if remaining_min is None:
            continue
        while stack and stack[-1] <= remaining_min:
            written.append(stack.pop())
    written.extend(reversed(stack))
    return "".join(written)