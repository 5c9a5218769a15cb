"""Maximum XOR problems solved with a binary trie."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

BIT_WIDTH = 32


class _TrieNode:
    __slots__ = ("children",)

    def __init__(self) -> None:
        self.children: list[_TrieNode | None] = [None, None]


class BitTrie:
    """Trie of 32-bit non-negative integers, most significant bit first."""

    def __init__(self) -> None:
        self._root = _TrieNode()
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def insert(self, num: int) -> None:
        """Add num to the trie."""
        if not 0 <= num < 1 << BIT_WIDTH:
            raise ValueError(f"{num} is not a non-negative {BIT_WIDTH}-bit integer")
        node = self._root
        for shift in reversed(range(BIT_WIDTH)):
            bit = (num >> shift) & 1
            child = node.children[bit]
            if child is None:
                child = node.children[bit] = _TrieNode()
            node = child
        self._count += 1

    def find_max(self, num: int) -> int:
        """Largest value of num XOR x over the numbers x held in the trie."""
        if not self._count:
            raise ValueError("the trie is empty")
        node = self._root
        best = 0
        for shift in reversed(range(BIT_WIDTH)):
            bit = (num >> shift) & 1
            opposite = node.children[1 - bit]
            if opposite is not None:
                best |= 1 << shift
                node = opposite
            else:
                same = node.children[bit]
                assert same is not None
                node = same
        return best


def max_xor(arr1: Iterable[int], arr2: Iterable[int]) -> int:
    """Largest a XOR b with a from arr1 and b from arr2; 0 if arr2 is empty."""
    trie = BitTrie()
    for value in arr1:
        trie.insert(value)
    return max((trie.find_max(value) for value in arr2), default=0)


def max_xor_queries(arr: Iterable[int], queries: Sequence[Sequence[int]]) -> list[int]:
    """Answer each query (x, limit) with the largest x XOR a over a in arr with a <= limit.

    A query with no such a gets -1. The input is not modified.
    """
    pending = sorted(arr)
    order = sorted(range(len(queries)), key=lambda index: queries[index][1])
    results = [-1] * len(queries)
    trie = BitTrie()
    position = 0
    for index in order:
        x, limit = queries[index]
        while position < len(pending) and pending[position] <= limit:
            trie.insert(pending[position])
            position += 1
        if len(trie):
            results[index] = trie.find_max(x)
    return results