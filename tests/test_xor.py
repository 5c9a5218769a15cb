import random

import pytest

from algobox.xor import BitTrie, max_xor, max_xor_queries


def test_max_xor_example():
    assert max_xor([6, 8], [7, 8, 2]) == 15


@pytest.mark.parametrize("seed", range(5))
def test_max_xor_matches_all_pairs(seed):
    rng = random.Random(seed)
    arr1 = [rng.randint(0, 10_000) for _ in range(rng.randint(1, 15))]
    arr2 = [rng.randint(0, 10_000) for _ in range(rng.randint(1, 15))]
    assert max_xor(arr1, arr2) == max(a ^ b for a in arr1 for b in arr2)


def test_max_xor_empty_second_array():
    assert max_xor([1, 2, 3], []) == 0


def test_find_max_on_single_value_is_xor():
    trie = BitTrie()
    trie.insert(12345)
    assert trie.find_max(678) == 12345 ^ 678
    assert len(trie) == 1


def test_find_max_handles_high_bit():
    trie = BitTrie()
    trie.insert(0)
    trie.insert(2**31)
    assert trie.find_max(0) == 2**31


def test_find_max_on_empty_trie_raises():
    with pytest.raises(ValueError):
        BitTrie().find_max(5)


@pytest.mark.parametrize("value", [-1, 2**32])
def test_insert_rejects_out_of_range(value):
    with pytest.raises(ValueError):
        BitTrie().insert(value)


@pytest.mark.parametrize(
    ("arr", "queries", "expected"),
    [
        ([0, 1, 2, 3, 4], [[3, 1], [1, 3], [5, 6]], [3, 3, 7]),
        ([5, 2, 4, 6, 6, 3], [[12, 4], [8, 1], [6, 3]], [15, -1, 5]),
    ],
)
def test_max_xor_queries_examples(arr, queries, expected):
    assert max_xor_queries(arr, queries) == expected


@pytest.mark.parametrize("seed", range(5))
def test_max_xor_queries_matches_scan(seed):
    rng = random.Random(seed)
    arr = [rng.randint(0, 500) for _ in range(rng.randint(1, 20))]
    queries = [[rng.randint(0, 500), rng.randint(0, 500)] for _ in range(10)]
    expected = [max((a ^ x for a in arr if a <= limit), default=-1) for x, limit in queries]
    assert max_xor_queries(arr, queries) == expected


def test_max_xor_queries_does_not_modify_input():
    arr = [5, 1, 3]
    max_xor_queries(arr, [[1, 10]])
    assert arr == [5, 1, 3]


def test_max_xor_queries_empty_array():
    assert max_xor_queries([], [[1, 2], [3, 4]]) == [-1, -1]