import random

import pytest

from algobox.segment_tree import MaxSegmentTree, length_of_lis


def test_new_tree_queries_zero():
    tree = MaxSegmentTree(10)
    assert tree.query(1, 10) == 0


@pytest.mark.parametrize("seed", range(4))
def test_query_matches_slice_maximum(seed):
    rng = random.Random(seed)
    size = rng.randint(1, 40)
    tree = MaxSegmentTree(size)
    values = [0] * size
    for _ in range(60):
        index = rng.randint(1, size)
        value = rng.randint(0, 100)
        tree.update(index, value)
        values[index - 1] = value
        left = rng.randint(1, size)
        right = rng.randint(left, size)
        assert tree.query(left, right) == max(values[left - 1 : right])


def test_query_clips_to_range():
    tree = MaxSegmentTree(5)
    tree.update(1, 7)
    tree.update(5, 3)
    assert tree.query(-10, 1) == 7
    assert tree.query(5, 100) == 3


def test_empty_range_is_zero():
    tree = MaxSegmentTree(5)
    tree.update(3, 9)
    assert tree.query(4, 2) == 0
    assert tree.query(6, 10) == 0


def test_update_outside_range_is_ignored():
    tree = MaxSegmentTree(3)
    tree.update(0, 50)
    tree.update(4, 50)
    assert tree.query(1, 3) == 0


def test_update_overwrites():
    tree = MaxSegmentTree(4)
    tree.update(2, 10)
    tree.update(2, 1)
    assert tree.query(1, 4) == 1


def test_size_must_be_positive():
    with pytest.raises(ValueError):
        MaxSegmentTree(0)


@pytest.mark.parametrize(
    ("nums", "k", "expected"),
    [
        ([4, 2, 1, 4, 3, 4, 5, 8, 15], 3, 5),
        ([7, 4, 5, 1, 8, 12, 4, 7], 5, 4),
        ([1, 5], 1, 1),
    ],
)
def test_length_of_lis_examples(nums, k, expected):
    assert length_of_lis(nums, k) == expected


def test_length_of_lis_consecutive_run():
    assert length_of_lis(list(range(1, 21)), 1) == 20


def test_length_of_lis_strictly_decreasing():
    assert length_of_lis(list(range(30, 0, -1)), 100) == 1


def test_length_of_lis_empty():
    assert length_of_lis([], 3) == 0