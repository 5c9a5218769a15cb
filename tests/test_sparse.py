import random

import pytest

from algobox.sparse import Element, SparseMatrix


def _random_dense(rng, rows, cols):
    return [[rng.choice([0, 0, 0, rng.randint(-9, 9)]) for _ in range(cols)] for _ in range(rows)]


def test_from_dense_keeps_only_nonzero_in_row_major_order():
    matrix = SparseMatrix.from_dense([[0, 5], [7, 0], [0, 3]])
    assert matrix.shape == (3, 2)
    assert matrix.elements == [Element(0, 1, 5), Element(1, 0, 7), Element(2, 1, 3)]
    assert matrix.num == 3


@pytest.mark.parametrize("seed", range(5))
def test_dense_round_trip(seed):
    rng = random.Random(seed)
    dense = _random_dense(rng, rng.randint(1, 6), rng.randint(1, 6))
    assert SparseMatrix.from_dense(dense).to_dense() == dense


def test_constructor_sorts_elements():
    matrix = SparseMatrix(2, 2, [Element(1, 1, 4), Element(0, 0, 1)])
    assert [element.position for element in matrix.elements] == [(0, 0), (1, 1)]


def test_display_format():
    matrix = SparseMatrix.from_dense([[1, 0], [0, 2]])
    assert matrix.display() == "1 0 \n0 2 \n"


@pytest.mark.parametrize("seed", range(5))
def test_add_matches_elementwise_sum(seed):
    rng = random.Random(seed)
    rows, cols = rng.randint(1, 5), rng.randint(1, 5)
    first = _random_dense(rng, rows, cols)
    second = _random_dense(rng, rows, cols)
    total = SparseMatrix.from_dense(first).add(SparseMatrix.from_dense(second))
    expected = [[a + b for a, b in zip(r1, r2)] for r1, r2 in zip(first, second)]
    assert total.to_dense() == expected
    positions = [element.position for element in total.elements]
    assert positions == sorted(positions)


def test_add_keeps_entries_that_cancel():
    first = SparseMatrix.from_dense([[3, 0]])
    second = SparseMatrix.from_dense([[-3, 0]])
    total = first + second
    assert total.elements == [Element(0, 0, 0)]
    assert total.to_dense() == [[0, 0]]


def test_add_rejects_different_shapes():
    with pytest.raises(ValueError):
        SparseMatrix(2, 2).add(SparseMatrix(2, 3))


def test_element_out_of_bounds_rejected():
    with pytest.raises(ValueError):
        SparseMatrix(2, 2, [Element(2, 0, 1)])


def test_duplicate_position_rejected():
    with pytest.raises(ValueError):
        SparseMatrix(2, 2, [Element(0, 0, 1), Element(0, 0, 2)])


def test_ragged_rows_rejected():
    with pytest.raises(ValueError):
        SparseMatrix.from_dense([[1, 2], [3]])