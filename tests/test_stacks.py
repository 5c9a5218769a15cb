import pytest

from algobox.stacks import sort_stack, sorted_insert


@pytest.mark.parametrize(
    "values",
    [[], [1], [3, 1, 2], [5, -2, 9, -7, 3], [4, 4, 1, 4], list(range(10, 0, -1))],
)
def test_sort_stack_sorts_in_place(values):
    stack = list(values)
    assert sort_stack(stack) is None
    assert stack == sorted(values)


def test_largest_on_top():
    stack = [7, 30, -1, 12]
    sort_stack(stack)
    assert stack[-1] == max(stack)
    assert stack[0] == min(stack)


@pytest.mark.parametrize("value", [-10, 0, 3, 4, 100])
def test_sorted_insert_keeps_order(value):
    stack = [1, 3, 3, 8]
    sorted_insert(stack, value)
    assert stack == sorted([1, 3, 3, 8, value])


def test_sorted_insert_into_empty():
    stack = []
    sorted_insert(stack, 42)
    assert stack == [42]