"""Singly linked lists: building, merging sorted lists, even/odd split."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class Node:
    """A singly linked list node."""

    data: int
    next: Node | None = None

    def __iter__(self) -> Iterator[int]:
        node: Node | None = self
        while node is not None:
            yield node.data
            node = node.next


def from_iterable(values: Iterable[int]) -> Node | None:
    """Build a linked list holding values in order; None when empty."""
    head: Node | None = None
    tail: Node | None = None
    for value in values:
        node = Node(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def to_list(head: Node | None) -> list[int]:
    """The values of a linked list, front to back."""
    return list(head) if head is not None else []


def sorted_merge(a: Node | None, b: Node | None) -> Node | None:
    """Splice two ascending lists into one ascending list.

    On equal values the node from ``a`` comes first. The nodes are reused.
    """
    dummy = Node(0)
    tail = dummy
    while a is not None and b is not None:
        if a.data <= b.data:
            tail.next, a = a, a.next
        else:
            tail.next, b = b, b.next
        tail = tail.next
    tail.next = a if a is not None else b
    return dummy.next


def segregate_even_odd(head: Node | None) -> Node | None:
    """Relink so that even values come before odd ones, keeping relative order."""
    even_dummy = Node(0)
    odd_dummy = Node(0)
    even_tail = even_dummy
    odd_tail = odd_dummy
    node = head
    while node is not None:
        if node.data % 2 == 0:
            even_tail.next = node
            even_tail = node
        else:
            odd_tail.next = node
            odd_tail = node
        node = node.next
    odd_tail.next = None
    even_tail.next = odd_dummy.next
    return even_dummy.next