"""A binary search tree with traversals, counts and deletion."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass


@dataclass(eq=False)
class _Node:
    info: int
    left: _Node | None = None
    right: _Node | None = None


def _preorder(node: _Node | None) -> Iterator[_Node]:
    if node is not None:
        yield node
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _inorder(node: _Node | None) -> Iterator[_Node]:
    if node is not None:
        yield from _inorder(node.left)
        yield node
        yield from _inorder(node.right)


def _postorder(node: _Node | None) -> Iterator[_Node]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node


def _delete(node: _Node | None, key: int) -> _Node | None:
    if node is None:
        return None
    if key < node.info:
        node.left = _delete(node.left, key)
    elif key > node.info:
        node.right = _delete(node.right, key)
    elif node.left is None:
        return node.right
    elif node.right is None:
        return node.left
    else:
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.info = successor.info
        node.right = _delete(node.right, successor.info)
    return node


class BinarySearchTree:
    """Binary search tree of integers; equal values go to the right."""

    def __init__(self) -> None:
        self._root: _Node | None = None

    def __bool__(self) -> bool:
        return self._root is not None

    def __len__(self) -> int:
        return self.count_nodes()

    def insert(self, value: int) -> None:
        """Add value to the tree."""
        new = _Node(value)
        if self._root is None:
            self._root = new
            return
        node = self._root
        while True:
            if value < node.info:
                if node.left is None:
                    node.left = new
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = new
                    return
                node = node.right

    def delete(self, key: int) -> None:
        """Remove one node holding key; nothing happens if it is absent."""
        self._root = _delete(self._root, key)

    def inorder(self) -> list[int]:
        return [node.info for node in _inorder(self._root)]

    def preorder(self) -> list[int]:
        return [node.info for node in _preorder(self._root)]

    def postorder(self) -> list[int]:
        return [node.info for node in _postorder(self._root)]

    def count_nodes(self) -> int:
        return sum(1 for _ in _preorder(self._root))

    def count_parents(self) -> int:
        """Number of nodes that have both a left and a right child."""
        return sum(
            1 for node in _preorder(self._root) if node.left is not None and node.right is not None
        )

    def count_leaves(self) -> int:
        return sum(
            1 for node in _preorder(self._root) if node.left is None and node.right is None
        )


def _format(values: list[int]) -> str:
    return "".join(f"{value}    " for value in values)


def _read_int(prompt: str) -> int | None:
    """Read an integer; None on end of input. Non-numbers are asked again."""
    while True:
        try:
            line = input(prompt)
        except EOFError:
            return None
        try:
            return int(line.strip())
        except ValueError:
            continue


def main(argv: Sequence[str] | None = None) -> int:
    """Interactive menu driving a BinarySearchTree over standard input."""
    tree = BinarySearchTree()
    while True:
        choice = _read_int(
            "Enter 1 for insert 2 for display 3 for node count 4 for deletion and 5 for exit: "
        )
        if choice is None or choice == 5:
            return 0
        if choice == 1:
            data = _read_int("Enter data to insert in binary search tree: ")
            if data is None:
                return 0
            tree.insert(data)
        elif choice == 2:
            print(_format(tree.preorder()))
            print(_format(tree.inorder()))
            print(_format(tree.postorder()))
        elif choice == 3:
            print(f"Number of nodes are: {tree.count_nodes()}")
            print(f"Number of parent nodes are: {tree.count_parents()}")
            print(f"Number of leaf nodes are: {tree.count_leaves()}")
        elif choice == 4:
            if not tree:
                print("Nothing to delete")
            else:
                key = _read_int("Enter the value you want to delete:")
                if key is None:
                    return 0
                tree.delete(key)
        sys.stdout.flush()