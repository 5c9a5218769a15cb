"""Binary trees of digits: summing the numbers read along root-to-leaf paths."""

from __future__ import annotations

from dataclasses import dataclass

MOD = 1_000_000_007


@dataclass(eq=False)
class TreeNode:
    """A binary tree node."""

    data: int
    left: TreeNode | None = None
    right: TreeNode | None = None


def root_to_leaf_sum(root: TreeNode | None) -> int:
    """Sum, modulo 1000000007, of the numbers spelled by each root-to-leaf path.

    Each step down a path multiplies the number so far by 10 and adds the
    node's value. An empty tree gives 0.
    """
    total = 0
    stack: list[tuple[TreeNode, int]] = [(root, 0)] if root is not None else []
    while stack:
        node, prefix = stack.pop()
        number = (prefix * 10 + node.data) % MOD
        if node.left is None and node.right is None:
            total = (total + number) % MOD
            continue
        for child in (node.right, node.left):
            if child is not None:
                stack.append((child, number))
    return total