# algobox

A small library of classic algorithms and data structures: array scans,
number puzzles, string problems, linked lists, a binary search tree,
a segment tree and a bit trie, graph traversals, a sudoku solver, sparse
matrices and grid patterns.

It has no runtime dependencies beyond Python 3.10 or later.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library overview

| Module | What it offers |
| --- | --- |
| `algobox.arrays` | `largest_subarray_sum`, `max_subarray_sum`, `max_sum`, `increasing_triplet`, `longest_mountain`, `help_classmates`, `search_rotated` |
| `algobox.numbers` | `is_happy`, `is_prime`, `prime_sieve` |
| `algobox.text` | `longest_unique_substring`, `robot_with_string` |
| `algobox.linked_list` | `Node`, `from_iterable`, `to_list`, `sorted_merge`, `segregate_even_odd` |
| `algobox.bst` | `BinarySearchTree` with insertion, deletion, traversals and node counts |
| `algobox.stacks` | `sorted_insert`, `sort_stack` |
| `algobox.frequency` | `top_k_frequent`, `maximum_meetings` |
| `algobox.sparse` | `Element`, `SparseMatrix` with addition, dense conversion and display |
| `algobox.segment_tree` | `MaxSegmentTree`, `length_of_lis` |
| `algobox.xor` | `BitTrie`, `max_xor`, `max_xor_queries` |
| `algobox.trees` | `TreeNode`, `root_to_leaf_sum` |
| `algobox.graphs` | `dfs_finish_order`, `kosaraju_order`, `shortest_path` |
| `algobox.sudoku` | `can_place`, `solve_sudoku` |
| `algobox.patterns` | `spiral_fill`, `sorted_spiral`, `square_pattern` |

Functions that cannot give an answer raise `ValueError`: for example
`max_sum` on an empty sequence, `shortest_path` when the target cannot be
reached, `SparseMatrix.add` on matrices of different shapes, and
`solve_sudoku` on a board that is not 9x9.

## Examples

```python
from algobox.arrays import largest_subarray_sum, help_classmates
from algobox.numbers import is_happy
from algobox.text import longest_unique_substring
from algobox.linked_list import from_iterable, sorted_merge, to_list
from algobox.xor import max_xor

largest_subarray_sum([-10, 20, -30, 40, 50, 60, -70, 80, -90])  # 160
help_classmates([3, 8, 5, 2, 25])                              # [2, 5, 2, -1, -1]
is_happy(19)                                                    # True
longest_unique_substring("geeksforgeeks")                       # 7
max_xor([6, 8], [7, 8, 2])                                      # 15

merged = sorted_merge(from_iterable([5, 10, 15]), from_iterable([2, 3, 20]))
to_list(merged)                                                 # [2, 3, 5, 10, 15, 20]
```

A binary search tree:

```python
from algobox.bst import BinarySearchTree

tree = BinarySearchTree()
for value in (50, 30, 70, 20, 40):
    tree.insert(value)
tree.delete(30)
tree.inorder()         # [20, 40, 50, 70]
tree.count_leaves()    # 2
```

## Command-line tools

Two commands are installed with the package.

`algobox-bst` opens an interactive menu for a binary search tree: insert
values, print the preorder, inorder and postorder traversals, count nodes,
parent nodes and leaves, delete values, and exit.

`algobox-scc` reads a directed graph from standard input — the number of
vertices and the number of edges, followed by one `u v` pair per edge —
and prints the DFS finishing order followed by the vertex order produced by
the strongly-connected-components pass:

```
printf '5 5\n1 0\n0 2\n2 1\n0 3\n3 4\n' | algobox-scc
```

## What it does not do

The package is a library plus the two commands above. It has no game or
quiz, no other interactive programs, and it keeps nothing on disk.