"""Classic algorithms and data structures, with two small command-line tools."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "bst",
    "frequency",
    "graphs",
    "linked_list",
    "numbers",
    "patterns",
    "segment_tree",
    "sparse",
    "stacks",
    "sudoku",
    "text",
    "trees",
    "xor",
]