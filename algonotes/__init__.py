"""Classic algorithm exercises on arrays, strings, numbers, linked lists, trees,
substring search, merge sort, a sparse matrix and random sampling."""

__version__ = "0.1.0"

__all__ = [
    "structures",
    "arrays",
    "strings",
    "numbers",
    "linked_lists",
    "kmp",
    "trees",
    "merge_sort",
    "sparse_matrix",
    "sampling",
]