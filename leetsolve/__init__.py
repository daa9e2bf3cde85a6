"""Solutions to classic interview problems, grouped by technique."""

__version__ = "0.1.0"
__all__ = [
    "arrays_strings",
    "hashmap_set",
    "prefix_sum",
    "sliding_window",
    "stacks",
    "two_pointers",
]