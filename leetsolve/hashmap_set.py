"""Problems solved by counting with hash maps and sets."""

from __future__ import annotations

from collections import Counter


def unique_occurrences(arr: list[int]) -> bool:
    """Tell whether every distinct value occurs a distinct number of times."""
    counts = Counter(arr).values()
    return len(counts) == len(set(counts))


def close_strings(word1: str, word2: str) -> bool:
    """Tell whether one word can become the other by swaps and letter exchanges."""
    if len(word1) != len(word2):
        return False
    count1 = Counter(word1)
    count2 = Counter(word2)
    if count1.keys() != count2.keys():
        return False
    return sorted(count1.values()) == sorted(count2.values())


def find_difference(nums1: list[int], nums2: list[int]) -> list[list[int]]:
    """Return the distinct values only in ``nums1`` and only in ``nums2``.

    Each list keeps the order in which values first appear.
    """
    set1 = set(nums1)
    set2 = set(nums2)
    return [
        [num for num in dict.fromkeys(nums1) if num not in set2],
        [num for num in dict.fromkeys(nums2) if num not in set1],
    ]


def equal_pairs(grid: list[list[int]]) -> int:
    """Count (row, column) pairs of a square grid that hold equal sequences."""
    rows = Counter(tuple(row) for row in grid)
    return sum(rows[column] for column in zip(*grid))