"""Problems solved with running (prefix) sums."""

from __future__ import annotations

from itertools import accumulate


def largest_altitude(gain: list[int]) -> int:
    """Return the highest altitude reached on a trip starting at altitude 0."""
    return max(0, *accumulate(gain)) if gain else 0


def pivot_index(nums: list[int]) -> int:
    """Return the leftmost index whose left and right sums are equal, or -1."""
    total = sum(nums)
    left = 0
    for index, num in enumerate(nums):
        if total - left - num == left:
            return index
        left += num
    return -1