"""Problems solved with two indices moving through a sequence."""

from __future__ import annotations

from collections import Counter


def max_area(height: list[int]) -> int:
    """Return the most water a container formed by two lines can hold."""
    best = 0
    low, high = 0, len(height) - 1
    while low < high:
        best = max(best, (high - low) * min(height[low], height[high]))
        if height[low] < height[high]:
            low += 1
        elif height[low] > height[high]:
            high -= 1
        else:
            low += 1
            high -= 1
    return best


def max_operations(nums: list[int], k: int) -> int:
    """Return how many disjoint pairs summing to ``k`` can be removed."""
    waiting: Counter[int] = Counter()
    pairs = 0
    for num in nums:
        need = k - num
        if waiting[need] > 0:
            waiting[need] -= 1
            pairs += 1
        else:
            waiting[num] += 1
    return pairs


def move_zeroes(nums: list[int]) -> None:
    """Move every zero to the end in place, keeping other values in order."""
    insert = 0
    for scan, num in enumerate(nums):
        if num != 0:
            nums[insert], nums[scan] = nums[scan], nums[insert]
            insert += 1


def is_subsequence(s: str, t: str) -> bool:
    """Tell whether ``s`` can be obtained by deleting characters from ``t``."""
    remaining = iter(t)
    return all(ch in remaining for ch in s)