"""Problems solved with a window sliding over a sequence."""

from __future__ import annotations

import math

_VOWELS = frozenset("aeiou")


def longest_ones(nums: list[int], k: int) -> int:
    """Return the longest run of 1s obtainable by flipping at most ``k`` zeros."""
    zeros = 0
    left = 0
    best = 0
    for right, num in enumerate(nums):
        if num == 0:
            zeros += 1
        while zeros > k:
            if nums[left] == 0:
                zeros -= 1
            left += 1
        best = max(best, right - left + 1)
    return best


def _check_window(length: int, k: int) -> None:
    if k <= 0 or k > length:
        raise ValueError(f"window size {k} does not fit a sequence of length {length}")


def max_vowels(s: str, k: int) -> int:
    """Return the most lowercase vowels found in any substring of length ``k``.

    Raises ValueError when ``k`` is not between 1 and ``len(s)``.
    """
    _check_window(len(s), k)
    count = sum(1 for ch in s[:k] if ch in _VOWELS)
    best = count
    for outgoing, incoming in zip(s, s[k:]):
        count += (incoming in _VOWELS) - (outgoing in _VOWELS)
        best = max(best, count)
    return best


def _round_half_away(value: float, digits: int) -> float:
    scale = 10.0**digits
    return math.copysign(math.floor(abs(value) * scale + 0.5), value) / scale


def find_max_average(nums: list[int], k: int) -> float:
    """Return the largest average of ``k`` consecutive values, to 5 decimals.

    Raises ValueError when ``k`` is not between 1 and ``len(nums)``.
    """
    _check_window(len(nums), k)
    total = sum(nums[:k])
    best = total / k
    for outgoing, incoming in zip(nums, nums[k:]):
        total += incoming - outgoing
        best = max(best, total / k)
    return _round_half_away(best, 5)