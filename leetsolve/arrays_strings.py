"""Array and string problems: merging, reversing, compressing and scanning."""

from __future__ import annotations

from itertools import accumulate, groupby, zip_longest
from math import gcd, inf
from operator import mul

_VOWELS = frozenset("aeiouAEIOU")


def gcd_of_strings(str1: str, str2: str) -> str:
    """Return the longest string that divides both inputs, or "" if none does."""
    length = gcd(len(str1), len(str2))
    if length == 0:
        return ""
    candidate = str1[:length]
    if (
        candidate * (len(str1) // length) == str1
        and candidate * (len(str2) // length) == str2
    ):
        return candidate
    return ""


def kids_with_candies(candies: list[int], extra_candies: int) -> list[bool]:
    """Tell for each kid whether the extra candies would give them the most.

    Raises ValueError when ``candies`` is empty.
    """
    most = max(candies)
    return [count + extra_candies >= most for count in candies]


def reverse_words(s: str) -> str:
    """Reverse the order of whitespace-separated words, single-space joined."""
    return " ".join(reversed(s.split()))


def merge_alternately(word1: str, word2: str) -> str:
    """Interleave the characters of two words, appending the longer tail."""
    return "".join(
        a + b for a, b in zip_longest(word1, word2, fillvalue="")
    )


def product_except_self(nums: list[int]) -> list[int]:
    """Return, for each position, the product of every other element."""
    prefix = [1, *accumulate(nums[:-1], mul)] if nums else []
    suffix = [1, *accumulate(reversed(nums[1:]), mul)][::-1] if nums else []
    return [left * right for left, right in zip(prefix, suffix)]


def increasing_triplet(nums: list[int]) -> bool:
    """Tell whether there are i < j < k with nums[i] < nums[j] < nums[k]."""
    first = second = inf
    for num in nums:
        if num <= first:
            first = num
        elif num <= second:
            second = num
        else:
            return True
    return False


def reverse_vowels(s: str) -> str:
    """Reverse only the vowels of a string, keeping other characters in place."""
    chars = list(s)
    i, j = 0, len(chars) - 1
    while i < j:
        while i < j and chars[i] not in _VOWELS:
            i += 1
        while i < j and chars[j] not in _VOWELS:
            j -= 1
        chars[i], chars[j] = chars[j], chars[i]
        i += 1
        j -= 1
    return "".join(chars)


def compress(chars: list[str]) -> int:
    """Compress runs of characters in place and return the new length.

    Each run becomes its character followed by its length when longer than
    one; the compressed form is written to the front of ``chars``.
    """
    compressed: list[str] = []
    for char, run in groupby(chars):
        count = sum(1 for _ in run)
        compressed.append(char)
        if count != 1:
            compressed.extend(str(count))
    chars[: len(compressed)] = compressed
    return len(compressed)


def can_place_flowers(flowerbed: list[int], n: int) -> bool:
    """Tell whether ``n`` flowers fit without any two being adjacent.

    The given flowerbed is left unchanged.
    """
    bed = list(flowerbed)
    planted = 0
    last = len(bed) - 1
    for i, plot in enumerate(bed):
        if plot != 0:
            continue
        left_free = i == 0 or bed[i - 1] == 0
        right_free = i == last or bed[i + 1] == 0
        if left_free and right_free:
            bed[i] = 1
            planted += 1
    return planted >= n