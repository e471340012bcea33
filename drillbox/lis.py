"""Longest strictly increasing subsequence: lengths and one witness."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence


def dp_longest_increasing_subsequence(nums: Sequence[int]) -> int:
    """Length of the longest strictly increasing subsequence, in O(n^2)."""
    lengths: list[int] = []
    for i, value in enumerate(nums):
        best = max(
            (lengths[j] for j in range(i) if nums[j] < value),
            default=0,
        )
        lengths.append(best + 1)
    return max(lengths, default=0)


def optimized_lis(nums: Sequence[int]) -> int:
    """Length of the longest strictly increasing subsequence, in O(n log n)."""
    tails: list[int] = []
    for value in nums:
        position = bisect_left(tails, value)
        if position == len(tails):
            tails.append(value)
        else:
            tails[position] = value
    return len(tails)


def lis_elements(nums: Sequence[int]) -> list[int]:
    """Return one longest strictly increasing subsequence.

    Ties are settled in favour of the earliest predecessor and the earliest end.
    """
    if not nums:
        return []
    lengths = [1] * len(nums)
    parents: list[int | None] = [None] * len(nums)
    for i, value in enumerate(nums):
        for j in range(i):
            if nums[j] < value and lengths[j] + 1 > lengths[i]:
                lengths[i] = lengths[j] + 1
                parents[i] = j

    best_length = max(lengths)
    current: int | None = lengths.index(best_length)
    result: list[int] = []
    while current is not None:
        result.append(nums[current])
        current = parents[current]
    result.reverse()
    return result