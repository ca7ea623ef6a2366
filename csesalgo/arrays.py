"""Array problems: merging, prefix sums, subarrays and medians."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import accumulate

__all__ = [
    "kth_element",
    "range_sums",
    "max_subarray_sum",
    "stick_lengths",
    "subarray_divisibility",
]


def kth_element(a: Iterable[int], b: Iterable[int], k: int) -> int:
    """Return the k-th (1-based) element of the merge of two sorted sequences."""
    merged = list(heapq.merge(a, b))
    if not 1 <= k <= len(merged):
        raise IndexError(f"k must be between 1 and {len(merged)}")
    return merged[k - 1]


def range_sums(values: Sequence[int], queries: Iterable[tuple[int, int]]) -> list[int]:
    """Return the sum of values[a..b] (1-based, inclusive) for each query (a, b)."""
    prefix = [0, *accumulate(values)]
    n = len(values)
    result = []
    for a, b in queries:
        if not 1 <= a <= b <= n:
            raise IndexError(f"range ({a}, {b}) is outside 1..{n}")
        result.append(prefix[b] - prefix[a - 1])
    return result


def max_subarray_sum(nums: Iterable[int]) -> int:
    """Return the largest sum of a non-empty contiguous subarray."""
    best: int | None = None
    running = 0
    for x in nums:
        running += x
        if best is None or running > best:
            best = running
        if running < 0:
            running = 0
    if best is None:
        raise ValueError("nums must not be empty")
    return best


def stick_lengths(sticks: Iterable[int]) -> int:
    """Return the least total change needed to make all sticks the same length."""
    ordered = sorted(sticks)
    if not ordered:
        return 0
    median = ordered[len(ordered) // 2]
    return sum(abs(x - median) for x in ordered)


def subarray_divisibility(values: Sequence[int]) -> int:
    """Count contiguous subarrays whose sum is divisible by the number of values."""
    n = len(values)
    if n == 0:
        return 0
    remainders = Counter([0])
    remainders.update(total % n for total in accumulate(values))
    return sum(c * (c - 1) // 2 for c in remainders.values())