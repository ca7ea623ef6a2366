"""Dynamic programming problems."""

from __future__ import annotations

from collections.abc import Iterable
from math import comb

__all__ = [
    "MOD",
    "edit_distance",
    "counting_towers",
    "dice_combinations",
    "minimizing_coins",
    "unique_paths",
]

MOD = 1_000_000_007


def edit_distance(s: str, t: str) -> int:
    """Return the minimum number of insertions, deletions and replacements turning s into t."""
    previous = list(range(len(t) + 1))
    for i, a in enumerate(s, 1):
        current = [i]
        for j, b in enumerate(t, 1):
            if a == b:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(previous[j], current[j - 1], previous[j - 1]))
        previous = current
    return previous[-1]


def counting_towers(n: int) -> int:
    """Return the number of ways to build a tower of width 2 and height n, modulo 1e9+7."""
    if n < 1:
        raise ValueError("height must be at least 1")
    joined, split = 1, 1
    for _ in range(n - 1):
        joined, split = (2 * joined + split) % MOD, (joined + 4 * split) % MOD
    return (joined + split) % MOD


def dice_combinations(n: int) -> int:
    """Return the number of ordered dice-throw sequences summing to n, modulo 1e9+7."""
    if n < 0:
        return 0
    ways = [1]
    for total in range(1, n + 1):
        ways.append(sum(ways[max(0, total - 6):total]) % MOD)
    return ways[n]


def minimizing_coins(coins: Iterable[int], target: int) -> int | None:
    """Return the fewest coins summing to target, or None if it cannot be reached."""
    values = sorted(set(coins))
    if any(c <= 0 for c in values):
        raise ValueError("coin values must be positive")
    if target < 0:
        return None
    best: list[int | None] = [0]
    for amount in range(1, target + 1):
        candidates = [
            best[amount - c] + 1
            for c in values
            if c <= amount and best[amount - c] is not None
        ]
        best.append(min(candidates, default=None))
    return best[target]


def unique_paths(m: int, n: int) -> int:
    """Return the number of right/down paths across an m x n grid."""
    if m < 1 or n < 1:
        raise ValueError("grid dimensions must be positive")
    return comb(m + n - 2, m - 1)