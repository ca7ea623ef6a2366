"""Introductory problems: counting, sequences, permutations and strings."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator
from itertools import groupby

__all__ = [
    "missing_number",
    "weird_algorithm",
    "longest_repetition",
    "beautiful_permutation",
    "two_knights",
    "tower_of_hanoi",
    "creating_strings",
    "palindrome_reorder",
]


def missing_number(n: int, numbers: Iterable[int]) -> int:
    """Return the one number of 1..n that is absent from ``numbers``."""
    values = list(numbers)
    if len(values) != n - 1:
        raise ValueError(f"expected {n - 1} numbers, got {len(values)}")
    return n * (n + 1) // 2 - sum(values)


def weird_algorithm(n: int) -> list[int]:
    """Return the sequence n, ... that halves even and maps odd to 3n+1 until 1."""
    if n < 1:
        raise ValueError("n must be a positive integer")
    sequence = [n]
    while n != 1:
        n = n // 2 if n % 2 == 0 else 3 * n + 1
        sequence.append(n)
    return sequence


def longest_repetition(s: str) -> int:
    """Return the length of the longest run of one repeated character."""
    return max((sum(1 for _ in run) for _, run in groupby(s)), default=0)


def beautiful_permutation(n: int) -> list[int]:
    """Return a permutation of 1..n with no adjacent values differing by one.

    Raises ValueError when no such permutation exists (n equal to 2 or 3).
    """
    if n == 1:
        return [1]
    if n in (2, 3):
        raise ValueError("NO SOLUTION")
    return [*range(2, n + 1, 2), *range(1, n + 1, 2)]


def two_knights(n: int) -> list[int]:
    """For every k in 1..n, count the ways to place two non-attacking knights on a k x k board."""
    return [
        (k * k * (k * k - 1)) // 2 - 4 * (k - 1) * (k - 2)
        for k in range(1, n + 1)
    ]


def _hanoi(n: int, source: int, spare: int, target: int) -> Iterator[tuple[int, int]]:
    if n > 0:
        yield from _hanoi(n - 1, source, target, spare)
        yield source, target
        yield from _hanoi(n - 1, spare, source, target)


def tower_of_hanoi(n: int) -> list[tuple[int, int]]:
    """Return the minimal moves taking n disks from peg 1 to peg 3, as (from, to) pairs."""
    return list(_hanoi(n, 1, 2, 3))


def _unique_permutations(counts: Counter[str], length: int) -> Iterator[str]:
    if length == 0:
        yield ""
        return
    for ch in sorted(counts):
        if counts[ch]:
            counts[ch] -= 1
            for rest in _unique_permutations(counts, length - 1):
                yield ch + rest
            counts[ch] += 1


def creating_strings(s: str) -> list[str]:
    """Return every distinct rearrangement of ``s`` in lexicographic order."""
    return list(_unique_permutations(Counter(s), len(s)))


def palindrome_reorder(s: str) -> str:
    """Rearrange ``s`` into a palindrome, smallest letters outermost.

    Raises ValueError when more than one character occurs an odd number of times.
    """
    counts = Counter(s)
    odd = sorted(ch for ch, count in counts.items() if count % 2)
    if len(odd) > 1:
        raise ValueError("NO SOLUTION")
    half = "".join(ch * (counts[ch] // 2) for ch in sorted(counts))
    return half + "".join(odd) + half[::-1]