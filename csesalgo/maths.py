"""Number theory and counting problems."""

from __future__ import annotations

import math

from .dynamic import MOD

__all__ = [
    "counting_grids",
    "divisor_counts",
    "count_divisors",
    "is_prime",
    "is_palindrome",
    "digit_sum",
    "to_binary",
    "from_binary",
    "ncr",
    "lcm",
    "exponentiation",
    "exponentiation2",
    "josephus_query",
    "max_difference",
]


def counting_grids(n: int) -> int:
    """Count n x n black/white grids up to rotation, modulo 1e9+7."""
    if n < 1:
        raise ValueError("grid size must be positive")
    identity = pow(2, n * n, MOD)
    half_turn = pow(2, (n * n + 1) // 2, MOD)
    r = n // 2
    quarter_exp = r * (r + 1) + 1 if n % 2 else r * r
    quarter_turn = pow(2, quarter_exp, MOD)
    total = (identity + half_turn + 2 * quarter_turn) % MOD
    return total * pow(4, MOD - 2, MOD) % MOD


def divisor_counts(limit: int) -> list[int]:
    """Return a list whose entry i is the number of divisors of i, for 0 <= i <= limit.

    Entry 0 holds 0.
    """
    if limit < 0:
        raise ValueError("limit must be non-negative")
    counts = [0] * (limit + 1)
    for d in range(1, limit + 1):
        for multiple in range(d, limit + 1, d):
            counts[multiple] += 1
    return counts


def count_divisors(n: int) -> int:
    """Return the number of positive divisors of n."""
    if n < 1:
        raise ValueError("n must be a positive integer")
    result = 1
    p = 2
    while p * p <= n:
        exponent = 0
        while n % p == 0:
            n //= p
            exponent += 1
        result *= exponent + 1
        p += 1
    if n > 1:
        result *= 2
    return result


def is_prime(x: int) -> bool:
    """Return True if x is a prime number."""
    if x < 2:
        return False
    if x <= 3:
        return True
    if x % 2 == 0 or x % 3 == 0:
        return False
    i = 5
    while i * i <= x:
        if x % i == 0 or x % (i + 2) == 0:
            return False
        i += 6
    return True


def is_palindrome(s: str) -> bool:
    """Return True if s reads the same backwards."""
    return s == s[::-1]


def digit_sum(n: int) -> int:
    """Return the sum of the decimal digits of n."""
    return sum(int(d) for d in str(abs(n)))


def to_binary(n: int) -> str:
    """Return the binary representation of a non-negative integer."""
    if n < 0:
        raise ValueError("n must be non-negative")
    return format(n, "b")


def from_binary(s: str) -> int:
    """Parse a string of binary digits; the empty string is 0."""
    if any(ch not in "01" for ch in s):
        raise ValueError(f"not a binary string: {s!r}")
    return int(s, 2) if s else 0


def ncr(n: int, r: int) -> int:
    """Return the binomial coefficient n choose r."""
    if n < 0 or r < 0 or r > n:
        raise ValueError("require 0 <= r <= n")
    return math.comb(n, r)


def lcm(a: int, b: int) -> int:
    """Return the least common multiple of a and b."""
    return math.lcm(a, b)


def exponentiation(a: int, b: int) -> int:
    """Return a**b modulo 1e9+7."""
    if b < 0:
        raise ValueError("exponent must be non-negative")
    return pow(a, b, MOD)


def exponentiation2(a: int, b: int, c: int) -> int:
    """Return a**(b**c) modulo 1e9+7, reducing the exponent by Fermat's little theorem."""
    if b < 0 or c < 0:
        raise ValueError("exponents must be non-negative")
    return pow(a, pow(b, c, MOD - 1), MOD)


def _wrap(value: int, n: int) -> int:
    return (value - 1) % n + 1


def josephus_query(n: int, k: int) -> int:
    """Return the k-th child removed when every second of n children in a circle leaves."""
    if not 1 <= k <= n:
        raise ValueError(f"k must be between 1 and {n}")
    diff, start, length = 1, 2, n
    first = False
    while length:
        removed = length // 2 + (1 if first and length % 2 else 0)
        if k <= removed:
            return _wrap(start + 2 * (k - 1) * diff, n)
        if length % 2:
            start = _wrap(start + (3 if first else -1) * diff, n)
            first = not first
        else:
            start = _wrap(start + diff, n)
        diff *= 2
        k -= removed
        length -= removed
    return start


def max_difference(n: int, s: int) -> int:
    """Return the largest |x - y| over pairs 0 <= x, y <= n with x + y = s."""
    best = max(
        (abs(s - 2 * i) for i in range(min(n, s) + 1) if s - i <= n),
        default=None,
    )
    if best is None:
        raise ValueError("no pair of values in 0..n sums to s")
    return best