from collections import deque
from itertools import permutations, product

import pytest

from csesalgo.dynamic import (
    MOD,
    counting_towers,
    dice_combinations,
    edit_distance,
    minimizing_coins,
    unique_paths,
)


@pytest.mark.parametrize("s", ["", "LOVE", "MOVIE", "abcdef"])
def test_edit_distance_against_empty(s):
    assert edit_distance(s, "") == len(s)
    assert edit_distance("", s) == len(s)
    assert edit_distance(s, s) == 0


def test_edit_distance_appended_suffix():
    suffix = "xyz"
    assert edit_distance("kitten", "kitten" + suffix) == len(suffix)


@pytest.mark.parametrize("s,t", [("LOVE", "MOVIE"), ("kitten", "sitting"), ("abc", "yabd")])
def test_edit_distance_symmetric_and_bounded(s, t):
    d = edit_distance(s, t)
    assert d == edit_distance(t, s)
    assert abs(len(s) - len(t)) <= d <= max(len(s), len(t))


def test_edit_distance_triangle_inequality():
    a, b, c = "intention", "execution", "attention"
    assert edit_distance(a, c) <= edit_distance(a, b) + edit_distance(b, c)


@pytest.mark.parametrize("n,expected", [(2, 8), (6, 2864), (1337, 640403945)])
def test_counting_towers_samples(n, expected):
    assert counting_towers(n) == expected


def test_counting_towers_rejects_zero():
    with pytest.raises(ValueError):
        counting_towers(0)


def _brute_dice(n):
    return sum(
        1
        for length in range(1, n + 1)
        for throws in product(range(1, 7), repeat=length)
        if sum(throws) == n
    )


@pytest.mark.parametrize("n", range(1, 7))
def test_dice_combinations_matches_enumeration(n):
    assert dice_combinations(n) == _brute_dice(n)


def test_dice_combinations_recurrence_holds():
    n = 200
    assert dice_combinations(n) == sum(dice_combinations(n - k) for k in range(1, 7)) % MOD
    assert 0 <= dice_combinations(n) < MOD


def test_dice_combinations_negative_is_zero():
    assert dice_combinations(-3) == dice_combinations(-1) == 0


def _bfs_coins(coins, target):
    seen = {0}
    queue = deque([(0, 0)])
    while queue:
        amount, used = queue.popleft()
        if amount == target:
            return used
        for c in coins:
            nxt = amount + c
            if nxt <= target and nxt not in seen:
                seen.add(nxt)
                queue.append((nxt, used + 1))
    return None


@pytest.mark.parametrize(
    "coins,target", [([1, 5, 7], 11), ([2, 3], 7), ([3, 4], 5), ([5, 10, 25], 40), ([2], 3)]
)
def test_minimizing_coins_matches_search(coins, target):
    assert minimizing_coins(coins, target) == _bfs_coins(coins, target)


def test_minimizing_coins_unreachable():
    assert minimizing_coins([4, 6], 9) is None


def test_minimizing_coins_rejects_non_positive_coin():
    with pytest.raises(ValueError):
        minimizing_coins([0, 1], 5)


@pytest.mark.parametrize("m,n", [(1, 1), (2, 3), (3, 7), (4, 4)])
def test_unique_paths_matches_enumeration(m, n):
    moves = "D" * (m - 1) + "R" * (n - 1)
    assert unique_paths(m, n) == len(set(permutations(moves)))
    assert unique_paths(m, n) == unique_paths(n, m)


def test_unique_paths_rejects_empty_grid():
    with pytest.raises(ValueError):
        unique_paths(0, 3)