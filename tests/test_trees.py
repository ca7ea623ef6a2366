import itertools

import pytest

from csesalgo.trees import Tree

EDGES = [(1, 2), (1, 3), (3, 4), (3, 5)]
BRANCHY = [(1, 2), (1, 3), (2, 4), (2, 5), (3, 6), (6, 7), (6, 8), (8, 9), (4, 10)]


def test_distance_worked_example():
    assert Tree(5, EDGES).distance(2, 5) == 3


def test_adjacent_nodes_are_one_apart():
    tree = Tree(10, BRANCHY)
    for a, b in BRANCHY:
        assert tree.distance(a, b) == 1


def test_distance_metric_properties():
    tree = Tree(10, BRANCHY)
    nodes = range(1, 11)
    for u in nodes:
        assert tree.distance(u, u) == 0
    for u, v in itertools.product(nodes, repeat=2):
        assert tree.distance(u, v) == tree.distance(v, u)
        for w in nodes:
            assert tree.distance(u, v) <= tree.distance(u, w) + tree.distance(w, v)


def test_path_distance_is_index_gap():
    n = 60
    tree = Tree(n, [(i, i + 1) for i in range(1, n)])
    for u, v in [(1, n), (7, 33), (50, 2), (20, 20)]:
        assert tree.distance(u, v) == abs(u - v)


def test_deep_path_builds_without_recursion():
    n = 3000
    tree = Tree(n, [(i + 1, i) for i in range(1, n)])
    assert tree.distance(1, n) == n - 1
    assert tree.kth_ancestor(n, n - 1) == 1


def test_kth_ancestor_bounds():
    tree = Tree(10, BRANCHY)
    for node in range(1, 11):
        depth = tree.distance(node, 1)
        assert tree.kth_ancestor(node, 0) == node
        assert tree.kth_ancestor(node, depth) == 1
        assert tree.kth_ancestor(node, depth + 1) is None


def test_kth_ancestor_composes():
    n = 200
    tree = Tree(n, [(i, i + 1) for i in range(1, n)])
    for a, b in [(3, 4), (10, 50), (64, 63)]:
        assert tree.kth_ancestor(tree.kth_ancestor(n, a), b) == tree.kth_ancestor(n, a + b)


def test_kth_ancestor_lies_on_path_to_root():
    tree = Tree(10, BRANCHY)
    for node in range(1, 11):
        depth = tree.distance(node, 1)
        for k in range(depth + 1):
            ancestor = tree.kth_ancestor(node, k)
            assert tree.distance(node, ancestor) == k
            assert tree.distance(ancestor, 1) == depth - k


def test_single_node_tree():
    tree = Tree(1, [])
    assert tree.distance(1, 1) == 0
    assert tree.kth_ancestor(1, 1) is None


def test_rejects_wrong_edge_count():
    with pytest.raises(ValueError):
        Tree(4, [(1, 2), (2, 3)])


def test_rejects_disconnected_edges():
    with pytest.raises(ValueError):
        Tree(4, [(1, 2), (2, 1), (3, 4)])


def test_rejects_bad_nodes_and_steps():
    tree = Tree(5, EDGES)
    with pytest.raises(ValueError):
        tree.distance(0, 2)
    with pytest.raises(ValueError):
        tree.kth_ancestor(6, 1)
    with pytest.raises(ValueError):
        tree.kth_ancestor(2, -1)