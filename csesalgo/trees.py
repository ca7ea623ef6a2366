"""Rooted trees with binary-lifting ancestor and distance queries."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

__all__ = ["Tree"]


class Tree:
    """A tree on nodes 1..n, rooted at node 1."""

    def __init__(self, n: int, edges: Iterable[tuple[int, int]]) -> None:
        if n < 1:
            raise ValueError("a tree needs at least one node")
        edge_list = list(edges)
        if len(edge_list) != n - 1:
            raise ValueError(f"a tree on {n} nodes has {n - 1} edges, got {len(edge_list)}")
        self._n = n
        adjacency: list[list[int]] = [[] for _ in range(n)]
        for a, b in edge_list:
            u, v = self._index(a), self._index(b)
            adjacency[u].append(v)
            adjacency[v].append(u)

        parent = [0] * n
        depth = [0] * n
        seen = [False] * n
        seen[0] = True
        queue = deque([0])
        visited = 0
        while queue:
            node = queue.popleft()
            visited += 1
            for nxt in adjacency[node]:
                if not seen[nxt]:
                    seen[nxt] = True
                    parent[nxt] = node
                    depth[nxt] = depth[node] + 1
                    queue.append(nxt)
        if visited != n:
            raise ValueError("edges do not connect all nodes")

        self._depth = depth
        self._up = [parent]
        for _ in range(1, max(1, (n - 1).bit_length())):
            previous = self._up[-1]
            self._up.append([previous[p] for p in previous])

    def _index(self, node: int) -> int:
        if not 1 <= node <= self._n:
            raise ValueError(f"node {node} is out of range")
        return node - 1

    def _lift(self, node: int, k: int) -> int:
        level = 0
        while k:
            if k & 1:
                node = self._up[level][node]
            k >>= 1
            level += 1
        return node

    def kth_ancestor(self, node: int, k: int) -> int | None:
        """Return the ancestor k levels above node, or None if the root is passed."""
        if k < 0:
            raise ValueError("k must be non-negative")
        index = self._index(node)
        if k > self._depth[index]:
            return None
        return self._lift(index, k) + 1

    def _lca(self, u: int, v: int) -> int:
        if self._depth[u] < self._depth[v]:
            u, v = v, u
        u = self._lift(u, self._depth[u] - self._depth[v])
        if u == v:
            return u
        for level in reversed(self._up):
            if level[u] != level[v]:
                u, v = level[u], level[v]
        return self._up[0][u]

    def distance(self, u: int, v: int) -> int:
        """Return the number of edges on the path between u and v."""
        a, b = self._index(u), self._index(v)
        lca = self._lca(a, b)
        return self._depth[a] + self._depth[b] - 2 * self._depth[lca]