"""Graph problems: topological orders, path counting, cycles and shortest paths."""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Iterable, Sequence

from .dynamic import MOD

__all__ = [
    "SuccessorGraph",
    "can_finish",
    "course_schedule",
    "game_routes",
    "find_cycle",
    "all_pairs_shortest_paths",
    "shortest_path_queries",
    "shortest_routes",
]


def _index(node: int, n: int, base: int) -> int:
    i = node - base
    if not 0 <= i < n:
        raise ValueError(f"node {node} is out of range")
    return i


def _directed(
    n: int, edges: Iterable[tuple[int, int]], base: int
) -> tuple[list[list[int]], list[int]]:
    adjacency: list[list[int]] = [[] for _ in range(n)]
    indegree = [0] * n
    for a, b in edges:
        src, dst = _index(a, n, base), _index(b, n, base)
        adjacency[src].append(dst)
        indegree[dst] += 1
    return adjacency, indegree


def _kahn(n: int, edges: Iterable[tuple[int, int]], base: int) -> list[int]:
    adjacency, indegree = _directed(n, edges, base)
    queue = deque(i for i, degree in enumerate(indegree) if degree == 0)
    order = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for nxt in adjacency[node]:
            indegree[nxt] -= 1
            if indegree[nxt] == 0:
                queue.append(nxt)
    return order


def can_finish(num_courses: int, prerequisites: Iterable[tuple[int, int]]) -> bool:
    """Return True if the 0-based dependency graph has no cycle."""
    return len(_kahn(num_courses, prerequisites, 0)) == num_courses


def course_schedule(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Return a topological order of nodes 1..n where each edge (a, b) puts a before b.

    Raises ValueError when the graph has a cycle.
    """
    order = _kahn(n, edges, 1)
    if len(order) != n:
        raise ValueError("IMPOSSIBLE")
    return [node + 1 for node in order]


def game_routes(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Count routes from node 1 to node n in a directed graph, modulo 1e9+7."""
    adjacency, indegree = _directed(n, edges, 1)
    if n == 0:
        return 0
    routes = [0] * n
    routes[0] = 1
    queue = deque(i for i, degree in enumerate(indegree) if degree == 0)
    while queue:
        node = queue.popleft()
        for nxt in adjacency[node]:
            indegree[nxt] -= 1
            routes[nxt] = (routes[nxt] + routes[node]) % MOD
            if indegree[nxt] == 0:
                queue.append(nxt)
    return routes[n - 1]


class SuccessorGraph:
    """A functional graph on nodes 1..n answering "where am I after k steps" queries."""

    def __init__(self, successors: Sequence[int]) -> None:
        self._n = len(successors)
        self._jumps = [[_index(s, self._n, 1) for s in successors]]

    def _level(self, level: int) -> list[int]:
        while len(self._jumps) <= level:
            previous = self._jumps[-1]
            self._jumps.append([previous[p] for p in previous])
        return self._jumps[level]

    def query(self, x: int, k: int) -> int:
        """Return the node reached from x after following k successor links."""
        if k < 0:
            raise ValueError("step count must be non-negative")
        node = _index(x, self._n, 1)
        level = 0
        while k:
            if k & 1:
                node = self._level(level)[node]
            k >>= 1
            level += 1
        return node + 1


def find_cycle(n: int, edges: Iterable[tuple[int, int]]) -> list[int] | None:
    """Return a directed cycle as a node list whose first and last entries match, or None."""
    adjacency, _ = _directed(n, edges, 1)
    state = [0] * n
    parent = [-1] * n
    for start in range(n):
        if state[start]:
            continue
        state[start] = 1
        stack = [(start, iter(adjacency[start]))]
        while stack:
            cur, neighbours = stack[-1]
            for node in neighbours:
                if state[node] == 1:
                    chain = []
                    cc = cur
                    while cc != node:
                        chain.append(cc)
                        cc = parent[cc]
                    chain.append(node)
                    chain.append(cur)
                    chain.reverse()
                    return [v + 1 for v in chain]
                if state[node] == 0:
                    parent[node] = cur
                    state[node] = 1
                    stack.append((node, iter(adjacency[node])))
                    break
            else:
                state[cur] = 2
                stack.pop()
    return None


def all_pairs_shortest_paths(
    n: int, edges: Iterable[tuple[int, int, int]]
) -> list[list[int | None]]:
    """Return the distance matrix of an undirected weighted graph on nodes 1..n.

    Row and column i stand for node i + 1; unreachable pairs hold None.
    """
    dist = [[math.inf] * n for _ in range(n)]
    for i in range(n):
        dist[i][i] = 0
    for a, b, c in edges:
        i, j = _index(a, n, 1), _index(b, n, 1)
        dist[i][j] = min(dist[i][j], c)
        dist[j][i] = min(dist[j][i], c)
    for k in range(n):
        row_k = dist[k]
        for row in dist:
            via = row[k]
            if via == math.inf:
                continue
            for j, rest in enumerate(row_k):
                if via + rest < row[j]:
                    row[j] = via + rest
    return [[None if d == math.inf else d for d in row] for row in dist]


def shortest_path_queries(
    n: int,
    edges: Iterable[tuple[int, int, int]],
    queries: Iterable[tuple[int, int]],
) -> list[int | None]:
    """Answer (a, b) distance queries on an undirected graph; None where b is unreachable."""
    matrix = all_pairs_shortest_paths(n, edges)
    return [matrix[_index(a, n, 1)][_index(b, n, 1)] for a, b in queries]


def shortest_routes(n: int, edges: Iterable[tuple[int, int, int]]) -> list[int | None]:
    """Return shortest distances from node 1 to every node in a directed graph.

    Unreachable nodes get None.
    """
    if n < 1:
        raise ValueError("graph needs at least one node")
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for a, b, c in edges:
        adjacency[_index(a, n, 1)].append((_index(b, n, 1), c))
    dist: list[float] = [math.inf] * n
    dist[0] = 0
    heap = [(0, 0)]
    while heap:
        d, node = heapq.heappop(heap)
        if d != dist[node]:
            continue
        for nxt, weight in adjacency[node]:
            candidate = d + weight
            if candidate < dist[nxt]:
                dist[nxt] = candidate
                heapq.heappush(heap, (candidate, nxt))
    return [None if d == math.inf else int(d) for d in dist]