"""Maximum bipartite matching (Hopcroft-Karp style) with covers."""

from __future__ import annotations

import sys
from collections import deque

_INF = float("inf")


class DinicMatching:
    """Bipartite graph with ``n`` left and ``m`` right vertices."""

    def __init__(self, n: int = 0, m: int = 0) -> None:
        if n < 0 or m < 0:
            raise ValueError("sizes must be non-negative")
        self.n = n
        self.m = m
        self.adj: list[list[int]] = [[] for _ in range(n)]
        self.matched = [False] * n
        self.right_match = [-1] * m
        self._dist: list[float] = [_INF] * n
        self._edge_index = [0] * n
        self._reachable_left = [False] * n
        self._reachable_right = [False] * m

    def add_edge(self, a: int, b: int) -> None:
        """Connect left vertex ``a`` with right vertex ``b``."""
        if not 0 <= a < self.n:
            raise ValueError(f"left vertex {a} out of range")
        if not 0 <= b < self.m:
            raise ValueError(f"right vertex {b} out of range")
        self.adj[a].append(b)

    def _bfs(self) -> bool:
        dist = [_INF] * self.n
        queue = deque()
        for i in range(self.n):
            if not self.matched[i]:
                dist[i] = 0
                queue.append(i)

        has_path = False
        while queue:
            left = queue.popleft()
            for right in self.adj[left]:
                owner = self.right_match[right]
                if owner < 0:
                    has_path = True
                elif dist[left] + 1 < dist[owner]:
                    dist[owner] = dist[left] + 1
                    queue.append(owner)

        self._dist = dist
        return has_path

    def _augment(self, start: int) -> bool:
        dist = self._dist
        edge_index = self._edge_index
        stack = [start]
        rights: list[int] = []

        while stack:
            left = stack[-1]
            edges = self.adj[left]
            descended = False

            while edge_index[left] < len(edges):
                right = edges[edge_index[left]]
                edge_index[left] += 1
                owner = self.right_match[right]

                if owner < 0:
                    rights.append(right)
                    for l, r in zip(stack, rights):
                        self.right_match[r] = l
                        self.matched[l] = True
                    return True

                if dist[left] + 1 == dist[owner]:
                    rights.append(right)
                    stack.append(owner)
                    descended = True
                    break

            if not descended:
                dist[left] = _INF
                stack.pop()
                if rights:
                    rights.pop()

        return False

    def match(self) -> int:
        """Compute a maximum matching from scratch and return its size."""
        self.matched = [False] * self.n
        self.right_match = [-1] * self.m
        matches = 0

        while self._bfs():
            self._edge_index = [0] * self.n
            for i in range(self.n):
                if not self.matched[i] and self._augment(i):
                    matches += 1

        return matches

    def _mark_reachable(self, start: int) -> None:
        reach_left = self._reachable_left
        reach_right = self._reachable_right
        reach_left[start] = True
        stack = [start]

        while stack:
            left = stack.pop()
            for right in self.adj[left]:
                if self.right_match[right] != left and not reach_right[right]:
                    reach_right[right] = True
                    next_left = self.right_match[right]
                    if next_left >= 0 and not reach_left[next_left]:
                        reach_left[next_left] = True
                        stack.append(next_left)

    def min_vertex_cover(self) -> list[int]:
        """A minimum vertex cover; right vertex ``i`` is reported as ``n + i``."""
        self.match()
        self._reachable_left = [False] * self.n
        self._reachable_right = [False] * self.m

        for i in range(self.n):
            if not self.matched[i] and not self._reachable_left[i]:
                self._mark_reachable(i)

        cover = [i for i in range(self.n) if not self._reachable_left[i]]
        cover += [self.n + i for i in range(self.m) if self._reachable_right[i]]
        return cover

    def max_independent_set(self) -> list[int]:
        """A maximum independent set, the complement of the minimum vertex cover."""
        self.min_vertex_cover()
        independent = [i for i in range(self.n) if self._reachable_left[i]]
        independent += [self.n + i for i in range(self.m) if not self._reachable_right[i]]
        return independent


def main(argv: list[str] | None = None) -> None:
    """Read ``N M P`` and P edges from stdin; print the matching size."""
    tokens = iter(sys.stdin.read().split())
    n, m, p = (int(next(tokens)) for _ in range(3))
    graph = DinicMatching(n, m)

    for _ in range(p):
        a, b = int(next(tokens)), int(next(tokens))
        graph.add_edge(a - 1, b - 1)

    print(graph.match())