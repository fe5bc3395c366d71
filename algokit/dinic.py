"""Maximum flow with Dinic's algorithm."""

from __future__ import annotations

import math
import sys
from collections import deque
from dataclasses import dataclass, field


@dataclass(eq=False)
class FlowEdge:
    """A residual edge; ``rev`` is its paired edge in the opposite direction."""

    node: int
    capacity: float
    original: float
    rev: FlowEdge | None = field(default=None, repr=False)


class Dinic:
    """A flow network on ``vertices`` nodes numbered from 0."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("vertex count must be non-negative")
        self.vertices = vertices
        self.adj: list[list[FlowEdge]] = [[] for _ in range(vertices)]
        self.flow_called = False
        self._dist: list[int] = []
        self._edge_index: list[int] = []

    def _check_vertex(self, v: int) -> None:
        if not 0 <= v < self.vertices:
            raise ValueError(f"vertex {v} out of range [0, {self.vertices})")

    def _add_edge(self, u: int, v: int, capacity1: float, capacity2: float) -> None:
        self._check_vertex(u)
        self._check_vertex(v)
        if capacity1 < 0 or capacity2 < 0:
            raise ValueError("capacities must be non-negative")
        forward = FlowEdge(v, capacity1, capacity1)
        backward = FlowEdge(u, capacity2, capacity2)
        forward.rev = backward
        backward.rev = forward
        self.adj[u].append(forward)
        self.adj[v].append(backward)

    def add_directional_edge(self, u: int, v: int, capacity: float) -> None:
        """Add an edge u -> v."""
        self._add_edge(u, v, capacity, 0)

    def add_bidirectional_edge(self, u: int, v: int, capacity: float) -> None:
        """Add an edge usable in both directions with the same capacity."""
        self._add_edge(u, v, capacity, capacity)

    def _bfs(self, source: int, sink: int) -> bool:
        dist = [-1] * self.vertices
        dist[source] = 0
        queue = deque([source])

        while queue:
            node = queue.popleft()
            for edge in self.adj[node]:
                if edge.capacity > 0 and dist[edge.node] < 0:
                    dist[edge.node] = dist[node] + 1
                    queue.append(edge.node)

        self._dist = dist
        return dist[sink] >= 0

    def _augment(self, source: int, sink: int, limit: float) -> float:
        """Find one augmenting path in the level graph and push flow along it."""
        dist = self._dist
        edge_index = self._edge_index
        path: list[FlowEdge] = []
        node = source

        while True:
            if node == sink:
                push = min(limit, min(edge.capacity for edge in path))
                for edge in path:
                    edge.capacity -= push
                    edge.rev.capacity += push
                return push

            edges = self.adj[node]
            advanced = False

            # Edges already fully searched at this level are never revisited.
            while edge_index[node] < len(edges):
                edge = edges[edge_index[node]]
                target = edge.node
                if (
                    edge.capacity > 0
                    and dist[target] == dist[node] + 1
                    and (target == sink or dist[target] < dist[sink])
                ):
                    path.append(edge)
                    node = target
                    advanced = True
                    break
                edge_index[node] += 1

            if advanced:
                continue
            if not path:
                return 0
            node = path.pop().rev.node
            edge_index[node] += 1

    def flow(self, source: int, sink: int, flow_cap: float | None = None) -> float:
        """Push as much flow as possible (at most ``flow_cap``) and return it.

        Calling again continues from the current residual network.
        """
        self._check_vertex(source)
        self._check_vertex(sink)
        if source == sink:
            raise ValueError("source and sink must differ")

        self.flow_called = True
        remaining = math.inf if flow_cap is None else flow_cap
        total = 0

        while remaining > 0 and self._bfs(source, sink):
            self._edge_index = [0] * self.vertices
            while remaining > 0:
                pushed = self._augment(source, sink, remaining)
                if pushed == 0:
                    break
                total += pushed
                remaining -= pushed

        return total

    def _reachable(self, source: int) -> list[bool]:
        reachable = [False] * self.vertices
        reachable[source] = True
        stack = [source]

        while stack:
            node = stack.pop()
            for edge in self.adj[node]:
                if edge.capacity > 0 and not reachable[edge.node]:
                    reachable[edge.node] = True
                    stack.append(edge.node)

        return reachable

    def min_cut(self, source: int) -> list[tuple[float, tuple[int, int]]]:
        """Edges of the minimum cut as ``(capacity, (from_node, to_node))``."""
        if not self.flow_called:
            raise RuntimeError("flow() must be called before min_cut()")
        self._check_vertex(source)
        reachable = self._reachable(source)
        cut = []

        for node, edges in enumerate(self.adj):
            if not reachable[node]:
                continue
            for edge in edges:
                if not reachable[edge.node] and edge.capacity < edge.original:
                    cut.append((edge.original - edge.capacity, (node, edge.node)))

        return cut

    def find_edge(self, a: int, b: int) -> FlowEdge | None:
        """The first edge stored at ``a`` that leads to ``b``, if any."""
        self._check_vertex(a)
        return next((edge for edge in self.adj[a] if edge.node == b), None)


def main(argv: list[str] | None = None) -> None:
    """Read ``[directed] N M`` and M edges ``a b c`` from stdin; print the max flow."""
    tokens = iter(sys.stdin.read().split())
    first = next(tokens)
    directed = first == "directed"
    n = int(next(tokens)) if directed else int(first)
    m = int(next(tokens))
    graph = Dinic(n)

    for _ in range(m):
        a, b, c = (int(next(tokens)) for _ in range(3))
        if directed:
            graph.add_directional_edge(a - 1, b - 1, c)
        else:
            graph.add_bidirectional_edge(a - 1, b - 1, c)

    print(graph.flow(0, n - 1))