"""Minimum-cost flow with successive shortest paths."""

from __future__ import annotations

import heapq
import math
import sys
from dataclasses import dataclass, field


@dataclass(eq=False)
class _Edge:
    node: int
    capacity: float
    cost: float
    rev: _Edge | None = field(default=None, repr=False)


class MinCostFlow:
    """A flow network with per-unit edge costs.

    Shortest paths start with a Bellman-Ford variant. When that does too much
    work, the search switches to Dijkstra on reduced costs.
    """

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("vertex count must be non-negative")
        self.vertices = vertices
        self.edge_count = 0
        self.adj: list[list[_Edge]] = [[] for _ in range(vertices)]
        self.too_much_bellman_ford = False
        self._dist: list[float] = []
        self._prev_edge: list[_Edge | None] = []

    def _check_vertex(self, v: int) -> None:
        if not 0 <= v < self.vertices:
            raise ValueError(f"vertex {v} out of range [0, {self.vertices})")

    def add_directional_edge(self, u: int, v: int, capacity: float, cost: float) -> None:
        """Add an edge u -> v carrying up to ``capacity`` units at ``cost`` each."""
        self._check_vertex(u)
        self._check_vertex(v)
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        forward = _Edge(v, capacity, cost)
        backward = _Edge(u, 0, -cost)
        forward.rev = backward
        backward.rev = forward
        self.adj[u].append(forward)
        self.adj[v].append(backward)
        self.edge_count += 1

    def _bellman_ford(self, source: int, sink: int) -> bool:
        n = self.vertices
        dist: list[float] = [math.inf] * n
        prev_edge: list[_Edge | None] = [None] * n
        dist[source] = 0
        work = 0
        last_seen = [-1] * n
        nodes = [source]

        for iteration in range(n):
            next_nodes = []
            for node in nodes:
                for edge in self.adj[node]:
                    candidate = dist[node] + edge.cost
                    if edge.capacity > 0 and candidate < dist[edge.node]:
                        dist[edge.node] = candidate
                        prev_edge[edge.node] = edge
                        if last_seen[edge.node] != iteration:
                            last_seen[edge.node] = iteration
                            next_nodes.append(edge.node)
                work += len(self.adj[node])
            nodes = next_nodes

        self._dist = dist
        self._prev_edge = prev_edge

        if work > 1.75 * self.edge_count * n.bit_length() + 100:
            self.too_much_bellman_ford = True
            return False

        return prev_edge[sink] is not None

    def _dijkstra(self, source: int, sink: int) -> bool:
        dist: list[float] = [math.inf] * self.vertices
        prev_edge: list[_Edge | None] = [None] * self.vertices
        dist[source] = 0
        heap = [(0, source)]

        while heap:
            top_dist, node = heapq.heappop(heap)
            if top_dist > dist[node]:
                continue
            for edge in self.adj[node]:
                if edge.capacity > 0:
                    candidate = top_dist + edge.cost
                    if candidate < dist[edge.node]:
                        dist[edge.node] = candidate
                        prev_edge[edge.node] = edge
                        heapq.heappush(heap, (candidate, edge.node))

        self._dist = dist
        self._prev_edge = prev_edge
        return prev_edge[sink] is not None

    def _reduce_cost(self) -> None:
        dist = self._dist
        for node, edges in enumerate(self.adj):
            for edge in edges:
                if dist[node] < math.inf and dist[edge.node] < math.inf:
                    edge.cost += dist[node] - dist[edge.node]

    def _path(self, sink: int) -> list[_Edge]:
        path = []
        node = sink
        while (edge := self._prev_edge[node]) is not None:
            path.append(edge)
            node = edge.rev.node
        return path

    def solve_min_cost_flow(
        self, source: int, sink: int, flow_goal: float | None = None
    ) -> tuple[float, float]:
        """Send up to ``flow_goal`` units at minimum cost; return ``(flow, cost)``."""
        self._check_vertex(source)
        self._check_vertex(sink)
        goal = math.inf if flow_goal is None else flow_goal
        total_flow = 0
        total_cost = 0
        reduce_sum = 0

        def process_path() -> None:
            nonlocal total_flow, total_cost
            path = self._path(sink)
            path_cap = min([goal - total_flow] + [edge.capacity for edge in path])
            cost_sum = 0
            for edge in path:
                edge.capacity -= path_cap
                edge.rev.capacity += path_cap
                cost_sum += edge.cost
            total_flow += path_cap
            total_cost += (reduce_sum + cost_sum) * path_cap

        while total_flow < goal and self._bellman_ford(source, sink):
            process_path()

        if self.too_much_bellman_ford:
            while True:
                self._reduce_cost()
                if self._prev_edge[sink] is None:
                    break
                reduce_sum += self._dist[sink]
                process_path()
                if not (total_flow < goal and self._dijkstra(source, sink)):
                    break

        return total_flow, total_cost


def main(argv: list[str] | None = None) -> None:
    """Read ``N M`` and M edges ``a b cap cost``; print flow and cost from 1 to N."""
    tokens = iter(sys.stdin.read().split())
    n, m = int(next(tokens)), int(next(tokens))
    graph = MinCostFlow(n)

    for _ in range(m):
        a, b, cap, cost = (int(next(tokens)) for _ in range(4))
        graph.add_directional_edge(a - 1, b - 1, cap, cost)

    flow, cost = graph.solve_min_cost_flow(0, n - 1)
    print(flow, cost)