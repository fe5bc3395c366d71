"""The assignment problem solved as a minimum-cost flow."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from algokit.min_cost_flow import MinCostFlow


class AssignmentProblem:
    """Match rows to columns, each used at most once, at minimum total cost.

    With a rectangular matrix, ``min(rows, columns)`` pairs are matched.
    """

    def __init__(self, costs: Sequence[Sequence[int]] = ()) -> None:
        self.costs = [list(row) for row in costs]
        self.n = len(self.costs)
        self.m = len(self.costs[0]) if self.costs else 0
        if any(len(row) != self.m for row in self.costs):
            raise ValueError("all rows must have the same length")

    def solve(self) -> int:
        """The minimum total cost of a maximum assignment."""
        n, m = self.n, self.m
        vertices = n + m + 2
        source, sink = vertices - 2, vertices - 1
        graph = MinCostFlow(vertices)

        for i in range(n):
            graph.add_directional_edge(source, i, 1, 0)
        for j in range(m):
            graph.add_directional_edge(n + j, sink, 1, 0)
        for i, row in enumerate(self.costs):
            for j, cost in enumerate(row):
                graph.add_directional_edge(i, n + j, 1, cost)

        return graph.solve_min_cost_flow(source, sink)[1]


def main(argv: list[str] | None = None) -> None:
    """Read ``N M`` and an N by M cost matrix from stdin; print the minimum cost."""
    tokens = iter(sys.stdin.read().split())
    n, m = int(next(tokens)), int(next(tokens))
    costs = [[int(next(tokens)) for _ in range(m)] for _ in range(n)]
    print(AssignmentProblem(costs).solve())