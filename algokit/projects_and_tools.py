"""Project selection: choose projects to maximise reward minus tool costs."""

from __future__ import annotations

import math
import sys
from collections.abc import Sequence

from algokit.dinic import Dinic


class ProjectsAndTools:
    """Projects pay rewards; each needs tools, and each tool is bought once.

    ``solve`` returns the best achievable reward minus cost.
    """

    def __init__(self, num_projects: int, num_tools: int) -> None:
        if num_projects < 0 or num_tools < 0:
            raise ValueError("counts must be non-negative")
        self.num_projects = num_projects
        self.num_tools = num_tools
        self.source = num_projects + num_tools
        self.sink = self.source + 1
        self.graph = Dinic(num_projects + num_tools + 2)
        self.project_total = 0

    def set_projects(self, projects: Sequence[int]) -> None:
        """Set the reward of every project."""
        if len(projects) != self.num_projects:
            raise ValueError(f"expected {self.num_projects} project rewards")
        self.project_total = 0
        for i, reward in enumerate(projects):
            self.graph.add_directional_edge(self.source, i, reward)
            self.project_total += reward

    def set_tools(self, tools: Sequence[int]) -> None:
        """Set the cost of every tool."""
        if len(tools) != self.num_tools:
            raise ValueError(f"expected {self.num_tools} tool costs")
        for i, cost in enumerate(tools):
            self.graph.add_directional_edge(self.num_projects + i, self.sink, cost)

    def add_dependency(self, project: int, tool: int) -> None:
        """Record that ``project`` needs ``tool``."""
        if not 0 <= project < self.num_projects:
            raise ValueError(f"project {project} out of range")
        if not 0 <= tool < self.num_tools:
            raise ValueError(f"tool {tool} out of range")
        self.graph.add_directional_edge(project, self.num_projects + tool, math.inf)

    def add_project_dependency(self, p1: int, p2: int) -> None:
        """Record that ``p1`` also needs every tool that ``p2`` needs."""
        if not (0 <= p1 < self.num_projects and 0 <= p2 < self.num_projects):
            raise ValueError("project out of range")
        self.graph.add_directional_edge(p1, p2, math.inf)

    def solve(self) -> int:
        """The maximum total reward minus total tool cost."""
        return self.project_total - self.graph.flow(self.source, self.sink)

    def chosen_projects(self) -> list[int]:
        """Projects in an optimal choice; call after :meth:`solve`."""
        chosen = [True] * self.num_projects
        for _, (a, b) in self.graph.min_cut(self.source):
            if a == self.source:
                chosen[b] = False
        return [i for i, keep in enumerate(chosen) if keep]


def main(argv: list[str] | None = None) -> None:
    """Read a graph of weighted vertices and edges; print the best subgraph weight.

    Edges are projects, their endpoints the tools they need.
    """
    tokens = iter(sys.stdin.read().split())
    n, m = int(next(tokens)), int(next(tokens))
    solver = ProjectsAndTools(m, n)
    solver.set_tools([int(next(tokens)) for _ in range(n)])
    rewards = []

    for i in range(m):
        u, v, w = (int(next(tokens)) for _ in range(3))
        solver.add_dependency(i, u - 1)
        solver.add_dependency(i, v - 1)
        rewards.append(w)

    solver.set_projects(rewards)
    print(solver.solve())
    print(" ".join(map(str, solver.chosen_projects())), file=sys.stderr)