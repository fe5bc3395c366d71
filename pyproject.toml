[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algokit"
version = "0.1.0"
description = "Algorithms and data structures: flows, matchings, bitmask transforms, splay trees, number-theoretic transform and more."
requires-python = ">=3.10"
dependencies = [
    "sortedcontainers",
]
keywords = [
    "algorithms",
    "data-structures",
    "max-flow",
    "min-cost-flow",
    "bipartite-matching",
    "splay-tree",
    "ntt",
    "subset-convolution",
    "competitive-programming",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
algokit-dinic = "algokit.dinic:main"
algokit-matching = "algokit.bipartite_matching:main"
algokit-projects = "algokit.projects_and_tools:main"
algokit-min-cost-flow = "algokit.min_cost_flow:main"
algokit-assignment = "algokit.assignment:main"
algokit-distinct-subsequences = "algokit.distinct_subsequences:main"
algokit-lcs = "algokit.lcs:main"
algokit-count-pairs = "algokit.count_pairs:main"
algokit-masks = "algokit.bitmasks:main"
algokit-subset-sums = "algokit.submask_sums:main"
algokit-splay = "algokit.splay_tree:main"
algokit-splay-lazy = "algokit.splay_lazy:main"
algokit-prefix-max = "algokit.online_prefix_max:main"
algokit-orderset = "algokit.ordered_set:main"
algokit-ntt = "algokit.ntt:main"

[tool.hatch.build.targets.wheel]
packages = ["algokit"]

[tool.hatch.build.targets.sdist]
include = [
    "algokit",
    "tests",
    "pyproject.toml",
]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
