import io
import random

import pytest

from algokit.dinic import Dinic, main


def brute_min_cut(n, edges, source, sink):
    best = None
    for bits in range(1 << n):
        if not bits >> source & 1 or bits >> sink & 1:
            continue
        total = sum(c for u, v, c in edges if bits >> u & 1 and not bits >> v & 1)
        best = total if best is None else min(best, total)
    return best


def random_graph(seed, n=5, m=9, bidirectional=False):
    rng = random.Random(seed)
    graph = Dinic(n)
    directed_edges = []
    for _ in range(m):
        u, v = rng.randrange(n), rng.randrange(n)
        c = rng.randint(0, 10)
        if bidirectional:
            graph.add_bidirectional_edge(u, v, c)
            directed_edges += [(u, v, c), (v, u, c)]
        else:
            graph.add_directional_edge(u, v, c)
            directed_edges.append((u, v, c))
    return graph, directed_edges


def test_single_edge():
    graph = Dinic(2)
    graph.add_directional_edge(0, 1, 5)
    assert graph.flow(0, 1) == 5


def test_chain_bottleneck():
    graph = Dinic(3)
    graph.add_directional_edge(0, 1, 3)
    graph.add_directional_edge(1, 2, 7)
    assert graph.flow(0, 2) == 3
    assert graph.min_cut(0) == [(3, (0, 1))]


def test_directional_edge_blocks_reverse():
    graph = Dinic(2)
    graph.add_directional_edge(0, 1, 5)
    assert graph.flow(1, 0) == 0


def test_bidirectional_edge_works_both_ways():
    graph = Dinic(2)
    graph.add_bidirectional_edge(0, 1, 4)
    assert graph.flow(1, 0) == 4


@pytest.mark.parametrize("seed", range(12))
def test_matches_brute_force_cut(seed):
    graph, edges = random_graph(seed)
    assert graph.flow(0, 4) == brute_min_cut(5, edges, 0, 4)


@pytest.mark.parametrize("seed", range(8))
def test_bidirectional_matches_brute_force_cut(seed):
    graph, edges = random_graph(100 + seed, bidirectional=True)
    assert graph.flow(0, 4) == brute_min_cut(5, edges, 0, 4)


@pytest.mark.parametrize("seed", range(8))
def test_min_cut_sums_to_flow_and_separates(seed):
    graph, _ = random_graph(200 + seed)
    answer = graph.flow(0, 4)
    cut = graph.min_cut(0)
    assert sum(capacity for capacity, _ in cut) == answer
    # Every cut edge is saturated.
    for _, (a, b) in cut:
        assert any(e.node == b and e.capacity == 0 for e in graph.adj[a])


@pytest.mark.parametrize("seed", range(6))
def test_flow_cap_is_incremental(seed):
    full, _ = random_graph(300 + seed)
    total = full.flow(0, 4)
    graph, _ = random_graph(300 + seed)
    first = graph.flow(0, 4, flow_cap=total // 2)
    assert first == total // 2
    assert first + graph.flow(0, 4) == total


def test_min_cut_before_flow_raises():
    graph = Dinic(2)
    with pytest.raises(RuntimeError):
        graph.min_cut(0)


def test_invalid_edges_raise():
    graph = Dinic(2)
    with pytest.raises(ValueError):
        graph.add_directional_edge(0, 2, 1)
    with pytest.raises(ValueError):
        graph.add_directional_edge(0, 1, -1)


def test_same_source_and_sink_raises():
    graph = Dinic(2)
    with pytest.raises(ValueError):
        graph.flow(1, 1)


def test_find_edge():
    graph = Dinic(3)
    graph.add_directional_edge(0, 1, 6)
    edge = graph.find_edge(0, 1)
    assert edge.node == 1 and edge.original == 6
    assert edge.rev.node == 0
    assert graph.find_edge(0, 2) is None


def test_main_undirected(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3 2\n1 2 5\n2 3 4\n"))
    main([])
    assert capsys.readouterr().out.strip() == "4"


def test_main_directed(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("directed 2 1\n2 1 5\n"))
    main([])
    assert capsys.readouterr().out.strip() == "0"