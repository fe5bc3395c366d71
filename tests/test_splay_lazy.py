import io
import math
import random

import pytest

from algokit.splay_lazy import (
    LazySplayNode,
    LazySplayTree,
    SplayChange,
    main,
    node_max,
    node_sum,
)


def forward(tree):
    values = []
    node = tree.first()
    while node is not None:
        values.append(node.value)
        node = tree.successor(node)
    return values


def backward(tree):
    values = []
    node = tree.last()
    while node is not None:
        values.append(node.value)
        node = tree.predecessor(node)
    return values


def test_build_and_iterate():
    values = [5, -3, 8, 0, 2, 7, 1]
    tree = LazySplayTree(values)
    assert list(tree) == values
    assert len(tree) == len(values)


def test_traversal_both_directions():
    values = [4, 1, 9, 9, 2]
    tree = LazySplayTree(values)
    assert forward(tree) == values
    assert backward(tree) == values[::-1]


def test_node_at_index():
    values = [10, 20, 30, 40]
    tree = LazySplayTree(values)
    for i, value in enumerate(values):
        assert tree.node_at_index(i).value == value
    assert tree.node_at_index(-1) is None
    assert tree.node_at_index(len(values)) is None


def test_range_sum_and_max_all_ranges():
    values = [3, -1, 4, 1, -5, 9, 2, 6]
    tree = LazySplayTree(values)
    for a in range(len(values) + 1):
        for b in range(a + 1, len(values) + 1):
            node = tree.query_range(a, b)
            assert node.size == b - a
            assert node_sum(node) == sum(values[a:b])
            assert node_max(node) == max(values[a:b])
    assert list(tree) == values


def test_empty_range():
    tree = LazySplayTree([1, 2, 3])
    assert tree.query_range(2, 2) is None
    assert node_sum(None) == 0
    assert node_max(None) == -math.inf


def test_reverse_range():
    values = list(range(8))
    tree = LazySplayTree(values)
    tree.update(tree.query_range(2, 6), SplayChange(True))
    assert list(tree) == values[:2] + values[2:6][::-1] + values[6:]


def test_add_and_set():
    values = [1, 2, 3, 4, 5, 6]
    tree = LazySplayTree(values)
    tree.update(tree.query_range(1, 4), SplayChange(False, 10))
    expected = values[:1] + [v + 10 for v in values[1:4]] + values[4:]
    assert list(tree) == expected
    tree.update(tree.query_range(3, 6), SplayChange(False, 0, 7))
    expected = expected[:3] + [7, 7, 7]
    assert list(tree) == expected
    assert node_sum(tree.query_range(0, 6)) == sum(expected)


def test_combine_rules():
    assign_then_add = SplayChange(to_set=5).combine(SplayChange(to_add=2))
    assert assign_then_add == SplayChange(False, 2, 5)
    add_then_assign = SplayChange(to_add=3).combine(SplayChange(to_set=1))
    assert add_then_assign == SplayChange(False, 0, 1)
    both = SplayChange(True).combine(SplayChange(True))
    assert both.reverse is False
    assert not SplayChange().has_change()
    assert SplayChange(to_set=0).has_set()


def test_erase():
    values = [7, 3, 5, 1, 9]
    tree = LazySplayTree(values)
    tree.erase(tree.node_at_index(2))
    del values[2]
    assert list(tree) == values
    tree.erase(tree.node_at_index(0))
    del values[0]
    assert forward(tree) == values


def test_insert_and_bounds():
    tree = LazySplayTree()
    tree.insert(0, 4)
    tree.insert(0, 2)
    tree.insert(2, 6)
    tree.insert(1, 3)
    assert list(tree) == [2, 3, 4, 6]
    with pytest.raises(IndexError):
        tree.insert(10, 1)


def test_detach_and_reattach():
    values = list(range(10))
    tree = LazySplayTree(values)
    node = tree.query_range(2, 5)
    tree.detach(node)
    assert len(tree) == 7
    tree.insert_node(4, node)
    segment = values[2:5]
    rest = values[:2] + values[5:]
    assert list(tree) == rest[:4] + segment + rest[4:]


def test_clear():
    tree = LazySplayTree([1, 2, 3])
    tree.clear()
    assert len(tree) == 0
    assert tree.first() is None


def test_random_operations_match_list():
    rng = random.Random(12345)
    values = [rng.randint(-20, 20) for _ in range(15)]
    tree = LazySplayTree(values)

    for _ in range(400):
        n = len(values)
        op = rng.randrange(7)
        a = rng.randint(0, n)
        b = rng.randint(a, n)
        if op == 0:
            index, value = rng.randint(0, n), rng.randint(-20, 20)
            tree.insert(index, value)
            values.insert(index, value)
        elif op == 1 and n > 0:
            index = rng.randrange(n)
            tree.erase(tree.node_at_index(index))
            del values[index]
        elif op == 2:
            tree.update(tree.query_range(a, b), SplayChange(True))
            values[a:b] = values[a:b][::-1]
        elif op == 3:
            add = rng.randint(-5, 5)
            tree.update(tree.query_range(a, b), SplayChange(False, add))
            values[a:b] = [v + add for v in values[a:b]]
        elif op == 4:
            to_set = rng.randint(-5, 5)
            tree.update(tree.query_range(a, b), SplayChange(False, 0, to_set))
            values[a:b] = [to_set] * (b - a)
        elif op == 5:
            node = tree.query_range(a, b)
            assert node_sum(node) == sum(values[a:b])
            assert node_max(node) == (max(values[a:b]) if b > a else -math.inf)
        else:
            segment = values[a:b]
            rest = values[:a] + values[b:]
            index = rng.randint(0, len(rest))
            node = tree.query_range(a, b)
            tree.detach(node)
            tree.insert_node(index, node)
            values = rest[:index] + segment + rest[index:]

        assert len(tree) == len(values)

    assert list(tree) == values
    assert backward(tree) == values[::-1]


def test_node_summary():
    node = LazySplayNode(6)
    assert (node.size, node.sum, node.maximum) == (1, 6, 6)


def test_main(monkeypatch, capsys):
    data = "5\n1 2 3 4 5\nsum 0 5\nreverse 0 5\nget 0\nmax 1 3\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(data))
    main([])
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["15", "5", "4", "5 4 3 2 1", "1 2 3 4 5"]


def test_main_rejects_bad_range(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n1 2\nsum 0 5\n"))
    with pytest.raises(ValueError):
        main([])