import io
import operator
import random

import pytest

from algokit.count_pairs import count_pairs, main


def test_inversions_small():
    assert count_pairs([3, 1, 2], operator.gt) == 2


@pytest.mark.parametrize("seed", range(10))
def test_complementary_comparisons_partition_pairs(seed):
    rng = random.Random(seed)
    values = [rng.randint(-5, 5) for _ in range(rng.randint(0, 60))]
    total = len(values) * (len(values) - 1) // 2
    assert count_pairs(values, operator.lt) + count_pairs(values, operator.ge) == total
    assert count_pairs(values, operator.gt) + count_pairs(values, operator.le) == total


@pytest.mark.parametrize("seed", range(5))
def test_reversal_swaps_directions(seed):
    rng = random.Random(seed)
    values = [rng.randint(0, 100) for _ in range(40)]
    assert count_pairs(values, operator.lt) == count_pairs(values[::-1], operator.gt)


def test_sorted_distinct():
    values = list(range(25))
    assert count_pairs(values, operator.lt) == 25 * 24 // 2
    assert count_pairs(values, operator.gt) == 0


def test_all_equal():
    values = [7] * 9
    assert count_pairs(values, operator.lt) == 0
    assert count_pairs(values, operator.le) == 9 * 8 // 2


def test_input_not_modified():
    values = [5, 2, 8, 1]
    count_pairs(values)
    assert values == [5, 2, 8, 1]


def test_main(monkeypatch, capsys):
    values = [4, 1, 4, 2, 9]
    monkeypatch.setattr("sys.stdin", io.StringIO("5\n4 1 4 2 9\n"))
    main([])
    expected = [
        str(count_pairs(values, op))
        for op in (operator.lt, operator.gt, operator.le, operator.ge)
    ]
    assert capsys.readouterr().out.split() == expected