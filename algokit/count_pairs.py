"""Counting ordered pairs that satisfy a comparison, by merge sort."""

from __future__ import annotations

import operator
import sys
from collections.abc import Callable, Iterable
from typing import Any


def count_pairs(
    values: Iterable[Any], compare: Callable[[Any, Any], bool] = operator.lt
) -> int:
    """Count pairs i < j with ``compare(values[i], values[j])`` true.

    ``compare`` must be an ordering such as ``<``, ``>``, ``<=`` or ``>=``.
    """
    items = list(values)

    def sort_count(start: int, end: int) -> int:
        if end - start <= 1:
            return 0

        mid = (start + end) // 2
        answer = sort_count(start, mid) + sort_count(mid, end)
        merged = []
        left, right = start, mid

        while left < mid or right < end:
            if left < mid and (right == end or compare(items[left], items[right])):
                merged.append(items[left])
                left += 1
            else:
                answer += left - start
                merged.append(items[right])
                right += 1

        items[start:end] = merged
        return answer

    return sort_count(0, len(items))


def main(argv: list[str] | None = None) -> None:
    """Read N and N integers; print counts for <, >, <= and >=."""
    tokens = sys.stdin.read().split()
    n = int(tokens[0])
    values = [int(token) for token in tokens[1 : 1 + n]]
    for compare in (operator.lt, operator.gt, operator.le, operator.ge):
        print(count_pairs(values, compare))