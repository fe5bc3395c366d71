"""Counting distinct nonempty subsequences of a sequence."""

from __future__ import annotations

import sys
from collections.abc import Hashable, Sequence

from algokit.modint import ModInt


def distinct_subsequences(values: Sequence[Hashable]) -> ModInt:
    """Count distinct nonempty subsequences of ``values`` modulo 998244353."""
    dp = [ModInt(1)]
    last: dict[Hashable, int] = {}

    for i, value in enumerate(values):
        current = dp[i] * 2
        if value in last:
            current -= dp[last[value]]
        last[value] = i
        dp.append(current)

    # Drop the empty subsequence.
    return dp[-1] - 1


def main(argv: list[str] | None = None) -> None:
    """Read N and N integers from stdin and print the count."""
    tokens = sys.stdin.read().split()
    count = int(tokens[0])
    values = [int(token) for token in tokens[1 : 1 + count]]
    print(distinct_subsequences(values))