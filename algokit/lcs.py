"""Longest common subsequence of two strings."""

from __future__ import annotations

import sys


def is_subsequence(sub: str, text: str) -> bool:
    """Whether ``sub`` appears in ``text`` in order, not necessarily contiguously."""
    remaining = iter(text)
    return all(ch in remaining for ch in sub)


def longest_common_subsequence_quadratic_memory(s: str, t: str) -> int:
    """LCS length with a full DP table."""
    m = len(t)
    dp = [[0] * (m + 1) for _ in range(len(s) + 1)]

    for i, a in enumerate(s):
        for j, b in enumerate(t):
            if a == b:
                dp[i + 1][j + 1] = dp[i][j] + 1
            else:
                dp[i + 1][j + 1] = max(dp[i][j + 1], dp[i + 1][j])

    return dp[-1][m]


def longest_common_subsequence(s: str, t: str) -> int:
    """LCS length using a single rolling row."""
    m = len(t)
    dp = [0] * (m + 1)

    for a in s:
        next_dp = [0] * (m + 1)
        for j, b in enumerate(t):
            if a == b:
                next_dp[j + 1] = dp[j] + 1
            else:
                next_dp[j + 1] = max(dp[j + 1], next_dp[j])
        dp = next_dp

    return dp[m]


def construct_longest_common_subsequence(s: str, t: str) -> str:
    """One longest common subsequence of ``s`` and ``t``."""
    m = len(t)
    dp = [0] * (m + 1)
    go_left = [[False] * (m + 1) for _ in range(len(s) + 1)]

    for i, a in enumerate(s):
        next_dp = [0] * (m + 1)
        for j, b in enumerate(t):
            if a == b:
                next_dp[j + 1] = dp[j] + 1
            else:
                next_dp[j + 1] = max(dp[j + 1], next_dp[j])
                go_left[i + 1][j + 1] = next_dp[j + 1] == next_dp[j]
        dp = next_dp

    a, b = len(s), m
    common = []

    while a > 0 and b > 0:
        if s[a - 1] == t[b - 1]:
            common.append(s[a - 1])
            a -= 1
            b -= 1
        elif go_left[a][b]:
            b -= 1
        else:
            a -= 1

    return "".join(reversed(common))


def main(argv: list[str] | None = None) -> None:
    """Read two words from stdin; print the LCS length and one LCS."""
    s, t = sys.stdin.read().split()[:2]
    print(longest_common_subsequence(s, t))
    print(construct_longest_common_subsequence(s, t))