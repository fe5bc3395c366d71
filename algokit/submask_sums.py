"""Sum-over-subsets transforms and subset convolution."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from algokit.bitmasks import iterate_bitmasks_with_popcount


def _check_size(n: int, values: Sequence) -> None:
    if len(values) != 1 << n:
        raise ValueError(f"expected {1 << n} values, got {len(values)}")


def submask_sums(n: int, values: Sequence) -> list:
    """For every mask, the sum of ``values[sub]`` over its submasks."""
    _check_size(n, values)
    dp = list(values)
    for i in range(n):
        bit = 1 << i
        for mask in range(1 << n):
            if mask & bit:
                dp[mask] += dp[mask ^ bit]
    return dp


def supermask_sums(n: int, values: Sequence) -> list:
    """For every mask, the sum of ``values[sup]`` over its supermasks."""
    return submask_sums(n, list(values)[::-1])[::-1]


def mobius_transform(n: int, values: Sequence) -> list:
    """Invert :func:`submask_sums`."""
    _check_size(n, values)
    dp = list(values)
    for i in range(n):
        bit = 1 << i
        for mask in range(1 << n):
            if mask & bit:
                dp[mask] -= dp[mask ^ bit]
    return dp


def super_mobius_transform(n: int, values: Sequence) -> list:
    """Invert :func:`supermask_sums`."""
    return mobius_transform(n, list(values)[::-1])[::-1]


def subset_convolution(n: int, a: Sequence, b: Sequence) -> list:
    """C[x | y] += A[x] * B[y] over all disjoint x, y, in n^2 * 2^n time."""
    _check_size(n, a)
    _check_size(n, b)
    size = 1 << n
    ranked_a = [[0] * size for _ in range(n + 1)]
    ranked_b = [[0] * size for _ in range(n + 1)]

    for mask in range(size):
        bits = mask.bit_count()
        ranked_a[bits][mask] = a[mask]
        ranked_b[bits][mask] = b[mask]

    for c in range(n):
        ranked_a[c] = submask_sums(n, ranked_a[c])
        ranked_b[c] = submask_sums(n, ranked_b[c])

    result = [0] * size

    for c in range(n + 1):
        combined = [0] * size
        # All ways to reach c bits, overlaps included.
        for i in range(c + 1):
            left, right = ranked_a[i], ranked_b[c - i]
            for mask in range(size):
                combined[mask] += left[mask] * right[mask]

        # Remove combinations that actually have fewer than c bits.
        if c > 1:
            combined = mobius_transform(n, combined)

        for mask in iterate_bitmasks_with_popcount(n, c):
            result[mask] = combined[mask]

    return result


def reverse_subset_convolution(n: int, a: Sequence, b: Sequence) -> list:
    """C[x] += A[x | y] * B[y] over all disjoint x, y."""
    return subset_convolution(n, list(a)[::-1], b)[::-1]


def main(argv: list[str] | None = None) -> None:
    """Read N and the arrays from stdin; print transforms or convolutions."""
    parser = argparse.ArgumentParser(description="Subset sums and subset convolution.")
    parser.add_argument("mode", nargs="?", default="sums", choices=("sums", "convolution"))
    args = parser.parse_args(argv)

    tokens = iter(sys.stdin.read().split())
    n = int(next(tokens))
    size = 1 << n
    a = [int(next(tokens)) for _ in range(size)]

    if args.mode == "sums":
        print(" ".join(map(str, submask_sums(n, a))))
        print(" ".join(map(str, supermask_sums(n, a))))
    else:
        b = [int(next(tokens)) for _ in range(size)]
        print(" ".join(map(str, subset_convolution(n, a, b))))
        print(" ".join(map(str, reverse_subset_convolution(n, a, b))))