"""Enumeration of bitmasks: fixed popcount, submasks and supermasks."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator


def _ctz(x: int) -> int:
    return (x & -x).bit_length() - 1


def iterate_bitmasks_with_popcount(n: int, k: int) -> Iterator[int]:
    """Yield every n-bit mask with exactly k set bits, in increasing order."""
    if k == 0:
        yield 0
        return

    mask = (1 << k) - 1

    while mask < 1 << n:
        yield mask
        zeros = _ctz(mask)
        shifted = mask >> zeros
        ones = _ctz(~shifted & (shifted + 1))
        mask += (1 << zeros) + (1 << (ones - 1)) - 1


def iterate_submasks(mask: int) -> Iterator[int]:
    """Yield every submask of ``mask`` in decreasing order, ending with 0."""
    sub = mask
    while True:
        yield sub
        if sub == 0:
            return
        sub = (sub - 1) & mask


def iterate_supermasks(mask: int, n: int) -> Iterator[int]:
    """Yield every n-bit supermask of ``mask`` in increasing order."""
    sup = mask
    while sup < 1 << n:
        yield sup
        sup = (sup + 1) | mask


def format_mask(mask: int, n: int) -> str:
    """Write the low n bits of ``mask``, lowest bit first."""
    return "".join(str(mask >> i & 1) for i in range(n))


def main(argv: list[str] | None = None) -> None:
    """Read ``n mask`` from stdin and list its submasks or supermasks."""
    parser = argparse.ArgumentParser(description="List submasks or supermasks of a mask.")
    parser.add_argument("mode", choices=("submasks", "supermasks"))
    args = parser.parse_args(argv)

    n, mask = (int(token) for token in sys.stdin.read().split()[:2])
    masks = iterate_submasks(mask) if args.mode == "submasks" else iterate_supermasks(mask, n)

    for value in masks:
        print(f"{value:3d}: {format_mask(value, n)}")