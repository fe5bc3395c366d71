"""A linear basis of integers under XOR."""

from __future__ import annotations

from collections.abc import Iterator

BITS = 30


class XorBasis:
    """Basis values kept in decreasing order, each with a distinct highest bit."""

    def __init__(self, bits: int = BITS) -> None:
        self.bits = bits
        self.basis: list[int] = []

    def __len__(self) -> int:
        return len(self.basis)

    def __iter__(self) -> Iterator[int]:
        return iter(self.basis)

    def copy(self) -> XorBasis:
        result = XorBasis(self.bits)
        result.basis = list(self.basis)
        return result

    def min_value(self, start: int) -> int:
        """Smallest value reachable by XORing ``start`` with the span."""
        if len(self.basis) == self.bits:
            return 0
        for value in self.basis:
            start = min(start, start ^ value)
        return start

    def max_value(self, start: int = 0) -> int:
        """Largest value reachable by XORing ``start`` with the span."""
        if len(self.basis) == self.bits:
            return (1 << self.bits) - 1
        for value in self.basis:
            start = max(start, start ^ value)
        return start

    def add(self, x: int) -> bool:
        """Add ``x``; return whether it enlarged the span."""
        x = self.min_value(x)
        if x == 0:
            return False

        basis = self.basis
        basis.append(x)
        k = len(basis) - 1
        while k > 0 and basis[k] > basis[k - 1]:
            basis[k], basis[k - 1] = basis[k - 1], basis[k]
            k -= 1

        # Clear the highest bit of x from the larger basis values.
        for i in range(k - 1, -1, -1):
            basis[i] = min(basis[i], basis[i] ^ x)
        return True

    def merge(self, other: XorBasis) -> None:
        """Add every value of ``other`` into this basis."""
        for value in other.basis:
            if len(self.basis) >= self.bits:
                break
            self.add(value)

    @classmethod
    def from_union(cls, a: XorBasis, b: XorBasis) -> XorBasis:
        """A new basis spanning both ``a`` and ``b``."""
        larger, smaller = (a, b) if len(a) > len(b) else (b, a)
        result = larger.copy()
        result.merge(smaller)
        return result