"""Polynomial multiplication with the number-theoretic transform.

Single-prime products use one NTT. Products modulo any integer use three
NTT primes and the Chinese remainder theorem. Exact products use two primes.
"""

from __future__ import annotations

import heapq
import itertools
import sys
from collections.abc import Iterable, Sequence
from functools import lru_cache

MOD = 998244353
MOD2 = 1711276033
MOD3 = 2113929217
TRIPLE_CUTOFF = 100000


def _is_prime(n: int) -> bool:
    if n < 2:
        return False
    if n % 2 == 0:
        return n == 2
    p = 3
    while p * p <= n:
        if n % p == 0:
            return False
        p += 2
    return True


def _round_up_power_two(n: int) -> int:
    return 1 if n <= 1 else 1 << (n - 1).bit_length()


def _get_length(n: int) -> int:
    """For a power of two ``n``, the ``k`` with ``n == 1 << k``."""
    return n.bit_length() - 1


class NTT:
    """Convolution of integer sequences modulo a prime ``mod``.

    Transform sizes are limited by the largest power of two dividing ``mod - 1``.
    """

    def __init__(self, mod: int = MOD) -> None:
        if not _is_prime(mod):
            raise ValueError(f"modulus {mod} must be prime")
        self.mod = mod
        self.max_size = (mod - 1) & -(mod - 1)
        self._root: int | None = None
        self._roots = [0, 1]
        self._bit_reverse: list[int] = []

    def _find_root(self) -> int:
        if self._root is None:
            mod, size = self.mod, self.max_size
            root = 2
            # A max_size-th primitive root of unity modulo mod.
            while not (pow(root, size, mod) == 1 and pow(root, size // 2, mod) != 1):
                root += 1
            self._root = root
        return self._root

    def _prepare_roots(self, n: int) -> None:
        if n > self.max_size:
            raise ValueError(
                f"transform size {n} exceeds the maximum {self.max_size} for modulus {self.mod}"
            )
        roots = self._roots
        if len(roots) >= n:
            return

        root = self._find_root()
        mod = self.mod
        length = _get_length(len(roots))
        roots.extend([0] * (n - len(roots)))

        # roots[k / 2] .. roots[k - 1] are the first half of the k-th roots of unity.
        while 1 << length < n:
            z = pow(root, self.max_size >> (length + 1), mod)
            for i in range(1 << (length - 1), 1 << length):
                roots[2 * i] = roots[i]
                roots[2 * i + 1] = roots[i] * z % mod
            length += 1

    def _bit_reorder(self, values: list[int]) -> None:
        n = len(values)
        if len(self._bit_reverse) != n:
            length = _get_length(n)
            rev = [0] * n
            for i in range(1, n):
                rev[i] = (rev[i >> 1] >> 1) | ((i & 1) << (length - 1))
            self._bit_reverse = rev

        for i, j in enumerate(self._bit_reverse):
            if i < j:
                values[i], values[j] = values[j], values[i]

    def _transform(self, values: list[int]) -> None:
        n = len(values)
        self._prepare_roots(n)
        self._bit_reorder(values)
        mod = self.mod
        roots = self._roots
        length = 1

        while length < n:
            for start in range(0, n, 2 * length):
                for i in range(start, start + length):
                    even = values[i]
                    odd = values[i + length] * roots[length + i - start] % mod
                    values[i + length] = (even - odd) % mod
                    values[i] = (even + odd) % mod
            length *= 2

    def _inverse_transform(self, values: list[int]) -> None:
        n = len(values)
        inv_n = pow(n, -1, self.mod)
        values[:] = [v * inv_n % self.mod for v in values]
        values[1:] = values[:0:-1]
        self._transform(values)

    def mod_multiply(
        self, left: Sequence[int], right: Sequence[int], circular: bool = False
    ) -> list[int]:
        """The product of two coefficient lists, reduced modulo ``mod``.

        With ``circular``, indices wrap modulo the power of two at least
        ``max(len(left), len(right))``.
        """
        if not left or not right:
            return []

        mod = self.mod
        a = [x % mod for x in left]
        b = [x % mod for x in right]
        n, m = len(a), len(b)
        output_size = _round_up_power_two(max(n, m)) if circular else n + m - 1
        size = _round_up_power_two(output_size)

        brute_force_cost = 1.25 * n * m
        ntt_cost = 3.0 * size * (_get_length(size) + 3)

        if brute_force_cost < ntt_cost:
            result = [0] * output_size
            for i, x in enumerate(a):
                for j, y in enumerate(b):
                    index = i + j
                    if index >= output_size:
                        index -= output_size
                    result[index] += x * y
            return [x % mod for x in result]

        a.extend([0] * (size - n))
        b.extend([0] * (size - m))

        if a == b:
            self._transform(a)
            b = a
        else:
            self._transform(a)
            self._transform(b)

        product = [x * y % mod for x, y in zip(a, b)]
        self._inverse_transform(product)
        return product[:output_size]

    def mod_power(self, values: Sequence[int], exponent: int) -> list[int]:
        """``values`` raised to ``exponent`` as a polynomial, modulo ``mod``."""
        if exponent < 0:
            raise ValueError("exponent must be non-negative")
        result = [1]
        if exponent == 0:
            return result

        for k in range(exponent.bit_length() - 1, -1, -1):
            result = self.mod_multiply(result, result)
            if exponent >> k & 1:
                result = self.mod_multiply(result, values)

        return result

    def mod_multiply_all(self, polynomials: Iterable[Sequence[int]]) -> list[int]:
        """The product of many polynomials, always combining the two shortest."""
        counter = itertools.count()
        heap = [(len(p), next(counter), list(p)) for p in polynomials]
        if not heap:
            return [1]
        heapq.heapify(heap)

        while len(heap) > 1:
            _, _, a = heapq.heappop(heap)
            _, _, b = heapq.heappop(heap)
            product = self.mod_multiply(a, b)
            heapq.heappush(heap, (len(product), next(counter), product))

        return heap[0][2]


@lru_cache(maxsize=None)
def _ntt_for(mod: int) -> NTT:
    return NTT(mod)


def inv_mod(a: int, m: int) -> int:
    """The inverse of ``a`` modulo ``m``; raises ValueError if none exists."""
    if m <= 0:
        raise ValueError("modulus must be positive")
    g, r, x, y = m, a % m, 0, 1

    while r != 0:
        q = g // r
        g, r = r, g % r
        x, y = y, x - q * y

    if g != 1:
        raise ValueError(f"{a} has no inverse modulo {m}")
    return x % m


def chinese_remainder_theorem(a0: int, m0: int, a1: int, m1: int, inv_m0: int) -> int:
    """The number in ``[0, m0 * m1)`` that is ``a0`` mod ``m0`` and ``a1`` mod ``m1``.

    ``inv_m0`` is the inverse of ``m0`` modulo ``m1``.
    """
    a0 %= m0
    k = (a1 - a0) * inv_m0 % m1
    return a0 + k * m0


def triple_crt(
    a: Sequence[int], m: Sequence[int], inv: Sequence[int], mod: int
) -> int:
    """Combine residues ``a`` modulo the coprime ``m``, then reduce modulo ``mod``.

    ``inv`` holds ``m[0]^-1 mod m[1]`` and ``(m[0] * m[1])^-1 mod m[2]``.
    """
    m01 = m[0] * m[1]
    a01 = chinese_remainder_theorem(a[0], m[0], a[1], m[1], inv[0])
    k = (a[2] - a01) * inv[1] % m[2]
    return (a01 + k * m01) % mod


def _prepare_triple_crt(m: Sequence[int]) -> tuple[int, int]:
    return inv_mod(m[0], m[1]), inv_mod(m[0] * m[1], m[2])


_MODS = (MOD, MOD2, MOD3)
_INV = _prepare_triple_crt(_MODS)
_INV23 = inv_mod(MOD2, MOD3)


def multi_mod_multiply(
    left: Sequence[int], right: Sequence[int], mod: int, circular: bool = False
) -> list[int]:
    """The product of two coefficient lists modulo any ``mod``, via three NTTs."""
    if mod <= 0:
        raise ValueError("modulus must be positive")
    products = [_ntt_for(p).mod_multiply(left, right, circular) for p in _MODS]
    return [triple_crt(residues, _MODS, _INV, mod) for residues in zip(*products)]


def multiply_exact(
    left: Sequence[int], right: Sequence[int], circular: bool = False
) -> list[int]:
    """The exact product of non-negative coefficient lists, via two NTTs.

    Correct while every output coefficient is below ``MOD2 * MOD3``.
    """
    product2 = _ntt_for(MOD2).mod_multiply(left, right, circular)
    product3 = _ntt_for(MOD3).mod_multiply(left, right, circular)
    return [
        chinese_remainder_theorem(x, MOD2, y, MOD3, _INV23)
        for x, y in zip(product2, product3)
    ]


def main(argv: list[str] | None = None) -> None:
    """Read ``mod_multiply n m mod circular`` and two lists; print the product."""
    tokens = iter(sys.stdin.read().split())
    task = next(tokens)
    if task != "mod_multiply":
        raise ValueError(f"unknown task {task!r}")

    n, m, mod = int(next(tokens)), int(next(tokens)), int(next(tokens))
    circular = bool(int(next(tokens)))
    left = [int(next(tokens)) for _ in range(n)]
    right = [int(next(tokens)) for _ in range(m)]

    if mod == MOD:
        answer = _ntt_for(MOD).mod_multiply(left, right, circular)
    elif mod < TRIPLE_CUTOFF:
        answer = [x % mod for x in multiply_exact(left, right, circular)]
    else:
        answer = multi_mod_multiply(left, right, mod, circular)

    if answer:
        print("\n".join(map(str, answer)))