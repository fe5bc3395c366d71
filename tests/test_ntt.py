import io
import math
import random

import pytest

from algokit.ntt import (
    MOD,
    MOD2,
    MOD3,
    NTT,
    chinese_remainder_theorem,
    inv_mod,
    main,
    multi_mod_multiply,
    multiply_exact,
    triple_crt,
)


def _evaluate(poly, x, mod):
    return sum(c * pow(x, i, mod) for i, c in enumerate(poly)) % mod


def _random_list(rng, length, bound):
    return [rng.randrange(bound) for _ in range(length)]


@pytest.mark.parametrize("sizes", [(3, 4), (10, 7), (200, 250), (300, 1)])
def test_mod_multiply_matches_evaluation(sizes):
    rng = random.Random(sum(sizes))
    n, m = sizes
    left = _random_list(rng, n, MOD)
    right = _random_list(rng, m, MOD)
    ntt = NTT()
    product = ntt.mod_multiply(left, right)
    assert len(product) == n + m - 1
    for x in (2, 12345, 987654):
        assert _evaluate(product, x, MOD) == _evaluate(left, x, MOD) * _evaluate(right, x, MOD) % MOD


def test_mod_multiply_square_path():
    rng = random.Random(7)
    values = _random_list(rng, 300, MOD)
    ntt = NTT()
    square = ntt.mod_multiply(values, values)
    assert _evaluate(square, 3, MOD) == pow(_evaluate(values, 3, MOD), 2, MOD)


def test_mod_multiply_reduces_negative_inputs():
    ntt = NTT()
    assert ntt.mod_multiply([-1], [2]) == [MOD - 2]


def test_mod_multiply_empty():
    ntt = NTT()
    assert ntt.mod_multiply([], [1, 2]) == []
    assert ntt.mod_multiply([1], []) == []


@pytest.mark.parametrize("sizes", [(5, 3), (200, 130)])
def test_circular_is_folded_linear(sizes):
    rng = random.Random(sizes[0])
    left = _random_list(rng, sizes[0], MOD)
    right = _random_list(rng, sizes[1], MOD)
    ntt = NTT()
    linear = ntt.mod_multiply(left, right)
    circular = ntt.mod_multiply(left, right, circular=True)
    size = len(circular)
    assert size & (size - 1) == 0 and size >= max(sizes)
    folded = [0] * size
    for i, c in enumerate(linear):
        folded[i % size] = (folded[i % size] + c) % MOD
    assert circular == folded


def test_mod_power_binomials():
    ntt = NTT()
    assert ntt.mod_power([1, 1], 10) == [math.comb(10, k) for k in range(11)]
    assert ntt.mod_power([5, 6, 7], 0) == [1]


def test_mod_power_large_matches_evaluation():
    ntt = NTT()
    base = [3, 1, 4, 1, 5]
    result = ntt.mod_power(base, 77)
    assert len(result) == 4 * 77 + 1
    assert _evaluate(result, 9, MOD) == pow(_evaluate(base, 9, MOD), 77, MOD)


def test_mod_power_negative_exponent():
    with pytest.raises(ValueError):
        NTT().mod_power([1, 1], -1)


def test_mod_multiply_all():
    ntt = NTT()
    assert ntt.mod_multiply_all([]) == [1]
    assert ntt.mod_multiply_all([[1, 1]] * 6) == [math.comb(6, k) for k in range(7)]
    polys = [[1, 2], [3, 4, 5], [6], [7, 8, 9, 10]]
    product = ntt.mod_multiply_all(polys)
    expected = 1
    for p in polys:
        expected = expected * _evaluate(p, 11, MOD) % MOD
    assert _evaluate(product, 11, MOD) == expected


def test_non_prime_modulus_rejected():
    with pytest.raises(ValueError):
        NTT(100)


def test_small_prime_brute_force_still_works():
    ntt = NTT(7)
    assert ntt.mod_multiply([1, 1], [1, 1]) == [math.comb(2, k) for k in range(3)]


def test_inv_mod():
    for a in (1, 2, 12345, MOD - 1):
        assert a * inv_mod(a, MOD) % MOD == 1
    assert MOD2 * inv_mod(MOD2, MOD3) % MOD3 == 1
    with pytest.raises(ValueError):
        inv_mod(2, 4)


def test_chinese_remainder_theorem():
    m0, m1 = MOD2, MOD3
    x = 1234567890123456789
    result = chinese_remainder_theorem(x % m0, m0, x % m1, m1, inv_mod(m0, m1))
    assert result == x
    assert 0 <= result < m0 * m1


def test_triple_crt():
    mods = (MOD, MOD2, MOD3)
    inv = (inv_mod(MOD, MOD2), inv_mod(MOD * MOD2, MOD3))
    x = 3 * 10**26 + 987654321
    residues = [x % p for p in mods]
    assert triple_crt(residues, mods, inv, 10**9 + 7) == x % (10**9 + 7)
    assert triple_crt(residues, mods, inv, 1) == 0


@pytest.mark.parametrize("mod", [10**9 + 7, 2**31 - 1, 123456])
def test_multi_mod_multiply(mod):
    rng = random.Random(mod)
    left = _random_list(rng, 150, mod)
    right = _random_list(rng, 170, mod)
    product = multi_mod_multiply(left, right, mod)
    assert len(product) == 319
    assert all(0 <= c < mod for c in product)
    assert _evaluate(product, 5, mod) == _evaluate(left, 5, mod) * _evaluate(right, 5, mod) % mod


def test_multiply_exact():
    rng = random.Random(99)
    left = _random_list(rng, 220, 10**6)
    right = _random_list(rng, 180, 10**6)
    product = multiply_exact(left, right)
    assert sum(product) == sum(left) * sum(right)
    alt = lambda p: sum(c if i % 2 == 0 else -c for i, c in enumerate(p))
    assert alt(product) == alt(left) * alt(right)
    assert product[0] == left[0] * right[0]
    assert product[-1] == left[-1] * right[-1]


def test_main_uses_single_prime(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(f"mod_multiply 2 2 {MOD} 0\n1 1\n1 1\n"))
    main()
    assert capsys.readouterr().out.split() == [str(math.comb(2, k)) for k in range(3)]


def test_main_small_and_large_mod(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("mod_multiply 2 1 5 0\n3 4\n4\n"))
    main()
    assert capsys.readouterr().out.split() == [str(12 % 5), str(16 % 5)]

    monkeypatch.setattr("sys.stdin", io.StringIO("mod_multiply 1 1 1000000007 0\n1000000006\n1000000006\n"))
    main()
    assert capsys.readouterr().out.split() == ["1"]


def test_main_rejects_unknown_task(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("bignum 1 2"))
    with pytest.raises(ValueError):
        main()