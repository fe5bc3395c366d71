import pytest

from algokit.modint import MOD, ModInt


def test_negative_values_wrap():
    assert ModInt(-1).value == MOD - 1
    assert ModInt(MOD + 5).value == 5


def test_inverse_multiplies_to_one():
    for v in (1, 2, 3, 12345, MOD - 1, 10**6 + 7):
        x = ModInt(v)
        assert x * x.inv() == 1


def test_inverse_of_zero_raises():
    with pytest.raises(ZeroDivisionError):
        ModInt(0).inv()


def test_pow_matches_builtin():
    for base in (0, 1, 2, 7, MOD - 2):
        for exponent in (0, 1, 5, 100, 10**9):
            assert ModInt(base).pow(exponent).value == pow(base, exponent, MOD)


def test_negative_pow_is_inverse_power():
    x = ModInt(5)
    assert x.pow(-3) * x.pow(3) == 1
    assert x ** -1 == x.inv()


def test_arithmetic_with_ints():
    a = ModInt(10)
    assert (a + 5).value == 15
    assert (5 - a).value == MOD - 5
    assert (a * 3).value == 30
    assert (a / 10) == 1
    assert (1 / a) * a == 1
    assert (-a).value == MOD - 10
    assert (-ModInt(0)).value == 0


def test_comparisons_and_hash():
    assert ModInt(3) < ModInt(4)
    assert ModInt(4) >= 4
    assert ModInt(MOD + 3) == ModInt(3)
    assert len({ModInt(1), ModInt(MOD + 1)}) == 1


def test_mismatched_moduli_raise():
    with pytest.raises(ValueError):
        ModInt(1, 7) + ModInt(1, 11)


def test_custom_modulus():
    x = ModInt(3, 7)
    assert x.inv().value * 3 % 7 == 1
    assert int(x * 5) == 15 % 7