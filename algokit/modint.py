"""Integers modulo a fixed modulus."""

from __future__ import annotations

from functools import total_ordering

MOD = 998244353


@total_ordering
class ModInt:
    """An integer reduced modulo ``mod`` (998244353 unless given)."""

    __slots__ = ("value", "mod")

    def __init__(self, value: int | ModInt = 0, mod: int = MOD) -> None:
        if isinstance(value, ModInt):
            value = value.value
        if mod <= 0:
            raise ValueError("modulus must be positive")
        self.value = value % mod
        self.mod = mod

    def _coerce(self, other):
        if isinstance(other, ModInt):
            if other.mod != self.mod:
                raise ValueError("cannot combine values with different moduli")
            return other.value
        if isinstance(other, int):
            return other % self.mod
        return NotImplemented

    def _make(self, value: int) -> ModInt:
        return ModInt(value, self.mod)

    def __add__(self, other):
        value = self._coerce(other)
        if value is NotImplemented:
            return NotImplemented
        return self._make(self.value + value)

    __radd__ = __add__

    def __sub__(self, other):
        value = self._coerce(other)
        if value is NotImplemented:
            return NotImplemented
        return self._make(self.value - value)

    def __rsub__(self, other):
        value = self._coerce(other)
        if value is NotImplemented:
            return NotImplemented
        return self._make(value - self.value)

    def __mul__(self, other):
        value = self._coerce(other)
        if value is NotImplemented:
            return NotImplemented
        return self._make(self.value * value)

    __rmul__ = __mul__

    def __truediv__(self, other):
        value = self._coerce(other)
        if value is NotImplemented:
            return NotImplemented
        return self * self._make(value).inv()

    def __rtruediv__(self, other):
        value = self._coerce(other)
        if value is NotImplemented:
            return NotImplemented
        return self._make(value) * self.inv()

    def __neg__(self) -> ModInt:
        return self._make(-self.value)

    def __pow__(self, exponent: int) -> ModInt:
        return self.pow(exponent)

    def __eq__(self, other) -> bool:
        value = self._coerce(other)
        if value is NotImplemented:
            return NotImplemented
        return self.value == value

    def __lt__(self, other) -> bool:
        value = self._coerce(other)
        if value is NotImplemented:
            return NotImplemented
        return self.value < value

    def __hash__(self) -> int:
        return hash((self.value, self.mod))

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __bool__(self) -> bool:
        return self.value != 0

    def __repr__(self) -> str:
        return f"ModInt({self.value}, mod={self.mod})"

    def __str__(self) -> str:
        return str(self.value)

    def inv(self) -> ModInt:
        """Return the multiplicative inverse; raise ZeroDivisionError for zero."""
        if self.value == 0:
            raise ZeroDivisionError("zero has no inverse")
        return self._make(pow(self.value, -1, self.mod))

    def pow(self, exponent: int) -> ModInt:
        """Raise to an integer power; negative powers use the inverse."""
        if exponent < 0:
            return self.inv().pow(-exponent)
        return self._make(pow(self.value, exponent, self.mod))