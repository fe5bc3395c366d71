"""A sorted set with rank and select queries."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from typing import Any

from sortedcontainers import SortedList


class OrderedSet:
    """A set of distinct values kept in sorted order."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items = SortedList(set(values))

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __contains__(self, value: Any) -> bool:
        return value in self._items

    def add(self, value: Any) -> bool:
        """Insert ``value``; return whether it was new."""
        if value in self._items:
            return False
        self._items.add(value)
        return True

    def discard(self, value: Any) -> bool:
        """Remove ``value`` if present; return whether it was."""
        if value not in self._items:
            return False
        self._items.remove(value)
        return True

    def find_by_order(self, index: int) -> Any:
        """The value at sorted position ``index`` (0-based)."""
        if not 0 <= index < len(self._items):
            raise IndexError("order out of range")
        return self._items[index]

    def order_of_key(self, key: Any) -> int:
        """How many values are strictly less than ``key``."""
        return self._items.bisect_left(key)


def main(argv: list[str] | None = None) -> None:
    """Process Q commands ``I x``, ``D x``, ``K k`` and ``C x`` from stdin."""
    tokens = sys.stdin.read().split()
    q = int(tokens[0])
    values = OrderedSet()
    out = []

    for i in range(q):
        op, x = tokens[1 + 2 * i], int(tokens[2 + 2 * i])
        if op == "I":
            values.add(x)
        elif op == "D":
            values.discard(x)
        elif op == "K":
            try:
                out.append(str(values.find_by_order(x - 1)))
            except IndexError:
                out.append("invalid")
        elif op == "C":
            out.append(str(values.order_of_key(x)))

    if out:
        print("\n".join(out))