"""Online prefix maximum (or minimum) over keyed insertions."""

from __future__ import annotations

import math
import sys
from collections.abc import Iterator
from typing import Any

from sortedcontainers import SortedDict

INF64 = 2 * 10**18 + 5


class OnlinePrefixMax:
    """Insert (key, value) pairs and ask for the best value among keys below a limit.

    With ``maximum_mode`` false, the best value is the minimum instead.
    """

    def __init__(self, maximum_mode: bool = True, default: Any = None) -> None:
        self.maximum_mode = maximum_mode
        if default is None:
            default = -math.inf if maximum_mode else math.inf
        self.default = default
        self.optimal = SortedDict()

    def _is_better(self, a: Any, b: Any) -> bool:
        return b < a if self.maximum_mode else a < b

    def __len__(self) -> int:
        return len(self.optimal)

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        return iter(self.optimal.items())

    def query(self, key_limit: Any) -> Any:
        """The best value over entries with key < ``key_limit``, else the default."""
        index = self.optimal.bisect_left(key_limit)
        if index == 0:
            return self.default
        return self.optimal.peekitem(index - 1)[1]

    def insert(self, key: Any, value: Any) -> None:
        """Add an entry and drop entries it makes obsolete."""
        optimal = self.optimal
        index = optimal.bisect_right(key)

        if index > 0:
            previous_key, previous_value = optimal.peekitem(index - 1)
            if not self._is_better(value, previous_value):
                return
            if previous_key == key:
                del optimal[previous_key]
                index -= 1

        while index < len(optimal):
            next_key, next_value = optimal.peekitem(index)
            if self._is_better(next_value, value):
                break
            del optimal[next_key]

        optimal[key] = value


def merge_into(x: OnlinePrefixMax, y: OnlinePrefixMax) -> None:
    """Move all of ``y`` into ``x``; the larger store is kept and ``y`` ends empty."""
    if len(x) < len(y):
        x.optimal, y.optimal = y.optimal, x.optimal

    for key, value in list(y.optimal.items()):
        x.insert(key, value)

    y.optimal.clear()


def main(argv: list[str] | None = None) -> None:
    """Read N pairs ``key value``; before each insertion print the prefix maximum."""
    tokens = sys.stdin.read().split()
    n = int(tokens[0])
    prefix_max = OnlinePrefixMax(True, -INF64)
    max_size = 0
    out = []

    for i in range(n):
        key, value = int(tokens[1 + 2 * i]), int(tokens[2 + 2 * i])
        out.append(str(prefix_max.query(key)))
        prefix_max.insert(key, value)
        max_size = max(max_size, len(prefix_max))

    print(f"max size = {max_size}", file=sys.stderr)
    if out:
        print("\n".join(out))