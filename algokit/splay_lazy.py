"""A sequence splay tree with lazy range reverse, add and assign."""

from __future__ import annotations

import math
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class SplayChange:
    """A pending change: optional reverse, then assignment, then addition.

    ``to_set`` of None means no assignment.
    """

    reverse: bool = False
    to_add: int = 0
    to_set: int | None = None

    def has_set(self) -> bool:
        return self.to_set is not None

    def has_change(self) -> bool:
        return self.reverse or self.has_set() or self.to_add != 0

    def combine(self, other: SplayChange) -> SplayChange:
        """The change equal to applying this one and then ``other``."""
        if other.has_set():
            return SplayChange(self.reverse ^ other.reverse, other.to_add, other.to_set)
        return SplayChange(self.reverse ^ other.reverse, self.to_add + other.to_add, self.to_set)


_IDENTITY = SplayChange()


def node_sum(node: LazySplayNode | None) -> int:
    """Sum of the values in the subtree at ``node``; 0 for None."""
    return 0 if node is None else node.sum


def node_max(node: LazySplayNode | None) -> float:
    """Maximum value in the subtree at ``node``; minus infinity for None."""
    return -math.inf if node is None else node.maximum


def _node_size(node: LazySplayNode | None) -> int:
    return 0 if node is None else node.size


class LazySplayNode:
    """A node with its value and the size, sum and maximum of its subtree."""

    __slots__ = ("parent", "child", "size", "value", "maximum", "sum", "change")

    def __init__(self, value: int) -> None:
        self.parent: LazySplayNode | None = None
        self.child: list[LazySplayNode | None] = [None, None]
        self.size = 1
        self.value = value
        self.maximum = value
        self.sum = value
        self.change = _IDENTITY

    def __repr__(self) -> str:
        return f"LazySplayNode({self.value!r}, size={self.size})"

    def parent_index(self) -> int:
        """0 for a left child, 1 for a right child, -1 for a root."""
        if self.parent is None:
            return -1
        return int(self is self.parent.child[1])

    def set_child(self, index: int, node: LazySplayNode | None) -> None:
        self.child[index] = node
        if node is not None:
            node.parent = self

    def apply_and_combine(self, now: SplayChange) -> None:
        """Apply ``now`` to this subtree's summary and queue it for the children."""
        if now.reverse:
            self.child[0], self.child[1] = self.child[1], self.child[0]
        if now.has_set():
            self.value = now.to_set
            self.sum = self.size * now.to_set
            self.maximum = now.to_set
        self.value += now.to_add
        self.sum += self.size * now.to_add
        self.maximum += now.to_add
        self.change = self.change.combine(now)

    def push(self) -> None:
        """Hand the pending change down to the children."""
        if self.change.has_change():
            for c in self.child:
                if c is not None:
                    c.apply_and_combine(self.change)
            self.change = _IDENTITY

    def join(self) -> None:
        """Recompute the summary from the children."""
        left, right = self.child
        self.size = _node_size(left) + _node_size(right) + 1
        self.sum = self.value + node_sum(left) + node_sum(right)
        self.maximum = max(self.value, node_max(left), node_max(right))


class LazySplayTree:
    """A sequence of integers supporting range queries and lazy range updates."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.splay_count = 0
        self.root: LazySplayNode | None = None
        items = list(values)
        self._set_root(self._construct(items, 0, len(items)))

    def _construct(self, values: list[int], start: int, end: int) -> LazySplayNode | None:
        if start >= end:
            return None
        mid = (start + end) // 2
        current = LazySplayNode(values[mid])
        current.set_child(0, self._construct(values, start, mid))
        current.set_child(1, self._construct(values, mid + 1, end))
        current.join()
        return current

    def __len__(self) -> int:
        return _node_size(self.root)

    def __bool__(self) -> bool:
        return self.root is not None

    def __iter__(self) -> Iterator[int]:
        stack: list[LazySplayNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                node.push()
                stack.append(node)
                node = node.child[0]
            node = stack.pop()
            yield node.value
            node = node.child[1]

    def _set_root(self, node: LazySplayNode | None) -> LazySplayNode | None:
        if node is not None:
            node.parent = None
        self.root = node
        return node

    def _rotate_up(self, x: LazySplayNode, x_join: bool = True) -> None:
        p = x.parent
        gp = p.parent
        index = x.parent_index()

        if gp is None:
            self._set_root(x)
        else:
            gp.set_child(p.parent_index(), x)

        p.set_child(index, x.child[1 - index])
        x.set_child(1 - index, p)
        p.join()

        if x_join:
            x.join()

    def _splay(self, x: LazySplayNode) -> None:
        # Ancestors of x must already have been pushed by the caller.
        self.splay_count += 1
        x.push()

        while x is not self.root:
            p = x.parent
            if p is not self.root:
                self._rotate_up(p if x.parent_index() == p.parent_index() else x, False)
            self._rotate_up(x, False)

        x.join()

    def node_at_index(self, index: int) -> LazySplayNode | None:
        """The node at position ``index``, splayed to the root; None if out of range."""
        if index < 0 or index >= len(self):
            return None

        current = self.root
        while current is not None:
            current.push()
            left_size = _node_size(current.child[0])
            if index == left_size:
                self._splay(current)
                return current
            if index < left_size:
                current = current.child[0]
            else:
                current = current.child[1]
                index -= left_size + 1

        raise AssertionError("subtree sizes are inconsistent")

    def insert(self, index: int, value: int) -> LazySplayNode:
        """Insert ``value`` so that it ends up at position ``index``."""
        return self.insert_node(index, LazySplayNode(value))

    def insert_node(self, index: int, node: LazySplayNode | None) -> LazySplayNode | None:
        """Insert a detached subtree so that it starts at position ``index``."""
        if not 0 <= index <= len(self):
            raise IndexError(f"insert position {index} out of range [0, {len(self)}]")
        if node is None:
            return None
        if self.root is None:
            return self._set_root(node)

        current = self.root
        previous = current
        previous_dir = 0

        while current is not None:
            current.push()
            previous = current
            left_size = _node_size(current.child[0])
            if index <= left_size:
                current = current.child[0]
                previous_dir = 0
            else:
                current = current.child[1]
                previous_dir = 1
                index -= left_size + 1

        previous.set_child(previous_dir, node)
        self._splay(node)
        return node

    def first(self) -> LazySplayNode | None:
        """The first node, splayed to the root; None when empty."""
        if self.root is None:
            return None
        x = self.root
        x.push()
        while x.child[0] is not None:
            x = x.child[0]
            x.push()
        self._splay(x)
        return x

    def last(self) -> LazySplayNode | None:
        """The last node, splayed to the root; None when empty."""
        if self.root is None:
            return None
        x = self.root
        x.push()
        while x.child[1] is not None:
            x = x.child[1]
            x.push()
        self._splay(x)
        return x

    def successor(self, node: LazySplayNode | None) -> LazySplayNode | None:
        """The next node in sequence order, or None."""
        if node is None:
            return None
        node.push()
        if node.child[1] is not None:
            node = node.child[1]
            node.push()
            while node.child[0] is not None:
                node = node.child[0]
                node.push()
            return node
        while node.parent_index() == 1:
            node = node.parent
        return node.parent

    def predecessor(self, node: LazySplayNode | None) -> LazySplayNode | None:
        """The previous node in sequence order, or None."""
        if node is None:
            return None
        node.push()
        if node.child[0] is not None:
            node = node.child[0]
            node.push()
            while node.child[1] is not None:
                node = node.child[1]
                node.push()
            return node
        while node.parent_index() == 0:
            node = node.parent
        return node.parent

    def clear(self) -> None:
        """Remove every value."""
        self._set_root(None)

    def erase(self, node: LazySplayNode) -> None:
        """Remove ``node`` from the sequence."""
        self._splay(node)
        left, right = node.child
        if left is None or right is None:
            self._set_root(right if left is None else left)
        else:
            self._set_root(left)
            self.insert_node(len(self), right)

        node.parent = None
        node.child = [None, None]
        node.size = 1
        node.change = _IDENTITY
        node.sum = node.maximum = node.value

    def detach(self, node: LazySplayNode | None) -> None:
        """Cut ``node``'s subtree out of the tree, leaving two separate trees."""
        if node is None:
            return
        if node is self.root:
            self._set_root(None)
            return

        parent = node.parent
        parent.set_child(node.parent_index(), None)
        node.parent = None
        self._splay(parent)
        node.push()

    def query_prefix_count(self, count: int) -> LazySplayNode | None:
        """A subtree holding exactly the first ``count`` values."""
        if count <= 0:
            return None
        if count >= len(self):
            return self.root
        node = self.node_at_index(count)
        self._splay(node)
        return node.child[0]

    def query_suffix_count(self, count: int) -> LazySplayNode | None:
        """A subtree holding exactly the last ``count`` values."""
        if count <= 0:
            return None
        if count >= len(self):
            return self.root
        node = self.node_at_index(len(self) - count - 1)
        self._splay(node)
        return node.child[1]

    def query_range(self, start: int, end: int) -> LazySplayNode | None:
        """A subtree holding exactly positions [start, end); None if empty."""
        if start >= end:
            return None
        if start <= 0:
            return self.query_prefix_count(end)
        if end >= len(self):
            return self.query_suffix_count(len(self) - start)

        before = self.node_at_index(start - 1)
        after = self.node_at_index(end)
        self._splay(after)
        self._splay(before)

        if after.parent is not before:
            self._rotate_up(after)

        if before.child[1] is not after:
            raise AssertionError("range query left the tree in an unexpected shape")
        return after.child[0]

    def update(self, node: LazySplayNode | None, change: SplayChange) -> None:
        """Apply ``change`` to every value in ``node``'s subtree."""
        if node is None:
            return
        node.apply_and_combine(change)
        self._splay(node)


def _check_range(left: int, right: int, n: int) -> None:
    if not 0 <= left <= right <= n:
        raise ValueError(f"range [{left}, {right}) out of bounds for size {n}")


def main(argv: list[str] | None = None) -> None:
    """Read N values and then sequence commands from stdin; print the results."""
    tokens = sys.stdin.read().split()
    if not tokens:
        return
    pos = 0

    def take() -> int:
        nonlocal pos
        value = int(tokens[pos])
        pos += 1
        return value

    n = take()
    tree = LazySplayTree([take() for _ in range(n)])
    out: list[str] = []

    while pos < len(tokens):
        task = tokens[pos]
        pos += 1
        n = len(tree)

        if task == "insert":
            index, value = take(), take()
            tree.insert(index, value)
        elif task == "erase":
            index = take()
            if not 0 <= index < n:
                raise ValueError(f"index {index} out of range")
            tree.erase(tree.node_at_index(index))
        elif task == "get":
            index = take()
            if not 0 <= index < n:
                raise ValueError(f"index {index} out of range")
            out.append(str(tree.node_at_index(index).value))
        elif task == "sum":
            left, right = take(), take()
            _check_range(left, right, n)
            out.append(str(node_sum(tree.query_range(left, right))))
        elif task == "max":
            left, right = take(), take()
            _check_range(left, right, n)
            out.append(str(node_max(tree.query_range(left, right))))
        elif task == "reverse":
            left, right = take(), take()
            _check_range(left, right, n)
            tree.update(tree.query_range(left, right), SplayChange(True))
        elif task == "reattach":
            left, right, index = take(), take(), take()
            _check_range(left, right, n)
            if not 0 <= index <= n - (right - left):
                raise ValueError(f"index {index} out of range")
            node = tree.query_range(left, right)
            tree.detach(node)
            tree.insert_node(index, node)
        elif task == "add":
            left, right, add = take(), take(), take()
            _check_range(left, right, n)
            tree.update(tree.query_range(left, right), SplayChange(False, add))
        elif task == "set":
            left, right, to_set = take(), take(), take()
            _check_range(left, right, n)
            tree.update(tree.query_range(left, right), SplayChange(False, 0, to_set))
        else:
            raise ValueError(f"unknown task {task!r}")

    forward = []
    node = tree.first()
    while node is not None:
        forward.append(str(node.value))
        node = tree.successor(node)

    backward = []
    node = tree.last()
    while node is not None:
        backward.append(str(node.value))
        node = tree.predecessor(node)

    if forward:
        out.append(" ".join(forward))
        out.append(" ".join(backward))
    if out:
        print("\n".join(out))