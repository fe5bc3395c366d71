"""An ordered multiset of keys backed by a size-augmented splay tree."""

from __future__ import annotations

import random
import sys
from collections.abc import Iterable, Iterator
from typing import Any

_LOG_CONSTANT = 2.0
_SPLAY_PROB = 0.25
_SIZE_CUTOFF = 400


class SplayNode:
    """A tree node holding a key and the size of its subtree."""

    __slots__ = ("key", "parent", "child", "size")

    def __init__(self, key: Any) -> None:
        self.key = key
        self.parent: SplayNode | None = None
        self.child: list[SplayNode | None] = [None, None]
        self.size = 1

    def __repr__(self) -> str:
        return f"SplayNode({self.key!r}, size={self.size})"

    def parent_index(self) -> int:
        """0 for a left child, 1 for a right child, -1 for a root."""
        if self.parent is None:
            return -1
        return int(self is self.parent.child[1])

    def set_child(self, index: int, node: SplayNode | None) -> None:
        self.child[index] = node
        if node is not None:
            node.parent = self

    def join(self) -> None:
        self.size = node_size(self.child[0]) + node_size(self.child[1]) + 1


def node_size(node: SplayNode | None) -> int:
    """Number of nodes in the subtree at ``node``; 0 for None."""
    return 0 if node is None else node.size


class SplayTree:
    """Sorted keys with rank queries; deep accesses trigger splaying."""

    def __init__(self, keys: Iterable[Any] = (), rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.splay_count = 0
        self.root: SplayNode | None = None
        ordered = sorted(keys)
        self._set_root(self._construct(ordered, 0, len(ordered)))

    def _construct(self, keys: list, start: int, end: int) -> SplayNode | None:
        if start >= end:
            return None
        mid = (start + end) // 2
        current = SplayNode(keys[mid])
        current.set_child(0, self._construct(keys, start, mid))
        current.set_child(1, self._construct(keys, mid + 1, end))
        current.join()
        return current

    def __len__(self) -> int:
        return node_size(self.root)

    def __bool__(self) -> bool:
        return self.root is not None

    def __iter__(self) -> Iterator[Any]:
        stack: list[SplayNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.child[0]
            node = stack.pop()
            yield node.key
            node = node.child[1]

    def __contains__(self, key: Any) -> bool:
        return self.contains(key)

    def _set_root(self, node: SplayNode | None) -> SplayNode | None:
        if node is not None:
            node.parent = None
        self.root = node
        return node

    def _rotate_up(self, x: SplayNode, x_join: bool = True) -> None:
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

    def _splay(self, x: SplayNode) -> None:
        self.splay_count += 1

        while x is not self.root:
            p = x.parent
            if p is not self.root:
                self._rotate_up(p if x.parent_index() == p.parent_index() else x, False)
            self._rotate_up(x, False)

        x.join()

    def _check_splay(self, x: SplayNode, depth: int) -> None:
        n = len(self)
        # Splay when deep, or with some probability while the tree is small.
        if depth > _LOG_CONSTANT * n.bit_length() or (
            n <= _SIZE_CUTOFF and self._rng.random() < _SPLAY_PROB
        ):
            self._splay(x)

    def insert(self, key: Any, require_unique: bool = False) -> tuple[SplayNode, int]:
        """Insert ``key``; return its node and the count of smaller keys.

        With ``require_unique``, an equal key already present is returned instead.
        """
        x = SplayNode(key)
        if self.root is None:
            return self._set_root(x), 0

        current = self.root
        previous = None
        below = depth = 0

        while current is not None:
            previous = current
            depth += 1
            if current.key < key:
                below += node_size(current.child[0]) + 1
                current = current.child[1]
            else:
                if require_unique and not key < current.key:
                    below += node_size(current.child[0])
                    self._check_splay(current, depth)
                    return current, below
                current = current.child[0]

        previous.set_child(int(previous.key < key), x)
        self._check_splay(x, depth)

        node = x
        while node is not None:
            node.join()
            node = node.parent

        return x, below

    def first(self) -> SplayNode | None:
        """The node with the smallest key, or None when empty."""
        if self.root is None:
            return None
        x = self.root
        depth = 0
        while x.child[0] is not None:
            x = x.child[0]
            depth += 1
        self._check_splay(x, depth)
        return x

    def last(self) -> SplayNode | None:
        """The node with the largest key, or None when empty."""
        if self.root is None:
            return None
        x = self.root
        depth = 0
        while x.child[1] is not None:
            x = x.child[1]
            depth += 1
        self._check_splay(x, depth)
        return x

    def successor(self, node: SplayNode | None) -> SplayNode | None:
        """The next node in key order, or None."""
        if node is None:
            return None
        if node.child[1] is not None:
            node = node.child[1]
            while node.child[0] is not None:
                node = node.child[0]
            return node
        while node.parent_index() == 1:
            node = node.parent
        return node.parent

    def predecessor(self, node: SplayNode | None) -> SplayNode | None:
        """The previous node in key order, or None."""
        if node is None:
            return None
        if node.child[0] is not None:
            node = node.child[0]
            while node.child[1] is not None:
                node = node.child[1]
            return node
        while node.parent_index() == 0:
            node = node.parent
        return node.parent

    def clear(self) -> None:
        """Remove every key."""
        self._set_root(None)

    def erase_node(self, node: SplayNode) -> None:
        """Remove ``node`` from the tree."""
        x = node
        if x.child[0] is None or x.child[1] is None:
            new_x = x.child[int(x.child[0] is None)]
            fix_node = x.parent
        else:
            nxt = self.successor(x)
            new_x = nxt
            fix_node = nxt if nxt.parent is x else nxt.parent
            nxt.parent.set_child(nxt.parent_index(), nxt.child[1])
            nxt.set_child(0, x.child[0])
            nxt.set_child(1, x.child[1])

        if x is self.root:
            self._set_root(new_x)
        else:
            x.parent.set_child(x.parent_index(), new_x)

        depth = 0
        walk = fix_node
        while walk is not None:
            walk.join()
            depth += 1
            walk = walk.parent

        if fix_node is not None:
            self._check_splay(fix_node, depth)

        x.parent = None
        x.child = [None, None]
        x.size = 1

    def lower_bound(self, key: Any) -> tuple[SplayNode | None, int]:
        """The first node with key >= ``key`` (or None) and the count of smaller keys."""
        current = self.root
        previous = answer = None
        below = depth = 0

        while current is not None:
            previous = current
            depth += 1
            if current.key < key:
                below += node_size(current.child[0]) + 1
                current = current.child[1]
            else:
                answer = current
                current = current.child[0]

        if previous is not None:
            self._check_splay(previous, depth)

        return answer, below

    def contains(self, key: Any) -> bool:
        node = self.lower_bound(key)[0]
        return node is not None and node.key == key

    def erase(self, key: Any) -> bool:
        """Remove one copy of ``key``; return whether one was found."""
        node = self.lower_bound(key)[0]
        if node is None or node.key != key:
            return False
        self.erase_node(node)
        return True

    def node_at_index(self, index: int) -> SplayNode | None:
        """The node at sorted position ``index``, or None if out of range."""
        if index < 0 or index >= len(self):
            return None

        current = self.root
        depth = 0

        while current is not None:
            left_size = node_size(current.child[0])
            depth += 1
            if index == left_size:
                self._check_splay(current, depth)
                return current
            if index < left_size:
                current = current.child[0]
            else:
                current = current.child[1]
                index -= left_size + 1

        raise AssertionError("subtree sizes are inconsistent")

    def query_prefix_key(self, key: Any) -> SplayNode | None:
        """A subtree holding exactly the keys less than ``key``."""
        node = self.lower_bound(key)[0]
        if node is None:
            return self.root
        self._splay(node)
        return node.child[0]

    def query_prefix_count(self, count: int) -> SplayNode | None:
        """A subtree holding exactly the first ``count`` keys."""
        if count <= 0:
            return None
        if count >= len(self):
            return self.root
        node = self.node_at_index(count)
        self._splay(node)
        return node.child[0]

    def query_suffix_key(self, key: Any) -> SplayNode | None:
        """A subtree holding exactly the keys >= ``key``."""
        node = self.lower_bound(key)[0]
        if node is None:
            return None
        node = self.predecessor(node)
        if node is None:
            return self.root
        self._splay(node)
        return node.child[1]

    def query_suffix_count(self, count: int) -> SplayNode | None:
        """A subtree holding exactly the last ``count`` keys."""
        if count <= 0:
            return None
        if count >= len(self):
            return self.root
        node = self.node_at_index(len(self) - count - 1)
        self._splay(node)
        return node.child[1]

    def query_range(self, start: int, end: int) -> SplayNode | None:
        """A subtree holding exactly the keys at positions [start, end)."""
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

        return after.child[0]

    def query_range_key(self, lower: Any, upper: Any) -> SplayNode | None:
        """A subtree holding exactly the keys in [lower, upper)."""
        return self.query_range(self.lower_bound(lower)[1], self.lower_bound(upper)[1])


def main(argv: list[str] | None = None) -> None:
    """Process ``insert``, ``index``, ``less_than`` and ``erase`` commands from stdin."""
    tokens = sys.stdin.read().split()
    if not tokens:
        return
    require_unique = bool(int(tokens[0]))
    tree = SplayTree()
    out = []

    for task, value in zip(tokens[1::2], tokens[2::2]):
        x = int(value)
        if task == "insert":
            out.append(str(tree.insert(x, require_unique)[1]))
        elif task == "index":
            node = tree.node_at_index(x)
            out.append("none" if node is None else str(node.key))
        elif task == "less_than":
            out.append(str(tree.lower_bound(x)[1]))
        elif task == "erase":
            out.append(str(int(tree.erase(x))))
        else:
            raise ValueError(f"unknown task {task!r}")

    if out:
        print("\n".join(out))