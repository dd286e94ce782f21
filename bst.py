# bst.py
"""
Ordered symbol table backed by an unbalanced binary search tree. Supports:
  - put(key, value): insert or overwrite; put(key, None) deletes the key
  - get(key): Optional[value]
  - delete(key), delete_min(), delete_max()
  - min(), max(), floor(key), ceiling(key): Optional[key]
  - rank(key), select(index), size(lo, hi)
  - keys(lo, hi) in ascending order, level_order() breadth-first
  - len(tree), "k" in tree, str(tree)

Design:
  - Classic BST with no rebalancing; shape is a pure function of the
    insertion/deletion history, so worst-case operations are O(n)
  - Every node caches the size of its subtree; rank/select/size depend on it
  - Two-child deletion is Hibbard deletion (promote the in-order successor)
  - All walks are iterative: mutations record the descent path and fix the
    subtree sizes by walking that path backwards, so degenerate trees never
    hit the interpreter recursion limit
  - None is the absent marker; every other value (0, "", False) is storable

Not thread-safe: callers serialize access to a tree themselves.
"""

from __future__ import annotations

import os
import sys
import logging
from collections import deque
from typing import Any, Dict, Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar

# --------------------------- Logging ---------------------------
_logger = logging.getLogger("bst")
if not _logger.handlers:
    _h = logging.StreamHandler(stream=sys.stderr)
    _h.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    _logger.addHandler(_h)
_logger.setLevel(os.getenv("BST_LOG_LEVEL", "WARNING").upper())

V = TypeVar("V")


class OutOfRangeError(IndexError):
    """Raised by select() when the index is outside [0, len(tree))."""


# -------------------- Node --------------------
class _Node:
    """One key/value pair plus links to two exclusively owned subtrees."""
    __slots__ = ("key", "value", "left", "right", "size")

    def __init__(self, key: Any, value: Any) -> None:
        self.key = key
        self.value = value
        self.left: Optional[_Node] = None
        self.right: Optional[_Node] = None
        self.size: int = 1  # nodes in the subtree rooted here, self included


def _size(x: Optional[_Node]) -> int:
    return x.size if x is not None else 0


def _resize(x: _Node) -> None:
    x.size = 1 + _size(x.left) + _size(x.right)


# -------------------- Public tree --------------------
class BST(Generic[V]):
    """Binary search tree symbol table.

    Invariants:
      - Symmetric order: keys in x.left < x.key < keys in x.right
      - x.size == 1 + size(x.left) + size(x.right) for every node x
      - Each node is reachable through exactly one link (root or a child slot)

    Complexity:
      - put/get/delete/rank/select/floor/ceiling: O(height)
      - len/is_empty: O(1)
      - keys/level_order/str: O(n)
    """

    # Set True during testing to assert invariants after each write
    _ENABLE_VALIDATE_AFTER_WRITE = False

    def __init__(self) -> None:
        self._root: Optional[_Node] = None

    # -------------------- Mutators --------------------
    def put(self, key: Any, value: Optional[V]) -> None:
        """Insert or overwrite key's value. A None value deletes the key."""
        if key is None:
            raise TypeError("key must not be None")
        if value is None:
            _logger.debug("put(%r, None) treated as delete", key)
            self.delete(key)
            return

        path: List[_Node] = []
        x = self._root
        while x is not None:
            if key < x.key:
                path.append(x)
                x = x.left
            elif key > x.key:
                path.append(x)
                x = x.right
            else:
                # Overwrite in place; no structure change, sizes stay valid.
                x.value = value
                self._after_write()
                return

        node = _Node(key, value)
        if not path:
            self._root = node
        else:
            parent = path[-1]
            if key < parent.key:
                parent.left = node
            else:
                parent.right = node
        for p in reversed(path):
            _resize(p)
        self._after_write()

    def delete(self, key: Any) -> None:
        """Remove key if present (Hibbard deletion); absent keys are a no-op."""
        path: List[_Node] = []
        x = self._root
        while x is not None:
            if key < x.key:
                path.append(x)
                x = x.left
            elif key > x.key:
                path.append(x)
                x = x.right
            else:
                break
        if x is None:
            _logger.debug("delete(%r): key not present", key)
            return

        if x.right is None:
            replacement = x.left
        elif x.left is None:
            replacement = x.right
        else:
            # Successor takes x's place: it inherits x.left and the right
            # subtree with the successor already spliced out.
            rest, successor = _detach_min(x.right)
            successor.right = rest
            successor.left = x.left
            _resize(successor)
            replacement = successor

        self._replace_child(path[-1] if path else None, x, replacement)
        x.left = x.right = None
        for p in reversed(path):
            _resize(p)
        self._after_write()

    def delete_min(self) -> None:
        """Remove the smallest key; no-op on an empty tree."""
        if self._root is None:
            _logger.debug("delete_min() on empty tree")
            return
        self._root, removed = _detach_min(self._root)
        removed.right = None
        self._after_write()

    def delete_max(self) -> None:
        """Remove the largest key; no-op on an empty tree."""
        if self._root is None:
            _logger.debug("delete_max() on empty tree")
            return
        self._root, removed = _detach_max(self._root)
        removed.left = None
        self._after_write()

    def clear(self) -> None:
        """Remove all entries."""
        self._root = None

    def bulk_load(self, items: Iterable[Tuple[Any, Optional[V]]]) -> None:
        """Sequential puts, in the given order (order decides the shape)."""
        for k, v in items:
            self.put(k, v)

    # -------------------- Point queries --------------------
    def get(self, key: Any) -> Optional[V]:
        """Return the value stored at key, or None if missing."""
        node = self._find(key)
        return node.value if node is not None else None

    def contains(self, key: Any) -> bool:
        return self.get(key) is not None

    def __contains__(self, key: Any) -> bool:
        return self.contains(key)

    def __len__(self) -> int:
        """Number of stored keys."""
        return _size(self._root)

    def is_empty(self) -> bool:
        return self._root is None

    # -------------------- Ordered queries --------------------
    def min(self) -> Optional[Any]:
        """Smallest key, or None on an empty tree."""
        if self._root is None:
            return None
        x = self._root
        while x.left is not None:
            x = x.left
        return x.key

    def max(self) -> Optional[Any]:
        """Largest key, or None on an empty tree."""
        if self._root is None:
            return None
        x = self._root
        while x.right is not None:
            x = x.right
        return x.key

    def floor(self, key: Any) -> Optional[Any]:
        """Largest key <= key, or None if every key is greater."""
        best: Optional[_Node] = None
        x = self._root
        while x is not None:
            if key < x.key:
                x = x.left
            elif key > x.key:
                # x qualifies; anything better lives in x.right
                best = x
                x = x.right
            else:
                return x.key
        return best.key if best is not None else None

    def ceiling(self, key: Any) -> Optional[Any]:
        """Smallest key >= key, or None if every key is smaller."""
        best: Optional[_Node] = None
        x = self._root
        while x is not None:
            if key > x.key:
                x = x.right
            elif key < x.key:
                best = x
                x = x.left
            else:
                return x.key
        return best.key if best is not None else None

    def rank(self, key: Any) -> int:
        """Number of keys strictly less than key."""
        r = 0
        x = self._root
        while x is not None:
            if key < x.key:
                x = x.left
            elif key > x.key:
                r += 1 + _size(x.left)
                x = x.right
            else:
                return r + _size(x.left)
        return r

    def select(self, index: int) -> Any:
        """Return the key of the given rank (0-based).

        Raises
        ------
        OutOfRangeError
            If index < 0 or index >= len(self).
        """
        if index < 0 or index >= len(self):
            _logger.debug("select(%r) outside [0, %d)", index, len(self))
            raise OutOfRangeError(f"argument {index} given to select() is invalid")
        x = self._root
        while x is not None:
            t = _size(x.left)
            if t > index:
                x = x.left
            elif t < index:
                index -= t + 1
                x = x.right
            else:
                return x.key
        # Unreachable while sizes are consistent.
        raise AssertionError("subtree sizes inconsistent")

    def size(self, lo: Any, hi: Any) -> int:
        """Number of keys in the closed range [lo, hi]."""
        if lo > hi:
            return 0
        n = self.rank(hi) - self.rank(lo)
        return n + 1 if self.contains(hi) else n

    # -------------------- Enumeration --------------------
    def keys(self, lo: Optional[Any] = None, hi: Optional[Any] = None) -> List[Any]:
        """Ascending list of keys in [lo, hi]; bounds default to min()/max()."""
        if self._root is None:
            return []
        if lo is None:
            lo = self.min()
        if hi is None:
            hi = self.max()
        return [n.key for n in self._collect(lo, hi)]

    def items(self) -> List[Tuple[Any, V]]:
        """Ascending (key, value) pairs."""
        if self._root is None:
            return []
        return [(n.key, n.value) for n in self._collect(self.min(), self.max())]

    def __iter__(self) -> Iterator[Any]:
        return iter(self.keys())

    def level_order(self) -> List[Any]:
        """Keys breadth-first: root, then each depth level left to right."""
        out: List[Any] = []
        queue: deque = deque([self._root])
        while queue:
            x = queue.popleft()
            if x is None:
                continue
            out.append(x.key)
            queue.append(x.left)
            queue.append(x.right)
        return out

    def __str__(self) -> str:
        return "BST{" + ", ".join(f"{k}: {v}" for k, v in self.items()) + "}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(len={len(self)})"

    # -------------------- Debug helpers --------------------
    def height(self) -> int:
        """Nodes on the longest root-to-leaf path (0 when empty)."""
        h = 0
        level = [self._root] if self._root is not None else []
        while level:
            h += 1
            level = [c for x in level for c in (x.left, x.right) if c is not None]
        return h

    def stats(self) -> Dict[str, int]:
        return {"size": len(self), "height": self.height()}

    def _validate(self) -> None:
        """Check BST invariants; raise AssertionError if any is violated.

        Checks:
          - Symmetric order (strict, so no duplicate keys either).
          - Cached subtree sizes match the actual subtree sizes.
          - rank(select(i)) == i and select(rank(k)) == k.
        """
        # (node, lower-bound node, upper-bound node); None = unbounded
        stack: List[Tuple[_Node, Any, Any]] = []
        if self._root is not None:
            stack.append((self._root, None, None))
        order: List[_Node] = []
        while stack:
            x, lo, hi = stack.pop()
            assert lo is None or lo.key < x.key, f"symmetric order broken at {x.key!r}"
            assert hi is None or x.key < hi.key, f"symmetric order broken at {x.key!r}"
            order.append(x)
            if x.left is not None:
                stack.append((x.left, lo, x))
            if x.right is not None:
                stack.append((x.right, x, hi))
        for x in order:
            assert x.size == 1 + _size(x.left) + _size(x.right), \
                f"subtree size wrong at {x.key!r}"

        for i in range(len(self)):
            assert self.rank(self.select(i)) == i, f"rank(select({i})) != {i}"
        for k in self.keys():
            assert self.select(self.rank(k)) == k, f"select(rank({k!r})) != {k!r}"

    # -------------------- Internal helpers --------------------
    def _after_write(self) -> None:
        if self._ENABLE_VALIDATE_AFTER_WRITE:
            self._validate()

    def _find(self, key: Any) -> Optional[_Node]:
        x = self._root
        while x is not None:
            if key < x.key:
                x = x.left
            elif key > x.key:
                x = x.right
            else:
                return x
        return None

    def _replace_child(self, parent: Optional[_Node], old: _Node, new: Optional[_Node]) -> None:
        """Point the link that holds `old` (root or a child slot) at `new`."""
        if parent is None:
            self._root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    def _collect(self, lo: Any, hi: Any) -> List[_Node]:
        """In-order walk pruned to [lo, hi].

        Descend left only while lo < node.key, emit when lo <= key <= hi,
        and descend right only while hi > node.key.
        """
        out: List[_Node] = []
        stack: List[_Node] = []
        x = self._root
        while stack or x is not None:
            if x is not None:
                stack.append(x)
                x = x.left if lo < x.key else None
            else:
                x = stack.pop()
                if lo <= x.key <= hi:
                    out.append(x)
                x = x.right if hi > x.key else None
        return out


# -------------------- Splicing helpers --------------------
def _detach_min(x: _Node) -> Tuple[Optional[_Node], _Node]:
    """Splice the minimum out of subtree x.

    Returns (new subtree root, detached minimum node). The detached node still
    carries its old right link; callers reuse or clear it.
    """
    if x.left is None:
        return x.right, x
    path: List[_Node] = []
    n = x
    while n.left is not None:
        path.append(n)
        n = n.left
    path[-1].left = n.right
    for p in reversed(path):
        _resize(p)
    return x, n


def _detach_max(x: _Node) -> Tuple[Optional[_Node], _Node]:
    """Mirror of _detach_min; the detached node keeps its old left link."""
    if x.right is None:
        return x.left, x
    path: List[_Node] = []
    n = x
    while n.right is not None:
        path.append(n)
        n = n.right
    path[-1].right = n.left
    for p in reversed(path):
        _resize(p)
    return x, n
