"""
Ordered authenticated map.

An `OrderedAuthenticatedMap` maps byte-string keys to values that can
present themselves as hash trees. Every key/value pair becomes a
`Labeled(key, value_tree)` node and the nodes are arranged in a binary tree
of forks, ordered lexicographically by key.

Tree shape
----------
The shape depends only on the set of keys, never on the order of insertion.
For the sorted keys in a range `[lo, hi)`, the middle key `mid = (lo + hi) // 2`
is the node of that range, the keys below it form its left subtree and the
keys above it form its right subtree. Node and children are joined as::

    labeled                       (no children)
    fork(left, labeled)           (left child only)
    fork(labeled, right)          (right child only)
    fork(left, fork(labeled, right))

Digests of every range are memoized and dropped on mutation, so repeated
`root_hash()` and `witness()` calls between two mutations only hash once.
Values that are themselves mutable (nested maps) must be changed through
`modify()` so the memo is dropped as well.
"""

from __future__ import annotations

import bisect
from typing import Callable, Generic, Iterator, Protocol, TypeVar

from canister_sig.types.byte_arrays import Bytes32

from .tree import (
    HashTree,
    empty,
    empty_hash,
    fork,
    fork_hash,
    labeled,
    labeled_hash,
    leaf,
    leaf_hash,
    pruned,
)


class AsHashTree(Protocol):
    """A value that can be stored in an authenticated map."""

    def root_hash(self) -> Bytes32:
        """Digest of `as_hash_tree()`, ideally without building the tree."""
        ...

    def as_hash_tree(self) -> HashTree:
        """The value revealed as a hash tree."""
        ...


class Unit:
    """A value carrying no data. Its tree is an empty leaf."""

    __slots__ = ()

    def root_hash(self) -> Bytes32:
        return leaf_hash(b"")

    def as_hash_tree(self) -> HashTree:
        return leaf(b"")

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Unit)

    def __hash__(self) -> int:
        return hash(Unit)

    def __repr__(self) -> str:
        return "Unit()"


V = TypeVar("V", bound=AsHashTree)
T = TypeVar("T")


def _join(
    left: T | None, node: T, right: T | None, join: Callable[[T, T], T]
) -> T:
    """Combine a range node with its optional children."""
    if left is None and right is None:
        return node
    if right is None:
        assert left is not None
        return join(left, node)
    if left is None:
        return join(node, right)
    return join(left, join(node, right))


class OrderedAuthenticatedMap(Generic[V]):
    """
    A map from byte strings to hashable values with a Merkle root hash.

    Keys are compared as raw bytes. `bytes` subclasses such as `Bytes32`
    are accepted and stored as plain `bytes`.
    """

    def __init__(self) -> None:
        self._keys: list[bytes] = []
        self._values: dict[bytes, V] = {}
        self._range_hashes: dict[tuple[int, int], Bytes32] = {}

    # -------------------------------------------------------------------------
    # Mapping operations
    # -------------------------------------------------------------------------

    def insert(self, key: bytes, value: V) -> None:
        """Insert or replace the value stored under `key`."""
        k = bytes(key)
        if k not in self._values:
            bisect.insort(self._keys, k)
        self._values[k] = value
        self._range_hashes.clear()

    def get(self, key: bytes) -> V | None:
        """Return the value stored under `key`, or None."""
        return self._values.get(bytes(key))

    def modify(self, key: bytes, fn: Callable[[V], T]) -> T | None:
        """
        Apply `fn` to the value stored under `key` in place.

        Returns whatever `fn` returns, or None (without calling `fn`) if the
        key is absent.
        """
        value = self._values.get(bytes(key))
        if value is None:
            return None
        result = fn(value)
        self._range_hashes.clear()
        return result

    def delete(self, key: bytes) -> V | None:
        """Remove `key` and return its value. Absent keys are ignored."""
        k = bytes(key)
        value = self._values.pop(k, None)
        if value is None:
            return None
        del self._keys[bisect.bisect_left(self._keys, k)]
        self._range_hashes.clear()
        return value

    def is_empty(self) -> bool:
        return not self._keys

    def keys(self) -> list[bytes]:
        """Keys in ascending byte order."""
        return list(self._keys)

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, (bytes, bytearray)) and bytes(key) in self._values

    def __iter__(self) -> Iterator[bytes]:
        return iter(list(self._keys))

    # -------------------------------------------------------------------------
    # Hashing
    # -------------------------------------------------------------------------

    def _node_hash(self, index: int) -> Bytes32:
        key = self._keys[index]
        return labeled_hash(key, self._values[key].root_hash())

    def _range_hash(self, lo: int, hi: int) -> Bytes32 | None:
        """Digest of the subtree holding keys `[lo, hi)`, None if the range is empty."""
        if lo >= hi:
            return None
        cached = self._range_hashes.get((lo, hi))
        if cached is not None:
            return cached

        mid = (lo + hi) // 2
        digest = _join(
            self._range_hash(lo, mid),
            self._node_hash(mid),
            self._range_hash(mid + 1, hi),
            fork_hash,
        )
        self._range_hashes[(lo, hi)] = digest
        return digest

    def root_hash(self) -> Bytes32:
        """Digest of the whole map. An empty map hashes like an empty tree."""
        digest = self._range_hash(0, len(self._keys))
        return empty_hash() if digest is None else digest

    def as_hash_tree(self) -> HashTree:
        """Reveal the entire map."""
        if not self._keys:
            return empty()
        return self._range_tree(0, len(self._keys))

    def _range_tree(self, lo: int, hi: int) -> HashTree:
        mid = (lo + hi) // 2
        key = self._keys[mid]
        return _join(
            self._range_tree(lo, mid) if lo < mid else None,
            labeled(key, self._values[key].as_hash_tree()),
            self._range_tree(mid + 1, hi) if mid + 1 < hi else None,
            fork,
        )

    # -------------------------------------------------------------------------
    # Witnesses
    # -------------------------------------------------------------------------

    def witness(self, key: bytes) -> HashTree:
        """Prove the value stored under `key`, revealing it completely."""
        return self.nested_witness(key, lambda value: value.as_hash_tree())

    def nested_witness(self, key: bytes, inner: Callable[[V], HashTree]) -> HashTree:
        """
        Prove the value stored under `key`.

        The returned tree reveals only the path to `key`: siblings of the
        path and the labeled nodes of other keys are pruned. The value itself
        is represented by `inner(value)`, which must have the value's digest
        (typically a witness into a nested map).

        Raises:
            KeyError: If `key` is not in the map.
        """
        k = bytes(key)
        if k not in self._values:
            raise KeyError(k)
        target = bisect.bisect_left(self._keys, k)
        return self._range_witness(0, len(self._keys), target, inner)

    def _pruned_range(self, lo: int, hi: int) -> HashTree | None:
        digest = self._range_hash(lo, hi)
        return None if digest is None else pruned(digest)

    def _range_witness(
        self, lo: int, hi: int, target: int, inner: Callable[[V], HashTree]
    ) -> HashTree:
        mid = (lo + hi) // 2
        if target == mid:
            key = self._keys[mid]
            return _join(
                self._pruned_range(lo, mid),
                labeled(key, inner(self._values[key])),
                self._pruned_range(mid + 1, hi),
                fork,
            )

        node = pruned(self._node_hash(mid))
        if target < mid:
            return _join(
                self._range_witness(lo, mid, target, inner),
                node,
                self._pruned_range(mid + 1, hi),
                fork,
            )
        return _join(
            self._pruned_range(lo, mid),
            node,
            self._range_witness(mid + 1, hi, target, inner),
            fork,
        )
