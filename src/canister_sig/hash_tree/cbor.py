"""
CBOR data model of hash trees.

Each node is a CBOR array whose first element is the node tag::

    Empty             -> [0]
    Fork(l, r)        -> [1, l, r]
    Labeled(k, t)     -> [2, k: bytes, t]
    Leaf(v)           -> [3, v: bytes]
    Pruned(h)         -> [4, h: bytes .size 32]

This module converts between `HashTree` nodes and the plain Python values
(`list`, `int`, `bytes`) that `cbor2` encodes and decodes. It does no byte
level work itself.

References:
    - https://internetcomputer.org/docs/current/references/ic-interface-spec#certification-encoding
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import IntEnum
from typing import Any

from canister_sig.types.byte_arrays import Bytes32

from .tree import Empty, Fork, HashTree, Labeled, Leaf, Pruned


class NodeTag(IntEnum):
    """First element of every encoded node."""

    EMPTY = 0
    FORK = 1
    LABELED = 2
    LEAF = 3
    PRUNED = 4


_ARITY: dict[NodeTag, int] = {
    NodeTag.EMPTY: 1,
    NodeTag.FORK: 3,
    NodeTag.LABELED: 3,
    NodeTag.LEAF: 2,
    NodeTag.PRUNED: 2,
}
"""Expected array length per node kind, tag included."""


class HashTreeDecodingError(ValueError):
    """Error while turning decoded CBOR values into a hash tree."""


def tree_to_cbor(tree: HashTree) -> list[Any]:
    """Return the CBOR data model of `tree`."""
    if isinstance(tree, Empty):
        return [NodeTag.EMPTY.value]
    if isinstance(tree, Fork):
        return [NodeTag.FORK.value, tree_to_cbor(tree.left), tree_to_cbor(tree.right)]
    if isinstance(tree, Labeled):
        return [NodeTag.LABELED.value, bytes(tree.label), tree_to_cbor(tree.subtree)]
    if isinstance(tree, Leaf):
        return [NodeTag.LEAF.value, bytes(tree.value)]
    if isinstance(tree, Pruned):
        return [NodeTag.PRUNED.value, bytes(tree.hash)]
    raise TypeError(f"Cannot encode hash tree node: {type(tree).__name__}")


def tree_from_cbor(item: Any) -> HashTree:
    """
    Build a hash tree from its decoded CBOR data model.

    Raises:
        HashTreeDecodingError: If `item` does not follow the node grammar.
    """
    is_array = isinstance(item, Sequence) and not isinstance(item, (str, bytes, bytearray))
    if not is_array or not item:
        raise HashTreeDecodingError(f"expected a non-empty array, got {type(item).__name__}")

    raw_tag = item[0]
    if not isinstance(raw_tag, int) or isinstance(raw_tag, bool) or raw_tag not in _TAGS:
        raise HashTreeDecodingError(f"unknown hash tree node tag: {raw_tag!r}")
    tag = NodeTag(raw_tag)

    if len(item) != _ARITY[tag]:
        raise HashTreeDecodingError(
            f"{tag.name.lower()} node expects {_ARITY[tag]} elements, got {len(item)}"
        )

    if tag is NodeTag.EMPTY:
        return Empty()
    if tag is NodeTag.FORK:
        return Fork(tree_from_cbor(item[1]), tree_from_cbor(item[2]))
    if tag is NodeTag.LABELED:
        return Labeled(_expect_bytes(item[1], "label"), tree_from_cbor(item[2]))
    if tag is NodeTag.LEAF:
        return Leaf(_expect_bytes(item[1], "leaf value"))

    digest = _expect_bytes(item[1], "pruned digest")
    if len(digest) != Bytes32.LENGTH:
        raise HashTreeDecodingError(
            f"pruned digest must be {Bytes32.LENGTH} bytes, got {len(digest)}"
        )
    return Pruned(Bytes32(digest))


_TAGS = frozenset(tag.value for tag in NodeTag)


def _expect_bytes(value: Any, what: str) -> bytes:
    if not isinstance(value, bytes):
        raise HashTreeDecodingError(f"{what} must be a byte string, got {type(value).__name__}")
    return value
