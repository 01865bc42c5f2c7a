"""
Certified hash trees.

A hash tree is a partial view of a larger labeled tree: some parts are
revealed, the rest is replaced by `Pruned` digests. Whatever is revealed, the
root digest stays the same, which is what lets a small tree act as a proof
against a separately certified root hash.

Node kinds::

    HashTree ::= Empty
               | Fork(HashTree, HashTree)
               | Labeled(label, HashTree)
               | Leaf(bytes)
               | Pruned(digest)

Digests are domain separated with `hash_with_domain`::

    digest(Empty)         = H("ic-hashtree-empty")
    digest(Fork(l, r))    = H("ic-hashtree-fork"    || digest(l) || digest(r))
    digest(Labeled(k, t)) = H("ic-hashtree-labeled" || k || digest(t))
    digest(Leaf(v))       = H("ic-hashtree-leaf"    || v)
    digest(Pruned(h))     = h

References:
    - https://internetcomputer.org/docs/current/references/ic-interface-spec#certification-encoding
    - https://internetcomputer.org/docs/current/references/ic-interface-spec#lookup
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, TypeAlias

from canister_sig.hashing import hash_with_domain
from canister_sig.types.byte_arrays import Bytes32

DOMAIN_EMPTY = b"ic-hashtree-empty"
"""Domain separator of empty nodes."""

DOMAIN_FORK = b"ic-hashtree-fork"
"""Domain separator of fork nodes."""

DOMAIN_LABELED = b"ic-hashtree-labeled"
"""Domain separator of labeled nodes."""

DOMAIN_LEAF = b"ic-hashtree-leaf"
"""Domain separator of leaf nodes."""


def empty_hash() -> Bytes32:
    """Digest of an empty tree."""
    return hash_with_domain(DOMAIN_EMPTY, b"")


def fork_hash(left: bytes, right: bytes) -> Bytes32:
    """Digest of a fork over two child digests."""
    return hash_with_domain(DOMAIN_FORK, left + right)


def labeled_hash(label: bytes, subtree: bytes) -> Bytes32:
    """Digest of a labeled node over its child digest."""
    return hash_with_domain(DOMAIN_LABELED, label + subtree)


def leaf_hash(value: bytes) -> Bytes32:
    """Digest of a leaf holding `value`."""
    return hash_with_domain(DOMAIN_LEAF, value)


@dataclass(frozen=True, slots=True)
class Empty:
    """A tree with nothing in it."""

    def digest(self) -> Bytes32:
        return empty_hash()


@dataclass(frozen=True, slots=True)
class Fork:
    """An unlabeled binary node joining two subtrees."""

    left: HashTree
    right: HashTree

    def digest(self) -> Bytes32:
        return fork_hash(self.left.digest(), self.right.digest())


@dataclass(frozen=True, slots=True)
class Labeled:
    """A subtree reachable under `label`."""

    label: bytes
    subtree: HashTree

    def digest(self) -> Bytes32:
        return labeled_hash(self.label, self.subtree.digest())


@dataclass(frozen=True, slots=True)
class Leaf:
    """A revealed value."""

    value: bytes

    def digest(self) -> Bytes32:
        return leaf_hash(self.value)


@dataclass(frozen=True, slots=True)
class Pruned:
    """A hidden subtree, represented only by its digest."""

    hash: Bytes32

    def digest(self) -> Bytes32:
        return Bytes32(self.hash)


HashTree: TypeAlias = Empty | Fork | Labeled | Leaf | Pruned
"""Any hash tree node."""


def empty() -> Empty:
    return Empty()


def fork(left: HashTree, right: HashTree) -> Fork:
    return Fork(left, right)


def labeled(label: bytes, subtree: HashTree) -> Labeled:
    return Labeled(bytes(label), subtree)


def leaf(value: bytes) -> Leaf:
    return Leaf(bytes(value))


def pruned(digest: bytes) -> Pruned:
    return Pruned(Bytes32(digest))


# -----------------------------------------------------------------------------
# Lookup
# -----------------------------------------------------------------------------


class LookupStatus(Enum):
    """Outcome of looking a path up in a (possibly pruned) hash tree."""

    FOUND = auto()
    """The path exists and was revealed."""

    ABSENT = auto()
    """The tree proves that the path does not exist."""

    UNKNOWN = auto()
    """The path would pass through a pruned part of the tree."""

    ERROR = auto()
    """The path ends on an inner node, so there is no value to return."""


@dataclass(frozen=True, slots=True)
class LookupResult:
    """Status of a lookup together with the value or subtree that was found."""

    status: LookupStatus
    value: bytes | HashTree | None = None

    @property
    def found(self) -> bool:
        return self.status is LookupStatus.FOUND


_ABSENT = LookupResult(LookupStatus.ABSENT)
_UNKNOWN = LookupResult(LookupStatus.UNKNOWN)
_ERROR = LookupResult(LookupStatus.ERROR)


def flatten_forks(tree: HashTree) -> list[HashTree]:
    """Return the non-fork nodes of `tree` from left to right, dropping empty ones."""
    if isinstance(tree, Empty):
        return []
    if isinstance(tree, Fork):
        return flatten_forks(tree.left) + flatten_forks(tree.right)
    return [tree]


def find_label(label: bytes, tree: HashTree) -> LookupResult:
    """
    Look for `label` among the labeled children of `tree`.

    Labels are sorted left to right, so a gap between two revealed labels
    (or before the first / after the last one) proves absence. A gap that
    contains a pruned node does not.
    """
    nodes = flatten_forks(tree)
    for node in nodes:
        if isinstance(node, Labeled) and node.label == label:
            return LookupResult(LookupStatus.FOUND, node.subtree)

    if not nodes:
        return _ABSENT
    if len(nodes) == 1 and isinstance(nodes[0], Leaf):
        return _ERROR

    first, last = nodes[0], nodes[-1]
    if isinstance(first, Labeled) and label < first.label:
        return _ABSENT
    if isinstance(last, Labeled) and last.label < label:
        return _ABSENT
    for lower, upper in zip(nodes, nodes[1:]):
        if (
            isinstance(lower, Labeled)
            and isinstance(upper, Labeled)
            and lower.label < label < upper.label
        ):
            return _ABSENT

    return _UNKNOWN


def lookup_subtree(tree: HashTree, path: Iterable[bytes]) -> LookupResult:
    """Return the subtree found at `path`, whatever kind of node it is."""
    current = tree
    for label in path:
        result = find_label(bytes(label), current)
        if not result.found:
            return result
        assert isinstance(result.value, (Empty, Fork, Labeled, Leaf, Pruned))
        current = result.value
    return LookupResult(LookupStatus.FOUND, current)


def lookup_path(tree: HashTree, path: Iterable[bytes]) -> LookupResult:
    """
    Return the leaf value found at `path`.

    The final node decides the outcome: a leaf is found, an empty tree is
    absent, a pruned node is unknown and an inner node is an error.
    """
    result = lookup_subtree(tree, path)
    if not result.found:
        return result

    node = result.value
    if isinstance(node, Leaf):
        return LookupResult(LookupStatus.FOUND, node.value)
    if isinstance(node, Empty):
        return _ABSENT
    if isinstance(node, Pruned):
        return _UNKNOWN
    return _ERROR
