"""
Certified hash trees and the ordered authenticated map built on them.

Usage::

    from canister_sig.hash_tree import OrderedAuthenticatedMap, Unit

    m = OrderedAuthenticatedMap()
    m.insert(b"key", Unit())
    proof = m.witness(b"key")
    assert proof.digest() == m.root_hash()
"""

from .cbor import HashTreeDecodingError, tree_from_cbor, tree_to_cbor
from .ordered_map import AsHashTree, OrderedAuthenticatedMap, Unit
from .tree import (
    Empty,
    Fork,
    HashTree,
    Labeled,
    Leaf,
    LookupResult,
    LookupStatus,
    Pruned,
    empty,
    fork,
    labeled,
    leaf,
    leaf_hash,
    lookup_path,
    lookup_subtree,
    pruned,
)

__all__ = [
    # Node kinds
    "HashTree",
    "Empty",
    "Fork",
    "Labeled",
    "Leaf",
    "Pruned",
    # Constructors
    "empty",
    "fork",
    "labeled",
    "leaf",
    "pruned",
    "leaf_hash",
    # Lookup
    "LookupResult",
    "LookupStatus",
    "lookup_path",
    "lookup_subtree",
    # Authenticated map
    "AsHashTree",
    "OrderedAuthenticatedMap",
    "Unit",
    # CBOR data model
    "HashTreeDecodingError",
    "tree_from_cbor",
    "tree_to_cbor",
]
