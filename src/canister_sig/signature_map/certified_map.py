"""
Two-level certified map of signatures.

    seed_hash -> message_hash -> Unit

The outer map is keyed by the SHA-256 of the signing seed, each submap by
the hash of a signed message. A submap is removed as soon as its last
message is deleted, so the tree never carries empty subtrees.
"""

from __future__ import annotations

from canister_sig.hash_tree import HashTree, OrderedAuthenticatedMap, Unit
from canister_sig.types.byte_arrays import Bytes32

SubMap = OrderedAuthenticatedMap[Unit]
"""Message hashes signed under one seed."""


class CertifiedSignatureMap:
    """Signature membership indexed by seed hash, then message hash."""

    def __init__(self) -> None:
        self._map: OrderedAuthenticatedMap[SubMap] = OrderedAuthenticatedMap()

    def insert(self, seed_hash: Bytes32, message_hash: Bytes32) -> None:
        """Mark the pair as signed. Inserting a present pair changes nothing."""
        if self._map.get(seed_hash) is None:
            submap: SubMap = OrderedAuthenticatedMap()
            submap.insert(message_hash, Unit())
            self._map.insert(seed_hash, submap)
        else:
            self._map.modify(seed_hash, lambda m: m.insert(message_hash, Unit()))

    def delete(self, seed_hash: Bytes32, message_hash: Bytes32) -> None:
        """Remove the pair, dropping the seed's submap if it becomes empty."""

        def _delete(submap: SubMap) -> bool:
            submap.delete(message_hash)
            return submap.is_empty()

        if self._map.modify(seed_hash, _delete):
            self._map.delete(seed_hash)

    def contains(self, seed_hash: Bytes32, message_hash: Bytes32) -> bool:
        submap = self._map.get(seed_hash)
        return submap is not None and message_hash in submap

    def root_hash(self) -> Bytes32:
        return self._map.root_hash()

    def witness(self, seed_hash: Bytes32, message_hash: Bytes32) -> HashTree | None:
        """
        Prove that the pair is present, or return None if it is not.

        The proof reveals the path seed_hash / message_hash and nothing else.
        """
        if not self.contains(seed_hash, message_hash):
            return None
        return self._map.nested_witness(seed_hash, lambda submap: submap.witness(message_hash))
