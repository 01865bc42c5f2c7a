"""Tests for the two-level certified map of signatures."""

from __future__ import annotations

from canister_sig.hash_tree import LookupStatus, empty, lookup_path
from canister_sig.hashing import hash_bytes
from canister_sig.signature_map import CertifiedSignatureMap

SEED_A = hash_bytes(b"seed-a")
SEED_B = hash_bytes(b"seed-b")
MSG_1 = hash_bytes(b"message-1")
MSG_2 = hash_bytes(b"message-2")


def test_empty_map_hashes_like_empty_tree() -> None:
    assert CertifiedSignatureMap().root_hash() == empty().digest()


def test_insert_and_contains() -> None:
    sigs = CertifiedSignatureMap()
    sigs.insert(SEED_A, MSG_1)

    assert sigs.contains(SEED_A, MSG_1)
    assert not sigs.contains(SEED_A, MSG_2)
    assert not sigs.contains(SEED_B, MSG_1)


def test_insert_is_idempotent() -> None:
    sigs = CertifiedSignatureMap()
    sigs.insert(SEED_A, MSG_1)
    root = sigs.root_hash()

    sigs.insert(SEED_A, MSG_1)

    assert sigs.root_hash() == root


def test_root_independent_of_insertion_order() -> None:
    first = CertifiedSignatureMap()
    first.insert(SEED_A, MSG_1)
    first.insert(SEED_A, MSG_2)
    first.insert(SEED_B, MSG_1)

    second = CertifiedSignatureMap()
    second.insert(SEED_B, MSG_1)
    second.insert(SEED_A, MSG_2)
    second.insert(SEED_A, MSG_1)

    assert first.root_hash() == second.root_hash()


def test_deleting_last_message_drops_seed() -> None:
    """Empty submaps are removed, so the root returns to the empty digest."""
    sigs = CertifiedSignatureMap()
    sigs.insert(SEED_A, MSG_1)
    sigs.insert(SEED_A, MSG_2)

    only_msg_2 = CertifiedSignatureMap()
    only_msg_2.insert(SEED_A, MSG_2)

    sigs.delete(SEED_A, MSG_1)
    assert sigs.root_hash() == only_msg_2.root_hash()

    sigs.delete(SEED_A, MSG_2)
    assert sigs.root_hash() == empty().digest()


def test_deleting_unknown_pair_is_ignored() -> None:
    sigs = CertifiedSignatureMap()
    sigs.insert(SEED_A, MSG_1)
    root = sigs.root_hash()

    sigs.delete(SEED_A, MSG_2)
    sigs.delete(SEED_B, MSG_1)

    assert sigs.root_hash() == root


def test_witness_reveals_only_requested_pair() -> None:
    sigs = CertifiedSignatureMap()
    sigs.insert(SEED_A, MSG_1)
    sigs.insert(SEED_A, MSG_2)
    sigs.insert(SEED_B, MSG_1)

    witness = sigs.witness(SEED_A, MSG_1)

    assert witness is not None
    assert witness.digest() == sigs.root_hash()
    assert lookup_path(witness, [SEED_A, MSG_1]).value == b""
    assert lookup_path(witness, [SEED_A, MSG_2]).status is LookupStatus.UNKNOWN
    assert lookup_path(witness, [SEED_B]).status is LookupStatus.UNKNOWN


def test_witness_of_missing_pair_is_none() -> None:
    sigs = CertifiedSignatureMap()
    sigs.insert(SEED_A, MSG_1)

    assert sigs.witness(SEED_A, MSG_2) is None
    assert sigs.witness(SEED_B, MSG_1) is None
