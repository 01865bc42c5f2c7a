"""
Signature map: certified signatures that expire.

A canister cannot sign with a private key. Instead it publishes one root hash
as certified data, and a "signature" is a certificate over that root plus a
hash tree proving that `/sig/<seed hash>/<message hash>` is in the tree.
The `SignatureMap` owns that tree and forgets entries once they expire.

Lifecycle
---------
1. An update call registers the signature with `add_signature(inputs)` and
   then publishes `root_hash()` (or a tree combining it with other certified
   subtrees) as the new certified data. The map cannot do the publishing
   itself.
2. A later query call fetches `get_signature_as_cbor(inputs)` while the host
   can still produce a certificate for that root.

Expiry
------
Each signature expires `SIGNATURE_EXPIRATION_PERIOD_NS` after it was added,
but nothing checks expiry on read. Expired signatures are removed only by
`prune_expired`, which `add_signature` runs before every insertion and
which stops after `MAX_SIGS_TO_PRUNE` entries. A signature can therefore
outlive its expiry until enough later insertions come along.
"""

from __future__ import annotations

import logging

from canister_sig.config import load_signature_map_config
from canister_sig.hash_tree import HashTree, fork, labeled, pruned
from canister_sig.hashing import hash_bytes
from canister_sig.host import Host, SystemHost
from canister_sig.signature import CanisterSig, serialize_canister_sig
from canister_sig.types import (
    Bytes32,
    NoCertificateError,
    NoSignatureError,
    saturating_add,
)

from .certified_map import CertifiedSignatureMap
from .constants import LABEL_SIG, SignatureMapConfig
from .expiration import ExpirationQueue, SigExpiration
from .inputs import CanisterSigInputs

logger = logging.getLogger(__name__)


class SignatureMap:
    """
    Signatures with associated expirations.

    The map is meant to be created once per process and handed to every
    request handler; it is not safe for concurrent mutation.

    Args:
        config: Expiry tunables. Defaults to `load_signature_map_config()`.
        host: Clock and certificate source. Defaults to a `SystemHost`
            without a certificate.
    """

    def __init__(
        self,
        config: SignatureMapConfig | None = None,
        host: Host | None = None,
    ) -> None:
        self.config = config if config is not None else load_signature_map_config()
        self.host: Host = host if host is not None else SystemHost()
        self._certified_map = CertifiedSignatureMap()
        self._expiration_queue = ExpirationQueue()

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def put(self, seed: bytes, message_hash: Bytes32, signature_expires_at: int) -> None:
        """
        Insert the signature and schedule its deletion.

        A deletion is scheduled even if the signature is already present.
        """
        seed_hash = hash_bytes(seed)
        self._certified_map.insert(seed_hash, message_hash)
        self._expiration_queue.push(
            SigExpiration(
                expires_at=signature_expires_at,
                seed_hash=seed_hash,
                msg_hash=message_hash,
            )
        )

    def delete(self, seed_hash: Bytes32, message_hash: Bytes32) -> None:
        """Remove a signature. Unknown signatures are ignored."""
        self._certified_map.delete(seed_hash, message_hash)

    def prune_expired(self, now: int) -> int:
        """
        Remove a batch of expired signatures.

        Pops at most `MAX_SIGS_TO_PRUNE` records with `expires_at <= now`,
        earliest first. Records whose signature was already deleted still
        count as pruned.

        Pruning changes the root hash, so the caller has to publish the new
        root hash as certified data. `add_signature` is the only caller
        here, and it has to publish anyway.

        Returns:
            Number of expiration records removed.
        """
        num_pruned = 0
        for _ in range(self.config.MAX_SIGS_TO_PRUNE):
            expiration = self._expiration_queue.peek()
            if expiration is None or expiration.expires_at > now:
                break
            self._expiration_queue.pop()
            self.delete(expiration.seed_hash, expiration.msg_hash)
            num_pruned += 1

        if num_pruned:
            logger.debug(
                "Pruned %d expired signatures, %d expirations pending",
                num_pruned,
                len(self._expiration_queue),
            )
        return num_pruned

    def add_signature(self, sig_inputs: CanisterSigInputs) -> None:
        """Add a signature for the given inputs, expiring relative to the host clock."""
        self.add_signature_at(sig_inputs, self.host.current_time())

    def add_signature_at(self, sig_inputs: CanisterSigInputs, now: int) -> None:
        """Add a signature for the given inputs as of time `now` (nanoseconds)."""
        self.prune_expired(now)
        expires_at = saturating_add(now, self.config.SIGNATURE_EXPIRATION_PERIOD_NS)
        self.put(sig_inputs.seed, sig_inputs.message_hash(), expires_at)
        logger.debug(
            "Added signature for seed hash %s, expires at %d",
            sig_inputs.seed_hash().hex()[:16],
            expires_at,
        )

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        """
        Number of pending expiration records.

        This is an upper bound on the number of signatures: adding the same
        signature twice counts twice.
        """
        return len(self._expiration_queue)

    def is_empty(self) -> bool:
        return not self._expiration_queue

    def root_hash(self) -> Bytes32:
        """The hash to publish as (part of) the certified data."""
        return self._certified_map.root_hash()

    def witness(self, seed: bytes, message_hash: Bytes32) -> HashTree | None:
        """Prove the signature of `message_hash` under `seed`, or None if there is none."""
        return self._certified_map.witness(hash_bytes(seed), message_hash)

    def get_signature_as_cbor(
        self,
        sig_inputs: CanisterSigInputs,
        certified_assets_root_hash: Bytes32 | None = None,
    ) -> bytes:
        """
        Retrieve the signature for the given inputs as CBOR-serialized `CanisterSig`.

        If the certified data also covers other subtrees (for example the
        `http_assets` / `http_expr` trees used for response verification),
        pass their combined root hash as `certified_assets_root_hash`; it is
        placed as a pruned sibling of the `sig` subtree.

        Raises:
            NoCertificateError: If the host has no certificate to offer.
            NoSignatureError: If no signature exists for the inputs.
        """
        certificate = self.host.current_certificate()
        if certificate is None:
            raise NoCertificateError()
        return self.signature_cbor_with_certificate(
            sig_inputs, certificate, certified_assets_root_hash
        )

    def signature_cbor_with_certificate(
        self,
        sig_inputs: CanisterSigInputs,
        certificate: bytes,
        certified_assets_root_hash: Bytes32 | None = None,
    ) -> bytes:
        """
        Build the CBOR signature for the given inputs around `certificate`.

        Raises:
            NoSignatureError: If no signature exists for the inputs.
            AssertionError: If the witness does not hash to the root hash.
        """
        witness = self.witness(sig_inputs.seed, sig_inputs.message_hash())
        if witness is None:
            raise NoSignatureError()

        if witness.digest() != self.root_hash():
            raise AssertionError(
                "signature map computed an invalid hash tree, "
                f"witness hash is {witness.digest().hex()}, "
                f"root hash is {self.root_hash().hex()}"
            )

        sigs_tree = labeled(LABEL_SIG, witness)
        tree: HashTree
        if certified_assets_root_hash is not None:
            tree = fork(pruned(certified_assets_root_hash), sigs_tree)
        else:
            tree = sigs_tree

        return serialize_canister_sig(CanisterSig(certificate=bytes(certificate), tree=tree))
