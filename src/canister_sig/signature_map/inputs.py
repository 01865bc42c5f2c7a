"""Inputs identifying one canister signature."""

from __future__ import annotations

from canister_sig.hashing import hash_bytes, hash_with_domain
from canister_sig.types import Bytes32, StrictBaseModel


class CanisterSigInputs(StrictBaseModel):
    """
    Inputs to create and retrieve a canister signature.

    The same inputs must be supplied when adding a signature and when
    fetching it later.
    """

    domain: bytes
    """Domain separator, so that a signature cannot be misused in another context."""

    seed: bytes
    """Seed from which the canister signature public key is derived."""

    message: bytes
    """The message to sign."""

    def message_hash(self) -> Bytes32:
        """Domain-separated hash of the message, the leaf key in the certified map."""
        return hash_with_domain(self.domain, self.message)

    def seed_hash(self) -> Bytes32:
        """Hash of the seed, the outer key in the certified map."""
        return hash_bytes(self.seed)
