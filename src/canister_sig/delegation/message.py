"""
Signing input of authentication delegations.

A delegation lets a session key act on behalf of an identity until
`expiration`, optionally restricted to a set of target canisters. The
identity signs the representation-independent hash of::

    {
        "pubkey": <session public key, DER>,
        "expiration": <nanoseconds since the epoch>,
        "targets": [<canister id>, ...],   # only if restricted
    }

prefixed with the `DELEGATION_SIG_DOMAIN` separator when it is fed to the
signature map.

References:
    - https://internetcomputer.org/docs/current/references/ic-interface-spec#authentication
"""

from __future__ import annotations

from typing import Final, Sequence

from canister_sig.types.byte_arrays import Bytes32

from .representation_hash import Value, representation_independent_hash

DELEGATION_SIG_DOMAIN: Final = b"ic-request-auth-delegation"
"""Signature domain of request authentication delegations."""


def delegation_signature_msg(
    pubkey: bytes,
    expiration: int,
    targets: Sequence[bytes] | None = None,
) -> Bytes32:
    """
    Compute the signing input of a delegation.

    `targets=None` leaves the delegation unrestricted and omits the field.
    An empty list keeps the field, so the two hash differently.
    """
    fields: list[tuple[str, Value]] = [
        ("pubkey", bytes(pubkey)),
        ("expiration", expiration),
    ]
    if targets is not None:
        fields.append(("targets", [bytes(target) for target in targets]))
    return representation_independent_hash(fields)
