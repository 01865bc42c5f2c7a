"""
Canister signature wire format.

A canister signature is a CBOR map carrying the host's certificate and a
hash tree that proves the signed message under the certified root::

    55799({
        "certificate": bytes,
        "tree": hash-tree,
    })

The leading self-describing tag 55799 encodes as the three bytes
`D9 D9 F7` and is required by the interface specification. Keys are always
written in the order above.

References:
    - https://internetcomputer.org/docs/current/references/ic-interface-spec#canister-signatures
    - https://www.rfc-editor.org/rfc/rfc8949#section-3.4.6
"""

from __future__ import annotations

import io
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Final

import cbor2

from canister_sig.hash_tree import HashTree, tree_from_cbor, tree_to_cbor
from canister_sig.types.exceptions import SignatureFormatError

SELF_DESCRIBE_CBOR_TAG: Final = 55799
"""CBOR tag marking data as CBOR."""

SELF_DESCRIBING_PREFIX: Final = b"\xd9\xd9\xf7"
"""Encoded form of the self-describing tag."""

CERTIFICATE_KEY: Final = "certificate"
TREE_KEY: Final = "tree"


@dataclass(frozen=True, slots=True)
class CanisterSig:
    """A canister signature: a certificate plus a witness tree."""

    certificate: bytes
    """Certificate over the root hash the tree is checked against."""

    tree: HashTree
    """Hash tree revealing `/sig/<seed hash>/<message hash>`."""


def serialize_canister_sig(sig: CanisterSig) -> bytes:
    """Encode `sig` as self-described CBOR."""
    payload = {
        CERTIFICATE_KEY: bytes(sig.certificate),
        TREE_KEY: tree_to_cbor(sig.tree),
    }
    return cbor2.dumps(cbor2.CBORTag(SELF_DESCRIBE_CBOR_TAG, payload))


def parse_canister_sig_cbor(signature_cbor: bytes) -> CanisterSig:
    """
    Parse the given bytes as a CBOR-encoded `CanisterSig`.

    Raises:
        SignatureFormatError: If the self-describing tag is missing or the
            payload does not decode to a canister signature.
    """
    if signature_cbor[:3] != SELF_DESCRIBING_PREFIX:
        raise SignatureFormatError("signature CBOR doesn't have a self-describing tag")

    try:
        return _canister_sig_from_cbor(_decode_exactly(signature_cbor))
    except (cbor2.CBORDecodeError, ValueError, RecursionError) as exc:
        raise SignatureFormatError(f"failed to parse canister signature CBOR: {exc}") from exc


def _decode_exactly(data: bytes) -> Any:
    """Decode a single CBOR item that spans all of `data`."""
    with io.BytesIO(data) as fp:
        item = cbor2.CBORDecoder(fp).decode()
        if fp.tell() != len(data):
            raise cbor2.CBORDecodeError(
                f"trailing data: decoded {fp.tell()} of {len(data)} bytes"
            )

    if isinstance(item, cbor2.CBORTag) and item.tag == SELF_DESCRIBE_CBOR_TAG:
        item = item.value
    return item


def _canister_sig_from_cbor(item: Any) -> CanisterSig:
    if not isinstance(item, Mapping):
        raise ValueError(f"expected a map, got {type(item).__name__}")
    for key in (CERTIFICATE_KEY, TREE_KEY):
        if key not in item:
            raise ValueError(f"missing field `{key}`")

    certificate = item[CERTIFICATE_KEY]
    if not isinstance(certificate, bytes):
        raise ValueError(f"certificate must be a byte string, got {type(certificate).__name__}")

    return CanisterSig(certificate=certificate, tree=tree_from_cbor(item[TREE_KEY]))
