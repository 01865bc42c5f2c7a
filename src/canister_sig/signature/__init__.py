"""CBOR codec of canister signatures."""

from .codec import (
    SELF_DESCRIBING_PREFIX,
    CanisterSig,
    parse_canister_sig_cbor,
    serialize_canister_sig,
)

__all__ = [
    "CanisterSig",
    "SELF_DESCRIBING_PREFIX",
    "parse_canister_sig_cbor",
    "serialize_canister_sig",
]
