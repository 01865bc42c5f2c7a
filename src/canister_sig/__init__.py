"""
Creation of canister signatures.

A canister proves statements by certifying a hash tree: it publishes the
tree's root hash as certified data, and hands out a certificate for that
root together with a witness for the statement. This package maintains the
tree of signatures, builds the witnesses and encodes the keys and
signatures exchanged with clients.
"""

from .delegation import DELEGATION_SIG_DOMAIN, delegation_signature_msg
from .hashing import hash_bytes, hash_with_domain
from .host import Host, SystemHost
from .keys import (
    IC_ROOT_PUBLIC_KEY,
    CanisterSigPublicKey,
    Principal,
    extract_raw_canister_sig_pk_from_der,
    extract_raw_root_pk_from_der,
)
from .signature import CanisterSig, parse_canister_sig_cbor, serialize_canister_sig
from .signature_map import CanisterSigInputs, SignatureMap, SignatureMapConfig
from .types import (
    CanisterSigError,
    NoCertificateError,
    NoSignatureError,
    PrincipalError,
    PublicKeyError,
    SignatureFormatError,
)

__all__ = [
    # Signature map
    "SignatureMap",
    "SignatureMapConfig",
    "CanisterSigInputs",
    # Host services
    "Host",
    "SystemHost",
    # Hashing
    "hash_bytes",
    "hash_with_domain",
    # Keys
    "Principal",
    "CanisterSigPublicKey",
    "IC_ROOT_PUBLIC_KEY",
    "extract_raw_canister_sig_pk_from_der",
    "extract_raw_root_pk_from_der",
    # Delegations
    "DELEGATION_SIG_DOMAIN",
    "delegation_signature_msg",
    # Signatures
    "CanisterSig",
    "parse_canister_sig_cbor",
    "serialize_canister_sig",
    # Errors
    "CanisterSigError",
    "NoCertificateError",
    "NoSignatureError",
    "PublicKeyError",
    "PrincipalError",
    "SignatureFormatError",
]
