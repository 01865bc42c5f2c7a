"""Principals and the public keys of canister signatures."""

from .principal import MAX_LENGTH_IN_BYTES, Principal
from .public_key import (
    CANISTER_SIG_PK_DER_OID,
    CANISTER_SIG_PK_DER_PREFIX_LENGTH,
    CanisterSigPublicKey,
    extract_raw_canister_sig_pk_from_der,
)
from .root_key import (
    IC_ROOT_PK_DER,
    IC_ROOT_PK_DER_PREFIX,
    IC_ROOT_PK_LENGTH,
    IC_ROOT_PUBLIC_KEY,
    extract_raw_root_pk_from_der,
)

__all__ = [
    "Principal",
    "MAX_LENGTH_IN_BYTES",
    "CanisterSigPublicKey",
    "CANISTER_SIG_PK_DER_OID",
    "CANISTER_SIG_PK_DER_PREFIX_LENGTH",
    "extract_raw_canister_sig_pk_from_der",
    "IC_ROOT_PK_DER",
    "IC_ROOT_PK_DER_PREFIX",
    "IC_ROOT_PK_LENGTH",
    "IC_ROOT_PUBLIC_KEY",
    "extract_raw_root_pk_from_der",
]
