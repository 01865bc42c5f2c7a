"""
The Internet Computer root public key.

Canister signatures are ultimately verified against the certificate chain
rooted in this BLS12-381 G2 public key. Its DER encoding is a fixed 37-byte
prefix followed by the 96-byte key.
"""

from __future__ import annotations

from typing import Final

from canister_sig.types.byte_arrays import Bytes96
from canister_sig.types.exceptions import PublicKeyError

IC_ROOT_PK_DER_PREFIX: Final = bytes.fromhex(
    "308182301d060d2b0601040182dc7c0503010201060c2b0601040182dc7c0503"
    "0201036100"
)
"""SubjectPublicKeyInfo header of the root key (37 bytes)."""

IC_ROOT_PK_DER: Final = bytes.fromhex(
    "308182301d060d2b0601040182dc7c0503010201060c2b0601040182dc7c0503"
    "0201036100814c0e6ec71fab583b08bd81373c255c3c371b2e84863c98a4f1e0"
    "8b74235d14fb5d9c0cd546d9685f913a0c0b2cc5341583bf4b4392e467db96d6"
    "5b9bb4cb717112f8472e0d5a4d14505ffd7484b01291091c5f87b98883463f98"
    "091a0baaae"
)
"""DER encoding of the mainnet root key (133 bytes)."""

IC_ROOT_PK_LENGTH: Final = 96
"""Length of the raw root key."""


def extract_raw_root_pk_from_der(pk_der: bytes) -> Bytes96:
    """
    Verify the structure of a DER-encoded root public key and return the raw key.

    Raises:
        PublicKeyError: If the length is not 133 bytes or the prefix differs.
    """
    expected_length = len(IC_ROOT_PK_DER_PREFIX) + IC_ROOT_PK_LENGTH
    if len(pk_der) != expected_length:
        raise PublicKeyError("invalid root pk length")

    if pk_der[: len(IC_ROOT_PK_DER_PREFIX)] != IC_ROOT_PK_DER_PREFIX:
        raise PublicKeyError("invalid OID")

    return Bytes96(pk_der[len(IC_ROOT_PK_DER_PREFIX) :])


IC_ROOT_PUBLIC_KEY: Final = extract_raw_root_pk_from_der(IC_ROOT_PK_DER)
"""The raw root key used when verifying canister signatures."""
