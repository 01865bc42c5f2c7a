"""
Canister signature public keys.

A canister signature public key names the canister that certifies the
signatures and a seed that the canister chose for the signing identity. Its
raw form is::

    [len(canister_id): 1 byte] [canister_id] [seed: rest of the buffer]

The DER form wraps the raw form in a SubjectPublicKeyInfo with the
canister signature OID 1.3.6.1.4.1.56387.1.2::

    30 <17 + len(raw)>                      SEQUENCE
       30 0C 06 0A 2B 06 01 04 01 83 B8 43 01 02   AlgorithmIdentifier(OID)
       03 <1 + len(raw)> 00 <raw>           BIT STRING, no unused bits

Length fields are single bytes (short-form ASN.1 lengths), which bounds the
raw form to 238 bytes.

References:
    - https://internetcomputer.org/docs/current/references/ic-interface-spec#canister-signatures
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from typing_extensions import Self

from canister_sig.types.exceptions import PrincipalError, PublicKeyError

from .principal import Principal

CANISTER_SIG_PK_DER_OID: Final = bytes.fromhex("300C060A2B0601040183B8430102")
"""DER AlgorithmIdentifier of canister signatures (14 bytes)."""

CANISTER_SIG_PK_DER_PREFIX_LENGTH: Final = 19
"""Bytes before the raw key: SEQUENCE header, OID, BIT STRING header, unused-bits byte."""

_SEQUENCE_TAG: Final = 0x30
_BIT_STRING_TAG: Final = 0x03
_OID_OFFSET: Final = 2

MAX_RAW_LENGTH: Final = 0xFF - 17
"""Largest raw key whose DER lengths still fit the single-byte length fields."""


def extract_raw_canister_sig_pk_from_der(pk_der: bytes) -> bytes:
    """
    Verify the structure of a DER-encoded canister signature public key and
    return its raw form.

    Raises:
        PublicKeyError: If the OID differs or the key is truncated.
    """
    oid_part = pk_der[_OID_OFFSET : _OID_OFFSET + len(CANISTER_SIG_PK_DER_OID)]
    if oid_part != CANISTER_SIG_PK_DER_OID:
        raise PublicKeyError("invalid OID of canister sig pk")

    bitstring_offset = CANISTER_SIG_PK_DER_PREFIX_LENGTH
    if len(pk_der) <= bitstring_offset:
        raise PublicKeyError("canister sig pk shorter than DER prefix")

    canister_id_len = pk_der[bitstring_offset]
    if len(pk_der) < bitstring_offset + 1 + canister_id_len:
        raise PublicKeyError("canister sig pk too short")

    return bytes(pk_der[bitstring_offset:])


@dataclass(frozen=True, slots=True)
class CanisterSigPublicKey:
    """The public key of canister signatures issued by `canister_id` for `seed`."""

    canister_id: Principal
    """The canister whose certified data holds the signatures."""

    seed: bytes
    """Seed the canister uses to derive this identity."""

    @classmethod
    def from_raw(cls, pk_raw: bytes) -> Self:
        """
        Parse the raw form (canister id length, canister id, seed).

        Raises:
            PublicKeyError: If the input is empty or shorter than the canister
                id length it announces, or the canister id is invalid.
        """
        if not pk_raw:
            raise PublicKeyError("empty raw canister sig pk")

        canister_id_len = pk_raw[0]
        if len(pk_raw) < 1 + canister_id_len:
            raise PublicKeyError("canister sig pk too short")

        try:
            canister_id = Principal(pk_raw[1 : 1 + canister_id_len])
        except PrincipalError as exc:
            raise PublicKeyError(f"invalid canister id in canister sig pk: {exc}") from exc

        return cls(canister_id=canister_id, seed=bytes(pk_raw[1 + canister_id_len :]))

    @classmethod
    def from_der(cls, pk_der: bytes) -> Self:
        """Parse the DER form, see `extract_raw_canister_sig_pk_from_der`."""
        return cls.from_raw(extract_raw_canister_sig_pk_from_der(pk_der))

    def to_raw(self) -> bytes:
        """Return the raw form, without the DER envelope."""
        return bytes([len(self.canister_id)]) + bytes(self.canister_id) + self.seed

    def to_der(self) -> bytes:
        """
        Return the DER encoding of this key.

        Raises:
            PublicKeyError: If the raw key is too long for short-form lengths.
        """
        raw_pk = self.to_raw()
        if len(raw_pk) > MAX_RAW_LENGTH:
            raise PublicKeyError(
                f"canister sig pk too long for DER encoding: {len(raw_pk)} > {MAX_RAW_LENGTH} bytes"
            )

        return (
            bytes([_SEQUENCE_TAG, 17 + len(raw_pk)])
            + CANISTER_SIG_PK_DER_OID
            + bytes([_BIT_STRING_TAG, 1 + len(raw_pk), 0x00])
            + raw_pk
        )
