"""
Principals: the identifiers of canisters and users.

A principal is an opaque byte string of at most 29 bytes. Its textual form
is built as follows::

    checksum = CRC-32(bytes), 4 bytes big-endian
    text     = base32(checksum || bytes), lowercase, no padding,
               split into groups of 5 characters joined with "-"

For example the 10-byte canister id `00 00 00 00 00 00 00 00 01 01` reads
`rwlgt-iiaaa-aaaaa-aaaaa-cai`.

References:
    - https://internetcomputer.org/docs/current/references/ic-interface-spec#textual-ids
"""

from __future__ import annotations

import base64
import zlib
from typing import Any, Final

from typing_extensions import Self

from canister_sig.types.exceptions import PrincipalError

MAX_LENGTH_IN_BYTES: Final = 29
"""Longest principal the interface specification allows."""

CHECKSUM_LENGTH: Final = 4
"""Length of the CRC-32 prefix of the textual form."""

GROUP_SIZE: Final = 5
"""Characters per dash-separated group of the textual form."""


class Principal(bytes):
    """An immutable principal id; compares and hashes like its raw bytes."""

    def __new__(cls, value: Any = b"") -> Self:
        """
        Create a principal from its raw bytes.

        Raises:
            PrincipalError: If the value is longer than 29 bytes.
        """
        raw = bytes(value)
        if len(raw) > MAX_LENGTH_IN_BYTES:
            raise PrincipalError(
                f"expected at most {MAX_LENGTH_IN_BYTES} bytes, got {len(raw)}"
            )
        return super().__new__(cls, raw)

    @classmethod
    def from_text(cls, text: str) -> Self:
        """
        Parse the textual form of a principal.

        Raises:
            PrincipalError: If the text is not valid base32, the checksum does
                not match, or the text is not in canonical (grouped,
                lowercase) form.
        """
        compact = text.replace("-", "").upper()
        padding = "=" * (-len(compact) % 8)
        try:
            decoded = base64.b32decode(compact + padding)
        except ValueError as exc:
            raise PrincipalError(f"text must be in valid base32 encoding: {exc}") from exc

        if len(decoded) < CHECKSUM_LENGTH:
            raise PrincipalError("text is too short to hold a checksum")

        checksum, raw = decoded[:CHECKSUM_LENGTH], decoded[CHECKSUM_LENGTH:]
        if checksum != _crc32(raw):
            raise PrincipalError(f"checksum mismatch in {text!r}")

        principal = cls(raw)
        if principal.to_text() != text:
            raise PrincipalError(f"text is not in canonical form, expected {principal.to_text()!r}")
        return principal

    def to_text(self) -> str:
        """Return the canonical textual form."""
        encoded = base64.b32encode(_crc32(bytes(self)) + bytes(self)).decode("ascii")
        compact = encoded.rstrip("=").lower()
        groups = [compact[i : i + GROUP_SIZE] for i in range(0, len(compact), GROUP_SIZE)]
        return "-".join(groups)

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"Principal({self.to_text()})"


def _crc32(data: bytes) -> bytes:
    return zlib.crc32(data).to_bytes(CHECKSUM_LENGTH, "big")
