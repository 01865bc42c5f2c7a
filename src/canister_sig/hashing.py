"""
SHA-256 helpers shared by the hash tree, the signature map and the key codec.

Two flavors are used throughout:

- `hash_bytes(value)`: the plain SHA-256 digest of `value`.
- `hash_with_domain(sep, value)`: SHA-256 over a one-byte length of `sep`,
  then `sep`, then `value`. The length prefix keeps separators from
  colliding with each other.
"""

from __future__ import annotations

import hashlib

from canister_sig.types.byte_arrays import Bytes32

MAX_DOMAIN_LENGTH = 255
"""Largest separator representable by the one-byte length prefix."""


def hash_bytes(value: bytes) -> Bytes32:
    """Return the SHA-256 digest of `value`."""
    return Bytes32(hashlib.sha256(value).digest())


def domain_sep(sep: bytes) -> bytes:
    """Return `sep` prefixed with its one-byte length."""
    if len(sep) > MAX_DOMAIN_LENGTH:
        raise ValueError(f"domain separator too long: {len(sep)} > {MAX_DOMAIN_LENGTH} bytes")
    return bytes([len(sep)]) + sep


def hash_with_domain(sep: bytes, value: bytes) -> Bytes32:
    """Return SHA-256(len(sep) || sep || value)."""
    hasher = hashlib.sha256()
    hasher.update(domain_sep(sep))
    hasher.update(value)
    return Bytes32(hasher.digest())
