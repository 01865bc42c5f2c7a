"""
Representation-independent hashing of structured values.

The hash of a structure does not depend on how the structure was encoded on
the wire, only on its content:

- byte strings hash to `SHA-256(bytes)`
- text hashes to `SHA-256(utf8(text))`
- natural numbers hash to `SHA-256(leb128(n))`
- arrays hash to `SHA-256(concat(hash(e) for e in array))`
- maps hash to `SHA-256(concat(sorted(hash(key) || hash(value))))`

Sorting the concatenated key/value hashes makes the map hash independent of
field order.

References:
    - https://internetcomputer.org/docs/current/references/ic-interface-spec#hash-of-map
"""

from __future__ import annotations

import hashlib
from typing import Mapping, Sequence, TypeAlias, Union

from canister_sig.types.byte_arrays import Bytes32

Value: TypeAlias = Union[bytes, str, int, Sequence["Value"], Mapping[str, "Value"]]
"""A value that can be hashed: bytes, text, natural number, array or map."""

Fields: TypeAlias = Sequence[tuple[str, Value]]
"""An ordered list of (key, value) pairs forming a map."""


def leb128(value: int) -> bytes:
    """
    Encode a natural number as unsigned LEB128.

    Seven bits per byte, least significant group first; the high bit marks
    that more bytes follow.
    """
    if value < 0:
        raise ValueError(f"cannot LEB128-encode negative number {value}")

    out = bytearray()
    while True:
        byte = value & 0x7F
        value >>= 7
        if value:
            out.append(byte | 0x80)
        else:
            out.append(byte)
            return bytes(out)


def _sha256(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


def hash_value(value: Value) -> bytes:
    """Return the representation-independent hash of a single value."""
    # bool is an int subclass, but has no encoding of its own.
    if isinstance(value, bool):
        raise TypeError("cannot hash a boolean value")
    if isinstance(value, (bytes, bytearray)):
        return _sha256(bytes(value))
    if isinstance(value, str):
        return _sha256(value.encode("utf-8"))
    if isinstance(value, int):
        return _sha256(leb128(value))
    if isinstance(value, Mapping):
        return representation_independent_hash(list(value.items()))
    if isinstance(value, Sequence):
        return _sha256(b"".join(hash_value(item) for item in value))
    raise TypeError(f"cannot hash value of type {type(value).__name__}")


def representation_independent_hash(fields: Fields) -> Bytes32:
    """Return the representation-independent hash of a map given as (key, value) pairs."""
    pair_hashes = sorted(_sha256(key.encode("utf-8")) + hash_value(value) for key, value in fields)
    return Bytes32(_sha256(b"".join(pair_hashes)))
