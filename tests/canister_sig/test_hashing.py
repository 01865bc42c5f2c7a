"""Tests for the SHA-256 helpers."""

from __future__ import annotations

import hashlib

import pytest

from canister_sig.hashing import MAX_DOMAIN_LENGTH, domain_sep, hash_bytes, hash_with_domain
from canister_sig.types import Bytes32


def test_hash_bytes_is_sha256() -> None:
    digest = hash_bytes(b"hello")

    assert isinstance(digest, Bytes32)
    assert digest == hashlib.sha256(b"hello").digest()


def test_domain_sep_prefixes_length() -> None:
    assert domain_sep(b"sig") == b"\x03sig"
    assert domain_sep(b"") == b"\x00"


def test_hash_with_domain_layout() -> None:
    """The separator is length-prefixed and placed before the payload."""
    expected = hashlib.sha256(b"\x0bsome-domain" + b"payload").digest()

    assert hash_with_domain(b"some-domain", b"payload") == expected


def test_separators_do_not_collide() -> None:
    """Moving bytes between separator and payload changes the hash."""
    assert hash_with_domain(b"ab", b"c") != hash_with_domain(b"a", b"bc")


def test_longest_separator_is_accepted() -> None:
    hash_with_domain(b"x" * MAX_DOMAIN_LENGTH, b"")


def test_overlong_separator_is_rejected() -> None:
    with pytest.raises(ValueError, match="domain separator too long"):
        hash_with_domain(b"x" * (MAX_DOMAIN_LENGTH + 1), b"")
