"""Tests for the canister signature public key codec."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from canister_sig.keys import (
    CANISTER_SIG_PK_DER_OID,
    CanisterSigPublicKey,
    Principal,
    extract_raw_canister_sig_pk_from_der,
)
from canister_sig.types import PublicKeyError
from tests.canister_sig.helpers import TEST_CANISTER_ID, TEST_PK_DER, TEST_SEED


class TestDer:
    """Tests for the DER form."""

    def test_parse_der(self) -> None:
        pk = CanisterSigPublicKey.from_der(TEST_PK_DER)

        assert pk.canister_id == TEST_CANISTER_ID
        assert pk.seed == TEST_SEED

    def test_encode_der(self) -> None:
        pk = CanisterSigPublicKey(canister_id=TEST_CANISTER_ID, seed=TEST_SEED)

        assert pk.to_der() == TEST_PK_DER

    def test_extract_raw(self) -> None:
        raw = extract_raw_canister_sig_pk_from_der(TEST_PK_DER)

        assert raw == TEST_PK_DER[19:]
        assert raw == bytes([10]) + bytes(TEST_CANISTER_ID) + TEST_SEED

    def test_der_layout(self) -> None:
        assert TEST_PK_DER[2:16] == CANISTER_SIG_PK_DER_OID

    def test_bad_oid(self) -> None:
        bad_der = bytearray(TEST_PK_DER)
        bad_der[2] += 42

        with pytest.raises(PublicKeyError, match="invalid OID"):
            CanisterSigPublicKey.from_der(bytes(bad_der))

    def test_der_too_short(self) -> None:
        """The canister id length byte announces more bytes than there are."""
        with pytest.raises(PublicKeyError, match="pk too short"):
            CanisterSigPublicKey.from_der(TEST_PK_DER[:25])

    def test_der_without_raw_key(self) -> None:
        with pytest.raises(PublicKeyError, match="shorter than DER prefix"):
            extract_raw_canister_sig_pk_from_der(TEST_PK_DER[:19])

    def test_empty_seed_is_allowed(self) -> None:
        pk = CanisterSigPublicKey(canister_id=TEST_CANISTER_ID, seed=b"")

        assert CanisterSigPublicKey.from_der(pk.to_der()) == pk

    def test_raw_too_long_for_der(self) -> None:
        pk = CanisterSigPublicKey(canister_id=TEST_CANISTER_ID, seed=b"\x00" * 240)

        with pytest.raises(PublicKeyError, match="too long for DER encoding"):
            pk.to_der()

    @given(
        st.binary(max_size=29),
        st.binary(max_size=200),
    )
    def test_der_round_trip(self, canister_id: bytes, seed: bytes) -> None:
        pk = CanisterSigPublicKey(canister_id=Principal(canister_id), seed=seed)

        assert CanisterSigPublicKey.from_der(pk.to_der()) == pk


class TestRaw:
    """Tests for the raw form."""

    def test_raw_round_trip(self) -> None:
        pk = CanisterSigPublicKey(canister_id=TEST_CANISTER_ID, seed=TEST_SEED)

        assert CanisterSigPublicKey.from_raw(pk.to_raw()) == pk

    def test_raw_too_short(self) -> None:
        with pytest.raises(PublicKeyError, match="pk too short"):
            CanisterSigPublicKey.from_raw(TEST_PK_DER[19:29])

    def test_raw_empty(self) -> None:
        with pytest.raises(PublicKeyError, match="empty raw canister sig pk"):
            CanisterSigPublicKey.from_raw(b"")

    def test_raw_canister_id_too_long(self) -> None:
        raw = bytes([30]) + b"\x01" * 30

        with pytest.raises(PublicKeyError, match="invalid canister id"):
            CanisterSigPublicKey.from_raw(raw)

    def test_raw_with_empty_canister_id(self) -> None:
        pk = CanisterSigPublicKey.from_raw(b"\x00seed")

        assert pk.canister_id == b""
        assert pk.seed == b"seed"
