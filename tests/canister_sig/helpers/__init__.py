"""Test helpers for canister signature unit tests."""

from .mocks import START_TIME_NS, FakeHost
from .vectors import (
    TEST_CANISTER_ID,
    TEST_PK_DER,
    TEST_SEED,
    TEST_SIGNATURE_CBOR,
    TEST_SIGNATURE_MSG_HASH,
    TEST_SIGNATURE_SEED_HASH,
)

__all__ = [
    # Mocks
    "FakeHost",
    "START_TIME_NS",
    # Vectors
    "TEST_CANISTER_ID",
    "TEST_PK_DER",
    "TEST_SEED",
    "TEST_SIGNATURE_CBOR",
    "TEST_SIGNATURE_SEED_HASH",
    "TEST_SIGNATURE_MSG_HASH",
]
