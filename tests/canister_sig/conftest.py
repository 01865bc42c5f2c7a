"""
Shared pytest fixtures for canister signature tests.

Import these fixtures automatically via pytest discovery.
"""

from __future__ import annotations

import pytest

from canister_sig.signature_map import PROD_CONFIG, CanisterSigInputs, SignatureMap
from tests.canister_sig.helpers import FakeHost


@pytest.fixture
def host() -> FakeHost:
    """Fake host at `START_TIME_NS` without a certificate."""
    return FakeHost()


@pytest.fixture
def sig_map(host: FakeHost) -> SignatureMap:
    """Empty signature map with production tunables, driven by `host`."""
    return SignatureMap(config=PROD_CONFIG, host=host)


@pytest.fixture
def sig_inputs() -> CanisterSigInputs:
    """Inputs of a single signature."""
    return CanisterSigInputs(domain=b"some-domain", seed=b"some-seed", message=b"some-message")
