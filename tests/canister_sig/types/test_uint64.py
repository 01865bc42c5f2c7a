"""Tests for 64-bit timestamp arithmetic."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from canister_sig.types import UINT64_MAX, saturating_add

_u64 = st.integers(min_value=0, max_value=UINT64_MAX - 1)


def test_small_values_add_normally() -> None:
    assert saturating_add(1, 2) == 3


def test_overflow_saturates_at_largest_value() -> None:
    assert saturating_add(UINT64_MAX - 10, 60 * 10**9) == UINT64_MAX - 1


@given(_u64, _u64)
def test_never_leaves_range(a: int, b: int) -> None:
    """The result is always a valid u64 and never smaller than either operand."""
    result = saturating_add(a, b)

    assert 0 <= result <= UINT64_MAX - 1
    assert result >= max(a, b)
