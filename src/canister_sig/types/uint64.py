"""Unsigned 64-bit Integer Type Specification."""

from pydantic import Field
from typing_extensions import Annotated

UINT64_MAX = 2**64
"""The exclusive upper bound for an unsigned 64-bit integer (2**64)."""

Uint64 = Annotated[int, Field(ge=0, lt=UINT64_MAX)]
"""A type alias to represent a uint64."""


def saturating_add(a: int, b: int) -> int:
    """Add two uint64 values, clamping at the largest representable value."""
    return min(a + b, UINT64_MAX - 1)
