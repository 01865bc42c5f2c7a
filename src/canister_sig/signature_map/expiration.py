"""
Expiration queue of the signature map.

A min-heap of `SigExpiration` records keyed by expiry time. The queue only
schedules deletions; whether a signature is present is decided by the
certified map alone. Adding the same signature twice schedules two records,
and whichever pops first removes the signature.
"""

from __future__ import annotations

import heapq
from dataclasses import dataclass, field

from canister_sig.types.byte_arrays import Bytes32


@dataclass(frozen=True, slots=True, order=True)
class SigExpiration:
    """A pending deletion of one (seed hash, message hash) pair."""

    expires_at: int
    """Expiry time in nanoseconds since the epoch."""

    seed_hash: Bytes32 = field(compare=False)
    """SHA-256 of the seed the signature belongs to."""

    msg_hash: Bytes32 = field(compare=False)
    """Domain-separated hash of the signed message."""


class ExpirationQueue:
    """Min-heap of expiration records, earliest expiry first."""

    def __init__(self) -> None:
        self._heap: list[SigExpiration] = []

    def push(self, expiration: SigExpiration) -> None:
        heapq.heappush(self._heap, expiration)

    def peek(self) -> SigExpiration | None:
        """Return the earliest record without removing it."""
        return self._heap[0] if self._heap else None

    def pop(self) -> SigExpiration | None:
        """Remove and return the earliest record."""
        return heapq.heappop(self._heap) if self._heap else None

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
