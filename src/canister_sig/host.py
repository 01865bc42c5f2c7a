"""
Host services consumed by the signature map.

The signature map needs two things from the environment it runs in: the
current time, and, when a signature is read, a certificate proving the root
hash that was last published as certified data. Both are reached through the
`Host` protocol so request handlers can plug in whatever their platform
offers.
"""

from __future__ import annotations

import time
from typing import Protocol


class Host(Protocol):
    """
    Services offered by the hosting process.

    Uses structural subtyping: any object with matching methods satisfies
    the protocol.
    """

    def current_certificate(self) -> bytes | None:
        """
        Certificate over the currently certified data.

        Returns:
            The certificate, or None in contexts where none can be obtained.
        """
        ...

    def current_time(self) -> int:
        """Current time in nanoseconds since the epoch."""
        ...


class SystemHost:
    """
    A `Host` backed by the wall clock and a caller-supplied certificate.

    The certificate is whatever the embedding application last obtained for
    the root hash it published; it starts out unset.
    """

    def __init__(self, certificate: bytes | None = None) -> None:
        self._certificate = certificate

    def set_certificate(self, certificate: bytes | None) -> None:
        """Replace the certificate returned by `current_certificate`."""
        self._certificate = certificate

    def current_certificate(self) -> bytes | None:
        return self._certificate

    def current_time(self) -> int:
        return time.time_ns()
