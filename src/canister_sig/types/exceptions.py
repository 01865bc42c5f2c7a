"""Exception hierarchy for canister signature creation."""

from __future__ import annotations


class CanisterSigError(Exception):
    """
    Base exception for all recoverable canister signature errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class NoCertificateError(CanisterSigError):
    """
    Raised when a signature is requested while no data certificate is available.

    Data certificates only exist in contexts where the host can prove the
    currently certified data (query calls on the Internet Computer).
    """

    def __init__(self) -> None:
        super().__init__(
            "Data certificates (which are required to create canister signatures) "
            "are only available in query calls."
        )


class NoSignatureError(CanisterSigError):
    """Raised when no signature exists for the requested inputs."""

    def __init__(self) -> None:
        super().__init__("No signature found for the given inputs.")


class PublicKeyError(CanisterSigError, ValueError):
    """Raised when a canister signature or root public key is malformed."""


class PrincipalError(PublicKeyError):
    """
    Raised when a principal cannot be built from bytes or text.

    Attributes:
        detail: Description of what went wrong.
    """

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"invalid principal: {detail}")


class SignatureFormatError(CanisterSigError, ValueError):
    """
    Raised when a CBOR-encoded canister signature cannot be parsed.

    Decoding failures are chained, so `__cause__` holds the underlying error.
    """
