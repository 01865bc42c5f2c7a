"""Reusable type definitions for canister signature creation."""

from .base import CanisterSigModel, StrictBaseModel
from .byte_arrays import Bytes32, Bytes96
from .exceptions import (
    CanisterSigError,
    NoCertificateError,
    NoSignatureError,
    PrincipalError,
    PublicKeyError,
    SignatureFormatError,
)
from .uint64 import UINT64_MAX, Uint64, saturating_add

__all__ = [
    # Core types
    "Uint64",
    "UINT64_MAX",
    "Bytes32",
    "Bytes96",
    "CanisterSigModel",
    "StrictBaseModel",
    "saturating_add",
    # Exceptions
    "CanisterSigError",
    "NoCertificateError",
    "NoSignatureError",
    "PublicKeyError",
    "PrincipalError",
    "SignatureFormatError",
]
