"""Delegation signing inputs and the structure hash they are built on."""

from .message import DELEGATION_SIG_DOMAIN, delegation_signature_msg
from .representation_hash import hash_value, leb128, representation_independent_hash

__all__ = [
    "DELEGATION_SIG_DOMAIN",
    "delegation_signature_msg",
    "representation_independent_hash",
    "hash_value",
    "leb128",
]
