"""
Certified, self-expiring map of canister signatures.

Usage::

    from canister_sig.signature_map import CanisterSigInputs, SignatureMap

    sigs = SignatureMap()
    inputs = CanisterSigInputs(domain=b"ic-request-auth-delegation", seed=seed, message=msg)

    sigs.add_signature(inputs)           # update call
    publish_certified_data(sigs.root_hash())

    cbor = sigs.get_signature_as_cbor(inputs)   # query call
"""

from .certified_map import CertifiedSignatureMap
from .constants import LABEL_SIG, MINUTE_NS, PROD_CONFIG, SignatureMapConfig
from .expiration import ExpirationQueue, SigExpiration
from .inputs import CanisterSigInputs
from .map import SignatureMap

__all__ = [
    "SignatureMap",
    "CanisterSigInputs",
    "CertifiedSignatureMap",
    "ExpirationQueue",
    "SigExpiration",
    "SignatureMapConfig",
    "PROD_CONFIG",
    "LABEL_SIG",
    "MINUTE_NS",
]
