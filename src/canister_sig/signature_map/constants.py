"""
Constants and configuration presets of the signature map.

Signatures are kept for a fixed period after they were added. Expired
signatures are not removed eagerly: every call that adds a signature first
removes a bounded batch of expired ones, so the cost of a single call stays
predictable on hosts that meter compute per call.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing_extensions import Final

from canister_sig.types.uint64 import Uint64

MINUTE_NS: Final = 60 * 1_000_000_000
"""One minute in nanoseconds."""

LABEL_SIG: Final = b"sig"
"""Label under which the signature map is placed in the certified tree."""


class SignatureMapConfig(BaseModel):
    """A model holding the tunables of a signature map."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    SIGNATURE_EXPIRATION_PERIOD_NS: Uint64 = Field(gt=0)
    """How long (in nanoseconds) a freshly added signature stays valid."""

    MAX_SIGS_TO_PRUNE: int = Field(gt=0)
    """Upper bound on expired signatures removed by a single pruning pass."""


PROD_CONFIG: Final = SignatureMapConfig(
    SIGNATURE_EXPIRATION_PERIOD_NS=1 * MINUTE_NS,
    MAX_SIGS_TO_PRUNE=50,
)
