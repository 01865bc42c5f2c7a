"""
Global configuration for canister signature creation.

Settings are read from environment variables:

- `CANISTER_SIG_ENV` ('prod' or 'test'), checked once at import.
- `CANISTER_SIG_EXPIRATION_PERIOD_NS` and `CANISTER_SIG_MAX_PRUNE`, read by
  `load_signature_map_config`. They are honored in the 'test' environment
  only; production signatures always use `PROD_CONFIG`.
"""

import logging
import os
from typing import Mapping

from canister_sig.signature_map.constants import PROD_CONFIG, SignatureMapConfig

logger = logging.getLogger(__name__)

_SUPPORTED_CANISTER_SIG_ENVS: list[str] = ["prod", "test"]

CANISTER_SIG_ENV = os.environ.get("CANISTER_SIG_ENV", "prod").lower()
"""The environment flag ('prod' or 'test'). Defaults to 'prod'."""

if CANISTER_SIG_ENV not in _SUPPORTED_CANISTER_SIG_ENVS:
    raise ValueError(
        f"Invalid CANISTER_SIG_ENV environment variable: '{CANISTER_SIG_ENV}'. "
        f"Supported values: {_SUPPORTED_CANISTER_SIG_ENVS}"
    )

EXPIRATION_PERIOD_VAR = "CANISTER_SIG_EXPIRATION_PERIOD_NS"
"""Overrides `SIGNATURE_EXPIRATION_PERIOD_NS`."""

MAX_PRUNE_VAR = "CANISTER_SIG_MAX_PRUNE"
"""Overrides `MAX_SIGS_TO_PRUNE`."""


def _read_int(environ: Mapping[str, str], name: str) -> int | None:
    raw = environ.get(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"Invalid {name} environment variable: '{raw}' is not an integer") from None


def load_signature_map_config(
    environ: Mapping[str, str] | None = None,
    env_flag: str = CANISTER_SIG_ENV,
) -> SignatureMapConfig:
    """
    Build the signature map configuration from the environment.

    Unset variables keep the `PROD_CONFIG` values. Outside the 'test'
    environment overrides are ignored with a warning.

    Raises:
        ValueError: If a variable is not an integer or is out of range.
    """
    env = os.environ if environ is None else environ
    overrides: dict[str, int] = {}

    expiration = _read_int(env, EXPIRATION_PERIOD_VAR)
    if expiration is not None:
        overrides["SIGNATURE_EXPIRATION_PERIOD_NS"] = expiration

    max_prune = _read_int(env, MAX_PRUNE_VAR)
    if max_prune is not None:
        overrides["MAX_SIGS_TO_PRUNE"] = max_prune

    if not overrides:
        return PROD_CONFIG

    if env_flag != "test":
        logger.warning(
            "Ignoring signature map overrides %s outside the test environment",
            sorted(overrides),
        )
        return PROD_CONFIG

    return SignatureMapConfig(**(PROD_CONFIG.model_dump() | overrides))
