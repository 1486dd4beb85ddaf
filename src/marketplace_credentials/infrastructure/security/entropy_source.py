"""Entropy sources used to generate marketplace password salts."""

from __future__ import annotations

import logging
import os
import random
import secrets
from functools import lru_cache

from marketplace_credentials.application.ports.entropy_source_port import EntropySourcePort

logger = logging.getLogger(__name__)

_HEX_ALPHABET = "0123456789abcdef"


def _require_non_negative(length_bytes: int) -> None:
    if length_bytes < 0:
        raise ValueError(f"length_bytes must be >= 0, got {length_bytes}")


class SecureEntropySource:
    """Salt generation backed by the operating system CSPRNG."""

    is_secure = True

    def generate_hex(self, length_bytes: int) -> str:
        _require_non_negative(length_bytes)
        return secrets.token_hex(length_bytes)


class InsecureFallbackEntropySource:
    """Non-cryptographic salt generation for hosts without an OS random source.

    Salts produced here are predictable. Every call logs a warning.
    """

    is_secure = False

    def __init__(self, *, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def generate_hex(self, length_bytes: int) -> str:
        _require_non_negative(length_bytes)
        logger.warning("entropy_source_insecure_fallback_used length_bytes=%s", length_bytes)
        return "".join(self._rng.choice(_HEX_ALPHABET) for _ in range(length_bytes * 2))


def os_random_available() -> bool:
    """Return whether the operating system exposes a secure random source."""

    try:
        os.urandom(1)
    except NotImplementedError:
        return False
    return True


@lru_cache(maxsize=1)
def select_entropy_source() -> EntropySourcePort:
    """Probe once per process and return the strongest available entropy source."""

    if os_random_available():
        return SecureEntropySource()

    logger.warning(
        "entropy_source_insecure_fallback_selected reason=os_random_unavailable"
    )
    return InsecureFallbackEntropySource()
