"""SHA-256 digest backends and one-time backend selection."""

from __future__ import annotations

import hashlib
import logging
from collections.abc import Callable
from functools import lru_cache

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes

from marketplace_credentials.application.ports.digest_provider_port import DigestProviderPort
from marketplace_credentials.domain.marketplace.errors import DigestEnvironmentUnavailableError

logger = logging.getLogger(__name__)


class CryptographyDigestProvider:
    """SHA-256 through the OpenSSL bindings of the `cryptography` package."""

    name = "cryptography"

    async def digest_hex(self, data: bytes) -> str:
        digest = hashes.Hash(hashes.SHA256())
        digest.update(data)
        return digest.finalize().hex()


class HashlibDigestProvider:
    """SHA-256 through the interpreter's built-in `hashlib` primitive."""

    name = "hashlib"

    async def digest_hex(self, data: bytes) -> str:
        return hashlib.sha256(data).hexdigest()


def cryptography_sha256_available() -> bool:
    """Return whether the `cryptography` OpenSSL backend can compute SHA-256."""

    try:
        hashes.Hash(hashes.SHA256())
    except UnsupportedAlgorithm:
        return False
    return True


def hashlib_sha256_available() -> bool:
    """Return whether `hashlib` exposes a usable SHA-256 constructor."""

    if "sha256" not in hashlib.algorithms_available:
        return False
    try:
        hashlib.sha256(b"")
    except ValueError:
        return False
    return True


_PROVIDERS: tuple[tuple[str, Callable[[], bool], Callable[[], DigestProviderPort]], ...] = (
    ("cryptography", cryptography_sha256_available, CryptographyDigestProvider),
    ("hashlib", hashlib_sha256_available, HashlibDigestProvider),
)


@lru_cache(maxsize=None)
def select_digest_provider(preference: str = "auto") -> DigestProviderPort:
    """Probe digest backends once per preference and return the first usable one.

    `auto` tries `cryptography` then `hashlib`. An explicit preference only
    considers the named backend.
    """

    for name, probe, factory in _PROVIDERS:
        if preference not in ("auto", name):
            continue
        if probe():
            logger.info("digest_backend_selected backend=%s preference=%s", name, preference)
            return factory()
        logger.warning("digest_backend_unavailable backend=%s", name)

    raise DigestEnvironmentUnavailableError(backend=preference)
