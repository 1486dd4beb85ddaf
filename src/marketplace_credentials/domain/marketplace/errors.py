"""Errors raised by the marketplace join-credential subsystem."""

from __future__ import annotations


class MarketplaceCredentialError(Exception):
    """Base error for marketplace join-credential failures."""


class DigestEnvironmentUnavailableError(MarketplaceCredentialError, RuntimeError):
    """Raised when no usable SHA-256 backend exists in this process."""

    def __init__(self, *, backend: str) -> None:
        super().__init__(f"no usable sha-256 digest backend (requested: {backend})")
        self.backend = backend
