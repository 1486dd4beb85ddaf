"""Application service recomputing join proofs from stored salts."""

from __future__ import annotations

from marketplace_credentials.application.ports.digest_provider_port import DigestProviderPort
from marketplace_credentials.domain.marketplace.password_secret import build_digest_input


class ProofVerifier:
    """Recompute the credential digest for a candidate password.

    Comparison against the stored hash is left to the caller.
    """

    def __init__(self, *, digest_provider: DigestProviderPort) -> None:
        self._digest_provider = digest_provider

    async def compute_proof(self, password: str | None, salt: str | None) -> str:
        return await self._digest_provider.digest_hex(
            build_digest_input(salt=salt, password=password)
        )
