"""Facade over marketplace join-password issuance and verification."""

from __future__ import annotations

from marketplace_credentials.application.ports.digest_provider_port import DigestProviderPort
from marketplace_credentials.application.ports.entropy_source_port import EntropySourcePort
from marketplace_credentials.application.services.credential_issuer import CredentialIssuer
from marketplace_credentials.application.services.proof_verifier import ProofVerifier
from marketplace_credentials.domain.marketplace.password_secret import (
    DEFAULT_SALT_BYTES,
    MarketplacePasswordSecret,
    build_digest_input,
)


class MarketplacePasswordService:
    """Expose salt, digest, issuance and join-proof operations."""

    def __init__(
        self,
        *,
        entropy_source: EntropySourcePort,
        digest_provider: DigestProviderPort,
        salt_bytes: int = DEFAULT_SALT_BYTES,
    ) -> None:
        self._entropy_source = entropy_source
        self._digest_provider = digest_provider
        self._issuer = CredentialIssuer(
            entropy_source=entropy_source,
            digest_provider=digest_provider,
            salt_bytes=salt_bytes,
        )
        self._verifier = ProofVerifier(digest_provider=digest_provider)

    @property
    def digest_backend(self) -> str:
        return self._digest_provider.name

    @property
    def entropy_is_secure(self) -> bool:
        return self._entropy_source.is_secure

    def generate_salt(self, byte_length: int = DEFAULT_SALT_BYTES) -> str:
        """Return `2 * byte_length` lowercase hex characters of fresh salt."""

        return self._entropy_source.generate_hex(byte_length)

    async def compute_password_digest(self, password: str | None, salt: str | None) -> str:
        """Return the 64-character hex digest of `salt:password`."""

        return await self._digest_provider.digest_hex(
            build_digest_input(salt=salt, password=password)
        )

    async def create_password_secret(self, password: str | None) -> MarketplacePasswordSecret:
        """Issue a new salt/hash credential for one marketplace password."""

        return await self._issuer.create_secret(password)

    async def compute_join_proof(self, password: str | None, salt: str | None) -> str:
        """Return the proof a joiner presents for comparison with the stored hash."""

        return await self._verifier.compute_proof(password, salt)
