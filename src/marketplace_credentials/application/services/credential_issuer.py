"""Application service issuing marketplace join-password credentials."""

from __future__ import annotations

from marketplace_credentials.application.ports.digest_provider_port import DigestProviderPort
from marketplace_credentials.application.ports.entropy_source_port import EntropySourcePort
from marketplace_credentials.domain.marketplace.password_secret import (
    DEFAULT_SALT_BYTES,
    MarketplacePasswordSecret,
    build_digest_input,
)


class CredentialIssuer:
    """Combine a fresh salt with a password into a storable credential."""

    def __init__(
        self,
        *,
        entropy_source: EntropySourcePort,
        digest_provider: DigestProviderPort,
        salt_bytes: int = DEFAULT_SALT_BYTES,
    ) -> None:
        self._entropy_source = entropy_source
        self._digest_provider = digest_provider
        self._salt_bytes = salt_bytes

    async def create_secret(self, password: str | None) -> MarketplacePasswordSecret:
        """Return a new salt and its `salt:password` digest."""

        salt = self._entropy_source.generate_hex(self._salt_bytes)
        password_hash = await self._digest_provider.digest_hex(
            build_digest_input(salt=salt, password=password)
        )
        return MarketplacePasswordSecret(salt=salt, password_hash=password_hash)
