"""Process-wide wiring for marketplace join-password operations."""

from __future__ import annotations

import logging
from functools import lru_cache

from marketplace_credentials.application.services.marketplace_password_service import (
    MarketplacePasswordService,
)
from marketplace_credentials.config.settings import Settings, load_settings
from marketplace_credentials.domain.marketplace.password_secret import (
    DEFAULT_SALT_BYTES,
    MarketplacePasswordSecret,
)
from marketplace_credentials.infrastructure.security.digest_provider import (
    select_digest_provider,
)
from marketplace_credentials.infrastructure.security.entropy_source import (
    select_entropy_source,
)

logger = logging.getLogger(__name__)


def build_marketplace_password_service(settings: Settings) -> MarketplacePasswordService:
    """Build the service, raising at startup when no digest backend is usable."""

    digest_provider = select_digest_provider(settings.marketplace_digest_backend)
    entropy_source = select_entropy_source()
    logger.info(
        "marketplace_password_service_ready digest_backend=%s entropy_secure=%s salt_bytes=%s",
        digest_provider.name,
        entropy_source.is_secure,
        settings.marketplace_salt_bytes,
    )
    return MarketplacePasswordService(
        entropy_source=entropy_source,
        digest_provider=digest_provider,
        salt_bytes=settings.marketplace_salt_bytes,
    )


@lru_cache(maxsize=1)
def get_marketplace_password_service() -> MarketplacePasswordService:
    """Return the process-wide service built from environment settings."""

    return build_marketplace_password_service(load_settings())


def generate_salt(byte_length: int = DEFAULT_SALT_BYTES) -> str:
    return get_marketplace_password_service().generate_salt(byte_length)


async def compute_password_digest(password: str | None, salt: str | None) -> str:
    return await get_marketplace_password_service().compute_password_digest(password, salt)


async def create_password_secret(password: str | None) -> MarketplacePasswordSecret:
    return await get_marketplace_password_service().create_password_secret(password)


async def compute_join_proof(password: str | None, salt: str | None) -> str:
    return await get_marketplace_password_service().compute_join_proof(password, salt)
