from __future__ import annotations

import logging
import re

import pytest

from marketplace_credentials.config.settings import Settings
from marketplace_credentials.domain.marketplace.errors import DigestEnvironmentUnavailableError
from marketplace_credentials.infrastructure.logging import resolve_log_level
from marketplace_credentials.infrastructure.security import digest_provider, runtime
from marketplace_credentials.infrastructure.security.digest_provider import (
    CryptographyDigestProvider,
    HashlibDigestProvider,
)


def _settings(**overrides: object) -> Settings:
    values: dict[str, object] = {
        "MARKETPLACE_SALT_BYTES": 16,
        "MARKETPLACE_DIGEST_BACKEND": "auto",
        "LOG_LEVEL": "INFO",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def test_build_service_uses_configured_backend_and_salt_length() -> None:
    service = runtime.build_marketplace_password_service(
        _settings(MARKETPLACE_DIGEST_BACKEND="hashlib", MARKETPLACE_SALT_BYTES=8)
    )

    assert service.digest_backend == "hashlib"
    assert service.entropy_is_secure is True


@pytest.mark.asyncio
async def test_configured_salt_length_applies_to_issued_credentials() -> None:
    service = runtime.build_marketplace_password_service(_settings(MARKETPLACE_SALT_BYTES=8))

    secret = await service.create_password_secret("pw")

    assert len(secret.salt) == 16


def test_build_service_fails_at_startup_without_digest_backend(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setattr(
        digest_provider,
        "_PROVIDERS",
        (
            ("cryptography", lambda: False, CryptographyDigestProvider),
            ("hashlib", lambda: False, HashlibDigestProvider),
        ),
    )

    with pytest.raises(DigestEnvironmentUnavailableError):
        runtime.build_marketplace_password_service(_settings())


def test_build_service_logs_selected_backend_without_secrets(
    caplog: pytest.LogCaptureFixture,
) -> None:
    with caplog.at_level(logging.INFO):
        runtime.build_marketplace_password_service(_settings())

    assert "marketplace_password_service_ready digest_backend=cryptography" in caplog.text


@pytest.mark.asyncio
async def test_module_level_operations_share_default_service(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.delenv("MARKETPLACE_SALT_BYTES", raising=False)
    monkeypatch.delenv("MARKETPLACE_DIGEST_BACKEND", raising=False)

    salt = runtime.generate_salt()
    secret = await runtime.create_password_secret("cornell123")

    assert re.fullmatch(r"[0-9a-f]{32}", salt)
    assert await runtime.compute_join_proof("cornell123", secret.salt) == secret.password_hash
    assert await runtime.compute_password_digest(
        "cornell123", secret.salt
    ) == secret.password_hash
    assert runtime.get_marketplace_password_service() is runtime.get_marketplace_password_service()


@pytest.mark.parametrize(
    ("level", "expected"),
    [("debug", logging.DEBUG), ("", logging.INFO), ("  ", logging.INFO), ("nope", logging.INFO)],
)
def test_resolve_log_level(level: str, expected: int) -> None:
    assert resolve_log_level(level) == expected
