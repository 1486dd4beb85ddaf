from __future__ import annotations

from collections.abc import Iterator

import pytest

from marketplace_credentials.config.settings import load_settings
from marketplace_credentials.infrastructure.security.digest_provider import (
    select_digest_provider,
)
from marketplace_credentials.infrastructure.security.entropy_source import (
    select_entropy_source,
)
from marketplace_credentials.infrastructure.security.runtime import (
    get_marketplace_password_service,
)


@pytest.fixture(autouse=True)
def _clear_process_caches() -> Iterator[None]:
    caches = (
        load_settings,
        select_digest_provider,
        select_entropy_source,
        get_marketplace_password_service,
    )
    for cached in caches:
        cached.cache_clear()
    yield
    for cached in caches:
        cached.cache_clear()
