"""Port for SHA-256 digest backends."""

from __future__ import annotations

from typing import Protocol


class DigestProviderPort(Protocol):
    """SHA-256 digest contract shared by every backend."""

    name: str

    async def digest_hex(self, data: bytes) -> str:
        """Return the 64-character lowercase hex SHA-256 digest of `data`."""
