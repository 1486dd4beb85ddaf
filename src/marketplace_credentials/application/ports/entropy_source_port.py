"""Port for random salt material."""

from __future__ import annotations

from typing import Protocol


class EntropySourcePort(Protocol):
    """Hex-encoded random bytes contract."""

    is_secure: bool

    def generate_hex(self, length_bytes: int) -> str:
        """Return `2 * length_bytes` lowercase hex characters."""
