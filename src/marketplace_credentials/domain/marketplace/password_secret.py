"""Marketplace join-password credential model and digest input encoding."""

from __future__ import annotations

import hmac
from collections.abc import Mapping
from dataclasses import dataclass

PASSWORD_DIGEST_SEPARATOR = ":"
DEFAULT_SALT_BYTES = 16
DIGEST_HEX_LENGTH = 64

# Field names used by already-persisted marketplace records.
SALT_RECORD_FIELD = "passwordSalt"
HASH_RECORD_FIELD = "passwordHash"


@dataclass(frozen=True)
class MarketplacePasswordSecret:
    """Persistable salt/hash pair for one marketplace join password."""

    salt: str
    password_hash: str

    def to_record(self) -> dict[str, str]:
        """Render the credential with the stored marketplace field names."""

        return {SALT_RECORD_FIELD: self.salt, HASH_RECORD_FIELD: self.password_hash}

    @classmethod
    def from_record(cls, record: Mapping[str, object]) -> MarketplacePasswordSecret:
        """Rebuild one credential from a stored marketplace record."""

        try:
            salt = record[SALT_RECORD_FIELD]
            password_hash = record[HASH_RECORD_FIELD]
        except KeyError as exc:
            raise ValueError(f"marketplace record missing field: {exc.args[0]}") from exc
        if not isinstance(salt, str) or not isinstance(password_hash, str):
            raise ValueError("marketplace credential fields must be strings")
        return cls(salt=salt, password_hash=password_hash)


def build_digest_input(*, salt: str | None, password: str | None) -> bytes:
    """Encode `salt:password` as UTF-8, treating missing values as empty.

    The layout is fixed for every credential already issued; changing the order
    or the separator requires a versioned migration.
    """

    return f"{salt or ''}{PASSWORD_DIGEST_SEPARATOR}{password or ''}".encode("utf-8")


def proof_matches(*, proof: str, password_hash: str) -> bool:
    """Compare one join proof against a stored hash in constant time."""

    return hmac.compare_digest(proof.encode("utf-8"), password_hash.encode("utf-8"))
