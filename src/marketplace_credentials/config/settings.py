"""Runtime settings loaded from environment variables."""

from functools import lru_cache
from typing import Annotated, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PositiveInt = Annotated[int, Field(gt=0)]
DigestBackend = Literal["auto", "cryptography", "hashlib"]


class Settings(BaseSettings):
    """Environment-driven application settings."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    marketplace_salt_bytes: PositiveInt = Field(
        default=16,
        validation_alias="MARKETPLACE_SALT_BYTES",
    )
    marketplace_digest_backend: DigestBackend = Field(
        default="auto",
        validation_alias="MARKETPLACE_DIGEST_BACKEND",
    )
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Load and cache application settings."""

    return Settings()
