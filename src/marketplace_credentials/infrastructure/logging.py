"""Shared logging configuration for entrypoints and scripts."""

from __future__ import annotations

import logging

_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def resolve_log_level(level: str) -> int:
    """Map one configured level name to a logging constant, defaulting to INFO."""

    normalized_level = level.strip().upper() or "INFO"
    resolved = logging.getLevelName(normalized_level)
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(*, level: str) -> None:
    """Configure root logging with the shared format and runtime level."""

    logging.basicConfig(level=resolve_log_level(level), format=_LOG_FORMAT)
