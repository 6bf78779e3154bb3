"""Helpers for reading settings from the process environment."""

from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)


def require_env(key: str) -> str:
    """Return the value of ``key``, raising ``KeyError`` if it is not set."""
    try:
        return os.environ[key]
    except KeyError:
        raise KeyError(f"environment variable not set: `{key}`") from None


def env_or_default(key: str, default_value: str) -> str:
    """Return the value of ``key``, or ``default_value`` with a warning if unset."""
    value = os.environ.get(key)
    if value is None:
        logger.warning(
            "Environment variable not set, using default. key=%s default=%s",
            key,
            default_value,
        )
        return default_value
    return value