"""Configuration-related exceptions."""

from __future__ import annotations

from hashcache.exceptions.base import HashCacheError


class ConfigError(HashCacheError, ValueError):
    """Raised when cache configuration is invalid."""
