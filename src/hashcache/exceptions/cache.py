"""Bucket store exceptions."""

from __future__ import annotations

from pathlib import Path

from hashcache.exceptions.base import HashCacheError


class CacheError(HashCacheError, ValueError):
    """Raised when a tracked path cannot be mapped onto the cache."""


class BucketFormatError(CacheError):
    """Raised when a persisted bucket document cannot be parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Malformed bucket document at {path}: {reason}")
        self.path = path
        self.reason = reason
