"""Config data model for the hash cache."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from hashcache.constants.cache import BUCKET_SUFFIX, DEFAULT_CACHE_DIR, DEFAULT_SOURCE_DIR, GRACE_PERIOD_MS
from hashcache.constants.config import DEFAULT_INVALIDATING_GLOBS, DEFAULT_TRACKED_GLOBS


@dataclass(frozen=True)
class CacheConfig:
    """Resolved cache settings.

    ``source_root`` is the directory tracked paths are made relative to when
    picking a bucket; ``cache_root`` holds the bucket documents.
    """

    source_root: Path
    cache_root: Path
    bucket_suffix: str = BUCKET_SUFFIX
    grace_period_ms: int = GRACE_PERIOD_MS
    tracked_globs: tuple[str, ...] = DEFAULT_TRACKED_GLOBS
    invalidating_globs: tuple[str, ...] = DEFAULT_INVALIDATING_GLOBS

    @classmethod
    def for_root(cls, root: Path) -> CacheConfig:
        """Default config for a project rooted at ``root``."""
        root = root.resolve()
        return cls(source_root=root / DEFAULT_SOURCE_DIR, cache_root=root / DEFAULT_CACHE_DIR)
