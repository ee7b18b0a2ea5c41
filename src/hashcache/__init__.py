"""Incremental change-detection cache for lint and format pipelines."""

from __future__ import annotations

from hashcache.cache import CacheStore, detect_change, fingerprint, update_cache
from hashcache.config import CacheConfig, load_config

__version__ = "0.1.0"

__all__ = [
    "CacheConfig",
    "CacheStore",
    "__version__",
    "detect_change",
    "fingerprint",
    "load_config",
    "update_cache",
]
