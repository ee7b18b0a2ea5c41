"""Incremental change-detection cache."""

from __future__ import annotations

from hashcache.cache.detector import changed_files, detect_change, is_changed
from hashcache.cache.discovery import discover_tracked_files, invalidating_changes, matches_any
from hashcache.cache.fingerprint import fingerprint
from hashcache.cache.store import CacheStore, zero_entry
from hashcache.cache.writer import sync_files, update_cache

__all__ = [
    "CacheStore",
    "changed_files",
    "detect_change",
    "discover_tracked_files",
    "fingerprint",
    "invalidating_changes",
    "is_changed",
    "matches_any",
    "sync_files",
    "update_cache",
    "zero_entry",
]
