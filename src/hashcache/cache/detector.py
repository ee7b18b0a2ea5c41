"""Change detection against recorded fingerprints."""

from __future__ import annotations

import asyncio
from collections.abc import Iterable
from pathlib import Path

from hashcache.cache.fingerprint import fingerprint
from hashcache.cache.store import CacheStore
from hashcache.io import read_text, stat_file
from hashcache.types import CacheEntry, FileInfo


def is_changed(current_hash: int, date_updated: int, stored: CacheEntry, grace_period_ms: int) -> bool:
    """Return True unless the hash matches and the timestamp stayed within the grace period.

    A matching hash alone never proves the content is unchanged because the
    fingerprint collides easily; once the timestamp has moved further than the
    grace period the file is reported as changed even if its bytes are equal.
    """
    if current_hash != stored["hash"]:
        return True
    return date_updated - stored["dateUpdated"] > grace_period_ms


async def detect_change(store: CacheStore, file_path: Path) -> FileInfo:
    """Read ``file_path`` and report whether it differs from its recorded entry."""
    file_stat, file_data = await asyncio.gather(
        asyncio.to_thread(stat_file, file_path),
        asyncio.to_thread(read_text, file_path),
    )
    stored = await store.read_entry(file_path)
    changed = is_changed(
        fingerprint(file_data),
        file_stat.modified_ms,
        stored,
        store.config.grace_period_ms,
    )
    return FileInfo(
        file_path=file_path,
        file_data=file_data,
        date_updated=file_stat.modified_ms,
        changed=changed,
    )


async def changed_files(store: CacheStore, file_paths: Iterable[Path]) -> list[FileInfo]:
    """Return change-detection results for the paths that changed, in input order."""
    results = await asyncio.gather(*(detect_change(store, path) for path in file_paths))
    return [info for info in results if info.changed]
