"""Committing current file state into the bucket store."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from pathlib import Path

from hashcache.cache.store import CacheStore
from hashcache.io import read_text, stat_file
from hashcache.types import CacheEntry

logger = logging.getLogger(__name__)


async def update_cache(store: CacheStore, file_path: Path) -> CacheEntry:
    """Re-read ``file_path`` and record its current fingerprint."""
    file_stat, file_data = await asyncio.gather(
        asyncio.to_thread(stat_file, file_path),
        asyncio.to_thread(read_text, file_path),
    )
    return await store.commit_entry(file_path, file_stat.modified_ms, file_data)


async def sync_files(store: CacheStore, file_paths: Iterable[Path]) -> list[CacheEntry]:
    """Record every path in ``file_paths``; entries come back in input order."""
    paths = list(file_paths)
    writes_before = store.write_count
    entries = await asyncio.gather(*(update_cache(store, path) for path in paths))
    logger.info(
        "Synced %d tracked files (%d bucket writes)",
        len(paths),
        store.write_count - writes_before,
    )
    return list(entries)
