"""Directory-partitioned bucket store for content fingerprints."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from jsonschema import Draft202012Validator

from hashcache.cache.fingerprint import fingerprint
from hashcache.config import CacheConfig
from hashcache.constants.schema import BUCKET_SCHEMA
from hashcache.exceptions import BucketFormatError, CacheError
from hashcache.io import read_bucket_document, write_bucket_document
from hashcache.types import CacheEntry, CacheFile

logger = logging.getLogger(__name__)

_BUCKET_VALIDATOR = Draft202012Validator(BUCKET_SCHEMA)


def zero_entry() -> CacheEntry:
    """Entry reported for files that were never recorded."""
    return {"dateUpdated": 0, "hash": 0}


class CacheStore:
    """Reads, mutates and persists bucket documents for one run.

    Every tracked file maps to the bucket document of its parent directory.
    Buckets read from disk are kept in an in-memory overlay for the lifetime
    of the store and are mutated in place by commits, so every caller holding
    a bucket sees later commits to it. Writers take the bucket through
    :meth:`bucket`, which serializes read-modify-write cycles per bucket
    inside this process. Nothing guards against other processes.
    """

    def __init__(self, config: CacheConfig) -> None:
        self.config = config
        self.write_count = 0
        self._source_root = config.source_root.resolve()
        self._buckets: dict[Path, CacheFile] = {}
        self._locks: dict[Path, asyncio.Lock] = {}

    @property
    def loaded_buckets(self) -> tuple[Path, ...]:
        """Bucket documents currently held in the overlay."""
        return tuple(sorted(self._buckets))

    def entry_key(self, file_path: Path) -> str:
        """Return the source-root relative POSIX path used as the bucket key."""
        resolved = file_path.resolve()
        try:
            return resolved.relative_to(self._source_root).as_posix()
        except ValueError as exc:
            raise CacheError(f"Tracked path {resolved} is outside source root {self._source_root}") from exc

    def bucket_path(self, file_path: Path) -> Path:
        """Return the bucket document holding the entry for ``file_path``."""
        parent = Path(self.entry_key(file_path)).parent
        return self.config.cache_root / f"{parent.as_posix()}{self.config.bucket_suffix}"

    async def load_bucket(self, file_path: Path) -> CacheFile:
        """Return the bucket for ``file_path``, reading it from disk on first use.

        A missing document yields a new empty bucket that only joins the
        overlay once something is committed to it.
        """
        bucket_path = self.bucket_path(file_path)
        cached = self._buckets.get(bucket_path)
        if cached is not None:
            return cached

        try:
            payload = await asyncio.to_thread(read_bucket_document, bucket_path)
        except FileNotFoundError:
            logger.debug("No bucket document at %s", bucket_path)
            return {}
        except ValueError as exc:
            raise BucketFormatError(bucket_path, str(exc)) from exc

        error = next(iter(_BUCKET_VALIDATOR.iter_errors(payload)), None)
        if error is not None:
            location = "/".join(str(part) for part in error.absolute_path) or "<root>"
            raise BucketFormatError(bucket_path, f"{location}: {error.message}")

        assert isinstance(payload, dict)
        logger.debug("Loaded bucket %s with %d entries", bucket_path, len(payload))
        # A concurrent load may have won while this one was reading.
        return self._buckets.setdefault(bucket_path, payload)

    @asynccontextmanager
    async def bucket(self, file_path: Path) -> AsyncIterator[CacheFile]:
        """Hold the bucket for ``file_path`` exclusively while the block runs."""
        bucket_path = self.bucket_path(file_path)
        lock = self._locks.setdefault(bucket_path, asyncio.Lock())
        async with lock:
            yield await self.load_bucket(file_path)

    async def read_entry(self, file_path: Path) -> CacheEntry:
        """Return a copy of the recorded entry for ``file_path`` or the zero entry."""
        bucket = await self.load_bucket(file_path)
        entry = bucket.get(self.entry_key(file_path))
        return entry.copy() if entry is not None else zero_entry()

    async def commit_entry(self, file_path: Path, date_updated: int, content: str) -> CacheEntry:
        """Record the fingerprint of ``content`` and persist the bucket when it changed."""
        entry: CacheEntry = {"dateUpdated": date_updated, "hash": fingerprint(content)}
        key = self.entry_key(file_path)
        bucket_path = self.bucket_path(file_path)

        async with self.bucket(file_path) as bucket:
            if bucket.get(key) == entry:
                logger.debug("Entry for %s unchanged; skipping write", key)
                return entry

            bucket[key] = entry.copy()
            self._buckets[bucket_path] = bucket
            await asyncio.to_thread(write_bucket_document, bucket_path, bucket)
            self.write_count += 1
            logger.debug("Committed %s to %s", key, bucket_path)

        return entry
