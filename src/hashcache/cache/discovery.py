"""Tracked file discovery and glob helpers."""

from __future__ import annotations

import fnmatch
from collections.abc import Iterable
from pathlib import Path

from hashcache.cache.detector import changed_files
from hashcache.cache.store import CacheStore
from hashcache.config import CacheConfig
from hashcache.types import FileInfo

RECURSIVE_PREFIX: str = "**/"


def discover_tracked_files(config: CacheConfig) -> list[Path]:
    """Return files under the source root matching any tracked glob, sorted."""
    discovered: set[Path] = set()
    for pattern in config.tracked_globs:
        for path in config.source_root.glob(pattern):
            if path.is_file():
                discovered.add(path.resolve())
    return sorted(discovered)


def matches_any(file_path: Path, patterns: Iterable[str], root: Path) -> bool:
    """Return True when the root-relative path of ``file_path`` matches a pattern.

    ``**/`` prefixes also match files directly under ``root``.
    """
    try:
        relative = file_path.resolve().relative_to(root.resolve()).as_posix()
    except ValueError:
        return False

    for pattern in patterns:
        if fnmatch.fnmatchcase(relative, pattern):
            return True
        if pattern.startswith(RECURSIVE_PREFIX) and fnmatch.fnmatchcase(relative, pattern[len(RECURSIVE_PREFIX) :]):
            return True
    return False


async def invalidating_changes(store: CacheStore, file_paths: Iterable[Path]) -> list[FileInfo]:
    """Return changed files whose edits should invalidate downstream caches."""
    config = store.config
    candidates = [path for path in file_paths if matches_any(path, config.invalidating_globs, config.source_root)]
    return await changed_files(store, candidates)
