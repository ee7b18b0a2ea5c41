"""File-level helpers for reading tracked files and their metadata."""

from __future__ import annotations

from pathlib import Path

from hashcache.types import FileStat

NS_PER_MS: int = 1_000_000


def read_text(path: Path) -> str:
    """Return file content decoded as UTF-8 with line endings left untouched.

    Invalid byte sequences become U+FFFD instead of failing, so any readable
    file can be fingerprinted.
    """
    return path.read_bytes().decode("utf-8", errors="replace")


def stat_file(path: Path) -> FileStat:
    """Return the modification time of ``path`` in epoch milliseconds."""
    stat = path.stat()
    return FileStat(modified_ms=stat.st_mtime_ns // NS_PER_MS)
