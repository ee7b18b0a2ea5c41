"""Typed cache payload structures."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TypeAlias, TypedDict


class CacheEntry(TypedDict):
    """Recorded fingerprint for a single tracked file; keys match the persisted JSON."""

    dateUpdated: int
    hash: int


CacheFile: TypeAlias = dict[str, CacheEntry]


@dataclass(frozen=True)
class FileStat:
    """Subset of file metadata the cache relies on."""

    modified_ms: int


@dataclass(frozen=True)
class FileInfo:
    """Result of one change-detection query."""

    file_path: Path
    file_data: str
    date_updated: int
    changed: bool
