"""Shared pytest fixtures for cache tests."""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path

import pytest

from hashcache.cache import CacheStore
from hashcache.config import CacheConfig

NS_PER_MS: int = 1_000_000


@pytest.fixture()
def project_root(tmp_path: Path) -> Path:
    """Return a project root with an empty tracked source tree."""
    (tmp_path / "website").mkdir()
    return tmp_path


@pytest.fixture()
def config(project_root: Path) -> CacheConfig:
    return CacheConfig.for_root(project_root)


@pytest.fixture()
def store(config: CacheConfig) -> CacheStore:
    return CacheStore(config)


@pytest.fixture()
def write_tracked(config: CacheConfig) -> Callable[..., Path]:
    """Return a helper writing a file under the source root with a fixed mtime in ms."""

    def _write(relative: str, content: str, mtime_ms: int | None = None) -> Path:
        path = config.source_root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content.encode("utf-8"))
        if mtime_ms is not None:
            os.utime(path, ns=(mtime_ms * NS_PER_MS, mtime_ms * NS_PER_MS))
        return path

    return _write
