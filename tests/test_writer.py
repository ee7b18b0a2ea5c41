"""Tests for committing current file state."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

import pytest

from hashcache.cache import CacheStore, fingerprint, sync_files, update_cache
from hashcache.config import CacheConfig


@pytest.mark.asyncio
async def test_update_cache_records_current_state(
    store: CacheStore, config: CacheConfig, write_tracked: Callable[..., Path]
) -> None:
    path = write_tracked("lib/util.ts", "export const one = 1;\n", mtime_ms=5000)

    entry = await update_cache(store, path)

    assert entry == {"dateUpdated": 5000, "hash": fingerprint("export const one = 1;\n")}
    assert (config.cache_root / "lib.json").is_file()


@pytest.mark.asyncio
async def test_update_cache_twice_writes_once(store: CacheStore, write_tracked: Callable[..., Path]) -> None:
    path = write_tracked("lib/util.ts", "same", mtime_ms=5000)

    first = await update_cache(store, path)
    second = await update_cache(store, path)

    assert first == second
    assert store.write_count == 1


@pytest.mark.asyncio
async def test_update_cache_keeps_crlf_content(store: CacheStore, write_tracked: Callable[..., Path]) -> None:
    path = write_tracked("lib/crlf.ts", "a\r\nb\r\n", mtime_ms=5000)

    entry = await update_cache(store, path)

    assert entry["hash"] == fingerprint("a\r\nb\r\n")


@pytest.mark.asyncio
async def test_update_cache_for_missing_file_is_fatal(store: CacheStore, config: CacheConfig) -> None:
    with pytest.raises(FileNotFoundError):
        await update_cache(store, config.source_root / "lib" / "missing.ts")

    assert store.write_count == 0


@pytest.mark.asyncio
async def test_sync_files_records_every_path_in_order(
    store: CacheStore,
    config: CacheConfig,
    write_tracked: Callable[..., Path],
    caplog: pytest.LogCaptureFixture,
) -> None:
    paths = [
        write_tracked("index.ts", "root", mtime_ms=1000),
        write_tracked("lib/a.ts", "a", mtime_ms=2000),
        write_tracked("lib/b.ts", "b", mtime_ms=3000),
    ]

    with caplog.at_level(logging.INFO, logger="hashcache.cache.writer"):
        entries = await sync_files(store, paths)

    assert [entry["dateUpdated"] for entry in entries] == [1000, 2000, 3000]
    assert [entry["hash"] for entry in entries] == [fingerprint("root"), fingerprint("a"), fingerprint("b")]
    assert (config.cache_root / "..json").is_file()
    assert store.loaded_buckets == (config.cache_root / "..json", config.cache_root / "lib.json")
    assert "Synced 3 tracked files" in caplog.text


@pytest.mark.asyncio
async def test_sync_files_skips_unchanged_buckets(store: CacheStore, write_tracked: Callable[..., Path]) -> None:
    paths = [write_tracked("lib/a.ts", "a", mtime_ms=2000), write_tracked("lib/b.ts", "b", mtime_ms=3000)]
    await sync_files(store, paths)
    writes = store.write_count

    await sync_files(store, paths)

    assert store.write_count == writes


@pytest.mark.asyncio
async def test_update_cache_accepts_non_utf8_content(store: CacheStore, write_tracked: Callable[..., Path]) -> None:
    path = write_tracked("lib/legacy.js", "", mtime_ms=4000)
    path.write_bytes(b"// caf\xe9\nexport {};\n")

    entry = await update_cache(store, path)

    assert entry["hash"] == fingerprint("// caf\ufffd\nexport {};\n")


@pytest.mark.asyncio
async def test_sync_files_records_batch_with_non_utf8_file(
    store: CacheStore, config: CacheConfig, write_tracked: Callable[..., Path]
) -> None:
    good = write_tracked("lib/good.ts", "export {};\n", mtime_ms=1000)
    bad = write_tracked("lib/bad.json", "", mtime_ms=2000)
    bad.write_bytes(b"\xff\xfe{}")

    entries = await sync_files(store, [good, bad])

    assert [entry["hash"] for entry in entries] == [fingerprint("export {};\n"), fingerprint("\ufffd\ufffd{}")]
    assert sorted(await CacheStore(config).load_bucket(good)) == ["lib/bad.json", "lib/good.ts"]
