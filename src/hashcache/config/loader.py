"""Config loading and normalization for the hash cache."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from hashcache.config.model import CacheConfig
from hashcache.constants.cache import BUCKET_SUFFIX, DEFAULT_CACHE_DIR, DEFAULT_SOURCE_DIR, GRACE_PERIOD_MS
from hashcache.constants.config import (
    ALLOWED_CONFIG_KEYS,
    CONFIG_FILENAME,
    DEFAULT_INVALIDATING_GLOBS,
    DEFAULT_TRACKED_GLOBS,
)
from hashcache.exceptions import ConfigError


def load_config(root: Path, config_path: Path | None = None) -> CacheConfig:
    """Load cache config from ``hashcache.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return CacheConfig.for_root(root)

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown = sorted(str(key) for key in raw if key not in ALLOWED_CONFIG_KEYS)
    if unknown:
        raise ConfigError(f"Unknown config key(s) in {path}: {', '.join(unknown)}")

    grace_period_ms = raw.get("grace_period_ms", GRACE_PERIOD_MS)
    if isinstance(grace_period_ms, bool) or not isinstance(grace_period_ms, int) or grace_period_ms <= 0:
        raise ConfigError("grace_period_ms must be a positive integer")

    bucket_suffix = raw.get("bucket_suffix", BUCKET_SUFFIX)
    if not isinstance(bucket_suffix, str) or not bucket_suffix.startswith("."):
        raise ConfigError("bucket_suffix must be a string starting with '.'")

    source_root = root / _ensure_relative_dir(raw.get("source_dir", DEFAULT_SOURCE_DIR), "source_dir")
    cache_root = root / _ensure_relative_dir(raw.get("cache_dir", DEFAULT_CACHE_DIR), "cache_dir")
    if cache_root == source_root:
        raise ConfigError("cache_dir must differ from source_dir")

    return CacheConfig(
        source_root=source_root,
        cache_root=cache_root,
        bucket_suffix=bucket_suffix,
        grace_period_ms=grace_period_ms,
        tracked_globs=tuple(
            _ensure_string_list(raw.get("tracked_globs", list(DEFAULT_TRACKED_GLOBS)), "tracked_globs")
        ),
        invalidating_globs=tuple(
            _ensure_string_list(
                raw.get("invalidating_globs", list(DEFAULT_INVALIDATING_GLOBS)),
                "invalidating_globs",
            )
        ),
    )


def _ensure_string_list(value: Any, key_name: str) -> list[str]:
    """Coerce a value to a list of non-empty strings, raising ConfigError on type mismatch."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key_name} must be a list of strings")
    return [item.strip() for item in value if item.strip()]


def _ensure_relative_dir(value: Any, key_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{key_name} must be a non-empty string")
    if Path(value).is_absolute():
        raise ConfigError(f"{key_name} must be relative to the project root, got {value!r}")
    return value.strip()
