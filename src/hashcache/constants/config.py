"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "hashcache.yaml"

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "source_dir",
        "cache_dir",
        "bucket_suffix",
        "grace_period_ms",
        "tracked_globs",
        "invalidating_globs",
    }
)

DEFAULT_TRACKED_GLOBS: tuple[str, ...] = (
    "**/*.ts",
    "**/*.tsx",
    "**/*.js",
    "**/*.jsx",
    "**/*.json",
    "**/.eslint*",
)

# Changes to these files invalidate every cached lint/format verdict downstream.
DEFAULT_INVALIDATING_GLOBS: tuple[str, ...] = (
    "**/*.js",
    "**/*.jsx",
    "**/*.ts",
    "**/*.tsx",
    "**/.eslint*",
    "**/tsconfig*.*",
    "**/tslint*.json",
    "**/tslint*.js",
    "**/tsfmt.json",
)
