"""Constants used by the bucket store and change detection."""

from __future__ import annotations

DEFAULT_SOURCE_DIR: str = "website"
DEFAULT_CACHE_DIR: str = ".hash-cache"
BUCKET_SUFFIX: str = ".json"
BUCKET_TEMP_PREFIX: str = ".bucket-"
BUCKET_TEMP_SUFFIX: str = ".tmp"

# A matching hash is only trusted while the timestamp has not moved further than this.
GRACE_PERIOD_MS: int = 1000 * 60 * 2

FINGERPRINT_MULTIPLIER: int = 31
INT32_MASK: int = 0xFFFFFFFF
INT32_SIGN_BIT: int = 0x80000000

ENTRY_DATE_KEY: str = "dateUpdated"
ENTRY_HASH_KEY: str = "hash"
