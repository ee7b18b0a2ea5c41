"""Shared exception hierarchy for hashcache."""

from __future__ import annotations

from .base import HashCacheError
from .cache import BucketFormatError, CacheError
from .config import ConfigError

__all__ = ["BucketFormatError", "CacheError", "ConfigError", "HashCacheError"]
