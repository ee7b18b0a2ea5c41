"""Configuration loading and normalization for the hash cache."""

from __future__ import annotations

from hashcache.config.loader import load_config
from hashcache.config.model import CacheConfig

__all__ = ["CacheConfig", "load_config"]
