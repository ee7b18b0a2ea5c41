"""Root exception for hashcache."""

from __future__ import annotations


class HashCacheError(Exception):
    """Base class for all errors raised by hashcache."""
