"""Shared type aliases for hashcache."""

from .cache import CacheEntry, CacheFile, FileInfo, FileStat

__all__ = ["CacheEntry", "CacheFile", "FileInfo", "FileStat"]
