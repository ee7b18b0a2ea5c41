"""Shared constants for hashcache."""
