"""Filesystem collaborators consumed by the cache core."""

from .buckets import read_bucket_document, render_bucket, write_bucket_document
from .files import read_text, stat_file

__all__ = ["read_bucket_document", "read_text", "render_bucket", "stat_file", "write_bucket_document"]
