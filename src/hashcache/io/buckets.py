"""Reading and writing bucket documents."""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path

from hashcache.constants.cache import BUCKET_TEMP_PREFIX, BUCKET_TEMP_SUFFIX
from hashcache.types import CacheFile


def read_bucket_document(path: Path) -> object:
    """Parse the bucket document at ``path``.

    A missing document raises ``FileNotFoundError``; undecodable or invalid
    JSON raises ``ValueError``. Shape checks are left to the caller.
    """
    with path.open("rb") as handle:
        return json.load(handle)


def render_bucket(bucket: CacheFile) -> str:
    """Serialize ``bucket`` with sorted keys, one field per line and a trailing newline."""
    return json.dumps(bucket, indent=2, sort_keys=True) + "\n"


def write_bucket_document(path: Path, bucket: CacheFile) -> None:
    """Replace the bucket document at ``path`` with the rendered ``bucket``.

    The document is rendered before anything touches the disk, written to a
    sibling temp file and swapped in with ``os.replace``, so readers only ever
    see a complete previous or new document.
    """
    text = render_bucket(bucket)
    path.parent.mkdir(parents=True, exist_ok=True)

    fd, temp_name = tempfile.mkstemp(dir=path.parent, prefix=BUCKET_TEMP_PREFIX, suffix=BUCKET_TEMP_SUFFIX)
    temp_path = Path(temp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as handle:
            handle.write(text)
        os.replace(temp_path, path)
    except Exception:
        temp_path.unlink(missing_ok=True)
        raise
