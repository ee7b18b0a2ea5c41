"""JSON Schema for persisted bucket documents."""

from __future__ import annotations

from typing import Any

from hashcache.constants.cache import ENTRY_DATE_KEY, ENTRY_HASH_KEY

BUCKET_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "additionalProperties": {
        "type": "object",
        "required": [ENTRY_DATE_KEY, ENTRY_HASH_KEY],
        "properties": {
            ENTRY_DATE_KEY: {"type": "integer"},
            ENTRY_HASH_KEY: {"type": "integer", "minimum": -2147483648, "maximum": 2147483647},
        },
        "additionalProperties": False,
    },
}
