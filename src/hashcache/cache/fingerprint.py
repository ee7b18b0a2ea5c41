"""Weak content fingerprint used to spot changed files."""

from __future__ import annotations

from hashcache.constants.cache import FINGERPRINT_MULTIPLIER, INT32_MASK, INT32_SIGN_BIT


def fingerprint(text: str) -> int:
    """Return a signed 32-bit rolling hash of ``text``.

    Walks the UTF-16 code units of the text computing ``h * 31 + unit`` and
    wraps to 32 bits after every step (the classic ``String.hashCode``
    scheme). Collisions are expected; callers pair the hash with a
    modification time before trusting a match.
    """
    if not text:
        return 0

    value = 0
    encoded = text.encode("utf-16-le", errors="surrogatepass")
    for index in range(0, len(encoded), 2):
        code_unit = encoded[index] | (encoded[index + 1] << 8)
        value = (value * FINGERPRINT_MULTIPLIER + code_unit) & INT32_MASK

    if value & INT32_SIGN_BIT:
        return value - (INT32_MASK + 1)
    return value
