"""
String Hashing

Java String.hashCode()-style accumulator with a large prime seed, used to
map terms onto sparse vector ids.
"""

from __future__ import annotations

from mathext.core.constants import (
    HASH_MULTIPLIER,
    HASH_SEED,
    INT64_MASK,
    INT64_SIGN_BIT,
)


def hash_string(s: str) -> int:
    """
    Hash s into a signed 64-bit integer.

    Accumulates h = 31*h + byte over the UTF-8 bytes of s, wrapping on
    overflow exactly like 64-bit two's complement arithmetic.

    Example:
        >>> hash_string("john")
        6774539739450401392
    """
    h = HASH_SEED
    for byte in s.encode("utf-8"):
        h = (HASH_MULTIPLIER * h + byte) & INT64_MASK
    return h - (1 << 64) if h & INT64_SIGN_BIT else h
