"""
Package-Wide Constants

Hash parameters follow Java's String.hashCode() with a large prime seed,
accumulated in signed 64-bit arithmetic.
"""

from typing import Final

# =============================================================================
# STRING HASHING
# =============================================================================
HASH_SEED: Final[int] = 1125899906842597  # prime
HASH_MULTIPLIER: Final[int] = 31

# =============================================================================
# 64-BIT INTEGER BOUNDS
# =============================================================================
INT64_BITS: Final[int] = 64
INT64_MASK: Final[int] = (1 << INT64_BITS) - 1
INT64_SIGN_BIT: Final[int] = 1 << (INT64_BITS - 1)

# =============================================================================
# CONFIGURATION
# =============================================================================
ENV_DEBUG_CHECKS: Final[str] = "MATHEXT_DEBUG_CHECKS"
ENV_LOG_LEVEL: Final[str] = "MATHEXT_LOG_LEVEL"
LOG_LEVELS: Final[tuple[str, ...]] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
