"""
mathext: Sparse Vector Arithmetic & Sorted-Sequence Merges

Two families of operations:
    - Sparse vectors: dot product, Euclidean norm, weighted mean
    - Sorted integer sequences: uniq, intersect, union

Usage:
    from mathext import SparseVector, ElementOrder, dot, norm, intersect

    v1 = SparseVector.from_pairs([(0, 4), (2, 2)])
    v2 = SparseVector.from_pairs([(0, 5), (1, 3), (2, 7), (3, 6)])
    dot(v1, v2)                        # 34.0

    # Term vectors, hashed onto ids and sorted for dot()
    doc = SparseVector.from_terms({"cat": 2.0, "hat": 1.0})

    # Reuse one output list across calls
    buf: list[int] = []
    for a, b in pairs:
        common = intersect(a, b, buf)  # common is buf

Preconditions (sortedness, uniqueness) are trusted. Enable the debug-only
assertions with MATHEXT_DEBUG_CHECKS=1 or `with debug_checks(): ...`.
"""

from __future__ import annotations

__version__ = "0.1.0"

from mathext.core.errors import (
    Result,
    Ok,
    Err,
    ErrorCode,
    MathExtError,
    InvalidArgumentError,
    PreconditionError,
    ConfigError,
)
from mathext.core.config import MathExtConfig, get_config, set_config, debug_checks
from mathext.core.logging import setup_logging
from mathext.hashing import hash_string
from mathext.ints import int_abs, int_max, int_min, intersect, union, uniq
from mathext.vectors import (
    Element,
    SparseVector,
    ElementOrder,
    sort_elements,
    dot,
    norm,
    weighted_mean,
    cosine_similarity,
)

__all__ = [
    # Version
    "__version__",
    # Sparse vectors
    "Element",
    "SparseVector",
    "ElementOrder",
    "sort_elements",
    "dot",
    "norm",
    "weighted_mean",
    "cosine_similarity",
    # Sorted integer sequences
    "uniq",
    "intersect",
    "union",
    "int_min",
    "int_max",
    "int_abs",
    # Hashing
    "hash_string",
    # Error handling
    "Result",
    "Ok",
    "Err",
    "ErrorCode",
    "MathExtError",
    "InvalidArgumentError",
    "PreconditionError",
    "ConfigError",
    # Config
    "MathExtConfig",
    "get_config",
    "set_config",
    "debug_checks",
    "setup_logging",
]
