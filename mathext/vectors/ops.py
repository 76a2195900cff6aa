"""
Sparse Vector Reductions

    dot:               merge-join over two id-sorted vectors
    norm:              Euclidean (L2) norm
    weighted_mean:     sum(x*w) / sum(w)
    cosine_similarity: dot / (norm * norm)

Preconditions:
    dot() and cosine_similarity() need both vectors strictly ascending by id.
    This is not checked unless debug checks are enabled; a violation gives a
    deterministic but meaningless result.

Complexity:
    dot: O(n+m), no allocation
    norm, weighted_mean: O(n)
"""

from __future__ import annotations

import logging
import math
from typing import Sequence

import numpy as np

from mathext.core.checks import check_sorted_by_id, debug_enabled, require
from mathext.core.errors import InvalidArgumentError
from mathext.vectors.types import Element

logger = logging.getLogger(__name__)


# =============================================================================
# DOT PRODUCT
# =============================================================================
def dot(v1: Sequence[Element], v2: Sequence[Element]) -> float:
    """
    Dot product of two sparse vectors.

    Sums value1 * value2 over ids present in both. Walks both vectors
    once, advancing whichever side holds the smaller id.

    Args:
        v1: Vector sorted ascending by id, no duplicate ids
        v2: Vector sorted ascending by id, no duplicate ids

    Returns:
        The dot product (0.0 if either vector is empty)

    Raises:
        PreconditionError: Only under debug checks, if an input is unsorted
    """
    if debug_enabled():
        require(check_sorted_by_id(v1, name="v1"))
        require(check_sorted_by_id(v2, name="v2"))

    result = 0.0
    len1, len2 = len(v1), len(v2)
    i = j = 0

    while i < len1 and j < len2:
        e1, e2 = v1[i], v2[j]
        if e1.id < e2.id:
            i += 1
        elif e2.id < e1.id:
            j += 1
        else:
            result += e1.value * e2.value
            i += 1
            j += 1

    return result


# =============================================================================
# NORM
# =============================================================================
def norm(v: Sequence[Element]) -> float:
    """Euclidean norm. No ordering requirement. Empty -> 0.0."""
    sum_of_squares = 0.0
    for e in v:
        sum_of_squares += e.value * e.value
    return math.sqrt(sum_of_squares)


# =============================================================================
# WEIGHTED MEAN
# =============================================================================
def weighted_mean(values: Sequence[float], weights: Sequence[float]) -> float:
    """
    Weighted arithmetic mean.

    Weights are expected non-negative; this is not checked. A zero weight
    sum follows IEEE-754 (NaN for 0/0, +/-inf otherwise) instead of raising.

    Args:
        values: Observations
        weights: One weight per observation

    Returns:
        sum(values[i] * weights[i]) / sum(weights[i])

    Raises:
        InvalidArgumentError: If values and weights differ in length
    """
    if len(values) != len(weights):
        raise InvalidArgumentError.length_mismatch(
            "values", len(values), "weights", len(weights)
        )

    sum_weighted = 0.0
    sum_weights = 0.0
    for x, w in zip(values, weights):
        sum_weighted += x * w
        sum_weights += w

    # numpy division gives the IEEE result where float division would raise
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(sum_weighted) / np.float64(sum_weights))


# =============================================================================
# COSINE SIMILARITY
# =============================================================================
def cosine_similarity(v1: Sequence[Element], v2: Sequence[Element]) -> float:
    """
    Cosine of the angle between two id-sorted sparse vectors.

    Returns:
        Similarity in [-1, 1]; 0.0 if either vector has zero norm
    """
    norm1 = norm(v1)
    norm2 = norm(v2)
    if norm1 == 0.0 or norm2 == 0.0:
        return 0.0
    return dot(v1, v2) / (norm1 * norm2)
