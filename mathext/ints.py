"""
Sorted Integer Sequences: Merge-Based Set Operations

    uniq:      drop consecutive duplicates
    intersect: values present in both sequences
    union:     values present in either sequence

intersect() and union() assume both inputs are ascending and duplicate-free;
uniq() assumes ascending input and removes the duplicates. None of this is
checked unless debug checks are enabled: unordered input yields a
deterministic but meaningless result, never an exception.

Results always hold plain Python ints, so numpy integer arrays are
accepted as inputs without leaking numpy scalars into the output.

Buffer Reuse:
    intersect() and union() accept an optional target list. When given, it
    is cleared, filled and returned (the same object), so a hot loop can
    reuse one list instead of allocating per call. A target must not be
    shared between concurrent calls.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from mathext.core.checks import check_ascending, debug_enabled, require

logger = logging.getLogger(__name__)


# =============================================================================
# INTEGER HELPERS
# =============================================================================
def int_min(a: int, b: int) -> int:
    """Return the lesser of a and b."""
    return a if a < b else b


def int_max(a: int, b: int) -> int:
    """Return the greater of a and b."""
    return a if a > b else b


def int_abs(x: int) -> int:
    return -x if x < 0 else x


def _output_buffer(target: Optional[list[int]], size_hint: int) -> list[int]:
    # Lists grow on demand; size_hint bounds the result length
    if target is None:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Allocating output buffer (size_hint={size_hint})")
        return []
    target.clear()
    return target


# =============================================================================
# UNIQ
# =============================================================================
def uniq(sorted_values: Optional[Sequence[int]]) -> list[int]:
    """
    Remove duplicates from an ascending sequence, like Unix `uniq`.

    Args:
        sorted_values: Ascending values, duplicates allowed (None = empty)

    Returns:
        New strictly ascending list; never None, never the input itself

    Complexity: O(n), single pass
    """
    if sorted_values is None or len(sorted_values) == 0:
        return []

    if debug_enabled():
        require(check_ascending(sorted_values, strict=False, name="sorted_values"))

    unique_values = [int(sorted_values[0])]
    for i in range(1, len(sorted_values)):
        if sorted_values[i] != sorted_values[i - 1]:
            unique_values.append(int(sorted_values[i]))
    return unique_values


# =============================================================================
# INTERSECT
# =============================================================================
def intersect(
    a: Optional[Sequence[int]],
    b: Optional[Sequence[int]],
    target: Optional[list[int]] = None,
) -> list[int]:
    """
    Intersection of two sorted sets.

    Args:
        a: Ascending, duplicate-free values (None = empty)
        b: Ascending, duplicate-free values (None = empty)
        target: Optional list to clear and fill with the result

    Returns:
        Ascending intersection; target itself when one was supplied

    Complexity: O(|a| + |b|)
    """
    if a is None:
        a = ()
    if b is None:
        b = ()
    if debug_enabled():
        require(check_ascending(a, name="a"))
        require(check_ascending(b, name="b"))

    len_a, len_b = len(a), len(b)
    intersection = _output_buffer(target, int_min(len_a, len_b))

    i = j = 0
    while i < len_a and j < len_b:
        a_val, b_val = a[i], b[j]
        if a_val < b_val:
            i += 1
        elif b_val < a_val:
            j += 1
        else:
            intersection.append(int(a_val))
            i += 1
            j += 1

    return intersection


# =============================================================================
# UNION
# =============================================================================
def union(
    a: Optional[Sequence[int]],
    b: Optional[Sequence[int]],
    target: Optional[list[int]] = None,
) -> list[int]:
    """
    Union of two sorted sets via binary merge.

    Args:
        a: Ascending, duplicate-free values (None = empty)
        b: Ascending, duplicate-free values (None = empty)
        target: Optional list to clear and fill with the result

    Returns:
        Ascending union; target itself when one was supplied

    Complexity: O(|a| + |b|)
    """
    if a is None:
        a = ()
    if b is None:
        b = ()
    if debug_enabled():
        require(check_ascending(a, name="a"))
        require(check_ascending(b, name="b"))

    len_a, len_b = len(a), len(b)
    merged = _output_buffer(target, int_max(len_a, len_b))

    i = j = 0
    while True:
        if i == len_a:
            merged.extend(int(x) for x in b[j:])
            break
        if j == len_b:
            merged.extend(int(x) for x in a[i:])
            break

        a_val, b_val = a[i], b[j]
        if a_val < b_val:
            merged.append(int(a_val))
            i += 1
        elif b_val < a_val:
            merged.append(int(b_val))
            j += 1
        else:
            merged.append(int(a_val))
            i += 1
            j += 1

    return merged
