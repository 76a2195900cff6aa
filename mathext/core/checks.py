"""
Precondition Checkers

The merge algorithms trust their callers: sortedness and uniqueness are
documented preconditions, not runtime checks. These helpers make the
preconditions verifiable. The checkers return a Result; require() raises
only when debug checks are enabled in the active config.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Sequence

from mathext.core.config import get_config
from mathext.core.errors import Err, Ok, PreconditionError, Result

if TYPE_CHECKING:
    from mathext.vectors.types import Element

logger = logging.getLogger(__name__)


def check_ascending(
    values: Optional[Sequence[int]],
    strict: bool = True,
    name: str = "values",
) -> Result[None, PreconditionError]:
    """
    Verify that values never decrease.

    Args:
        values: Sequence to inspect (None counts as empty)
        strict: Also reject equal neighbours (duplicates)
        name: Argument name used in the error

    Complexity: O(n)
    """
    if values is None or len(values) == 0:
        return Ok(None)

    prev = values[0]
    for i in range(1, len(values)):
        current = values[i]
        if current < prev:
            return Err(PreconditionError.not_ascending(name, i, prev, current))
        if strict and current == prev:
            return Err(PreconditionError.duplicate(name, i, current))
        prev = current
    return Ok(None)


def check_sorted_by_id(
    elements: Sequence["Element"],
    name: str = "vector",
) -> Result[None, PreconditionError]:
    """Verify strictly ascending, duplicate-free element ids."""
    return check_ascending([e.id for e in elements], strict=True, name=name)


def require(result: Result[None, PreconditionError]) -> None:
    """Raise the error carried by result, if any."""
    if result.is_err():
        error = result.error
        logger.debug(f"Precondition failed: {error}", extra={"error": error.to_dict()})
        raise error


def debug_enabled() -> bool:
    return get_config().debug_checks
