"""
Element Ordering Strategies

Two comparators that reorder a SparseVector in place:
    BY_ID:         ascending by id (the order dot() requires)
    BY_VALUE_DESC: descending by value (e.g. top-weighted terms first)

Tie order under BY_VALUE_DESC is whatever the sort produces; list.sort is
stable, but callers should not rely on it.
"""

from __future__ import annotations

import functools
from enum import Enum
from typing import Any, Callable, MutableSequence

from mathext.vectors.types import Element


def _compare_by_id(a: Element, b: Element) -> int:
    return (a.id > b.id) - (a.id < b.id)


def _compare_by_value_desc(a: Element, b: Element) -> int:
    return (a.value < b.value) - (a.value > b.value)


class ElementOrder(Enum):
    """Comparator strategy over Element."""
    BY_ID = "id"
    BY_VALUE_DESC = "value_desc"

    def compare(self, a: Element, b: Element) -> int:
        """Negative if a sorts before b, zero if tied, positive otherwise."""
        return _COMPARATORS[self](a, b)

    @property
    def key(self) -> Callable[[Element], Any]:
        """Sort key for list.sort()/sorted()."""
        return functools.cmp_to_key(_COMPARATORS[self])


_COMPARATORS: dict[ElementOrder, Callable[[Element, Element], int]] = {
    ElementOrder.BY_ID: _compare_by_id,
    ElementOrder.BY_VALUE_DESC: _compare_by_value_desc,
}


def sort_elements(elements: MutableSequence[Element], order: ElementOrder) -> None:
    """
    Sort elements in place.

    Works on any mutable sequence of Element, not only SparseVector.
    """
    if isinstance(elements, list):
        elements.sort(key=order.key)
        return
    elements[:] = sorted(elements, key=order.key)
