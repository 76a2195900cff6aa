"""
Sparse Vector Types

A sparse vector stores only its non-empty positions. The logical vector

    v = [9 0 0 2 0 0 0 0 7 0]

is held as three (id, value) pairs:

    sv = SparseVector.from_pairs([(0, 9), (3, 2), (8, 7)])

Invariants:
    - dot() requires ids strictly ascending with no duplicates
    - norm() and weighted_mean() impose no ordering
    - Neither invariant is enforced on construction; the caller tracks
      which ordering currently holds after sort_by()

Thread Safety:
    - Element and SparseVector are mutable and unsynchronized
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import (
    TYPE_CHECKING,
    Iterable,
    Iterator,
    Mapping,
    Sequence,
    Union,
)

import numpy as np

from mathext.core.errors import InvalidArgumentError
from mathext.hashing import hash_string

if TYPE_CHECKING:
    from mathext.vectors.ordering import ElementOrder

# (term, weight) pairs or a term->weight mapping
WeightedTerms = Union[Mapping[str, float], Iterable[tuple[str, float]]]


# =============================================================================
# ELEMENT: (id, value) PAIR
# =============================================================================
@dataclass(slots=True)
class Element:
    """
    One position of a sparse vector.

    Attributes:
        id: Ordinal position within the logical vector (non-negative)
        value: Value at that position (zero, negative, NaN all legal)
    """
    id: int
    value: float

    def __iter__(self) -> Iterator[Union[int, float]]:
        yield self.id
        yield self.value

    def as_tuple(self) -> tuple[int, float]:
        return (self.id, self.value)


# =============================================================================
# SPARSE VECTOR: ORDERED SEQUENCE OF ELEMENTS
# =============================================================================
class SparseVector(list):
    """
    Ordered list of Element.

    Being a plain list, any in-place sort applies; sort_by() is the
    shorthand for the two ordering strategies.

    Example:
        v = SparseVector.from_dict({2: 2.0, 0: 4.0})   # sorted by id
        v.sort_by(ElementOrder.BY_VALUE_DESC)          # now by value
        v.sort_by(ElementOrder.BY_ID)                  # back to id order
    """

    __slots__ = ()

    # -------------------------------------------------------------------------
    # Factory Methods
    # -------------------------------------------------------------------------
    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[int, float]]) -> "SparseVector":
        """Create from (id, value) pairs, keeping their order."""
        return cls(Element(int(i), float(v)) for i, v in pairs)

    @classmethod
    def from_dict(cls, id_values: Mapping[int, float]) -> "SparseVector":
        """
        Create from an id->value mapping.

        Returns:
            SparseVector sorted ascending by id

        Complexity: O(k log k)
        """
        return cls.from_pairs(sorted(id_values.items()))

    @classmethod
    def from_terms(cls, terms: WeightedTerms) -> "SparseVector":
        """
        Create from weighted terms, mapping each term to an id with
        hash_string().

        Terms hashing to the same id have their weights summed, so the
        result is sorted by id and duplicate-free (ready for dot()).

        Args:
            terms: term->weight mapping or iterable of (term, weight)

        Complexity: O(k log k) plus hashing
        """
        items = terms.items() if isinstance(terms, Mapping) else terms
        accumulated: dict[int, float] = {}
        for term, weight in items:
            term_id = hash_string(term)
            accumulated[term_id] = accumulated.get(term_id, 0.0) + float(weight)
        return cls.from_dict(accumulated)

    @classmethod
    def from_arrays(
        cls,
        ids: Union[Sequence[int], np.ndarray],
        values: Union[Sequence[float], np.ndarray],
    ) -> "SparseVector":
        """
        Create from parallel id and value arrays, keeping their order.

        Raises:
            InvalidArgumentError: If the arrays differ in length
        """
        id_arr = np.asarray(ids, dtype=np.int64)
        value_arr = np.asarray(values, dtype=np.float64)
        if id_arr.shape[0] != value_arr.shape[0]:
            raise InvalidArgumentError.length_mismatch(
                "ids", id_arr.shape[0], "values", value_arr.shape[0]
            )
        return cls(Element(int(i), float(v)) for i, v in zip(id_arr, value_arr))

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------
    def ids(self) -> list[int]:
        return [e.id for e in self]

    def values(self) -> list[float]:
        return [e.value for e in self]

    def to_arrays(self) -> tuple[np.ndarray, np.ndarray]:
        """Return (ids int64, values float64) in current element order."""
        return (
            np.fromiter((e.id for e in self), dtype=np.int64, count=len(self)),
            np.fromiter((e.value for e in self), dtype=np.float64, count=len(self)),
        )

    def to_dict(self) -> dict[int, float]:
        return {e.id: e.value for e in self}

    def sort_by(self, order: "ElementOrder") -> "SparseVector":
        """Reorder in place by the given strategy and return self."""
        self.sort(key=order.key)
        return self

    def __repr__(self) -> str:
        pairs = ", ".join(f"({e.id}, {e.value!r})" for e in self)
        return f"SparseVector([{pairs}])"
