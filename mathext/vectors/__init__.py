"""
Sparse Vectors: Types, Orderings, and Reductions
"""

from mathext.vectors.types import Element, SparseVector, WeightedTerms
from mathext.vectors.ordering import ElementOrder, sort_elements
from mathext.vectors.ops import cosine_similarity, dot, norm, weighted_mean

__all__ = [
    # Types
    "Element",
    "SparseVector",
    "WeightedTerms",
    # Ordering
    "ElementOrder",
    "sort_elements",
    # Reductions
    "dot",
    "norm",
    "weighted_mean",
    "cosine_similarity",
]
