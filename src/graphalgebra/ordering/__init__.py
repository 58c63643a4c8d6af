"""
Total ordering over graphs.

Built on submatrix containment, then edge count, then vertex count.
Equality is derived from the ordering, not from a cell-by-cell check.
"""

from graphalgebra.ordering.comparison import (
    less_than,
    greater_than,
    equals,
    not_equals,
    less_or_equal,
    greater_or_equal,
)
from graphalgebra.ordering.containment import is_submatrix, matrices_equal

__all__ = [
    "less_than",
    "greater_than",
    "equals",
    "not_equals",
    "less_or_equal",
    "greater_or_equal",
    "is_submatrix",
    "matrices_equal",
]
