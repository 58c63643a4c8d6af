from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from graphalgebra.ordering.containment import is_submatrix, matrices_equal

if TYPE_CHECKING:
    from graphalgebra.graph.graph_store import Graph

logger = logging.getLogger("graphalgebra.ordering")


def less_than(a: "Graph", b: "Graph") -> bool:
    """
    Strict ordering over graphs, decided by the first rule that applies:

    1. two empty graphs are not ordered
    2. an empty graph is less than any non-empty graph
    3. identical matrices are not ordered
    4. a graph contained as a contiguous block of the other is less
    5. fewer edges is less
    6. fewer vertices is less

    Anything left over is not ordered.
    """
    if a.is_empty() or b.is_empty():
        return a.is_empty() and not b.is_empty()

    ma = a.snapshot()
    mb = b.snapshot()

    if matrices_equal(ma, mb):
        return False

    if is_submatrix(ma, mb):
        logger.debug("ordered by containment")
        return True
    if is_submatrix(mb, ma):
        return False

    if a.edge_count() != b.edge_count():
        return a.edge_count() < b.edge_count()

    return a.vertex_count() < b.vertex_count()


def greater_than(a: "Graph", b: "Graph") -> bool:
    return less_than(b, a)


def equals(a: "Graph", b: "Graph") -> bool:
    """
    Graphs are equal when neither is less than the other.

    Matrices may differ: graphs the ordering cannot separate
    (same size, same edge count, neither contained in the other)
    compare equal.
    """
    return not less_than(a, b) and not less_than(b, a)


def not_equals(a: "Graph", b: "Graph") -> bool:
    return not equals(a, b)


def less_or_equal(a: "Graph", b: "Graph") -> bool:
    return less_than(a, b) or equals(a, b)


def greater_or_equal(a: "Graph", b: "Graph") -> bool:
    return greater_than(a, b) or equals(a, b)
