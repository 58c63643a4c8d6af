from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

import numpy as np

from graphalgebra.errors import DivideByZeroError, ShapeMismatchError
from graphalgebra.graph.graph_schema import NO_EDGE, narrow_weights

if TYPE_CHECKING:
    from graphalgebra.graph.graph_store import Graph

logger = logging.getLogger("graphalgebra.algebra")

CellFunc = Callable[[np.ndarray, np.ndarray], np.ndarray]
WeightFunc = Callable[[np.ndarray], np.ndarray]


# ------------------------------------------------------------------
# Shared rules
# ------------------------------------------------------------------


def require_same_shape(left: "Graph", right: "Graph", *, op: str) -> None:
    """
    Binary operators need operands of equal size and directedness.
    """
    if left.vertex_count() != right.vertex_count():
        raise ShapeMismatchError(
            f"Cannot {op} graphs with different number of vertices "
            f"({left.vertex_count()} and {right.vertex_count()})."
        )
    if left.is_directed() != right.is_directed():
        raise ShapeMismatchError(
            f"Cannot {op} graphs of different types (directed/undirected)."
        )


def remove_zero_weights(matrix: np.ndarray) -> np.ndarray:
    matrix[matrix == 0] = NO_EDGE
    return matrix


def combine_cells(left: "Graph", right: "Graph", func: CellFunc, *, op: str) -> "Graph":
    """
    Combine two graphs cell by cell.

    - both cells absent: the result is absent
    - one cell absent: it takes part as 0, the identity of the operator
      in that position (so ``_ - b`` yields ``-b``)
    - a zero result removes the edge

    Cells are combined exactly and narrowed back to weights afterwards;
    a result outside the weight range raises WeightOverflowError.
    """
    require_same_shape(left, right, op=op)

    has_a = left.snapshot() != NO_EDGE
    has_b = right.snapshot() != NO_EDGE
    a = left.snapshot().astype(object)
    b = right.snapshot().astype(object)

    out = np.full_like(a, NO_EDGE)

    both = has_a & has_b
    out[both] = func(a[both], b[both])

    only_a = has_a & ~has_b
    out[only_a] = func(a[only_a], np.zeros_like(a[only_a]))

    only_b = ~has_a & has_b
    out[only_b] = func(np.zeros_like(b[only_b]), b[only_b])

    result = left.with_matrix(narrow_weights(remove_zero_weights(out), op=op))
    logger.debug("%s -> %d edges", op, result.edge_count())
    return result


def map_weights(graph: "Graph", func: WeightFunc, *, op: str) -> "Graph":
    """
    Apply ``func`` to every present weight of a copy of ``graph``.

    Absent edges stay absent; weights mapped to zero are removed and
    weights mapped outside the weight range raise WeightOverflowError.
    """
    present = graph.snapshot() != NO_EDGE
    m = graph.snapshot().astype(object)
    m[present] = func(m[present])
    return graph.with_matrix(narrow_weights(remove_zero_weights(m), op=op))


# ------------------------------------------------------------------
# Binary operators
# ------------------------------------------------------------------


def add(left: "Graph", right: "Graph") -> "Graph":
    return combine_cells(left, right, np.add, op="add")


def subtract(left: "Graph", right: "Graph") -> "Graph":
    return combine_cells(left, right, np.subtract, op="subtract")


# ------------------------------------------------------------------
# Unary operators
# ------------------------------------------------------------------


def identity(graph: "Graph") -> "Graph":
    """
    Structurally independent copy of ``graph``.
    """
    return graph.clone()


def negate(graph: "Graph") -> "Graph":
    return map_weights(graph, np.negative, op="negate")


def increment(graph: "Graph") -> "Graph":
    """
    Prefix increment: add 1 to every edge of ``graph`` in place.

    Edges of weight -1 are removed. Returns ``graph`` itself.
    """
    return graph.assign(post_increment(graph))


def decrement(graph: "Graph") -> "Graph":
    """
    Prefix decrement: subtract 1 from every edge of ``graph`` in place.

    Edges of weight 1 are removed. Returns ``graph`` itself.
    """
    return graph.assign(post_decrement(graph))


def post_increment(graph: "Graph") -> "Graph":
    """
    Postfix increment: ``graph`` is left untouched and a fresh,
    incremented copy is returned.
    """
    return map_weights(graph, lambda w: w + 1, op="increment")


def post_decrement(graph: "Graph") -> "Graph":
    """
    Postfix decrement: ``graph`` is left untouched and a fresh,
    decremented copy is returned.
    """
    return map_weights(graph, lambda w: w - 1, op="decrement")


# ------------------------------------------------------------------
# Scalar operators
# ------------------------------------------------------------------


def _require_int(factor: object) -> int:
    if isinstance(factor, bool) or not isinstance(factor, (int, np.integer)):
        raise TypeError(f"Scalar factor must be int, got {type(factor).__name__}")
    return int(factor)


def multiply_by_scalar(graph: "Graph", factor: int) -> "Graph":
    """
    Multiply every weight by ``factor``; a zero factor removes all edges.
    """
    k = _require_int(factor)
    return map_weights(graph, lambda w: w * k, op="multiply")


def divide_by_scalar(graph: "Graph", factor: int) -> "Graph":
    """
    Integer-divide every weight by ``factor``, truncating toward zero.

    Weights whose quotient is zero are removed.
    """
    k = _require_int(factor)
    if k == 0:
        raise DivideByZeroError("Division by zero.")

    def _truncating_div(w: np.ndarray) -> np.ndarray:
        quotient = np.abs(w) // abs(k)
        return np.where((w < 0) != (k < 0), -quotient, quotient)

    return map_weights(graph, _truncating_div, op="divide")
