from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from graphalgebra.algebra.operators import remove_zero_weights, require_same_shape
from graphalgebra.graph.graph_schema import NO_EDGE, narrow_weights

if TYPE_CHECKING:
    from graphalgebra.graph.graph_store import Graph

logger = logging.getLogger("graphalgebra.algebra")


def _weights_only(matrix: np.ndarray) -> np.ndarray:
    """
    Absent cells contribute nothing to a product term.
    """
    return np.where(matrix != NO_EDGE, matrix, 0)


def multiply(left: "Graph", right: "Graph") -> "Graph":
    """
    Matrix product of two graphs.

    ``result[i][j]`` is the sum over ``k`` of ``left[i][k] * right[k][j]``
    for the terms where both edges are present; a zero sum is NO_EDGE.
    The diagonal of the product is cleared since self-loops are not
    representable.

    Both operands are snapshotted before the product is formed, so
    ``multiply(g, g)`` never reads a cell it has already written.

    Raises WeightOverflowError when a sum leaves the weight range and
    ValidationError when two undirected operands produce a
    non-symmetric matrix.
    """
    require_same_shape(left, right, op="multiply")

    a = _weights_only(left.snapshot()).astype(object)
    b = _weights_only(right.snapshot()).astype(object)

    out = a @ b
    np.fill_diagonal(out, NO_EDGE)

    result = left.with_matrix(narrow_weights(remove_zero_weights(out), op="multiply"))
    logger.debug(
        "multiply %dx%d -> %d edges",
        result.vertex_count(),
        result.vertex_count(),
        result.edge_count(),
    )
    return result
