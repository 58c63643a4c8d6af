from __future__ import annotations

import logging
from typing import Any, Sequence

import numpy as np

from graphalgebra.algebra import operators, product
from graphalgebra.errors import IndexOutOfRangeError, ValidationError
from graphalgebra.graph.graph_schema import (
    NO_EDGE,
    WEIGHT_DTYPE,
    Matrix,
    as_matrix,
    as_weight,
)
from graphalgebra.ordering import comparison
from graphalgebra.utils.render import render_graph

logger = logging.getLogger("graphalgebra.store")


class Graph:
    """
    Weighted graph stored as a dense adjacency matrix.

    Invariants, checked on every load and kept after every mutation:
    - the matrix is square
    - the diagonal is entirely NO_EDGE
    - undirected graphs have a symmetric matrix
    - the weighted / negative-weight flags match the matrix

    Size and directedness are fixed once loaded; only edge weights
    change afterwards.
    """

    # Graphs are mutable and define equality through the ordering.
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, directed: bool = False) -> None:
        self._directed = bool(directed)
        self._matrix = np.zeros((0, 0), dtype=WEIGHT_DTYPE)
        self._weighted = False
        self._negative_weight = False

    @classmethod
    def from_matrix(
        cls,
        matrix: Sequence[Sequence[Any]],
        *,
        directed: bool = False,
    ) -> "Graph":
        graph = cls(directed=directed)
        graph.load(matrix)
        return graph

    # -------------------- Loading --------------------

    def load(self, matrix: Sequence[Sequence[Any]]) -> None:
        """
        Replace the adjacency matrix.

        The candidate is fully validated before anything is installed;
        on failure the graph keeps its previous matrix.
        """
        candidate = as_matrix(matrix)
        self._validate(candidate)

        self._matrix = candidate
        self._refresh_flags()

        logger.debug(
            "loaded %s graph with %d vertices and %d edges",
            "directed" if self._directed else "undirected",
            self.vertex_count(),
            self.edge_count(),
        )

    def _validate(self, candidate: np.ndarray) -> None:
        diagonal = np.flatnonzero(np.diagonal(candidate) != NO_EDGE)
        if diagonal.size:
            i = int(diagonal[0])
            raise ValidationError(
                f"The diagonal of the matrix must be NO_EDGE "
                f"(mat[{i}][{i}] = {candidate[i, i]}).",
                row=i,
                column=i,
            )

        if not self._directed:
            asymmetric = np.argwhere(candidate != candidate.T)
            if asymmetric.size:
                i, j = (int(x) for x in asymmetric[0])
                raise ValidationError(
                    f"Invalid graph: the graph is not symmetric "
                    f"(mat[{i}][{j}] = {candidate[i, j]} and "
                    f"mat[{j}][{i}] = {candidate[j, i]}).",
                    row=i,
                    column=j,
                )

    def _refresh_flags(self) -> None:
        present = self._matrix[self._matrix != NO_EDGE]
        self._weighted = bool(np.any(present != 1))
        self._negative_weight = bool(np.any(present < 0))

    # -------------------- Queries --------------------

    def vertex_count(self) -> int:
        return int(self._matrix.shape[0])

    def edge_count(self) -> int:
        """
        Number of edges; each undirected edge is stored twice and
        counted once.
        """
        cells = int(np.count_nonzero(self._matrix != NO_EDGE))
        return cells if self._directed else cells // 2

    def is_directed(self) -> bool:
        return self._directed

    def is_weighted(self) -> bool:
        return self._weighted

    def has_negative_weight(self) -> bool:
        return self._negative_weight

    def is_empty(self) -> bool:
        return self.vertex_count() == 0

    def get_matrix(self) -> Matrix:
        """
        Deep copy of the adjacency matrix as nested lists.
        """
        return self._matrix.tolist()

    def snapshot(self) -> np.ndarray:
        """
        Independent copy of the adjacency matrix as an array.
        """
        return self._matrix.copy()

    def weight(self, u: int, v: int) -> int:
        self.check_vertex(u)
        self.check_vertex(v)
        return int(self._matrix[u, v])

    # -------------------- Mutation --------------------

    def set_edge(self, u: int, v: int, weight: int) -> None:
        """
        Set a single edge weight; NO_EDGE removes the edge.

        Undirected graphs get the mirror cell written as well.
        """
        self.check_vertex(u)
        self.check_vertex(v)
        value = as_weight(weight, row=u, column=v)

        if u == v and value != NO_EDGE:
            raise ValidationError(
                f"Self-loops are not allowed (vertex {u}).",
                row=u,
                column=v,
            )

        self._matrix[u, v] = value
        if not self._directed:
            self._matrix[v, u] = value
        self._refresh_flags()

    def assign(self, other: "Graph") -> "Graph":
        """
        Replace this graph's edges with a copy of ``other``'s.

        Used by the compound operators: the result is computed first,
        then committed here in one step.
        """
        if other is not self:
            self.load(other._matrix)
        return self

    def clone(self) -> "Graph":
        g = type(self)(directed=self._directed)
        g._matrix = self._matrix.copy()
        g._weighted = self._weighted
        g._negative_weight = self._negative_weight
        return g

    def with_matrix(self, matrix: Sequence[Sequence[Any]]) -> "Graph":
        """
        New graph of the same directedness holding ``matrix``.
        """
        g = type(self)(directed=self._directed)
        g.load(matrix)
        return g

    def check_vertex(self, index: int) -> None:
        if not isinstance(index, (int, np.integer)) or isinstance(index, bool):
            raise TypeError(f"Vertex index must be int, got {type(index).__name__}")
        if not 0 <= index < self.vertex_count():
            raise IndexOutOfRangeError(
                f"Vertex {index} is out of range for a graph with "
                f"{self.vertex_count()} vertices."
            )

    # -------------------- Unary operators --------------------

    def __pos__(self) -> "Graph":
        return operators.identity(self)

    def __neg__(self) -> "Graph":
        return operators.negate(self)

    # -------------------- Binary operators --------------------

    def __add__(self, other: Any) -> "Graph":
        if not isinstance(other, Graph):
            return NotImplemented
        return operators.add(self, other)

    def __iadd__(self, other: Any) -> "Graph":
        if not isinstance(other, Graph):
            return NotImplemented
        return self.assign(operators.add(self, other))

    def __sub__(self, other: Any) -> "Graph":
        if not isinstance(other, Graph):
            return NotImplemented
        return operators.subtract(self, other)

    def __isub__(self, other: Any) -> "Graph":
        if not isinstance(other, Graph):
            return NotImplemented
        return self.assign(operators.subtract(self, other))

    def __mul__(self, other: Any) -> "Graph":
        if isinstance(other, Graph):
            return product.multiply(self, other)
        if _is_scalar(other):
            return operators.multiply_by_scalar(self, other)
        return NotImplemented

    def __rmul__(self, other: Any) -> "Graph":
        if _is_scalar(other):
            return operators.multiply_by_scalar(self, other)
        return NotImplemented

    def __imul__(self, other: Any) -> "Graph":
        result = self.__mul__(other)
        if result is NotImplemented:
            return NotImplemented
        return self.assign(result)

    def __truediv__(self, other: Any) -> "Graph":
        if not _is_scalar(other):
            return NotImplemented
        return operators.divide_by_scalar(self, other)

    def __itruediv__(self, other: Any) -> "Graph":
        if not _is_scalar(other):
            return NotImplemented
        return self.assign(operators.divide_by_scalar(self, other))

    # -------------------- Comparison --------------------

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return comparison.less_than(self, other)

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return comparison.greater_than(self, other)

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return comparison.less_or_equal(self, other)

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return comparison.greater_or_equal(self, other)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return comparison.equals(self, other)

    def __ne__(self, other: Any) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return comparison.not_equals(self, other)

    # -------------------- Presentation --------------------

    def __str__(self) -> str:
        return render_graph(self)

    def __repr__(self) -> str:
        return (
            f"Graph(directed={self._directed}, "
            f"vertices={self.vertex_count()}, edges={self.edge_count()})"
        )


def _is_scalar(value: Any) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)
