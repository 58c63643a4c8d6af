from __future__ import annotations

import logging
from typing import Any, Dict, List

from graphalgebra import algebra, ordering
from graphalgebra.config.settings import GraphAlgebraConfig
from graphalgebra.errors import ValidationError
from graphalgebra.graph.graph_store import Graph
from graphalgebra.utils.render import render_graph


class GraphAlgebraService:
    """
    Bridges request payloads to the algebra engine.

    Owns no state beyond configuration: every call builds its operand
    graphs from the payload and returns plain data.
    """

    _BINARY = {
        "add": algebra.add,
        "subtract": algebra.subtract,
        "multiply": algebra.multiply,
    }

    # Increment/decrement use the postfix forms so the request operand
    # is never mutated.
    _UNARY = {
        "identity": algebra.identity,
        "negate": algebra.negate,
        "increment": algebra.post_increment,
        "decrement": algebra.post_decrement,
    }

    _SCALAR = {
        "multiply": algebra.multiply_by_scalar,
        "divide": algebra.divide_by_scalar,
    }

    def __init__(self, *, config: GraphAlgebraConfig) -> None:
        self.config = config
        self.logger = logging.getLogger("graphalgebra.service")

    # ------------------------------------------------------------------
    # Graph construction
    # ------------------------------------------------------------------

    def build_graph(self, matrix: List[List[int]], directed: bool | None = None) -> Graph:
        if len(matrix) > self.config.graph.max_vertices:
            raise ValidationError(
                f"Graph has {len(matrix)} vertices; at most "
                f"{self.config.graph.max_vertices} are accepted."
            )
        if directed is None:
            directed = self.config.graph.default_directed
        return Graph.from_matrix(matrix, directed=directed)

    # ------------------------------------------------------------------
    # Presentation
    # ------------------------------------------------------------------

    def summarize(self, graph: Graph) -> Dict[str, Any]:
        return {
            "vertices": graph.vertex_count(),
            "edges": graph.edge_count(),
            "directed": graph.is_directed(),
            "weighted": graph.is_weighted(),
            "negative_weight": graph.has_negative_weight(),
            "matrix": graph.get_matrix(),
        }

    def render(self, graph: Graph) -> str:
        return render_graph(graph, self.config.render)

    # ------------------------------------------------------------------
    # Algebra
    # ------------------------------------------------------------------

    def binary(self, op: str, left: Graph, right: Graph) -> Graph:
        self.logger.info("binary %s on %d vertices", op, left.vertex_count())
        return self._BINARY[op](left, right)

    def unary(self, op: str, graph: Graph) -> Graph:
        self.logger.info("unary %s on %d vertices", op, graph.vertex_count())
        return self._UNARY[op](graph)

    def scalar(self, op: str, graph: Graph, factor: int) -> Graph:
        self.logger.info("scalar %s by %d", op, factor)
        return self._SCALAR[op](graph, factor)

    def compare(self, left: Graph, right: Graph) -> Dict[str, bool]:
        return {
            "less_than": ordering.less_than(left, right),
            "greater_than": ordering.greater_than(left, right),
            "equals": ordering.equals(left, right),
            "not_equals": ordering.not_equals(left, right),
            "less_or_equal": ordering.less_or_equal(left, right),
            "greater_or_equal": ordering.greater_or_equal(left, right),
        }
