from __future__ import annotations

from typing import Iterable

import networkx as nx
import numpy as np

from graphalgebra.errors import IndexOutOfRangeError, ValidationError
from graphalgebra.graph.graph_schema import NO_EDGE, WEIGHT_DTYPE, Edge, as_weight
from graphalgebra.graph.graph_store import Graph


class GraphBuilder:
    """
    Constructs a graph from individual edges.

    Edges accumulate in a pending matrix; ``build`` installs it through
    ``Graph.load`` so the usual validation applies.
    """

    def __init__(self, size: int, *, directed: bool = False) -> None:
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        self.size = int(size)
        self.directed = directed
        self._pending = np.full((self.size, self.size), NO_EDGE, dtype=WEIGHT_DTYPE)

    def add_edge(self, edge: Edge) -> None:
        for index in (edge.source, edge.target):
            if not 0 <= index < self.size:
                raise IndexOutOfRangeError(
                    f"Vertex {index} is out of range for a graph with {self.size} vertices."
                )
        if edge.source == edge.target:
            raise ValidationError(
                f"Self-loops are not allowed (vertex {edge.source}).",
                row=edge.source,
                column=edge.target,
            )

        self._place(edge)
        if not self.directed:
            self._place(edge.mirrored())

    def _place(self, edge: Edge) -> None:
        self._pending[edge.source, edge.target] = as_weight(
            edge.weight, row=edge.source, column=edge.target
        )

    def add_edges(self, edges: Iterable[Edge]) -> None:
        for edge in edges:
            self.add_edge(edge)

    def build(self) -> Graph:
        return Graph.from_matrix(self._pending, directed=self.directed)

    @classmethod
    def from_networkx(cls, nx_graph: nx.Graph) -> "GraphBuilder":
        """
        Builder pre-filled from a networkx graph.

        Nodes are numbered ``0..n-1`` in iteration order; a missing
        ``weight`` attribute counts as 1.
        """
        index = {node: i for i, node in enumerate(nx_graph.nodes())}
        builder = cls(len(index), directed=nx_graph.is_directed())
        builder.add_edges(
            Edge(
                source=index[u],
                target=index[v],
                weight=data.get("weight", 1),
            )
            for u, v, data in nx_graph.edges(data=True)
        )
        return builder
