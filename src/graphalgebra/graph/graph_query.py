from __future__ import annotations

from typing import Iterator, List

import networkx as nx

from graphalgebra.graph.graph_schema import NO_EDGE, Edge
from graphalgebra.graph.graph_store import Graph


class GraphQueryEngine:
    """
    Read-only structural queries over a graph.

    No traversal: every query looks at single cells, rows or columns
    of the adjacency matrix.
    """

    def __init__(self, graph: Graph) -> None:
        self.graph = graph

    def edges(self) -> Iterator[Edge]:
        """
        Yield every edge once; undirected edges as ``source < target``.
        """
        directed = self.graph.is_directed()
        for u, row in enumerate(self.graph.get_matrix()):
            for v, w in enumerate(row):
                if w == NO_EDGE:
                    continue
                if not directed and v < u:
                    continue
                yield Edge(source=u, target=v, weight=w)

    def get_edges(self) -> List[Edge]:
        return list(self.edges())

    def has_edge(self, u: int, v: int) -> bool:
        return self.graph.weight(u, v) != NO_EDGE

    def weight(self, u: int, v: int) -> int:
        return self.graph.weight(u, v)

    def neighbors(self, u: int) -> List[int]:
        self.graph.check_vertex(u)
        row = self.graph.get_matrix()[u]
        return [v for v, w in enumerate(row) if w != NO_EDGE]

    def predecessors(self, v: int) -> List[int]:
        self.graph.check_vertex(v)
        return [
            u
            for u, row in enumerate(self.graph.get_matrix())
            if row[v] != NO_EDGE
        ]

    def degree(self, u: int) -> int:
        """
        Out-degree for directed graphs, degree otherwise.
        """
        return len(self.neighbors(u))

    def to_networkx(self) -> nx.Graph:
        g = nx.DiGraph() if self.graph.is_directed() else nx.Graph()
        g.add_nodes_from(range(self.graph.vertex_count()))
        for edge in self.edges():
            g.add_edge(edge.source, edge.target, weight=edge.weight)
        return g
