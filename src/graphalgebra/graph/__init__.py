"""
Graph subsystem for graphalgebra.

Defines the dense adjacency-matrix graph and its helpers:
- validated loading and single-edge mutation
- construction from edges or networkx graphs
- read-only structural queries
"""

from graphalgebra.graph.graph_schema import NO_EDGE, Edge
from graphalgebra.graph.graph_store import Graph
from graphalgebra.graph.graph_builder import GraphBuilder
from graphalgebra.graph.graph_query import GraphQueryEngine

__all__ = [
    "NO_EDGE",
    "Edge",
    "Graph",
    "GraphBuilder",
    "GraphQueryEngine",
]
