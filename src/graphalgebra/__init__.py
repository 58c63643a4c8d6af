"""
graphalgebra
============

A value-semantics graph algebra over dense adjacency matrices.

Core idea:
- Graphs combine like numbers: every operator yields a new, valid graph.

Public API:
- Graph
- GraphBuilder
- GraphQueryEngine
- render_graph
"""

from graphalgebra.graph import NO_EDGE, Edge, Graph, GraphBuilder, GraphQueryEngine
from graphalgebra.errors import (
    GraphError,
    ValidationError,
    ShapeMismatchError,
    IndexOutOfRangeError,
    DivideByZeroError,
    WeightOverflowError,
)
from graphalgebra.utils.render import render_graph

__all__ = [
    "NO_EDGE",
    "Edge",
    "Graph",
    "GraphBuilder",
    "GraphQueryEngine",
    "GraphError",
    "ValidationError",
    "ShapeMismatchError",
    "IndexOutOfRangeError",
    "DivideByZeroError",
    "WeightOverflowError",
    "render_graph",
]

__version__ = "0.1.0"
