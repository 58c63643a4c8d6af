"""
Presentation helpers for graphalgebra.

Formatting works on a read-only view of a graph; no algebra lives here.
"""

from graphalgebra.utils.render import render_graph, render_rows, summary_line

__all__ = [
    "render_graph",
    "render_rows",
    "summary_line",
]
