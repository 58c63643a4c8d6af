from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from graphalgebra.config.settings import RenderConfig
from graphalgebra.graph.graph_schema import NO_EDGE

if TYPE_CHECKING:
    from graphalgebra.graph.graph_store import Graph


def summary_line(graph: "Graph") -> str:
    kind = "Directed" if graph.is_directed() else "Undirected"
    return (
        f"{kind} graph with {graph.vertex_count()} vertices "
        f"and {graph.edge_count()} edges."
    )


def render_rows(graph: "Graph", config: Optional[RenderConfig] = None) -> List[str]:
    """
    One line per vertex, absent edges shown as the absent token.
    """
    config = config or RenderConfig()
    rows: List[str] = []
    for i, row in enumerate(graph.get_matrix()):
        cells = config.separator.join(
            config.absent_token if w == NO_EDGE else str(w) for w in row
        )
        rows.append(f"{i}: {cells}" if config.row_labels else cells)
    return rows


def render_graph(graph: "Graph", config: Optional[RenderConfig] = None) -> str:
    """
    Summary line followed by the adjacency matrix.
    """
    return "\n".join([summary_line(graph), *render_rows(graph, config)])
