from __future__ import annotations

from dataclasses import dataclass, field

# ---------------------------------------------------------------------
# Graph construction
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class GraphConfig:
    """
    Controls how graphs are created when the caller does not say
    otherwise.
    """

    default_directed: bool = False
    max_vertices: int = 256


# ---------------------------------------------------------------------
# Text rendering
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class RenderConfig:
    """
    Controls the textual adjacency-matrix rendering.
    """

    absent_token: str = "X"
    separator: str = " "
    row_labels: bool = True


# ---------------------------------------------------------------------
# Root configuration object
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class GraphAlgebraConfig:
    """
    Root configuration object for graphalgebra.

    Constructed explicitly and passed to the layers that need it;
    the engine itself never reads global settings.
    """

    graph: GraphConfig = field(default_factory=GraphConfig)
    render: RenderConfig = field(default_factory=RenderConfig)
