"""
Configuration layer for graphalgebra.

Configuration contracts for graph construction defaults and
text rendering. Configuration is:
- Explicit (passed, not global)
- Immutable (frozen dataclasses)
"""

from graphalgebra.config.settings import (
    GraphConfig,
    RenderConfig,
    GraphAlgebraConfig,
)

__all__ = [
    "GraphConfig",
    "RenderConfig",
    "GraphAlgebraConfig",
]
