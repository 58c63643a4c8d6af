from functools import lru_cache
import logging

from backend.app.config import AppConfig
from backend.app.services.algebra_service import GraphAlgebraService


@lru_cache
def get_config() -> AppConfig:
    return AppConfig()


@lru_cache
def get_algebra_service() -> GraphAlgebraService:
    config = get_config()
    logging.getLogger("graphalgebra.startup").info(
        "[startup] algebra service ready (max_vertices=%d, default_directed=%s)",
        config.graphalgebra.graph.max_vertices,
        config.graphalgebra.graph.default_directed,
    )
    return GraphAlgebraService(config=config.graphalgebra)
