from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from contextlib import asynccontextmanager

from backend.app.main import create_app
from backend.app.config import AppConfig
from backend.app.dependencies import get_algebra_service
from backend.app.services.algebra_service import GraphAlgebraService

from graphalgebra.config.settings import GraphAlgebraConfig, GraphConfig
from graphalgebra.graph.graph_store import Graph

TRIANGLE = [
    [0, 1, 1],
    [1, 0, 1],
    [1, 1, 0],
]

DIRECTED_PATH = [
    [0, 1, 1],
    [0, 0, 2],
    [0, 0, 0],
]


@pytest.fixture()
def triangle() -> Graph:
    return Graph.from_matrix(TRIANGLE)


@pytest.fixture()
def directed_path() -> Graph:
    return Graph.from_matrix(DIRECTED_PATH, directed=True)


@pytest.fixture()
def service() -> GraphAlgebraService:
    return GraphAlgebraService(
        config=GraphAlgebraConfig(graph=GraphConfig(max_vertices=8)),
    )


@pytest.fixture()
def client(service: GraphAlgebraService):
    @asynccontextmanager
    async def _no_lifespan(_: FastAPI):
        yield

    app = create_app(AppConfig())
    app.router.lifespan_context = _no_lifespan

    app.dependency_overrides[get_algebra_service] = lambda: service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
