from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager

from backend.app.config import AppConfig
from backend.app.api.routes_graph import router as graph_router
from backend.app.api.routes_algebra import router as algebra_router
from backend.app.dependencies import get_algebra_service

from graphalgebra.errors import GraphError, DivideByZeroError


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifecycle hooks.

    Builds the algebra service once at startup.
    """
    get_algebra_service()

    yield


async def graph_error_handler(request: Request, exc: GraphError) -> JSONResponse:
    status = 400 if isinstance(exc, DivideByZeroError) else 422
    detail = {
        "error": type(exc).__name__,
        "message": str(exc),
    }
    for attr in ("row", "column"):
        value = getattr(exc, attr, None)
        if value is not None:
            detail[attr] = value
    return JSONResponse(status_code=status, content={"detail": detail})


def create_app(config: AppConfig) -> FastAPI:
    app = FastAPI(
        title=config.app_name,
        lifespan=lifespan,
    )

    app.add_exception_handler(GraphError, graph_error_handler)

    app.include_router(
        graph_router,
        prefix=f"{config.api_prefix}/graph",
        tags=["graph"],
    )

    app.include_router(
        algebra_router,
        prefix=f"{config.api_prefix}/algebra",
        tags=["algebra"],
    )

    return app


config = AppConfig()
app = create_app(config)
