from fastapi import APIRouter, Depends

from backend.app.api.schemas import (
    BinaryRequest,
    UnaryRequest,
    ScalarRequest,
    CompareRequest,
    CompareResponse,
    GraphSummaryResponse,
)
from backend.app.dependencies import get_algebra_service
from backend.app.services.algebra_service import GraphAlgebraService

router = APIRouter()


@router.post("/binary", response_model=GraphSummaryResponse)
def binary(
    request: BinaryRequest,
    service: GraphAlgebraService = Depends(get_algebra_service),
):
    left = service.build_graph(request.left.matrix, request.left.directed)
    right = service.build_graph(request.right.matrix, request.right.directed)
    return service.summarize(service.binary(request.op, left, right))


@router.post("/unary", response_model=GraphSummaryResponse)
def unary(
    request: UnaryRequest,
    service: GraphAlgebraService = Depends(get_algebra_service),
):
    graph = service.build_graph(request.graph.matrix, request.graph.directed)
    return service.summarize(service.unary(request.op, graph))


@router.post("/scalar", response_model=GraphSummaryResponse)
def scalar(
    request: ScalarRequest,
    service: GraphAlgebraService = Depends(get_algebra_service),
):
    graph = service.build_graph(request.graph.matrix, request.graph.directed)
    return service.summarize(service.scalar(request.op, graph, request.factor))


@router.post("/compare", response_model=CompareResponse)
def compare(
    request: CompareRequest,
    service: GraphAlgebraService = Depends(get_algebra_service),
):
    left = service.build_graph(request.left.matrix, request.left.directed)
    right = service.build_graph(request.right.matrix, request.right.directed)
    return service.compare(left, right)
