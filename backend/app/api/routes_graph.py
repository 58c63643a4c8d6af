from fastapi import APIRouter, Depends

from backend.app.api.schemas import GraphPayload, GraphSummaryResponse, RenderResponse
from backend.app.dependencies import get_algebra_service
from backend.app.services.algebra_service import GraphAlgebraService

router = APIRouter()


@router.post("/summary", response_model=GraphSummaryResponse)
def graph_summary(
    payload: GraphPayload,
    service: GraphAlgebraService = Depends(get_algebra_service),
):
    graph = service.build_graph(payload.matrix, payload.directed)
    return GraphSummaryResponse(**service.summarize(graph))


@router.post("/render", response_model=RenderResponse)
def graph_render(
    payload: GraphPayload,
    service: GraphAlgebraService = Depends(get_algebra_service),
):
    graph = service.build_graph(payload.matrix, payload.directed)
    return RenderResponse(text=service.render(graph))
