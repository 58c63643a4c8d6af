from typing import List, Literal, Optional
from pydantic import BaseModel, StrictInt


class GraphPayload(BaseModel):
    matrix: List[List[StrictInt]]
    directed: Optional[bool] = None


class GraphSummaryResponse(BaseModel):
    vertices: int
    edges: int
    directed: bool
    weighted: bool
    negative_weight: bool
    matrix: List[List[int]]


class RenderResponse(BaseModel):
    text: str


class BinaryRequest(BaseModel):
    op: Literal["add", "subtract", "multiply"]
    left: GraphPayload
    right: GraphPayload


class UnaryRequest(BaseModel):
    op: Literal["identity", "negate", "increment", "decrement"]
    graph: GraphPayload


class ScalarRequest(BaseModel):
    op: Literal["multiply", "divide"]
    graph: GraphPayload
    factor: StrictInt


class CompareRequest(BaseModel):
    left: GraphPayload
    right: GraphPayload


class CompareResponse(BaseModel):
    less_than: bool
    greater_than: bool
    equals: bool
    not_equals: bool
    less_or_equal: bool
    greater_or_equal: bool
