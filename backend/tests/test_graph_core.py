import networkx as nx
import numpy as np
import pytest

from graphalgebra.errors import IndexOutOfRangeError, ValidationError
from graphalgebra.graph.graph_builder import GraphBuilder
from graphalgebra.graph.graph_query import GraphQueryEngine
from graphalgebra.graph.graph_schema import NO_EDGE, WEIGHT_MAX, WEIGHT_MIN, Edge
from graphalgebra.graph.graph_store import Graph


def test_load_triangle_counts_and_flags(triangle):
    assert triangle.vertex_count() == 3
    assert triangle.edge_count() == 3
    assert triangle.is_directed() is False
    assert triangle.is_weighted() is False
    assert triangle.has_negative_weight() is False


def test_directed_edge_count_is_not_halved(directed_path):
    assert directed_path.edge_count() == 3
    assert directed_path.is_weighted() is True


def test_empty_graph():
    graph = Graph()
    assert graph.vertex_count() == 0
    assert graph.edge_count() == 0
    assert graph.get_matrix() == []
    assert graph.is_empty()


def test_load_rejects_non_square_matrix():
    graph = Graph()
    with pytest.raises(ValidationError) as excinfo:
        graph.load([[0, 1, 1], [1, 0], [1, 1, 0]])
    assert excinfo.value.row == 1
    assert "square" in str(excinfo.value)


def test_load_rejects_present_diagonal():
    with pytest.raises(ValidationError) as excinfo:
        Graph.from_matrix([[0, 1, 0], [1, 0, 0], [0, 0, 4]])
    assert (excinfo.value.row, excinfo.value.column) == (2, 2)


def test_load_rejects_asymmetric_undirected_matrix():
    with pytest.raises(ValidationError) as excinfo:
        Graph.from_matrix([[0, 1, 0], [2, 0, 0], [0, 0, 0]])
    assert (excinfo.value.row, excinfo.value.column) == (0, 1)


def test_asymmetric_matrix_is_fine_when_directed():
    graph = Graph.from_matrix([[0, 1, 0], [2, 0, 0], [0, 0, 0]], directed=True)
    assert graph.edge_count() == 2


def test_load_rejects_fractional_weights():
    with pytest.raises(ValidationError):
        Graph.from_matrix([[0, 1.5], [1.5, 0]])


def test_failed_load_keeps_previous_state(triangle):
    with pytest.raises(ValidationError):
        triangle.load([[0, 5], [7, 0]])

    assert triangle.get_matrix() == [[0, 1, 1], [1, 0, 1], [1, 1, 0]]
    assert triangle.vertex_count() == 3
    assert triangle.is_weighted() is False


def test_load_accepts_numpy_arrays():
    graph = Graph.from_matrix(np.array([[0, 3], [3, 0]]))
    assert graph.get_matrix() == [[0, 3], [3, 0]]
    assert graph.is_weighted() is True


def test_get_matrix_is_a_deep_copy(triangle):
    exported = triangle.get_matrix()
    exported[0][1] = 99
    assert triangle.get_matrix()[0][1] == 1


def test_set_edge_writes_mirror_for_undirected(triangle):
    triangle.set_edge(0, 1, 4)
    assert triangle.weight(0, 1) == 4
    assert triangle.weight(1, 0) == 4
    assert triangle.is_weighted() is True


def test_set_edge_removal_resets_flags(triangle):
    triangle.set_edge(0, 1, -3)
    assert triangle.has_negative_weight() is True
    assert triangle.is_weighted() is True

    triangle.set_edge(0, 1, NO_EDGE)
    assert triangle.has_negative_weight() is False
    assert triangle.is_weighted() is False
    assert triangle.edge_count() == 2


def test_set_edge_out_of_range(triangle):
    with pytest.raises(IndexOutOfRangeError):
        triangle.set_edge(0, 3, 1)
    with pytest.raises(IndexOutOfRangeError):
        triangle.set_edge(-1, 0, 1)


def test_set_edge_rejects_self_loop(triangle):
    with pytest.raises(ValidationError):
        triangle.set_edge(1, 1, 2)


def test_builder_mirrors_undirected_edges():
    builder = GraphBuilder(3)
    builder.add_edges([Edge(0, 1, 2), Edge(1, 2)])
    graph = builder.build()

    assert graph.get_matrix() == [[0, 2, 0], [2, 0, 1], [0, 1, 0]]
    assert graph.edge_count() == 2


def test_builder_rejects_bad_edges():
    builder = GraphBuilder(2, directed=True)
    with pytest.raises(IndexOutOfRangeError):
        builder.add_edge(Edge(0, 2))
    with pytest.raises(ValidationError):
        builder.add_edge(Edge(1, 1))


def test_query_engine_structure(directed_path):
    engine = GraphQueryEngine(directed_path)

    assert [(e.source, e.target, e.weight) for e in engine.edges()] == [
        (0, 1, 1),
        (0, 2, 1),
        (1, 2, 2),
    ]
    assert engine.has_edge(1, 2)
    assert not engine.has_edge(2, 1)
    assert engine.neighbors(0) == [1, 2]
    assert engine.predecessors(2) == [0, 1]
    assert engine.degree(2) == 0


def test_query_engine_lists_undirected_edges_once(triangle):
    edges = GraphQueryEngine(triangle).get_edges()
    assert [(e.source, e.target) for e in edges] == [(0, 1), (0, 2), (1, 2)]


def test_networkx_round_trip(directed_path):
    exported = GraphQueryEngine(directed_path).to_networkx()
    assert isinstance(exported, nx.DiGraph)
    assert exported.number_of_edges() == 3
    assert exported[1][2]["weight"] == 2

    rebuilt = GraphBuilder.from_networkx(exported).build()
    assert rebuilt.get_matrix() == directed_path.get_matrix()
    assert rebuilt.is_directed() is True


def test_from_networkx_defaults_weight_to_one():
    g = nx.Graph()
    g.add_edge("a", "b")
    g.add_edge("b", "c")

    graph = GraphBuilder.from_networkx(g).build()
    assert graph.get_matrix() == [[0, 1, 0], [1, 0, 1], [0, 1, 0]]
    assert graph.is_weighted() is False


def test_load_rejects_weights_outside_storable_range(triangle):
    with pytest.raises(ValidationError) as excinfo:
        triangle.load([[0, 2**63], [2**63, 0]])
    assert (excinfo.value.row, excinfo.value.column) == (0, 1)
    assert triangle.vertex_count() == 3

    with pytest.raises(ValidationError):
        Graph.from_matrix([[0, -(2**63) - 1], [0, 0]], directed=True)


def test_load_accepts_range_bounds():
    graph = Graph.from_matrix([[0, WEIGHT_MAX], [WEIGHT_MIN, 0]], directed=True)
    assert graph.get_matrix() == [[0, 2**63 - 1], [-(2**63), 0]]
    assert graph.has_negative_weight() is True


def test_set_edge_and_builder_reject_oversized_weights(triangle):
    with pytest.raises(ValidationError):
        triangle.set_edge(0, 1, 2**64)
    assert triangle.weight(0, 1) == 1

    builder = GraphBuilder(2)
    with pytest.raises(ValidationError):
        builder.add_edge(Edge(0, 1, 2**63))
