from graphalgebra import Edge, GraphBuilder, GraphQueryEngine, render_graph
from graphalgebra import algebra, ordering


def test_full_algebra_pipeline_end_to_end():
    """
    End-to-end test covering:
    - construction from edges
    - binary, scalar and unary operators
    - ordering against the source graph
    - rendering of the result
    """

    builder = GraphBuilder(4)
    builder.add_edges([Edge(0, 1), Edge(1, 2), Edge(2, 3)])
    path = builder.build()

    assert path.edge_count() == 3
    assert path.is_weighted() is False

    # ---------------- Algebra ----------------

    squared = algebra.multiply(path, path)
    assert squared.get_matrix() == [
        [0, 0, 1, 0],
        [0, 0, 0, 1],
        [1, 0, 0, 0],
        [0, 1, 0, 0],
    ]

    combined = algebra.add(path, algebra.multiply_by_scalar(squared, 2))
    assert combined.edge_count() == 5
    assert combined.is_weighted() is True

    restored = algebra.subtract(combined, algebra.multiply_by_scalar(squared, 2))
    assert restored.get_matrix() == path.get_matrix()

    # ---------------- Ordering ----------------

    assert ordering.less_than(path, combined)
    assert ordering.equals(restored, path)

    # ---------------- Queries & rendering ----------------

    engine = GraphQueryEngine(combined)
    assert engine.neighbors(0) == [1, 2]
    assert engine.weight(0, 2) == 2

    text = render_graph(combined)
    assert text.splitlines()[0] == "Undirected graph with 4 vertices and 5 edges."
    assert text.splitlines()[1] == "0: X 1 2 X"


def test_api_pipeline_end_to_end(client):
    matrix = [[0, 2, 0], [2, 0, 4], [0, 4, 0]]

    halved = client.post(
        "/algebra/scalar",
        json={"op": "divide", "graph": {"matrix": matrix}, "factor": 2},
    ).json()
    assert halved["matrix"] == [[0, 1, 0], [1, 0, 2], [0, 2, 0]]

    lowered = client.post(
        "/algebra/unary",
        json={"op": "decrement", "graph": {"matrix": halved["matrix"]}},
    ).json()
    assert lowered["edges"] == 1
    assert lowered["weighted"] is False

    compared = client.post(
        "/algebra/compare",
        json={"left": {"matrix": lowered["matrix"]}, "right": {"matrix": matrix}},
    ).json()
    assert compared["less_than"] is True
