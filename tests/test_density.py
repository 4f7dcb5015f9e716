from helpers import build


def test_empty_edge_set_is_sparse(make_graph):
    graph = build(make_graph(), "ABCD", [])

    assert graph.get_edge_count() == 0
    assert graph.is_sparse()
    assert not graph.is_dense()


def test_one_edge_of_six_is_not_sparse(make_graph):
    # 1/6 is above the 0.15 threshold
    graph = build(make_graph(), "ABCD", [("A", "B")])

    assert graph.max_edges() == 6
    assert not graph.is_sparse()
    assert not graph.is_dense()


def test_sparse_boundary_is_inclusive(make_graph):
    # 3 of 20 directed edges is exactly 0.15
    graph = build(make_graph(directed=True), "ABCDE", [("A", "B"), ("B", "C"), ("C", "D")])

    assert graph.max_edges() == 20
    assert graph.is_sparse()


def test_complete_graph_is_dense_and_fully_connected(make_graph):
    vertices = "ABCDE"
    edges = [(a, b) for i, a in enumerate(vertices) for b in vertices[i + 1:]]
    graph = build(make_graph(), vertices, edges)

    assert graph.is_dense()
    assert graph.is_fully_connected()
    assert graph.is_connected()


def test_dense_boundary_is_inclusive(make_graph):
    # 17 of 20 directed edges is exactly 0.85
    graph = build(make_graph(directed=True), "ABCDE", [])
    pairs = [(a, b) for a in "ABCDE" for b in "ABCDE" if a != b]
    for a, b in pairs[:17]:
        graph.add_edge(a, b)

    assert graph.is_dense()
    assert not graph.is_fully_connected()


def test_single_vertex_convention(make_graph):
    graph = build(make_graph(), "A", [])

    assert not graph.is_sparse()
    assert graph.is_dense()
    assert graph.is_fully_connected()


def test_empty_graph_is_not_fully_connected(make_graph):
    graph = make_graph()

    assert not graph.is_fully_connected()
    assert graph.is_empty()
