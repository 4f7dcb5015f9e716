import logging

import pytest

from dualgraph import AdjacencyMatrix

from helpers import build


def test_matrix_grows_by_expansion_rate():
    graph = AdjacencyMatrix(expansion_rate=3, initial_size=2)
    assert graph.capacity == 2

    build(graph, "AB", [])
    assert graph.capacity == 2

    graph.add_vertex("C")
    assert graph.capacity == 5
    assert graph.get_vertex("C").vid == 3


def test_growth_keeps_existing_edges():
    graph = build(AdjacencyMatrix(weighted=True, initial_size=2), "AB", [("A", "B", 4)])

    build(graph, "CDEFG", [])

    assert graph.capacity == 7
    assert graph.get_edge("B", "A").weight == 4
    assert graph.get_edge_count() == 1


def test_matrix_never_shrinks_and_reuses_slots():
    graph = build(AdjacencyMatrix(initial_size=1), "ABC", [("A", "C")])
    capacity = graph.capacity

    graph.delete_vertex("B")
    assert graph.capacity == capacity

    graph.add_vertex("D")
    assert graph.get_vertex("D").vid == 2
    assert [v.value for v in graph.vertices()] == ["A", "D", "C"]
    assert not graph.has_edge("D", "A")


def test_invalid_construction_arguments():
    with pytest.raises(ValueError):
        AdjacencyMatrix(expansion_rate=0)
    with pytest.raises(ValueError):
        AdjacencyMatrix(initial_size=-1)


def test_is_connected_refreshes_flags():
    graph = build(AdjacencyMatrix(), "ABC", [("A", "B")])

    assert not graph.is_connected()
    assert [v.connected for v in graph.vertices()] == [True, True, False]

    graph.add_edge("B", "C")
    assert graph.is_connected()
    assert all(v.connected for v in graph.vertices())


def test_format_unweighted_grid():
    graph = build(AdjacencyMatrix(directed=True), "AB", [("A", "B")])

    assert graph.format_graph().splitlines() == [
        "Unweighted",
        "Digraph",
        "  A B",
        "A . x",
        "B . .",
    ]


def test_format_weighted_grid():
    graph = build(AdjacencyMatrix(weighted=True), "AB", [("A", "B", 12)])

    assert graph.format_graph().splitlines() == [
        "Weighted",
        "Undigraph",
        "     A    B",
        "A    .    12.0",
        "B    12.0 .",
    ]


def test_weight_on_unweighted_graph_is_discarded(caplog):
    graph = build(AdjacencyMatrix(), "AB", [])

    with caplog.at_level(logging.WARNING):
        assert graph.add_edge("A", "B", 7)

    assert graph.get_edge("A", "B").weight == 0
    assert "Ignoring weight" in caplog.text
