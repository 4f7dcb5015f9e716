import io
import itertools
import math

from helpers import build


def colorado(make_graph):
    return build(
        make_graph(weighted=True),
        ["Denver", "Boulder", "Pueblo"],
        [("Denver", "Boulder", 30), ("Denver", "Pueblo", 80)],
    )


def values(path):
    return [vertex.value for vertex in path]


def test_colorado_route(make_graph):
    graph = colorado(make_graph)

    path = graph.shortest_path("Pueblo", "Boulder")

    assert values(path) == ["Pueblo", "Denver", "Boulder"]
    assert graph.shortest_distance("Pueblo", "Boulder") == 110


def test_shortest_path_prefers_lighter_route(make_graph):
    graph = build(
        make_graph(weighted=True),
        "ABCD",
        [("A", "B", 1), ("B", "C", 2), ("A", "C", 5), ("C", "D", 1)],
    )

    assert values(graph.shortest_path("A", "D")) == ["A", "B", "C", "D"]
    assert graph.shortest_distance("A", "D") == 4


def test_self_path_is_single_vertex(make_graph):
    graph = colorado(make_graph)

    assert values(graph.shortest_path("Denver", "Denver")) == ["Denver"]
    assert graph.shortest_distance("Denver", "Denver") == 0


def test_unweighted_graph_has_no_shortest_paths(make_graph):
    graph = build(make_graph(), "AB", [("A", "B")])

    assert graph.shortest_paths("A") is False
    assert graph.shortest_path("A", "B") == []
    assert graph.shortest_distance("A", "B") is None


def test_disconnected_graph_has_no_shortest_paths(make_graph):
    graph = build(make_graph(weighted=True), "ABC", [("A", "B", 3)])

    assert graph.shortest_paths("A") is False
    assert graph.shortest_path("A", "B") == []

    graph.add_edge("B", "C", 2)

    assert graph.shortest_paths("A") is True
    assert values(graph.shortest_path("A", "C")) == ["A", "B", "C"]


def test_missing_source(make_graph):
    graph = colorado(make_graph)

    assert graph.shortest_paths("Aspen") is False
    assert graph.shortest_path("Aspen", "Denver") == []
    assert graph.shortest_path("Denver", "Aspen") == []


def test_directed_unreachable_target_gives_empty_path(make_graph):
    graph = build(make_graph(directed=True, weighted=True), "ABC", [("A", "B", 1), ("C", "B", 1)])

    assert graph.shortest_paths("A")
    assert graph.shortest_path("A", "C") == []
    assert math.isinf(graph.shortest_distance("A", "C"))


def test_triangle_inequality(make_graph):
    graph = build(
        make_graph(weighted=True),
        "ABCDE",
        [("A", "B", 7), ("A", "C", 9), ("A", "E", 14), ("B", "C", 10),
         ("B", "D", 15), ("C", "D", 11), ("C", "E", 2), ("D", "E", 6)],
    )

    for a, b, c in itertools.permutations("ABCDE", 3):
        assert graph.shortest_distance(a, c) <= graph.shortest_distance(a, b) + graph.shortest_distance(b, c)


def test_rerun_is_idempotent(make_graph):
    graph = build(
        make_graph(weighted=True),
        "ABCD",
        [("A", "B", 2), ("A", "C", 2), ("B", "D", 1), ("C", "D", 1)],
    )

    assert graph.shortest_paths("A")
    first = {v.value: (graph.shortest_distance("A", v.value), values(graph.shortest_path("A", v.value)))
             for v in graph.vertices()}
    assert graph.shortest_paths("A")
    second = {v.value: (graph.shortest_distance("A", v.value), values(graph.shortest_path("A", v.value)))
              for v in graph.vertices()}

    assert first == second


def test_ties_go_to_first_settled_vertex(make_graph):
    graph = build(
        make_graph(weighted=True),
        "ABCD",
        [("A", "B", 2), ("A", "C", 2), ("B", "D", 1), ("C", "D", 1)],
    )

    assert values(graph.shortest_path("A", "D")) == ["A", "B", "D"]


def test_mutation_invalidates_previous_run(make_graph):
    graph = colorado(make_graph)
    assert graph.shortest_distance("Pueblo", "Boulder") == 110

    graph.add_edge("Boulder", "Pueblo", 20)

    assert values(graph.shortest_path("Pueblo", "Boulder")) == ["Pueblo", "Boulder"]
    assert graph.shortest_distance("Pueblo", "Boulder") == 20


def test_path_switches_source(make_graph):
    graph = colorado(make_graph)

    assert values(graph.shortest_path("Pueblo", "Boulder")) == ["Pueblo", "Denver", "Boulder"]
    assert values(graph.shortest_path("Boulder", "Pueblo")) == ["Boulder", "Denver", "Pueblo"]


def test_permute_shortest_paths(make_graph):
    graph = colorado(make_graph)
    stream = io.StringIO()

    assert graph.permute_shortest_paths("Pueblo", stream)

    assert stream.getvalue().splitlines() == [
        "shortestPath Pueblo to Denver",
        "|{Pueblo, Denver}| = 80.0",
        "shortestPath Pueblo to Boulder",
        "|{Pueblo, Denver, Boulder}| = 110.0",
        "shortestPath Pueblo to Pueblo",
        "No Path Found",
    ]


def test_permute_shortest_paths_fails_on_unweighted_graph(make_graph):
    graph = build(make_graph(), "AB", [("A", "B")])
    stream = io.StringIO()

    assert graph.permute_shortest_paths("A", stream) is False
    assert stream.getvalue() == ""
