def build(graph, vertices, edges):
    """Add vertices then edges, asserting every insert succeeds."""
    for value in vertices:
        assert graph.add_vertex(value)
    for edge in edges:
        assert graph.add_edge(*edge)
    return graph
