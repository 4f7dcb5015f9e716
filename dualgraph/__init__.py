"""
PyDualGraph - Graph library with interchangeable matrix and list storage

A Python library providing a single graph contract over two internal
representations, a dense adjacency matrix and a sparse adjacency list, with
Dijkstra shortest paths, connectivity, circuit and density queries.

Main Classes:
    AdjacencyMatrix: Dense representation, O(1) edge tests
    AdjacencyList: Sparse representation with cached connectivity
    Vertex: Vertex record wrapping an application value
    Edge: Edge record with an optional weight

Example:
    >>> from dualgraph import create_graph
    >>> graph = create_graph("list", weighted=True)
    >>> graph.add_vertex("Denver"), graph.add_vertex("Boulder"), graph.add_vertex("Pueblo")
    (True, True, True)
    >>> graph.add_edge("Denver", "Boulder", 30), graph.add_edge("Denver", "Pueblo", 80)
    (True, True)
    >>> [str(v) for v in graph.shortest_path("Pueblo", "Boulder")]
    ['Pueblo', 'Denver', 'Boulder']
"""

__version__ = "0.1.0"

from dualgraph.classes.vertex import Vertex
from dualgraph.classes.edge import Edge
from dualgraph.core.graph import Graph, SPARSE_RATIO, DENSE_RATIO, MIN_WEIGHT
from dualgraph.core.matrix import AdjacencyMatrix
from dualgraph.core.adjacency_list import AdjacencyList
from dualgraph.core import Representation, create_graph
from dualgraph.errors import DualGraphError, InvalidEdgeWeightError, UnknownRepresentationError

__all__ = [
    'Graph',
    'AdjacencyMatrix',
    'AdjacencyList',
    'Representation',
    'create_graph',
    'Vertex',
    'Edge',
    'DualGraphError',
    'InvalidEdgeWeightError',
    'UnknownRepresentationError',
    'SPARSE_RATIO',
    'DENSE_RATIO',
    'MIN_WEIGHT',
]
