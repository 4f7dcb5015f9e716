"""
Graph contract shared by the matrix and adjacency-list representations.

This module provides the abstract base class both representations derive
from. It owns the state every graph has (directedness, weighting, vertex and
edge counters, the most recent shortest-path run) and implements the queries
that only need the representation's traversal primitives.
"""

import logging
import numbers
import sys
from abc import ABC, abstractmethod
from typing import Any, Iterator, List, Optional, TextIO, Tuple

from ..analysis import detection
from ..analysis.pathfinding import dijkstra, format_path
from ..classes.edge import Edge
from ..classes.path_state import ShortestPathTree
from ..classes.vertex import Vertex
from ..errors import InvalidEdgeWeightError

logger = logging.getLogger(__name__)

# Density thresholds
SPARSE_RATIO = 0.15
DENSE_RATIO = 0.85

# Smallest weight accepted by a weighted graph
MIN_WEIGHT = 1.0


class Graph(ABC):
    """
    Abstract graph with a vertex/edge CRUD, query and shortest-path contract.

    Vertices are addressed by their application value. Missing vertices or
    edges, duplicates and unmet shortest-path preconditions are reported as
    False, None or an empty list. Only caller misuse raises.

    Subclasses provide storage and the traversal primitives:
    - vertices(): vertices in insertion or slot order
    - _find(value): vertex lookup by value
    - _vertex_by_id(vid): vertex lookup by internal id
    - _out_edges(vid): (neighbor_id, Edge) pairs leaving a vertex
    - _adjacent(vid): neighbour ids ignoring edge direction
    """

    def __init__(self, directed: bool = False, weighted: bool = False):
        """
        Initialize an empty graph.

        Args:
            directed: Edges go from their first to their second endpoint only
            weighted: Edges carry a weight of at least MIN_WEIGHT
        """
        self._directed = directed
        self._weighted = weighted
        self.num_vertices = 0
        self.num_edges = 0
        self._path_tree: Optional[ShortestPathTree] = None

    # ========================================================================
    # GRAPH PROPERTIES
    # ========================================================================

    @property
    def is_directed(self) -> bool:
        return self._directed

    @property
    def is_weighted(self) -> bool:
        return self._weighted

    def get_vertex_count(self) -> int:
        """Get the number of vertices in the graph."""
        return self.num_vertices

    def get_edge_count(self) -> int:
        """Get the number of edges, counting an undirected edge once."""
        return self.num_edges

    def is_empty(self) -> bool:
        return self.num_vertices == 0

    def max_edges(self) -> int:
        """
        Get the largest edge count the graph can hold with its current vertices.

        Returns:
            n(n-1) for directed graphs, n(n-1)/2 for undirected graphs
        """
        pairs = self.num_vertices * (self.num_vertices - 1)
        return pairs if self._directed else pairs // 2

    def is_sparse(self) -> bool:
        """
        Check whether 15% or less of the possible edges exist.

        A graph with fewer than two vertices is never sparse.
        """
        if self.num_vertices < 2:
            return False
        return self.num_edges / self.max_edges() <= SPARSE_RATIO

    def is_dense(self) -> bool:
        """
        Check whether 85% or more of the possible edges exist.

        A graph with fewer than two vertices is always dense.
        """
        if self.num_vertices < 2:
            return True
        return self.num_edges / self.max_edges() >= DENSE_RATIO

    def is_fully_connected(self) -> bool:
        """Check whether every pair of distinct vertices is joined by an edge."""
        if self.num_vertices == 0:
            return False
        return self.num_edges == self.max_edges()

    # ========================================================================
    # VERTEX & EDGE QUERIES
    # ========================================================================

    def get_vertex(self, value: Any) -> Optional[Vertex]:
        """
        Get the vertex holding a value.

        Args:
            value: Application value of the vertex

        Returns:
            The vertex, or None if not found
        """
        return self._find(value)

    def has_vertex(self, value: Any) -> bool:
        return self._find(value) is not None

    def has_edge(self, a: Any, b: Any) -> bool:
        """Check for an edge from a to b (either way for undirected graphs)."""
        return self.get_edge(a, b) is not None

    def edges(self) -> Iterator[Tuple[Vertex, Vertex, Edge]]:
        """
        Iterate over the edges of the graph.

        Undirected edges are yielded once, from the endpoint with the lower id.
        """
        for vertex in self.vertices():
            for neighbor_id, edge in self._out_edges(vertex.vid):
                if self._directed or vertex.vid < neighbor_id:
                    yield vertex, self._vertex_by_id(neighbor_id), edge

    def has_circuit(self, value: Any) -> bool:
        """
        Check whether a circuit passes through a vertex.

        Args:
            value: Application value of the start vertex

        Returns:
            True if some path leaves the vertex and comes back to it
        """
        vertex = self._find(value)
        if vertex is None:
            return False
        return detection.has_circuit(vertex.vid, self._successor_ids, self._directed)

    # ========================================================================
    # SHORTEST PATHS
    # ========================================================================

    def shortest_paths(self, source: Any) -> bool:
        """
        Run Dijkstra's algorithm from a source vertex.

        The run replaces any previous one. It requires a weighted, connected
        graph holding the source vertex; otherwise nothing changes.

        Args:
            source: Application value of the source vertex

        Returns:
            True if the algorithm ran
        """
        vertex = self._find(source)
        if vertex is None:
            logger.debug(f"Shortest paths: source {source!r} not in graph")
            return False
        if not self._weighted:
            logger.debug("Shortest paths: graph is not weighted")
            return False
        if not self.is_connected():
            logger.debug("Shortest paths: graph is not connected")
            return False

        vertex_ids = [v.vid for v in self.vertices()]
        self._path_tree = dijkstra(vertex.vid, vertex_ids, self._successors)
        logger.info(f"Computed shortest paths from {vertex} over {len(vertex_ids)} vertices")
        return True

    def shortest_path(self, a: Any, b: Any) -> List[Vertex]:
        """
        Get the shortest path from a to b.

        Reuses the last shortest-path run when it started from a, otherwise
        runs the algorithm from a first.

        Args:
            a: Application value of the start vertex
            b: Application value of the end vertex

        Returns:
            Vertices [a, ..., b], [a] when a == b, or an empty list when no
            path exists or the graph does not meet the preconditions
        """
        source, target = self._find(a), self._find(b)
        if source is None or target is None:
            return []

        tree = self._paths_from(source)
        if tree is None:
            return []

        return [self._vertex_by_id(vid) for vid in tree.path_to(target.vid)]

    def shortest_distance(self, a: Any, b: Any) -> Optional[float]:
        """
        Get the length of the shortest path from a to b.

        Returns:
            The distance (inf if b is unreachable), or None when either vertex is
            missing or the graph does not meet the preconditions
        """
        source, target = self._find(a), self._find(b)
        if source is None or target is None:
            return None

        tree = self._paths_from(source)
        if tree is None:
            return None

        return tree.distance(target.vid)

    def permute_shortest_paths(self, source: Any, stream: Optional[TextIO] = None) -> bool:
        """
        Write the shortest path from a source to every vertex of the graph.

        Args:
            source: Application value of the source vertex
            stream: Text stream receiving the output (defaults to stdout)

        Returns:
            False if the source is missing or the graph does not meet the
            shortest-path preconditions
        """
        stream = sys.stdout if stream is None else stream

        start = self._find(source)
        if start is None:
            return False

        tree = self._paths_from(start)
        if tree is None:
            return False

        for vertex in self.vertices():
            path = [self._vertex_by_id(vid) for vid in tree.path_to(vertex.vid)]
            stream.write(f"shortestPath {start} to {vertex}\n")
            stream.write(format_path(path, tree.distance(vertex.vid)) + "\n")

        return True

    # ========================================================================
    # PRINTING
    # ========================================================================

    def format_graph(self) -> str:
        """Render the graph as text: a two-line header and a representation-specific body."""
        header = [
            "Weighted" if self._weighted else "Unweighted",
            "Digraph" if self._directed else "Undigraph",
        ]
        return "\n".join(header + self._format_body())

    def print_graph(self, stream: Optional[TextIO] = None) -> None:
        """Write format_graph() to a text stream (defaults to stdout)."""
        stream = sys.stdout if stream is None else stream
        stream.write(self.format_graph() + "\n")

    # ========================================================================
    # REPRESENTATION-SPECIFIC OPERATIONS
    # ========================================================================

    @abstractmethod
    def add_vertex(self, value: Any) -> bool:
        """Add a vertex. Returns False if a vertex with an equal value exists."""

    @abstractmethod
    def add_edge(self, a: Any, b: Any, weight: Optional[float] = None) -> bool:
        """
        Add an edge from a to b.

        Raises:
            InvalidEdgeWeightError: If the graph is weighted and weight is
                missing, not a number, NaN or below MIN_WEIGHT
        """

    @abstractmethod
    def delete_vertex(self, value: Any) -> bool:
        """Delete a vertex and every edge touching it."""

    @abstractmethod
    def delete_edge(self, a: Any, b: Any) -> bool:
        """Delete the edge from a to b (both records for undirected graphs)."""

    @abstractmethod
    def get_edge(self, a: Any, b: Any) -> Optional[Edge]:
        """Get the edge from a to b, or None."""

    @abstractmethod
    def is_connected(self) -> bool:
        """Check whether every vertex is linked to the root vertex."""

    @abstractmethod
    def vertices(self) -> List[Vertex]:
        """Get the vertices in insertion or slot order."""

    @abstractmethod
    def _find(self, value: Any) -> Optional[Vertex]:
        """Look up a vertex by its application value."""

    @abstractmethod
    def _vertex_by_id(self, vid: int) -> Vertex:
        """Look up a vertex by its internal id."""

    @abstractmethod
    def _out_edges(self, vid: int) -> Iterator[Tuple[int, Edge]]:
        """Iterate over the (neighbor_id, Edge) pairs leaving a vertex."""

    @abstractmethod
    def _adjacent(self, vid: int) -> Iterator[int]:
        """Iterate over neighbour ids of a vertex, ignoring edge direction."""

    @abstractmethod
    def _format_body(self) -> List[str]:
        """Render the representation-specific lines printed after the header."""

    # ========================================================================
    # HELPERS
    # ========================================================================

    def _successors(self, vid: int) -> Iterator[Tuple[int, float]]:
        for neighbor_id, edge in self._out_edges(vid):
            yield neighbor_id, edge.weight

    def _successor_ids(self, vid: int) -> Iterator[int]:
        for neighbor_id, _ in self._out_edges(vid):
            yield neighbor_id

    def _make_edge(self, weight: Optional[float]) -> Edge:
        """Build the edge record for a new edge, enforcing the weight policy."""
        if self._weighted:
            # NaN compares false against everything
            is_number = isinstance(weight, numbers.Real) and not isinstance(weight, bool)
            if not is_number or not weight >= MIN_WEIGHT:
                raise InvalidEdgeWeightError(weight, MIN_WEIGHT)
            return Edge(float(weight))

        if weight:
            logger.warning(f"Ignoring weight {weight} on an unweighted graph")
        return Edge()

    def _paths_from(self, source: Vertex) -> Optional[ShortestPathTree]:
        """Get the shortest-path run rooted at source, running it if needed."""
        if self._path_tree is None or self._path_tree.source != source.vid:
            if not self.shortest_paths(source.value):
                return None
        return self._path_tree

    def _invalidate_paths(self) -> None:
        self._path_tree = None
