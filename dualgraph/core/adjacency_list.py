"""
Sparse adjacency-list representation.

Vertices live in an arena keyed by a stable integer id, kept in insertion
order. Each vertex owns a mapping neighbour id -> Edge for its outgoing
edges; directed graphs also index incoming edges so a vertex can be removed
without scanning every adjacency map.

Connectivity to the root vertex (the earliest inserted vertex still present)
is cached on every vertex and updated incrementally by each mutation.
"""

import itertools
import logging
from typing import Any, Dict, Iterator, List, Optional, Tuple

from ..analysis import detection
from ..classes.edge import Edge
from ..classes.vertex import Vertex
from .graph import Graph

logger = logging.getLogger(__name__)


class AdjacencyList(Graph):
    """
    Graph stored as per-vertex adjacency maps.

    The graph tracks a single integer state: -1 when empty, otherwise the
    number of vertices not linked to the root. A state of 0 means the graph
    is connected. Edge direction is ignored for connectivity.
    """

    def __init__(self, directed: bool = False, weighted: bool = False):
        """
        Initialize an empty adjacency-list graph.

        Args:
            directed: Edges go from their first to their second endpoint only
            weighted: Edges carry a weight of at least MIN_WEIGHT
        """
        super().__init__(directed, weighted)
        self._vertices: Dict[int, Vertex] = {}
        self._index: Dict[Any, int] = {}
        self._out: Dict[int, Dict[int, Edge]] = {}
        self._in: Dict[int, Dict[int, Edge]] = {}
        self._next_id = 0
        self._root_id: Optional[int] = None
        self._disconnected = 0

    @property
    def state(self) -> int:
        """-1 if the graph is empty, else the number of vertices cut off from the root."""
        return -1 if self._root_id is None else self._disconnected

    @property
    def root(self) -> Optional[Vertex]:
        return None if self._root_id is None else self._vertices[self._root_id]

    # ========================================================================
    # MUTATION
    # ========================================================================

    def add_vertex(self, value: Any) -> bool:
        """
        Append a vertex. The first vertex of an empty graph becomes the root.

        Args:
            value: Application value of the vertex

        Returns:
            False if a vertex with an equal value already exists
        """
        if value in self._index:
            return False

        vid = self._next_id
        self._next_id += 1
        vertex = Vertex(value, vid)

        if self._root_id is None:
            self._root_id = vid
            vertex.connected = True
        else:
            self._disconnected += 1

        self._vertices[vid] = vertex
        self._index[value] = vid
        self._out[vid] = {}
        if self._directed:
            self._in[vid] = {}
        self.num_vertices += 1
        self._invalidate_paths()

        logger.debug(f"Added vertex {vertex} with id {vid}")
        return True

    def add_edge(self, a: Any, b: Any, weight: Optional[float] = None) -> bool:
        """
        Add an edge from a to b and extend the root component if it now reaches further.

        Args:
            a: Application value of the source vertex
            b: Application value of the target vertex
            weight: Edge weight, required for weighted graphs

        Returns:
            False if an endpoint is missing, a == b, or the edge already exists

        Raises:
            InvalidEdgeWeightError: If the graph is weighted and the weight is
                missing, not a number, NaN or below MIN_WEIGHT
        """
        edge = self._make_edge(weight)

        source, target = self._find(a), self._find(b)
        if source is None or target is None or source is target:
            return False
        if target.vid in self._out[source.vid]:
            return False

        self._out[source.vid][target.vid] = edge
        if self._directed:
            self._in[target.vid][source.vid] = edge
        else:
            self._out[target.vid][source.vid] = edge
        self.num_edges += 1
        self._invalidate_paths()

        if source.connected != target.connected:
            joined = target if source.connected else source
            self._mark_component(joined, True)

        logger.debug(f"Added edge {a} -> {b} ({edge}), state {self.state}")
        return True

    def delete_vertex(self, value: Any) -> bool:
        """
        Delete a vertex together with its outgoing and incoming edges.

        When the root is deleted the next vertex in insertion order becomes the
        root and connectivity is rebuilt; otherwise only the former neighbours
        are checked.

        Returns:
            False if the vertex doesn't exist
        """
        vertex = self._find(value)
        if vertex is None:
            return False

        vid = vertex.vid
        neighbors = set(self._adjacent(vid))

        removed = 0
        for neighbor_id in self._out.pop(vid):
            if self._directed:
                del self._in[neighbor_id][vid]
            else:
                del self._out[neighbor_id][vid]
            removed += 1
        if self._directed:
            for neighbor_id in self._in.pop(vid):
                del self._out[neighbor_id][vid]
                removed += 1

        del self._vertices[vid]
        del self._index[value]
        self.num_vertices -= 1
        self.num_edges -= removed
        if not vertex.connected:
            self._disconnected -= 1
        self._invalidate_paths()

        if vid == self._root_id:
            self._root_id = next(iter(self._vertices), None)
            self._rebuild_connectivity()
        else:
            self._recheck(*neighbors)

        logger.debug(f"Deleted vertex {value} with {removed} edges, state {self.state}")
        return True

    def delete_edge(self, a: Any, b: Any) -> bool:
        """
        Delete the edge from a to b and cut off whatever lost its link to the root.

        Returns:
            False if an endpoint or the edge doesn't exist
        """
        source, target = self._find(a), self._find(b)
        if source is None or target is None or target.vid not in self._out[source.vid]:
            return False

        del self._out[source.vid][target.vid]
        if self._directed:
            del self._in[target.vid][source.vid]
        else:
            del self._out[target.vid][source.vid]
        self.num_edges -= 1
        self._invalidate_paths()

        self._recheck(source.vid, target.vid)

        logger.debug(f"Deleted edge {a} -> {b}, state {self.state}")
        return True

    # ========================================================================
    # QUERIES
    # ========================================================================

    def get_edge(self, a: Any, b: Any) -> Optional[Edge]:
        source, target = self._find(a), self._find(b)
        if source is None or target is None:
            return None
        return self._out[source.vid].get(target.vid)

    def is_connected(self) -> bool:
        """Check the cached connectivity state. An empty graph is not connected."""
        return self.state == 0

    def vertices(self) -> List[Vertex]:
        return list(self._vertices.values())

    # ========================================================================
    # PRIMITIVES
    # ========================================================================

    def _find(self, value: Any) -> Optional[Vertex]:
        vid = self._index.get(value)
        return None if vid is None else self._vertices[vid]

    def _vertex_by_id(self, vid: int) -> Vertex:
        return self._vertices[vid]

    def _out_edges(self, vid: int) -> Iterator[Tuple[int, Edge]]:
        return iter(self._out[vid].items())

    def _adjacent(self, vid: int) -> Iterator[int]:
        if self._directed:
            return itertools.chain(self._out[vid], self._in[vid])
        return iter(self._out[vid])

    def _format_body(self) -> List[str]:
        lines = []
        for vertex in self._vertices.values():
            targets = []
            for neighbor_id, edge in self._out[vertex.vid].items():
                name = str(self._vertices[neighbor_id])
                targets.append(f"{name}-{edge}" if self._weighted else name)
            lines.append(f"{vertex} -> {' '.join(targets)}".rstrip())
        return lines

    # ========================================================================
    # CONNECTIVITY MAINTENANCE
    # ========================================================================

    def _mark_component(self, vertex: Vertex, connected: bool) -> None:
        """Set the connected flag on every vertex sharing a component with vertex."""
        for vid in detection.reachable(vertex.vid, self._adjacent):
            member = self._vertices[vid]
            if member.connected != connected:
                member.connected = connected
                self._disconnected += -1 if connected else 1

    def _recheck(self, *vids: int) -> None:
        """Flag the components of vertices that can no longer reach the root as disconnected."""
        for vid in vids:
            vertex = self._vertices.get(vid)
            if vertex is None or not vertex.connected:
                continue
            if not detection.is_reachable(vid, self._root_id, self._adjacent):
                logger.debug(f"Vertex {vertex} lost its path to the root")
                self._mark_component(vertex, False)

    def _rebuild_connectivity(self) -> None:
        if self._root_id is None:
            self._disconnected = 0
            return

        seen = detection.reachable(self._root_id, self._adjacent)
        for vid, vertex in self._vertices.items():
            vertex.connected = vid in seen
        self._disconnected = len(self._vertices) - len(seen)
        logger.debug(f"Rebuilt connectivity from root {self._vertices[self._root_id]}, state {self.state}")
