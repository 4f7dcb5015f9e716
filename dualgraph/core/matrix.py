"""
Dense adjacency-matrix representation.

Each vertex owns a slot (1..capacity) in a square numpy grid. Cell [i, j]
holds the weight of the edge from slot i to slot j, NaN when there is none.
Unweighted edges are stored with weight 0. Row and column 0 are never used
so slot indices match the grid indices.
"""

import logging
from typing import Any, Dict, Iterator, List, Optional, Tuple

import numpy as np

from ..analysis import detection
from ..classes.edge import Edge
from ..classes.vertex import Vertex
from .graph import Graph

logger = logging.getLogger(__name__)

DEFAULT_EXPANSION_RATE = 5
DEFAULT_INITIAL_SIZE = 2


class AdjacencyMatrix(Graph):
    """
    Graph stored as a dense weight matrix.

    Edge tests are O(1) once the endpoints are resolved. When every slot is
    taken the matrix grows by a fixed number of slots; it never shrinks.
    Connectivity is recomputed on every is_connected() call.
    """

    def __init__(self, directed: bool = False, weighted: bool = False,
                 expansion_rate: int = DEFAULT_EXPANSION_RATE,
                 initial_size: int = DEFAULT_INITIAL_SIZE):
        """
        Initialize an empty matrix graph.

        Args:
            directed: Edges go from their first to their second endpoint only
            weighted: Edges carry a weight of at least MIN_WEIGHT
            expansion_rate: Number of slots added when the matrix is full
            initial_size: Number of vertex slots allocated up front
        """
        super().__init__(directed, weighted)
        if expansion_rate < 1:
            raise ValueError(f"Expansion rate must be positive, got {expansion_rate}")
        if initial_size < 0:
            raise ValueError(f"Initial size can't be negative, got {initial_size}")

        self.expansion_rate = expansion_rate
        self._weights = np.full((initial_size + 1, initial_size + 1), np.nan)
        self._slots: List[Optional[Vertex]] = [None] * (initial_size + 1)
        self._slot_of: Dict[Any, int] = {}

    @property
    def capacity(self) -> int:
        """Number of vertex slots currently allocated."""
        return len(self._slots) - 1

    # ========================================================================
    # MUTATION
    # ========================================================================

    def add_vertex(self, value: Any) -> bool:
        """
        Add a vertex in the first free slot, growing the matrix if none is left.

        Args:
            value: Application value of the vertex

        Returns:
            False if a vertex with an equal value already exists
        """
        if value in self._slot_of:
            return False

        slot = self._free_slot()
        if slot is None:
            slot = len(self._slots)
            self._expand(self.expansion_rate)

        vertex = Vertex(value, slot)
        self._slots[slot] = vertex
        self._slot_of[value] = slot
        self.num_vertices += 1
        self._invalidate_paths()

        logger.debug(f"Added vertex {vertex} in slot {slot}")
        return True

    def add_edge(self, a: Any, b: Any, weight: Optional[float] = None) -> bool:
        """
        Add an edge from a to b.

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

        i, j = self._slot_of.get(a), self._slot_of.get(b)
        if i is None or j is None or i == j:
            return False
        if self._has_cell(i, j) or (not self._directed and self._has_cell(j, i)):
            return False

        self._weights[i, j] = edge.weight
        if not self._directed:
            self._weights[j, i] = edge.weight
        self.num_edges += 1
        self._invalidate_paths()

        logger.debug(f"Added edge {a} -> {b} ({edge})")
        return True

    def delete_vertex(self, value: Any) -> bool:
        """
        Delete a vertex, clearing its slot, row and column.

        Returns:
            False if the vertex doesn't exist
        """
        slot = self._slot_of.pop(value, None)
        if slot is None:
            return False

        outgoing = int(np.count_nonzero(~np.isnan(self._weights[slot, :])))
        incoming = int(np.count_nonzero(~np.isnan(self._weights[:, slot])))
        removed = outgoing + incoming if self._directed else outgoing

        self._weights[slot, :] = np.nan
        self._weights[:, slot] = np.nan
        self._slots[slot] = None
        self.num_vertices -= 1
        self.num_edges -= removed
        self._invalidate_paths()

        logger.debug(f"Deleted vertex {value} from slot {slot} with {removed} edges")
        return True

    def delete_edge(self, a: Any, b: Any) -> bool:
        """
        Delete the edge from a to b.

        Returns:
            False if an endpoint or the edge doesn't exist
        """
        i, j = self._slot_of.get(a), self._slot_of.get(b)
        if i is None or j is None or not self._has_cell(i, j):
            return False

        self._weights[i, j] = np.nan
        if not self._directed:
            self._weights[j, i] = np.nan
        self.num_edges -= 1
        self._invalidate_paths()

        logger.debug(f"Deleted edge {a} -> {b}")
        return True

    # ========================================================================
    # QUERIES
    # ========================================================================

    def get_edge(self, a: Any, b: Any) -> Optional[Edge]:
        i, j = self._slot_of.get(a), self._slot_of.get(b)
        if i is None or j is None or not self._has_cell(i, j):
            return None
        return Edge(float(self._weights[i, j]))

    def is_connected(self) -> bool:
        """
        Check connectivity with one traversal from the slot-first vertex.

        Edge direction is ignored. Every vertex's connected flag is refreshed.

        Returns:
            True if every vertex is reached; False for an empty graph
        """
        occupied = self.vertices()
        if not occupied:
            return False

        root = occupied[0]
        seen = detection.reachable(root.vid, self._adjacent)
        for vertex in occupied:
            vertex.connected = vertex.vid in seen

        return len(seen) == len(occupied)

    def vertices(self) -> List[Vertex]:
        return [vertex for vertex in self._slots if vertex is not None]

    # ========================================================================
    # PRIMITIVES
    # ========================================================================

    def _find(self, value: Any) -> Optional[Vertex]:
        slot = self._slot_of.get(value)
        return None if slot is None else self._slots[slot]

    def _vertex_by_id(self, vid: int) -> Vertex:
        return self._slots[vid]

    def _out_edges(self, vid: int) -> Iterator[Tuple[int, Edge]]:
        row = self._weights[vid, :]
        for j in np.flatnonzero(~np.isnan(row)):
            yield int(j), Edge(float(row[j]))

    def _adjacent(self, vid: int) -> Iterator[int]:
        linked = ~np.isnan(self._weights[vid, :]) | ~np.isnan(self._weights[:, vid])
        return iter(np.flatnonzero(linked).tolist())

    def _has_cell(self, i: int, j: int) -> bool:
        return not np.isnan(self._weights[i, j])

    def _free_slot(self) -> Optional[int]:
        for slot in range(1, len(self._slots)):
            if self._slots[slot] is None:
                return slot
        return None

    def _expand(self, by: int) -> None:
        """Grow the matrix by a number of slots, keeping existing cells."""
        self._weights = np.pad(self._weights, ((0, by), (0, by)), constant_values=np.nan)
        self._slots.extend([None] * by)
        logger.debug(f"Expanded matrix to {self.capacity} slots")

    def _format_body(self) -> List[str]:
        slots = [vertex.vid for vertex in self.vertices()]
        if not slots:
            return []

        labels = [str(self._slots[slot]) for slot in slots]
        cells = [[self._cell_text(i, j) for j in slots] for i in slots]
        width = max(len(text) for text in labels + [cell for row in cells for cell in row])

        lines = [(" " * width + " " + " ".join(label.ljust(width) for label in labels)).rstrip()]
        for label, row in zip(labels, cells):
            lines.append((label.ljust(width) + " " + " ".join(cell.ljust(width) for cell in row)).rstrip())
        return lines

    def _cell_text(self, i: int, j: int) -> str:
        if not self._has_cell(i, j):
            return "."
        return f"{self._weights[i, j]:.1f}" if self._weighted else "x"
