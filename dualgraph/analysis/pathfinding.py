"""
Shortest-path computation using Dijkstra's algorithm.

The engine is representation agnostic: it walks vertex ids through a
neighbour accessor yielding (neighbor_id, weight) pairs, and records its
bookkeeping in a ShortestPathTree allocated for the run.
"""

import heapq
import itertools
import logging
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from ..classes.path_state import ShortestPathState, ShortestPathTree
from ..classes.vertex import Vertex

logger = logging.getLogger(__name__)

WeightedNeighborFn = Callable[[int], Iterable[Tuple[int, float]]]


def dijkstra(source_id: int, vertex_ids: Iterable[int], neighbors: WeightedNeighborFn) -> ShortestPathTree:
    """
    Compute shortest distances from a source to every vertex.

    The queue accepts duplicate entries for a vertex. The first dequeue of an
    unvisited vertex is authoritative and later stale entries are skipped.
    Entries with equal keys leave the queue in insertion order.

    Args:
        source_id: Vertex ID the run starts from
        vertex_ids: IDs of every vertex in the graph snapshot
        neighbors: Accessor returning (neighbor_id, weight) pairs for a vertex

    Returns:
        ShortestPathTree holding distance and predecessor for every vertex
    """
    tree = ShortestPathTree(source=source_id)
    for vid in vertex_ids:
        tree.states[vid] = ShortestPathState()
    tree.states[source_id].distance = 0.0

    counter = itertools.count()
    heap: List[Tuple[float, int, int]] = [(0.0, next(counter), source_id)]

    while heap:
        _, _, current_id = heapq.heappop(heap)
        current = tree.states[current_id]

        if current.visited:
            continue

        for neighbor_id, weight in neighbors(current_id):
            neighbor = tree.states[neighbor_id]
            if neighbor.visited:
                continue
            candidate = weight + current.distance
            if candidate < neighbor.distance:
                neighbor.distance = candidate
                neighbor.predecessor = current_id
                heapq.heappush(heap, (candidate, next(counter), neighbor_id))

        current.visited = True

    settled = sum(1 for state in tree.states.values() if state.visited)
    logger.debug(f"Dijkstra from vertex {source_id} settled {settled}/{len(tree.states)} vertices")
    return tree


def format_path(path: Sequence[Vertex], distance: Optional[float] = None) -> str:
    """
    Render a path in the form |{v1, v2, ..., vn}| = total distance.

    Args:
        path: Vertices from source to target
        distance: Total distance of the path

    Returns:
        The rendered path, or "No Path Found" for paths with fewer than two vertices
    """
    if path is None or len(path) < 2:
        return "No Path Found"

    names = ", ".join(str(vertex) for vertex in path)
    return f"|{{{names}}}| = {distance}"
