"""
Reachability and circuit detection.

The functions here work on vertex ids and a neighbour accessor, so both graph
representations share one implementation and only supply their own
traversal primitive.
"""

import logging
from typing import Callable, Iterable, List, Set

logger = logging.getLogger(__name__)

NeighborFn = Callable[[int], Iterable[int]]


def reachable(start_id: int, neighbors: NeighborFn) -> Set[int]:
    """
    Find every vertex reachable from a starting vertex using DFS.

    Args:
        start_id: Starting vertex ID
        neighbors: Accessor returning the vertex IDs adjacent to a vertex

    Returns:
        Set of reachable vertex IDs, including start_id
    """
    seen = {start_id}
    stack = [start_id]

    while stack:
        current_id = stack.pop()
        for neighbor_id in neighbors(current_id):
            if neighbor_id not in seen:
                seen.add(neighbor_id)
                stack.append(neighbor_id)

    return seen


def is_reachable(start_id: int, target_id: int, neighbors: NeighborFn) -> bool:
    """
    Check whether a path leads from start_id to target_id.

    The search stops as soon as the target is seen.
    """
    if start_id == target_id:
        return True

    seen = {start_id}
    stack = [start_id]

    while stack:
        current_id = stack.pop()
        for neighbor_id in neighbors(current_id):
            if neighbor_id == target_id:
                return True
            if neighbor_id not in seen:
                seen.add(neighbor_id)
                stack.append(neighbor_id)

    return False


def has_circuit(start_id: int, neighbors: NeighborFn, directed: bool) -> bool:
    """
    Detect a circuit through a vertex using DFS back-edge discovery.

    A circuit is reported the moment a traversed edge leads back to start_id.
    In an undirected graph every edge is visible from both endpoints, so the
    edge used to leave start_id does not count as a way back: the closing edge
    must come from a vertex other than the first hop.

    Args:
        start_id: Vertex the circuit must pass through
        neighbors: Accessor returning the successors of a vertex
        directed: Whether the graph is directed

    Returns:
        True if a circuit through start_id exists
    """
    visited: Set[int] = {start_id}

    for first_hop in neighbors(start_id):
        if first_hop in visited:
            continue
        visited.add(first_hop)
        stack: List[int] = [first_hop]

        while stack:
            current_id = stack.pop()
            for neighbor_id in neighbors(current_id):
                if neighbor_id == start_id:
                    if directed or current_id != first_hop:
                        logger.debug(f"Circuit found through vertex {start_id} via {current_id}")
                        return True
                    continue
                if neighbor_id not in visited:
                    visited.add(neighbor_id)
                    stack.append(neighbor_id)

    return False
