"""
Per-run bookkeeping for the shortest-path engine.

The state lives in a side table keyed by vertex id instead of on the vertex
records, so every run starts from a freshly allocated table and the
persistent data model is never touched by the algorithm.
"""

import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass
class ShortestPathState:
    """Scratch state of one vertex during a Dijkstra run."""

    visited: bool = False
    distance: float = math.inf
    predecessor: Optional[int] = None


@dataclass
class ShortestPathTree:
    """
    Result of a single-source shortest-path run.

    Attributes:
        source: Vertex id the run started from
        states: Vertex id -> scratch state, one entry per vertex of the snapshot
    """

    source: int
    states: Dict[int, ShortestPathState] = field(default_factory=dict)

    def distance(self, vid: int) -> float:
        """Get the settled distance of a vertex (inf if unreachable or unknown)."""
        state = self.states.get(vid)
        return math.inf if state is None else state.distance

    def is_reachable(self, vid: int) -> bool:
        return not math.isinf(self.distance(vid))

    def path_to(self, vid: int) -> List[int]:
        """
        Rebuild the path from the source to a vertex by walking predecessors.

        Args:
            vid: Target vertex id

        Returns:
            Vertex ids [source, ..., vid], or an empty list if vid is unreachable
        """
        if not self.is_reachable(vid):
            return []

        stack = []
        current: Optional[int] = vid
        while current is not None:
            stack.append(current)
            current = self.states[current].predecessor

        path = []
        while stack:
            path.append(stack.pop())
        return path
