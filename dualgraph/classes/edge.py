"""
Edge record shared by both graph representations.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Edge:
    """
    An edge with an optional weight.

    A weight of zero marks an edge of an unweighted graph. Undirected edges
    are stored once per endpoint, both records carrying the same weight.
    """

    weight: float = 0.0

    @property
    def is_weighted(self) -> bool:
        return self.weight != 0

    def __str__(self) -> str:
        return f"{self.weight:.1f}"
