"""
Vertex record shared by both graph representations.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Vertex:
    """
    A vertex in a graph.

    Attributes:
        value: Application value used as the unique key of the vertex. Must be
            totally ordered and hashable (str, int, frozen dataclasses, ...)
        vid: Internal handle. Slot index for the matrix, arena id for the list
        connected: True if a path links this vertex and the root vertex
    """

    value: Any
    vid: int
    connected: bool = False

    def __str__(self) -> str:
        return str(self.value)
