"""
Core data classes for graph representation.

This module contains the records shared by both representations and the
scratch state of the shortest-path engine.
"""

from .vertex import Vertex
from .edge import Edge
from .path_state import ShortestPathState, ShortestPathTree

__all__ = [
    'Vertex',
    'Edge',
    'ShortestPathState',
    'ShortestPathTree',
]
