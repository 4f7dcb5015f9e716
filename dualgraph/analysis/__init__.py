"""
Graph algorithms shared by both representations.

This module contains reachability and circuit detection, and the Dijkstra
shortest-path engine.
"""

from .detection import reachable, is_reachable, has_circuit
from .pathfinding import dijkstra, format_path

__all__ = [
    'reachable',
    'is_reachable',
    'has_circuit',
    'dijkstra',
    'format_path',
]
