"""
Exception types raised by the dualgraph package.

Ordinary absence (missing vertex, missing edge, duplicate insert, unmet
shortest-path preconditions) is reported through return values. Exceptions
are reserved for caller misuse.
"""

from typing import Any


class DualGraphError(Exception):
    """Base error for the dualgraph package."""


class InvalidEdgeWeightError(DualGraphError, ValueError):
    """
    A missing, non-numeric, NaN or too small weight was given to a weighted graph.

    Attributes:
        weight: The rejected value (None when no weight was supplied)
        minimum: The smallest weight the graph accepts
    """

    def __init__(self, weight: Any, minimum: float):
        self.weight = weight
        self.minimum = minimum
        super().__init__(
            f"Can't add edge with weight {weight} to a weighted graph "
            f"(minimum weight is {minimum})"
        )


class UnknownRepresentationError(DualGraphError, ValueError):
    """The requested graph representation does not exist."""
