"""
Graph representations and the factory that builds them.

Both representations implement the Graph contract, so callers pick one by
expected density and use the same API afterwards.
"""

import logging
from enum import Enum
from typing import Union

from ..errors import UnknownRepresentationError
from .adjacency_list import AdjacencyList
from .graph import Graph
from .matrix import AdjacencyMatrix

logger = logging.getLogger(__name__)


class Representation(Enum):
    """Internal storage of a graph."""
    MATRIX = "matrix"
    LIST = "list"


def create_graph(representation: Union[Representation, str] = Representation.LIST,
                 directed: bool = False, weighted: bool = False, **options) -> Graph:
    """
    Create an empty graph.

    Args:
        representation: Representation member or its value ("matrix" or "list")
        directed: Edges go from their first to their second endpoint only
        weighted: Edges carry a weight of at least MIN_WEIGHT
        **options: Extra keyword arguments for the representation's constructor
            (expansion_rate and initial_size for the matrix)

    Returns:
        The new graph

    Raises:
        UnknownRepresentationError: If the representation is not recognised
    """
    try:
        kind = Representation(representation)
    except ValueError as e:
        raise UnknownRepresentationError(f"Unknown graph representation: {representation!r}") from e

    logger.debug(f"Creating {kind.value} graph (directed={directed}, weighted={weighted})")
    if kind is Representation.MATRIX:
        return AdjacencyMatrix(directed=directed, weighted=weighted, **options)
    return AdjacencyList(directed=directed, weighted=weighted, **options)


__all__ = [
    'Graph',
    'AdjacencyMatrix',
    'AdjacencyList',
    'Representation',
    'create_graph',
]
