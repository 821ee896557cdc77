"""
adjgraph - Adjacency List Graph Library

A small Python library for undirected graphs with a fixed vertex count,
stored as per-vertex linked adjacency lists, with structural queries.

Main Classes:
    pyadjgraph: Main class for graph construction and analysis (facade)
    AdjListsGraph: Core adjacency-list storage
    pyenode: Edge record in a vertex's adjacency list

Example:
    >>> from adjgraph import pyadjgraph
    >>> graph = pyadjgraph(4)
    >>> for v1, v2 in [(0, 1), (1, 2), (2, 3), (3, 0)]:
    ...     graph.add_edge(v1, v2)
    >>> graph.is_ring_graph()
    True
"""

__version__ = "0.1.0"

from adjgraph.classes.enode import pyenode
from adjgraph.classes.exceptions import (
    AdjGraphError,
    InvalidArgumentError,
    IndexOutOfRangeError,
    InvalidStateError,
)
from adjgraph.core.graph import AdjListsGraph
from adjgraph.core.adjgraph import pyadjgraph

__all__ = [
    'pyadjgraph',
    'AdjListsGraph',
    'pyenode',
    'AdjGraphError',
    'InvalidArgumentError',
    'IndexOutOfRangeError',
    'InvalidStateError',
]
