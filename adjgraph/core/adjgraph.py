"""
Main facade class for adjacency-list graph analysis.

This module provides the pyadjgraph class that owns the core graph and
delegates structural queries to the specialized analysis modules.
"""

import logging
from typing import List, Optional, Iterator, Tuple

import numpy as np

from ..classes.enode import pyenode
from .graph import AdjListsGraph
from ..analysis.detection import CircuitAnalyzer
from ..analysis.pathfinding import PathFinder

logger = logging.getLogger(__name__)


class pyadjgraph:
    """
    Main facade class for undirected adjacency-list graphs.

    The graph is a plain in-memory structure with no locking. Callers that
    share an instance between threads must synchronize every call.
    """

    def __init__(self, nVertex: int, iFlag_strict: bool = False):
        """
        Construct a graph of nVertex vertices and no edges.

        Args:
            nVertex: Number of vertices, fixed for the life of the graph
            iFlag_strict: Raise on invalid add_edge indices instead of
                logging a warning and skipping the edge
        """
        # Initialize core graph
        self._graph = AdjListsGraph(nVertex, iFlag_strict=iFlag_strict)

        # Initialize analysis components
        self._analyzer = CircuitAnalyzer(self._graph)
        self._pathfinder = PathFinder(self._graph)

    @property
    def nVertex(self) -> int:
        return self._graph.nVertex

    @property
    def iFlag_strict(self) -> bool:
        return self._graph.iFlag_strict

    def __len__(self):
        return len(self._graph)

    def __repr__(self):
        return f"pyadjgraph(nVertex={self.nVertex}, nEdge={self.num_edges()})"

    # ========================================================================
    # BASIC GRAPH OPERATIONS
    # ========================================================================

    def add_edge(self, v1: int, v2: int) -> bool:
        """Add an undirected edge between v1 and v2."""
        return self._graph.add_edge(v1, v2)

    def num_edges(self) -> int:
        """Return the number of undirected edges."""
        return self._graph.num_edges()

    def degree(self, vertex_id: int) -> int:
        """Return the number of edge records of a vertex."""
        return self._graph.degree(vertex_id)

    def get_vertex_count(self) -> int:
        return self._graph.get_vertex_count()

    def get_neighbors(self, vertex_id: int) -> List[int]:
        """Return a vertex's neighbors, most recently added first."""
        return self._graph.get_neighbors(vertex_id)

    def iter_edge_records(self) -> Iterator[Tuple[int, pyenode]]:
        return self._graph.iter_edge_records()

    def get_degree_array(self) -> np.ndarray:
        return self._graph.get_degree_array()

    # ========================================================================
    # STRUCTURAL ANALYSIS
    # ========================================================================

    def has_euler_circuit(self) -> bool:
        """Return True if every vertex has even degree (connectivity assumed)."""
        return self._analyzer.has_euler_circuit()

    def is_ring_graph(self) -> bool:
        """Return True if the graph is a single cycle through every vertex."""
        return self._analyzer.is_ring_graph()

    def get_odd_degree_vertices(self) -> List[int]:
        return self._analyzer.get_odd_degree_vertices()

    # ========================================================================
    # PATH FINDING
    # ========================================================================

    def get_reachable_vertices(self, start_id: int) -> List[int]:
        """Get all vertices reachable from start_id in BFS order."""
        return self._pathfinder.get_reachable_vertices(start_id)

    def is_connected(self, iFlag_ignore_isolated: bool = False) -> bool:
        """Check whether the graph is connected."""
        return self._pathfinder.is_connected(iFlag_ignore_isolated)

    def find_euler_circuit(self) -> Optional[List[int]]:
        """Build an Euler circuit, or return None if none exists."""
        return self._pathfinder.find_euler_circuit()
