"""
Structural pattern detection for adjacency-list graphs.

This module provides the Euler-circuit and ring-graph tests.
"""

import logging
from typing import List, Optional

import numpy as np

from ..classes.enode import pyenode
from ..classes.exceptions import InvalidStateError
from ..core.graph import AdjListsGraph

logger = logging.getLogger(__name__)


class CircuitAnalyzer:
    """
    Detects circuit-related properties of a graph.

    This class provides methods for:
    - Testing the even-degree condition for an Euler circuit
    - Testing whether the graph is a single ring
    - Listing odd-degree vertices
    """

    def __init__(self, graph: AdjListsGraph):
        """
        Initialize the circuit analyzer.

        Args:
            graph: AdjListsGraph instance to analyze
        """
        self.graph = graph

    def get_odd_degree_vertices(self) -> List[int]:
        """Return the vertices with odd degree, in ascending order."""
        aDegree = self.graph.get_degree_array()
        return [int(i) for i in np.flatnonzero(aDegree % 2)]

    def has_euler_circuit(self) -> bool:
        """
        Determine whether every vertex has even degree.

        The graph is assumed to be connected; connectivity is not checked,
        so a disconnected graph whose degrees are all even returns True.

        Returns:
            True if no vertex has odd degree
        """
        iFlag_euler = True
        for vertex_id in range(self.graph.nVertex):
            if self.graph.degree(vertex_id) % 2 != 0:
                iFlag_euler = False

        return iFlag_euler

    def is_ring_graph(self) -> bool:
        """
        Determine whether the graph is a single cycle through every vertex.

        Three conditions are evaluated and combined: every vertex has degree
        two, a walk leaving vertex 0 by its first record comes back to that
        same record after num_edges() steps, and the edge count equals the
        vertex count.

        Returns:
            True if all three conditions hold

        Raises:
            InvalidStateError: If vertex 0 does not exist or has no edges
        """
        nVertex = self.graph.nVertex

        iFlag_ring = True
        for vertex_id in range(nVertex):
            if self.graph.degree(vertex_id) != 2:
                iFlag_ring = False

        if nVertex == 0 or self.graph.aAdjacency[0] is None:
            raise InvalidStateError(
                "Ring test needs vertex 0 to have at least one edge",
                context={'nVertex': nVertex})

        nEdge = self.graph.num_edges()

        nStep = self._walk_ring(nEdge)
        if nStep != nEdge:
            iFlag_ring = False

        if nEdge != nVertex:
            iFlag_ring = False

        logger.debug(f"Ring test: {nVertex} vertices, {nEdge} edges, walk length {nStep}, result {iFlag_ring}")
        return iFlag_ring

    def _next_record(self, pRecord: pyenode) -> Optional[pyenode]:
        """
        Pick the record to leave by after traversing pRecord.

        This is the first record of the destination's list other than the
        reverse record of the same undirected edge, so the walk never turns
        back along the edge it arrived on. A self-loop's reverse record is
        its partner in the same list. Returns None at a dead end.
        """
        pHead = self.graph.aAdjacency[pRecord.dest]
        for pCandidate in pHead:
            if pCandidate.lEdgeID == pRecord.lEdgeID and pCandidate is not pRecord:
                continue
            return pCandidate
        return None

    def _walk_ring(self, nEdge: int) -> int:
        """
        Walk from vertex 0's first record until that record comes up again.

        Records are compared by identity, so parallel edges sharing a
        destination are told apart. The walk stops once it is longer than
        nEdge steps since it can no longer match the edge count.

        Returns:
            Number of records traversed, or -1 if the walk does not return
        """
        pStart = self.graph.aAdjacency[0]
        pCurrent = self._next_record(pStart)
        count = 1
        while pCurrent is not pStart:
            if pCurrent is None:
                logger.debug(f"Ring walk reached a dead end after {count} steps")
                return -1
            if count >= nEdge:
                logger.debug(f"Ring walk did not return to vertex 0 within {nEdge} steps")
                return -1
            pCurrent = self._next_record(pCurrent)
            count += 1

        return count
