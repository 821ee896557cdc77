"""
Path finding and reachability analysis for adjacency-list graphs.

This module provides connectivity queries and Euler circuit construction.
"""

import logging
from typing import List, Set, Optional
from collections import deque

from ..classes.utils import check_vertex_index
from ..core.graph import AdjListsGraph

logger = logging.getLogger(__name__)


class PathFinder:
    """
    Path finding algorithms for adjacency-list graphs.

    This class provides methods for:
    - Collecting the vertices reachable from a vertex
    - Testing connectivity
    - Building an Euler circuit
    """

    def __init__(self, graph: AdjListsGraph):
        """
        Initialize the path finder.

        Args:
            graph: AdjListsGraph instance to analyze
        """
        self.graph = graph

    def get_reachable_vertices(self, start_id: int) -> List[int]:
        """
        Get all vertices reachable from a starting vertex in BFS order.

        Args:
            start_id: Starting vertex ID

        Returns:
            List of reachable vertex IDs, starting with start_id

        Raises:
            IndexOutOfRangeError: If start_id is not a valid vertex
        """
        start_id = check_vertex_index(start_id, self.graph.nVertex)

        reachable = []
        queue = deque([start_id])
        visited: Set[int] = {start_id}

        while queue:
            current_id = queue.popleft()
            reachable.append(current_id)

            for neighbor_id in self.graph.get_neighbors(current_id):
                if neighbor_id not in visited:
                    visited.add(neighbor_id)
                    queue.append(neighbor_id)

        return reachable

    def is_connected(self, iFlag_ignore_isolated: bool = False) -> bool:
        """
        Check whether every vertex can reach every other vertex.

        Args:
            iFlag_ignore_isolated: Only require the vertices that have at
                least one edge to be connected

        Returns:
            True if the graph (or its non-isolated part) is connected.
            Graphs with no vertices to consider are connected.
        """
        if iFlag_ignore_isolated:
            aVertex = [v for v in range(self.graph.nVertex) if self.graph.aAdjacency[v] is not None]
        else:
            aVertex = list(range(self.graph.nVertex))

        if not aVertex:
            return True

        reachable = set(self.get_reachable_vertices(aVertex[0]))
        return all(v in reachable for v in aVertex)

    def find_euler_circuit(self) -> Optional[List[int]]:
        """
        Build an Euler circuit using Hierholzer's algorithm.

        Unlike the even-degree test, this checks connectivity: the vertices
        that have edges must form one component.

        Returns:
            Closed list of vertex IDs traversing every edge once, starting
            and ending at the lowest non-isolated vertex; [] for a graph
            without edges; None if no Euler circuit exists
        """
        aDegree = self.graph.get_degree_array()
        if (aDegree % 2).any():
            logger.debug("No Euler circuit: graph has odd-degree vertices")
            return None

        if not self.is_connected(iFlag_ignore_isolated=True):
            logger.debug("No Euler circuit: edges span more than one component")
            return None

        if self.graph.num_edges() == 0:
            return []

        # per-vertex cursor into each list, and a used flag per undirected edge
        aCursor = list(self.graph.aAdjacency)
        used: Set[int] = set()

        start_id = next(v for v in range(self.graph.nVertex) if aCursor[v] is not None)
        stack = [start_id]
        circuit = []

        while stack:
            current_id = stack[-1]
            pRecord = aCursor[current_id]
            while pRecord is not None and pRecord.lEdgeID in used:
                pRecord = pRecord.next
            aCursor[current_id] = pRecord

            if pRecord is None:
                circuit.append(stack.pop())
            else:
                used.add(pRecord.lEdgeID)
                stack.append(pRecord.dest)

        circuit.reverse()
        logger.debug(f"Found Euler circuit of length {len(circuit) - 1}")
        return circuit
