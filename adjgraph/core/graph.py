"""
Core graph data structure for adjacency-list graphs.

This module provides the fundamental graph storage without the structural
queries built on top of it.
"""

import logging
from typing import List, Optional, Iterator, Tuple

import numpy as np

from ..classes.enode import pyenode
from ..classes.exceptions import InvalidArgumentError
from ..classes.utils import (
    validate_vertex_count,
    is_valid_vertex,
    check_vertex_index,
    count_records,
    get_degree_array,
)

logger = logging.getLogger(__name__)


class AdjListsGraph:
    """
    Undirected graph with a fixed number of vertices.

    Each vertex owns a singly linked list of pyenode records. An undirected
    edge {u, v} is stored as two independent records, u -> v in u's list and
    v -> u in v's list. New records are inserted at the head of a list, so
    the most recently added edge of a vertex is always its first record.

    Multi-edges and self-loops are accepted. A self-loop adds two records to
    the same list.
    """

    def __init__(self, nVertex: int, iFlag_strict: bool = False):
        """
        Construct a graph of nVertex vertices and no edges.

        Args:
            nVertex: Number of vertices, fixed for the life of the graph
            iFlag_strict: Raise InvalidArgumentError on invalid add_edge
                indices instead of logging a warning and skipping the edge

        Raises:
            InvalidArgumentError: If nVertex is negative or not an integer
        """
        self._nVertex = validate_vertex_count(nVertex)
        self.iFlag_strict = iFlag_strict
        self.aAdjacency: List[Optional[pyenode]] = [None] * self._nVertex
        self._nEdge_inserted = 0

        logger.debug(f"Initialized AdjListsGraph with {self._nVertex} vertices")

    @property
    def nVertex(self) -> int:
        """Number of vertices."""
        return self._nVertex

    def get_vertex_count(self) -> int:
        return self._nVertex

    def __len__(self):
        return self._nVertex

    def __repr__(self):
        return f"AdjListsGraph(nVertex={self._nVertex}, nEdge={self.num_edges()})"

    def _validate_edge(self, v1, v2) -> bool:
        """
        Check both endpoints of an edge before anything is inserted.

        Returns:
            True if both indices are valid, False if the edge must be skipped

        Raises:
            InvalidArgumentError: In strict mode, if either index is invalid
        """
        if is_valid_vertex(v1, self._nVertex) and is_valid_vertex(v2, self._nVertex):
            return True

        if self.iFlag_strict:
            raise InvalidArgumentError(
                f"Invalid parameter to add_edge: ({v1}, {v2}) with {self._nVertex} vertices",
                context={'v1': v1, 'v2': v2, 'nVertex': self._nVertex})

        logger.warning(f"Invalid parameter to add_edge: ({v1}, {v2}) with {self._nVertex} vertices")
        return False

    def _add_directed_edge(self, source: int, dest: int, lEdgeID: int = -1):
        """
        Insert a record source -> dest at the head of source's list.

        Both indices must already have been validated by the caller.

        Args:
            source: Vertex whose list receives the record
            dest: Destination vertex of the record
            lEdgeID: Undirected edge the record belongs to
        """
        self.aAdjacency[source] = pyenode(int(dest), self.aAdjacency[source], lEdgeID)

    def add_edge(self, v1: int, v2: int) -> bool:
        """
        Add an undirected edge between v1 and v2.

        Both indices are validated before either direction is stored, so an
        invalid call never leaves half an edge behind.

        Args:
            v1: One endpoint of the edge
            v2: The other endpoint

        Returns:
            True if the edge was added, False if it was skipped
        """
        if not self._validate_edge(v1, v2):
            return False

        lEdgeID = self._nEdge_inserted
        self._add_directed_edge(v1, v2, lEdgeID)
        self._add_directed_edge(v2, v1, lEdgeID)
        self._nEdge_inserted += 1
        return True

    def num_edges(self) -> int:
        """
        Return the number of undirected edges.

        Every edge contributes one record to each endpoint's list, so the
        total record count is halved.
        """
        count = 0
        for head in self.aAdjacency:
            count += count_records(head)
        return count // 2

    def degree(self, vertex_id: int) -> int:
        """
        Return the number of records in vertex_id's list.

        Raises:
            IndexOutOfRangeError: If vertex_id is not a valid vertex
        """
        vertex_id = check_vertex_index(vertex_id, self._nVertex)
        return count_records(self.aAdjacency[vertex_id])

    def get_head(self, vertex_id: int) -> Optional[pyenode]:
        """Return the first record of vertex_id's list, or None if it is empty."""
        vertex_id = check_vertex_index(vertex_id, self._nVertex)
        return self.aAdjacency[vertex_id]

    def get_neighbors(self, vertex_id: int) -> List[int]:
        """
        Return the destinations of vertex_id's records in list order.

        The most recently added edge comes first. Multi-edges appear once per
        record.
        """
        head = self.get_head(vertex_id)
        if head is None:
            return []
        return [record.dest for record in head]

    def iter_edge_records(self) -> Iterator[Tuple[int, pyenode]]:
        """Yield (source, record) for every stored record."""
        for source, head in enumerate(self.aAdjacency):
            if head is None:
                continue
            for record in head:
                yield source, record

    def get_degree_array(self) -> np.ndarray:
        """Return the degree of every vertex as an integer array."""
        return get_degree_array(self.aAdjacency)
