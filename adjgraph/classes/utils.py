"""
Utility functions for adjgraph.

This module provides shared helpers used across the adjgraph package:
vertex index validation, record counting and degree arrays.
"""

import logging
from typing import List, Optional

import numpy as np

from .enode import pyenode
from .exceptions import InvalidArgumentError, IndexOutOfRangeError

logger = logging.getLogger(__name__)


def validate_vertex_count(nVertex) -> int:
    """
    Check a vertex count passed to a graph constructor.

    Args:
        nVertex: Requested number of vertices

    Returns:
        The vertex count as an int

    Raises:
        InvalidArgumentError: If the count is not an integer or is negative
    """
    if isinstance(nVertex, bool) or not isinstance(nVertex, (int, np.integer)):
        raise InvalidArgumentError(
            f"Vertex count must be an integer, got {type(nVertex).__name__}",
            context={'nVertex': nVertex})
    if nVertex < 0:
        raise InvalidArgumentError(
            f"Vertex count must be non-negative, got {nVertex}",
            context={'nVertex': int(nVertex)})
    return int(nVertex)


def is_valid_vertex(vertex_id, nVertex: int) -> bool:
    """Return True if vertex_id is an integer in [0, nVertex)."""
    if isinstance(vertex_id, bool) or not isinstance(vertex_id, (int, np.integer)):
        return False
    return 0 <= vertex_id < nVertex


def check_vertex_index(vertex_id, nVertex: int) -> int:
    """
    Validate a vertex index used by a query.

    Raises:
        IndexOutOfRangeError: If vertex_id is not in [0, nVertex)
    """
    if not is_valid_vertex(vertex_id, nVertex):
        raise IndexOutOfRangeError(
            f"Vertex {vertex_id} out of range for graph with {nVertex} vertices",
            context={'vertex_id': vertex_id, 'nVertex': nVertex})
    return int(vertex_id)


def count_records(head: Optional[pyenode]) -> int:
    """Count the records in a chain starting at head."""
    count = 0
    cur = head
    while cur is not None:
        count += 1
        cur = cur.next
    return count


def get_degree_array(aAdjacency: List[Optional[pyenode]]) -> np.ndarray:
    """
    Build the degree of every vertex as an integer array.

    Args:
        aAdjacency: Adjacency heads indexed by vertex

    Returns:
        Array of length len(aAdjacency) holding each vertex's record count
    """
    return np.fromiter((count_records(head) for head in aAdjacency),
                       dtype=np.int64, count=len(aAdjacency))
