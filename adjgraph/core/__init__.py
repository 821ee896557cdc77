"""
Core graph data structures and management.

This module contains the adjacency-list storage and the facade built on it.
"""

from .graph import AdjListsGraph
from .adjgraph import pyadjgraph

__all__ = ['AdjListsGraph', 'pyadjgraph']
