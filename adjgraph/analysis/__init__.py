"""
Graph analysis modules for detecting structural properties.

This module contains classes for circuit detection and path finding.
"""

from .detection import CircuitAnalyzer
from .pathfinding import PathFinder

__all__ = ['CircuitAnalyzer', 'PathFinder']
