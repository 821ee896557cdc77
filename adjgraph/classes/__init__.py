"""
Core data classes for adjacency-list graph representation.

This module contains the edge record and the error types used throughout
the adjgraph library.
"""

from .enode import pyenode
from .exceptions import (
    AdjGraphError,
    InvalidArgumentError,
    IndexOutOfRangeError,
    InvalidStateError,
)

__all__ = [
    'pyenode',
    'AdjGraphError',
    'InvalidArgumentError',
    'IndexOutOfRangeError',
    'InvalidStateError',
]
