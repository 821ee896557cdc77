"""
Exception hierarchy for adjgraph.

All errors raised by the package derive from AdjGraphError. The concrete
errors also derive from the closest builtin so callers can catch either.
"""

from typing import Dict, Any, Optional


class AdjGraphError(Exception):
    """
    Base error of the adjgraph package.

    Args:
        message: Human readable description
        context: Optional values describing the failing call
    """

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        self.message: str = message
        self.code: str = self.__class__.__name__
        self.context: Dict[str, Any] = context or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize the error for structured reporting.

        Returns:
            {"code": ..., "message": ..., "context": {...}}
        """
        return {
            "code": self.code,
            "message": self.message,
            "context": dict(self.context),
        }


class InvalidArgumentError(AdjGraphError, ValueError):
    """Invalid vertex count, or invalid vertex index passed to edge insertion."""

    pass


class IndexOutOfRangeError(AdjGraphError, IndexError):
    """Vertex index outside [0, nVertex) passed to a query."""

    pass


class InvalidStateError(AdjGraphError, RuntimeError):
    """Graph is not in a state the requested query can handle."""

    pass
