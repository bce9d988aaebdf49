"""Custom exception types used across :mod:`sspaths`."""

from __future__ import annotations

from typing import List, Optional


class PathfindingError(Exception):
    """Base class for all package-specific errors."""


class InputError(PathfindingError, ValueError):
    """Raised for invalid user input such as malformed edges."""


class GraphFormatError(InputError):
    """Raised when parsing a problem file fails."""


class GraphError(InputError):
    """Raised when a graph is built or queried inconsistently."""


class InvalidEdgeError(GraphError):
    """Raised when an edge references an unknown vertex or carries a bad cost."""


class EdgeNotFoundError(GraphError, KeyError):
    """Raised when asking for the cost of an edge that does not exist."""

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0]) if self.args else ""


class NegativeWeightError(InputError):
    """Raised by opt-in validation when an engine requires non-negative costs."""


class ConfigError(PathfindingError, ValueError):
    """Raised for invalid configuration options."""


class AlgorithmError(PathfindingError, RuntimeError):
    """Raised when an algorithm cannot produce a valid result."""


class NegativeCycleError(AlgorithmError):
    """Raised when a negative-weight cycle makes shortest paths undefined.

    Attributes:
        vertex: Vertex whose distance could still be improved when the cycle
            was detected, or ``None`` when unknown.
        cycle: Vertices of one offending cycle in traversal order, or an
            empty list when it could not be recovered.
    """

    def __init__(
        self,
        message: str = "negative weight cycle detected",
        vertex: Optional[int] = None,
        cycle: Optional[List[int]] = None,
    ) -> None:
        super().__init__(message)
        self.vertex = vertex
        self.cycle: List[int] = list(cycle or [])


__all__ = [
    "PathfindingError",
    "InputError",
    "GraphFormatError",
    "GraphError",
    "InvalidEdgeError",
    "EdgeNotFoundError",
    "NegativeWeightError",
    "ConfigError",
    "AlgorithmError",
    "NegativeCycleError",
]
