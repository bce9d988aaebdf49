"""Public package exports for :mod:`sspaths`."""

from __future__ import annotations

from .bellman_ford import BellmanFordSolver, bellman_ford
from .constants import MAX_EDGE_COST, NO_PREDECESSOR, UNREACHABLE
from .dijkstra import DijkstraSolver, dijkstra
from .exceptions import (
    AlgorithmError,
    ConfigError,
    EdgeNotFoundError,
    GraphError,
    GraphFormatError,
    InputError,
    InvalidEdgeError,
    NegativeCycleError,
    NegativeWeightError,
    PathfindingError,
)
from .floyd_warshall import FloydWarshallSolver, floyd_warshall
from .graph import Graph, GraphBuilder
from .io import (
    ProblemInstance,
    format_distance_matrix,
    format_sssp_result,
    parse_problem,
    read_problem,
    write_distance_matrix,
    write_sssp_result,
)
from .logger import Logger, NoopLogger, StdLogger
from .results import DistanceMatrix, SolverMetrics, SSSPResult

__version__ = "0.1.0"

__all__ = [
    "Graph",
    "GraphBuilder",
    "BellmanFordSolver",
    "FloydWarshallSolver",
    "DijkstraSolver",
    "bellman_ford",
    "floyd_warshall",
    "dijkstra",
    "SSSPResult",
    "DistanceMatrix",
    "SolverMetrics",
    "ProblemInstance",
    "parse_problem",
    "read_problem",
    "format_sssp_result",
    "write_sssp_result",
    "format_distance_matrix",
    "write_distance_matrix",
    "Logger",
    "NoopLogger",
    "StdLogger",
    "UNREACHABLE",
    "NO_PREDECESSOR",
    "MAX_EDGE_COST",
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
