"""Pieces shared by the engines."""

from __future__ import annotations

from typing import Dict, List, Optional

from .exceptions import InputError
from .graph import Graph, Vertex
from .logger import Logger, NoopLogger
from .results import SolverMetrics


class _BaseSolver:
    """Common constructor, counters and metrics for all engines.

    Args:
        G: Graph to read; never modified.
        num_vertices: Vertices ``1..num_vertices`` take part in the run.
            Defaults to ``G.num_vertices``.
        logger: Event sink, :class:`NoopLogger` when omitted.
    """

    name = ""

    def __init__(
        self,
        G: Graph,
        num_vertices: Optional[int] = None,
        logger: Logger | None = None,
    ) -> None:
        n = G.num_vertices if num_vertices is None else num_vertices
        if n < 1:
            raise InputError("num_vertices must be a positive integer.")
        missing = [v for v in range(1, n + 1) if v not in G]
        if missing:
            raise InputError(f"graph has no vertex {missing[0]} (expected 1..{n})")
        self.G = G
        self.n = n
        self.logger: Logger = logger or NoopLogger()
        self.counters: Dict[str, int] = {"relaxations": 0}

    def _check_source(self, source: Vertex) -> Vertex:
        if not (1 <= source <= self.n):
            raise InputError(f"source must be a vertex id in 1..{self.n}, got {source}")
        return source

    def visitation_order(self, source: Vertex) -> List[Vertex]:
        """Return ``source`` followed by the other vertices in ascending order."""
        return [source] + [v for v in range(1, self.n + 1) if v != source]

    def summary(self) -> Dict[str, int]:
        return dict(self.counters)

    def metrics(self, wall_ms: float) -> SolverMetrics:
        """Bundle counters and timing for reporting."""
        return SolverMetrics(
            algorithm=self.name,
            n=self.n,
            m=self.G.num_edges,
            counters=self.summary(),
            wall_ms=wall_ms,
        )
