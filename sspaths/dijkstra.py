"""Greedy single-source shortest paths (array-scan Dijkstra)."""

from __future__ import annotations

from typing import List, Optional, Set

from .constants import UNREACHABLE
from .exceptions import NegativeWeightError
from .graph import Graph, Vertex
from .logger import Logger
from .results import SSSPResult, empty_sssp_lists
from .solvers import _BaseSolver


class DijkstraSolver(_BaseSolver):
    """Dijkstra's algorithm with a linear scan for the next vertex.

    Edge costs must be non-negative. This is not checked unless ``validate``
    is set; a negative cost otherwise yields wrong distances silently.

    Args:
        G: Graph to read.
        source: Source vertex id in ``1..n``.
        num_vertices: Number of vertices taking part (defaults to
            ``G.num_vertices``).
        logger: Optional event sink.
        validate: Raise :class:`NegativeWeightError` on a negative edge cost
            before solving.
    """

    name = "dijkstra"

    def __init__(
        self,
        G: Graph,
        source: Vertex,
        num_vertices: Optional[int] = None,
        logger: Logger | None = None,
        validate: bool = False,
    ) -> None:
        super().__init__(G, num_vertices=num_vertices, logger=logger)
        self.source = self._check_source(source)
        self.validate = validate
        self.counters["visited"] = 0

    def _validate(self) -> None:
        lowest = self.G.min_cost()
        if lowest is None or lowest >= 0:
            return
        u, v, w = next(e for e in self.G.edges() if e[2] == lowest)
        raise NegativeWeightError(f"negative cost {w} on edge ({u}, {v})")

    def _next_vertex(self, unvisited: Set[Vertex], dist: List[int]) -> Optional[Vertex]:
        """Return the unvisited vertex with the smallest finite distance.

        Ties go to the lowest id. ``None`` means the rest is unreachable.
        """
        best: Optional[Vertex] = None
        for j in range(1, self.n + 1):
            if j not in unvisited:
                continue
            if best is None or dist[j] < dist[best]:
                best = j
        if best is None or dist[best] == UNREACHABLE:
            return None
        return best

    def solve(self) -> SSSPResult:
        """Compute distances and predecessors from the source."""
        if self.validate:
            self._validate()
        dist, pred = empty_sssp_lists(self.n)
        dist[self.source] = 0
        unvisited: Set[Vertex] = set(range(1, self.n + 1))

        vertex: Optional[Vertex] = self.source
        while vertex is not None:
            du = dist[vertex]
            for i, w in self.G.neighbors(vertex):
                if i not in unvisited or i == vertex:
                    continue
                self.counters["relaxations"] += 1
                if du + w < dist[i]:
                    dist[i] = du + w
                    pred[i] = vertex
            unvisited.discard(vertex)
            self.counters["visited"] += 1
            vertex = self._next_vertex(unvisited, dist)

        self.logger.info(
            "dijkstra.done",
            source=self.source,
            n=self.n,
            unreached=len(unvisited),
            **self.counters,
        )
        return SSSPResult(
            source=self.source,
            distances=dist,
            predecessors=pred,
            algorithm=self.name,
            counters=self.summary(),
        )


def dijkstra(
    G: Graph,
    source: Vertex,
    num_vertices: Optional[int] = None,
    logger: Logger | None = None,
    validate: bool = False,
) -> SSSPResult:
    """Run :class:`DijkstraSolver` and return its result."""
    return DijkstraSolver(
        G, source, num_vertices=num_vertices, logger=logger, validate=validate
    ).solve()


__all__ = ["DijkstraSolver", "dijkstra"]
