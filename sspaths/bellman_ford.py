"""Bellman-Ford single-source shortest paths with negative-cycle detection."""

from __future__ import annotations

from typing import List, Optional

from .constants import UNREACHABLE
from .exceptions import NegativeCycleError
from .graph import Graph, Vertex
from .logger import Logger
from .path import trace_cycle
from .results import SSSPResult, empty_sssp_lists
from .solvers import _BaseSolver


class BellmanFordSolver(_BaseSolver):
    """Relaxation-based solver that accepts negative edge costs.

    Every pass visits the source first, then the remaining vertices in
    ascending order, and relaxes each edge found from the visited vertex to
    destinations ``1..n`` in ascending order. After at most ``n - 1`` passes a
    final pass checks that nothing can still improve.

    Args:
        G: Graph to read.
        source: Source vertex id in ``1..n``.
        num_vertices: Number of vertices taking part (defaults to
            ``G.num_vertices``).
        logger: Optional event sink.

    Raises:
        InputError: If ``source`` is not a vertex id in ``1..n``.
    """

    name = "bellman-ford"

    def __init__(
        self,
        G: Graph,
        source: Vertex,
        num_vertices: Optional[int] = None,
        logger: Logger | None = None,
    ) -> None:
        super().__init__(G, num_vertices=num_vertices, logger=logger)
        self.source = self._check_source(source)
        self.counters["passes"] = 0

    def _relax_pass(self, order: List[Vertex], dist: List[int], pred: List[Vertex]) -> Optional[Vertex]:
        """Run one relaxation pass; return the last improved vertex, if any."""
        improved: Optional[Vertex] = None
        for u in order:
            du = dist[u]
            if du == UNREACHABLE:
                continue
            for j, w in self.G.neighbors(u):
                if not (1 <= j <= self.n):
                    continue
                self.counters["relaxations"] += 1
                if du + w < dist[j]:
                    dist[j] = du + w
                    pred[j] = u
                    improved = j
        return improved

    def solve(self) -> SSSPResult:
        """Compute distances and predecessors from the source.

        Raises:
            NegativeCycleError: If a negative cycle is reachable from the
                source; no result is returned in that case.
        """
        dist, pred = empty_sssp_lists(self.n)
        dist[self.source] = 0
        order = self.visitation_order(self.source)

        for i in range(self.n - 1):
            self.counters["passes"] += 1
            changed = self._relax_pass(order, dist, pred)
            self.logger.debug("bellman_ford.pass", index=i, improved=changed is not None)
            if changed is None:
                break

        culprit = self._relax_pass(order, dist, pred)
        if culprit is not None:
            cycle = trace_cycle(pred, culprit)
            self.logger.warning(
                "bellman_ford.negative_cycle", source=self.source, vertex=culprit, cycle=cycle
            )
            raise NegativeCycleError(
                f"negative weight cycle reachable from vertex {self.source}",
                vertex=culprit,
                cycle=cycle,
            )

        self.logger.info("bellman_ford.done", source=self.source, n=self.n, **self.counters)
        return SSSPResult(
            source=self.source,
            distances=dist,
            predecessors=pred,
            algorithm=self.name,
            counters=self.summary(),
        )


def bellman_ford(
    G: Graph,
    source: Vertex,
    num_vertices: Optional[int] = None,
    logger: Logger | None = None,
) -> SSSPResult:
    """Run :class:`BellmanFordSolver` and return its result."""
    return BellmanFordSolver(G, source, num_vertices=num_vertices, logger=logger).solve()


__all__ = ["BellmanFordSolver", "bellman_ford"]
