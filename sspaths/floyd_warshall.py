"""Floyd-Warshall all-pairs shortest paths on a dense NumPy matrix."""

from __future__ import annotations

from typing import List, Optional

import numpy as np
import numpy.typing as npt

from .constants import UNREACHABLE
from .exceptions import NegativeCycleError
from .graph import Graph
from .logger import Logger
from .results import DistanceMatrix
from .solvers import _BaseSolver


def initial_matrix(G: Graph, n: int) -> npt.NDArray[np.int64]:
    """Return the ``n x n`` matrix of direct edge costs.

    Position ``i`` stands for vertex ``i + 1``. The diagonal is ``0`` and
    pairs without an edge hold ``UNREACHABLE``.
    """
    dist = np.full((n, n), UNREACHABLE, dtype=np.int64)
    for u in range(1, n + 1):
        for v, w in G.neighbors(u):
            if 1 <= v <= n:
                dist[u - 1, v - 1] = w
    np.fill_diagonal(dist, 0)
    return dist


class FloydWarshallSolver(_BaseSolver):
    """Dynamic-programming all-pairs solver.

    Negative cycles are not detected unless ``check_negative_cycles`` is set;
    without the check a negative cycle leaves negative entries on the
    diagonal and inconsistent distances elsewhere.

    Args:
        G: Graph to read.
        num_vertices: Number of vertices taking part (defaults to
            ``G.num_vertices``).
        logger: Optional event sink.
        check_negative_cycles: Raise :class:`NegativeCycleError` when a
            diagonal entry ends up negative.
    """

    name = "floyd-warshall"

    def __init__(
        self,
        G: Graph,
        num_vertices: Optional[int] = None,
        logger: Logger | None = None,
        check_negative_cycles: bool = False,
    ) -> None:
        super().__init__(G, num_vertices=num_vertices, logger=logger)
        self.check_negative_cycles = check_negative_cycles

    def solve(self) -> DistanceMatrix:
        """Compute the distance matrix."""
        n = self.n
        dist = initial_matrix(self.G, n)

        for k in range(n):
            col = dist[:, k : k + 1]
            row = dist[k : k + 1, :]
            blocked = (col == UNREACHABLE) | (row == UNREACHABLE)
            through_k = np.where(blocked, UNREACHABLE, col + row)
            np.minimum(dist, through_k, out=dist)
            self.counters["relaxations"] += n * n

        self.logger.info("floyd_warshall.done", n=n, **self.counters)
        if self.check_negative_cycles:
            bad: List[int] = [int(i) + 1 for i in np.flatnonzero(np.diagonal(dist) < 0)]
            if bad:
                raise NegativeCycleError(
                    f"negative weight cycle through vertex {bad[0]}",
                    vertex=bad[0],
                )
        return DistanceMatrix(values=dist, counters=self.summary())


def floyd_warshall(
    G: Graph,
    num_vertices: Optional[int] = None,
    logger: Logger | None = None,
    check_negative_cycles: bool = False,
) -> DistanceMatrix:
    """Run :class:`FloydWarshallSolver` and return its matrix."""
    return FloydWarshallSolver(
        G,
        num_vertices=num_vertices,
        logger=logger,
        check_negative_cycles=check_negative_cycles,
    ).solve()


__all__ = ["FloydWarshallSolver", "floyd_warshall", "initial_matrix"]
