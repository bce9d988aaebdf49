"""Result containers produced by the engines."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Tuple

import numpy as np
import numpy.typing as npt

from .constants import NO_PREDECESSOR, UNREACHABLE
from .exceptions import InputError
from .graph import Vertex
from .path import reconstruct_path


@dataclass(frozen=True)
class SSSPResult:
    """Distances and predecessors from a single-source engine.

    Both lists are indexed by vertex id; slot ``0`` belongs to the reserved
    vertex and always holds ``UNREACHABLE`` / ``NO_PREDECESSOR``.
    """

    source: Vertex
    distances: List[int]
    predecessors: List[Vertex]
    algorithm: str = ""
    counters: Dict[str, int] = field(default_factory=dict)

    @property
    def num_vertices(self) -> int:
        return len(self.distances) - 1

    def _check(self, vertex: Vertex) -> None:
        if not (1 <= vertex <= self.num_vertices):
            raise InputError(f"vertex {vertex} outside 1..{self.num_vertices}")

    def distance(self, vertex: Vertex) -> int:
        """Return the distance to ``vertex`` (``UNREACHABLE`` if not reached)."""
        self._check(vertex)
        return self.distances[vertex]

    def predecessor(self, vertex: Vertex) -> Vertex:
        """Return the predecessor of ``vertex`` or ``NO_PREDECESSOR``."""
        self._check(vertex)
        return self.predecessors[vertex]

    def reachable(self, vertex: Vertex) -> bool:
        return self.distance(vertex) != UNREACHABLE

    def path_to(self, target: Vertex) -> List[Vertex]:
        """Return the vertices from the source to ``target`` (empty if unreachable)."""
        self._check(target)
        if not self.reachable(target):
            return []
        return reconstruct_path(self.predecessors, self.source, target)

    def rows(self) -> Iterator[Tuple[Vertex, int, Vertex]]:
        """Yield ``(vertex, distance, predecessor)`` for vertices ``1..n``."""
        for v in range(1, len(self.distances)):
            yield v, self.distances[v], self.predecessors[v]


@dataclass(frozen=True)
class DistanceMatrix:
    """All-pairs distances; position ``i`` corresponds to vertex ``i + 1``."""

    values: npt.NDArray[np.int64]
    counters: Dict[str, int] = field(default_factory=dict)

    @property
    def num_vertices(self) -> int:
        return int(self.values.shape[0])

    def distance(self, source: Vertex, destination: Vertex) -> int:
        """Return the distance between two vertex ids."""
        n = self.num_vertices
        if not (1 <= source <= n and 1 <= destination <= n):
            raise InputError(f"vertices must lie in 1..{n}")
        return int(self.values[source - 1, destination - 1])

    def row(self, source: Vertex) -> List[int]:
        """Return the distances from ``source`` to vertices ``1..n``."""
        if not (1 <= source <= self.num_vertices):
            raise InputError(f"vertex {source} outside 1..{self.num_vertices}")
        return [int(x) for x in self.values[source - 1]]

    def tolist(self) -> List[List[int]]:
        return [[int(x) for x in row] for row in self.values]


@dataclass(frozen=True)
class SolverMetrics:
    """Performance metrics collected from a solver run."""

    algorithm: str
    n: int
    m: int
    counters: Dict[str, int]
    wall_ms: float


def empty_sssp_lists(num_vertices: int) -> Tuple[List[int], List[Vertex]]:
    """Return fresh distance and predecessor lists for ``num_vertices`` vertices."""
    return [UNREACHABLE] * (num_vertices + 1), [NO_PREDECESSOR] * (num_vertices + 1)


__all__ = ["SSSPResult", "DistanceMatrix", "SolverMetrics", "empty_sssp_lists"]
