"""Weighted graph model shared by every engine.

A :class:`GraphBuilder` collects vertices and edges; :meth:`GraphBuilder.build`
freezes them into a :class:`Graph` that engines only ever read.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Iterator, List, Mapping, Set, Tuple

from .constants import MAX_EDGE_COST, RESERVED_VERTEX
from .exceptions import EdgeNotFoundError, InputError, InvalidEdgeError

Vertex = int
Cost = int
Edge = Tuple[Vertex, Vertex, Cost]
EdgeKey = Tuple[Vertex, Vertex]


def _edge_key(u: Vertex, v: Vertex, directed: bool) -> EdgeKey:
    """Return the storage key for ``(u, v)`` under the lookup policy."""
    if directed or u <= v:
        return (u, v)
    return (v, u)


@dataclass(frozen=True)
class Graph:
    """Read-only weighted graph.

    With ``directed=False`` (the default) an edge inserted as ``(a, b)`` is
    found when querying either ``(a, b)`` or ``(b, a)``, and inserting
    ``(b, a)`` later replaces it. With ``directed=True`` lookups follow the
    inserted direction only.

    Attributes:
        vertices: Vertex ids, including the reserved vertex ``0`` when the
            graph was read from a problem file.
        costs: Edge storage keyed by the lookup-policy key; values are the
            ``(source, destination, cost)`` triple as last inserted.
        directed: Lookup policy flag.
    """

    vertices: FrozenSet[Vertex]
    costs: Mapping[EdgeKey, Edge]
    directed: bool = False
    _adj: Mapping[Vertex, Tuple[Tuple[Vertex, Cost], ...]] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        adj: Dict[Vertex, List[Tuple[Vertex, Cost]]] = {v: [] for v in self.vertices}
        for u, v, w in self.costs.values():
            adj[u].append((v, w))
            if not self.directed and u != v:
                adj[v].append((u, w))
        frozen = {u: tuple(sorted(nbrs)) for u, nbrs in adj.items()}
        object.__setattr__(self, "_adj", MappingProxyType(frozen))

    @classmethod
    def from_edges(
        cls, num_vertices: int, edges: Iterable[Edge], directed: bool = False
    ) -> "Graph":
        """Create a graph over vertices ``0..num_vertices`` from ``edges``.

        Args:
            num_vertices: Highest vertex id.
            edges: Iterable of ``(source, destination, cost)`` triples.
            directed: Lookup policy, see :class:`Graph`.

        Returns:
            The frozen graph.

        Raises:
            InvalidEdgeError: If an edge references a vertex outside
                ``0..num_vertices`` or carries an invalid cost.

        Examples:
            ```python
            >>> g = Graph.from_edges(2, [(1, 2, 5)])
            >>> g.edge_cost(2, 1)
            5
            ```
        """
        builder = GraphBuilder(directed=directed)
        builder.add_vertices(range(RESERVED_VERTEX, num_vertices + 1))
        for u, v, w in edges:
            builder.add_edge(u, v, w)
        return builder.build()

    @property
    def num_vertices(self) -> int:
        """Highest vertex id (vertex ids are 1-based; ``0`` is reserved)."""
        return max(self.vertices, default=RESERVED_VERTEX)

    @property
    def num_edges(self) -> int:
        """Number of stored edges."""
        return len(self.costs)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self.vertices

    def has_edge(self, source: Vertex, destination: Vertex) -> bool:
        """Return ``True`` if an edge is found for ``(source, destination)``."""
        return _edge_key(source, destination, self.directed) in self.costs

    def edge_cost(self, source: Vertex, destination: Vertex) -> Cost:
        """Return the cost stored for ``(source, destination)``.

        Raises:
            EdgeNotFoundError: If :meth:`has_edge` is ``False`` for the pair.
        """
        try:
            return self.costs[_edge_key(source, destination, self.directed)][2]
        except KeyError:
            raise EdgeNotFoundError(f"no edge ({source}, {destination})") from None

    def neighbors(self, vertex: Vertex) -> Tuple[Tuple[Vertex, Cost], ...]:
        """Return ``(destination, cost)`` pairs reachable from ``vertex``.

        Pairs are sorted by destination. Unknown vertices have no neighbors.
        """
        return self._adj.get(vertex, ())

    def edges(self) -> Iterator[Edge]:
        """Yield stored ``(source, destination, cost)`` triples in key order."""
        for key in sorted(self.costs):
            yield self.costs[key]

    def min_cost(self) -> Cost | None:
        """Return the smallest edge cost, or ``None`` for an edgeless graph."""
        return min((w for _, _, w in self.costs.values()), default=None)


class GraphBuilder:
    """Mutable collector that produces a :class:`Graph`.

    Vertices must be added before any edge that references them.
    """

    def __init__(self, directed: bool = False) -> None:
        self.directed = directed
        self._vertices: Set[Vertex] = set()
        self._costs: Dict[EdgeKey, Edge] = {}

    def add_vertex(self, vertex: Vertex) -> None:
        """Insert ``vertex``; adding an existing vertex is a no-op.

        Raises:
            InputError: If ``vertex`` is not a non-negative integer.
        """
        if isinstance(vertex, bool) or not isinstance(vertex, numbers.Integral) or vertex < 0:
            raise InputError(f"vertex ids must be non-negative integers, got {vertex!r}")
        self._vertices.add(int(vertex))

    def add_vertices(self, vertices: Iterable[Vertex]) -> None:
        """Insert every vertex of ``vertices``."""
        for v in vertices:
            self.add_vertex(v)

    def add_edge(self, source: Vertex, destination: Vertex, cost: Cost) -> None:
        """Insert an edge, replacing any earlier cost for the same key.

        Raises:
            InvalidEdgeError: If either endpoint is unknown, or ``cost`` is not
                an integer within ``±MAX_EDGE_COST``.
        """
        if source not in self._vertices or destination not in self._vertices:
            raise InvalidEdgeError(
                f"edge ({source}, {destination}) references an unknown vertex"
            )
        if isinstance(cost, bool) or not isinstance(cost, numbers.Integral):
            raise InvalidEdgeError(f"non-integer cost {cost!r} on edge ({source}, {destination})")
        if abs(cost) > MAX_EDGE_COST:
            raise InvalidEdgeError(
                f"cost {cost} on edge ({source}, {destination}) exceeds ±{MAX_EDGE_COST}"
            )
        key = _edge_key(source, destination, self.directed)
        self._costs[key] = (int(source), int(destination), int(cost))

    def build(self) -> Graph:
        """Freeze the collected vertices and edges into a :class:`Graph`."""
        return Graph(
            vertices=frozenset(self._vertices),
            costs=MappingProxyType(dict(self._costs)),
            directed=self.directed,
        )


__all__ = ["Graph", "GraphBuilder", "Vertex", "Cost", "Edge"]
