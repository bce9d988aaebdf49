"""Seeded random problem generator.

Useful for quick experiments and for cross-checking the engines against one
another. Generated costs lie in ``[w_min, w_max]``; keep ``w_min >= 0`` when
the problem is meant for Dijkstra.
"""

from __future__ import annotations

import random
from typing import List, Set, Tuple

from .constants import MAX_EDGE_COST, RESERVED_VERTEX
from .exceptions import ConfigError
from .graph import Edge, GraphBuilder
from .io import ProblemInstance


def generate_edges(
    num_vertices: int,
    num_edges: int,
    seed: int = 0,
    w_min: int = 1,
    w_max: int = 100,
    allow_self_loops: bool = False,
) -> List[Edge]:
    """Return ``num_edges`` random edges over vertices ``1..num_vertices``.

    Endpoint pairs are drawn uniformly and may repeat (a repeat overwrites
    the earlier cost once inserted into a graph).

    Raises:
        ConfigError: On non-positive sizes, an empty weight range, or a
            self-loop-free request on a single vertex.
    """
    if num_vertices < 1:
        raise ConfigError("num_vertices must be positive")
    if num_edges < 0:
        raise ConfigError("num_edges must be non-negative")
    if w_min > w_max:
        raise ConfigError(f"w_min ({w_min}) exceeds w_max ({w_max})")
    if max(abs(w_min), abs(w_max)) > MAX_EDGE_COST:
        raise ConfigError(f"weights must stay within ±{MAX_EDGE_COST}")
    if num_vertices == 1 and num_edges and not allow_self_loops:
        raise ConfigError("a single vertex only admits self-loops")

    rnd = random.Random(seed)
    edges: List[Edge] = []
    while len(edges) < num_edges:
        u = rnd.randint(1, num_vertices)
        v = rnd.randint(1, num_vertices)
        if u == v and not allow_self_loops:
            continue
        edges.append((u, v, rnd.randint(w_min, w_max)))
    return edges


def generate_problem(
    num_vertices: int,
    num_edges: int,
    seed: int = 0,
    w_min: int = 1,
    w_max: int = 100,
    source: int = 1,
    directed: bool = False,
    allow_self_loops: bool = False,
) -> ProblemInstance:
    """Build a random :class:`~sspaths.io.ProblemInstance`.

    The same arguments always produce the same problem.

    Raises:
        ConfigError: If ``source`` lies outside ``1..num_vertices`` or the
            edge parameters are invalid (see :func:`generate_edges`).
    """
    if not (1 <= source <= num_vertices):
        raise ConfigError(f"source {source} outside 1..{num_vertices}")
    builder = GraphBuilder(directed=directed)
    builder.add_vertices(range(RESERVED_VERTEX, num_vertices + 1))
    for u, v, w in generate_edges(
        num_vertices, num_edges, seed=seed, w_min=w_min, w_max=w_max,
        allow_self_loops=allow_self_loops,
    ):
        builder.add_edge(u, v, w)
    return ProblemInstance(num_vertices=num_vertices, source=source, graph=builder.build())


def chain_with_cycle(length: int, cycle_cost: int = -1) -> Tuple[List[Edge], Set[int]]:
    """Return a directed chain ``1 -> 2 -> ... -> length`` closed by a back edge.

    The back edge ``length -> 1`` makes the cycle total ``cycle_cost``; the
    second element is the vertex set on the cycle.
    """
    if length < 2:
        raise ConfigError("a cycle needs at least two vertices")
    edges: List[Edge] = [(i, i + 1, 1) for i in range(1, length)]
    edges.append((length, 1, cycle_cost - (length - 1)))
    return edges, set(range(1, length + 1))


__all__ = ["generate_edges", "generate_problem", "chain_with_cycle"]
