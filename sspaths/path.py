"""Utilities for reconstructing paths from predecessor arrays."""

from __future__ import annotations

from typing import List, Sequence, Set

from .constants import NO_PREDECESSOR

Vertex = int


def reconstruct_path(
    predecessors: Sequence[Vertex],
    source: Vertex,
    target: Vertex,
) -> List[Vertex]:
    """Return the path from ``source`` to ``target`` using a predecessor array.

    Args:
        predecessors: Predecessor of each vertex, indexed by vertex id, with
            ``NO_PREDECESSOR`` for the source and for unreached vertices.
        source: Source vertex identifier.
        target: Target vertex identifier.

    Returns:
        Vertices from source to target (inclusive). Returns an empty list if
        the chain from ``target`` never reaches ``source``.

    Raises:
        ValueError: If ``source`` or ``target`` is not an index of
            ``predecessors``.
    """
    n = len(predecessors)
    if not (0 <= source < n and 0 <= target < n):
        raise ValueError("source/target out of range.")
    if source == target:
        return [source]

    chain: List[Vertex] = []
    cur = target
    seen: Set[Vertex] = set()
    while cur != NO_PREDECESSOR and cur not in seen:
        chain.append(cur)
        if cur == source:
            chain.reverse()
            return chain
        seen.add(cur)
        cur = predecessors[cur]
    return []


def path_cost(path: Sequence[Vertex], cost) -> int:
    """Sum ``cost(u, v)`` over consecutive vertices of ``path``."""
    return sum(cost(u, v) for u, v in zip(path, path[1:]))


def trace_cycle(predecessors: Sequence[Vertex], start: Vertex) -> List[Vertex]:
    """Return the cycle reached by walking predecessors from ``start``.

    Walking ``len(predecessors)`` steps back guarantees landing inside a cycle
    if the chain has one. Returns an empty list when the chain ends at
    ``NO_PREDECESSOR`` instead.
    """
    cur = start
    for _ in range(len(predecessors)):
        if cur == NO_PREDECESSOR:
            return []
        cur = predecessors[cur]
    if cur == NO_PREDECESSOR:
        return []
    cycle = [cur]
    nxt = predecessors[cur]
    while nxt != cur:
        if nxt == NO_PREDECESSOR:
            return []
        cycle.append(nxt)
        nxt = predecessors[nxt]
    cycle.reverse()
    return cycle


__all__ = ["reconstruct_path", "path_cost", "trace_cycle"]
