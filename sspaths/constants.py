"""Sentinel values shared by the graph and every engine."""

from __future__ import annotations

#: Largest accepted absolute edge cost (the signed 32-bit integer range).
MAX_EDGE_COST: int = 2**31 - 1

#: Distance of a vertex that has not been reached.
#:
#: Half of the signed 64-bit maximum: ``UNREACHABLE + UNREACHABLE`` still fits
#: in ``int64`` and any real path sum (at most ``n * MAX_EDGE_COST``) stays far
#: below it for every graph that fits in memory.
UNREACHABLE: int = (2**63 - 1) // 2

#: Predecessor of the source and of unreached vertices (the reserved vertex).
NO_PREDECESSOR: int = 0

#: Vertex id that the input format allocates but never uses.
RESERVED_VERTEX: int = 0

__all__ = ["MAX_EDGE_COST", "UNREACHABLE", "NO_PREDECESSOR", "RESERVED_VERTEX"]
