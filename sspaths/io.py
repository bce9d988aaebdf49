"""Problem file parsing and result serialization.

Problem files hold whitespace-separated integers::

    <numVertices>
    <sourceVertex>
    <numEdges>
    <src> <dst> <cost>      (numEdges times)

Single-source results are written as ``numVertices`` followed by one
``vertex distance predecessor`` line per vertex; Floyd-Warshall results as
``numVertices`` followed by one line of distances per matrix row.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List

from .constants import RESERVED_VERTEX
from .exceptions import GraphFormatError, InputError
from .graph import Edge, Graph, GraphBuilder, Vertex
from .results import DistanceMatrix, SSSPResult


@dataclass(frozen=True)
class ProblemInstance:
    """A graph together with the source vertex named by its problem file."""

    num_vertices: int
    source: Vertex
    graph: Graph

    @property
    def num_edges(self) -> int:
        return self.graph.num_edges


def _tokens(text: str) -> Iterator[int]:
    """Yield the integers of ``text`` in order."""
    for pos, tok in enumerate(text.split()):
        try:
            yield int(tok)
        except ValueError:
            raise GraphFormatError(f"token {pos + 1} is not an integer: {tok!r}") from None


def _take(it: Iterator[int], what: str) -> int:
    try:
        return next(it)
    except StopIteration:
        raise GraphFormatError(f"unexpected end of input while reading {what}") from None


def parse_problem(text: str, directed: bool = False) -> ProblemInstance:
    """Parse problem ``text`` into a :class:`ProblemInstance`.

    Vertices ``0..numVertices`` are allocated, so edges may not name any
    vertex outside that range.

    Args:
        text: File contents.
        directed: Lookup policy of the resulting graph.

    Returns:
        The parsed problem.

    Raises:
        GraphFormatError: On truncated input, non-integer tokens, negative
            counts, trailing data or a source outside ``1..numVertices``.
        InvalidEdgeError: If an edge references an unknown vertex.
    """
    it = _tokens(text)
    n = _take(it, "the vertex count")
    source = _take(it, "the source vertex")
    m = _take(it, "the edge count")
    if n < 1:
        raise GraphFormatError(f"vertex count must be positive, got {n}")
    if m < 0:
        raise GraphFormatError(f"edge count must be non-negative, got {m}")
    if not (1 <= source <= n):
        raise GraphFormatError(f"source vertex {source} outside 1..{n}")

    builder = GraphBuilder(directed=directed)
    builder.add_vertices(range(RESERVED_VERTEX, n + 1))
    for i in range(m):
        u = _take(it, f"edge {i + 1}")
        v = _take(it, f"edge {i + 1}")
        w = _take(it, f"edge {i + 1}")
        builder.add_edge(u, v, w)
    if next(it, None) is not None:
        raise GraphFormatError(f"trailing data after {m} edges")
    return ProblemInstance(num_vertices=n, source=source, graph=builder.build())


def read_problem(path: str | Path, directed: bool = False) -> ProblemInstance:
    """Read a problem file from ``path``.

    Raises:
        InputError: If the file does not exist or cannot be read.
        GraphFormatError: If the contents are malformed or not UTF-8.
    """
    p = Path(path)
    if not p.is_file():
        raise InputError(f"input file not found: {p}")
    try:
        text = p.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise GraphFormatError(f"input is not valid UTF-8: {exc}") from None
    except OSError as exc:
        raise InputError(f"cannot read input file {p}: {exc}") from None
    return parse_problem(text, directed=directed)


def format_problem(problem: ProblemInstance) -> str:
    """Return ``problem`` in the problem file format."""
    edges: List[Edge] = list(problem.graph.edges())
    lines = [str(problem.num_vertices), str(problem.source), str(len(edges))]
    lines.extend(f"{u} {v} {w}" for u, v, w in edges)
    return "\n".join(lines) + "\n"


def write_problem(problem: ProblemInstance, path: str | Path) -> None:
    Path(path).write_text(format_problem(problem), encoding="utf-8")


def format_sssp_result(result: SSSPResult) -> str:
    """Return the ``vertex distance predecessor`` listing for ``result``."""
    lines = [str(result.num_vertices)]
    lines.extend(f"{v} {d} {p}" for v, d, p in result.rows())
    return "\n".join(lines) + "\n"


def write_sssp_result(result: SSSPResult, path: str | Path) -> None:
    """Write a Bellman-Ford or Dijkstra result to ``path``.

    Raises:
        OSError: If ``path`` cannot be written.
    """
    Path(path).write_text(format_sssp_result(result), encoding="utf-8")


def format_distance_matrix(matrix: DistanceMatrix) -> str:
    """Return the row-per-line listing for a Floyd-Warshall matrix."""
    lines = [str(matrix.num_vertices)]
    lines.extend(" ".join(str(x) for x in row) for row in matrix.tolist())
    return "\n".join(lines) + "\n"


def write_distance_matrix(matrix: DistanceMatrix, path: str | Path) -> None:
    """Write a Floyd-Warshall matrix to ``path``.

    Raises:
        OSError: If ``path`` cannot be written.
    """
    Path(path).write_text(format_distance_matrix(matrix), encoding="utf-8")


__all__ = [
    "ProblemInstance",
    "parse_problem",
    "read_problem",
    "format_problem",
    "write_problem",
    "format_sssp_result",
    "write_sssp_result",
    "format_distance_matrix",
    "write_distance_matrix",
]
