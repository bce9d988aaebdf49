"""JSON export of results and shortest-path trees."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Tuple

from .constants import UNREACHABLE
from .results import DistanceMatrix, SSSPResult


def _finite(d: int) -> Optional[int]:
    return None if d == UNREACHABLE else d


def shortest_path_tree(result: SSSPResult) -> List[Tuple[int, int]]:
    """Return the tree edges ``(predecessor, vertex)`` of a single-source result.

    The source and unreached vertices contribute no edge.
    """
    tree: List[Tuple[int, int]] = []
    for v, d, p in result.rows():
        if v == result.source or d == UNREACHABLE:
            continue
        tree.append((p, v))
    return tree


def result_to_dict(result: SSSPResult) -> Dict[str, Any]:
    """Return a JSON-ready mapping; unreachable distances become ``None``."""
    return {
        "algorithm": result.algorithm,
        "source": result.source,
        "num_vertices": result.num_vertices,
        "vertices": [
            {"id": v, "distance": _finite(d), "predecessor": p if d != UNREACHABLE else None}
            for v, d, p in result.rows()
        ],
        "tree": [{"source": u, "target": v} for u, v in shortest_path_tree(result)],
        "counters": dict(result.counters),
    }


def matrix_to_dict(matrix: DistanceMatrix) -> Dict[str, Any]:
    """Return a JSON-ready mapping of an all-pairs matrix."""
    return {
        "algorithm": "floyd-warshall",
        "num_vertices": matrix.num_vertices,
        "distances": [[_finite(d) for d in row] for row in matrix.tolist()],
        "counters": dict(matrix.counters),
    }


def export_result_json(result: SSSPResult) -> str:
    """Return ``result`` as a JSON string."""
    return json.dumps(result_to_dict(result))


def export_matrix_json(matrix: DistanceMatrix) -> str:
    """Return ``matrix`` as a JSON string."""
    return json.dumps(matrix_to_dict(matrix))


__all__ = [
    "shortest_path_tree",
    "result_to_dict",
    "matrix_to_dict",
    "export_result_json",
    "export_matrix_json",
]
