"""
Cross-checks between the three engines and against NetworkX.
"""

import networkx as nx
import pytest

from sspaths.bellman_ford import bellman_ford
from sspaths.constants import UNREACHABLE
from sspaths.dijkstra import dijkstra
from sspaths.floyd_warshall import floyd_warshall
from sspaths.generator import generate_problem
from sspaths.visualize import to_networkx

CASES = [
    (8, 12, 0, False),
    (8, 12, 1, True),
    (20, 60, 2, False),
    (20, 35, 3, True),
    (30, 50, 4, True),
]


@pytest.mark.parametrize("n,m,seed,directed", CASES)
def test_dijkstra_matches_bellman_ford(n, m, seed, directed):
    p = generate_problem(n, m, seed=seed, w_min=0, w_max=20, directed=directed)
    assert dijkstra(p.graph, p.source).distances == bellman_ford(p.graph, p.source).distances


@pytest.mark.parametrize("n,m,seed,directed", CASES)
def test_floyd_warshall_rows_match_bellman_ford(n, m, seed, directed):
    p = generate_problem(n, m, seed=seed, directed=directed)
    matrix = floyd_warshall(p.graph)
    for s in range(1, n + 1):
        assert matrix.row(s) == bellman_ford(p.graph, s).distances[1:]


@pytest.mark.parametrize("n,m,seed,directed", CASES)
def test_matches_networkx(n, m, seed, directed):
    p = generate_problem(n, m, seed=seed, directed=directed)
    lengths = nx.single_source_dijkstra_path_length(to_networkx(p.graph), p.source)
    expected = [lengths.get(v, UNREACHABLE) for v in range(1, n + 1)]
    assert dijkstra(p.graph, p.source).distances[1:] == expected


def test_disconnected_vertex_in_every_engine(triangle_with_island):
    assert bellman_ford(triangle_with_island, 1).distance(4) == UNREACHABLE
    assert dijkstra(triangle_with_island, 1).distance(4) == UNREACHABLE
    assert floyd_warshall(triangle_with_island).distance(1, 4) == UNREACHABLE
