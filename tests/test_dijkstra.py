"""
Unit tests for the array-scan Dijkstra engine.
"""

import pytest

from sspaths.constants import NO_PREDECESSOR, UNREACHABLE
from sspaths.dijkstra import DijkstraSolver, dijkstra
from sspaths.exceptions import InputError, NegativeWeightError
from sspaths.graph import Graph


def test_triangle_distances_and_predecessors(triangle):
    res = dijkstra(triangle, 1)
    assert res.distances[1:] == [0, 4, 6]
    assert res.predecessors[1:] == [NO_PREDECESSOR, 1, 2]
    assert res.path_to(3) == [1, 2, 3]


def test_source_in_the_middle(triangle):
    res = dijkstra(triangle, 2)
    assert res.distances[1:] == [4, 0, 2]
    assert res.predecessors[1:] == [2, 0, 2]


def test_ties_go_to_lowest_vertex_id():
    g = Graph.from_edges(4, [(1, 3, 5), (1, 2, 5), (2, 4, 1), (3, 4, 1)], directed=True)
    res = dijkstra(g, 1)
    assert res.distance(4) == 6
    assert res.predecessor(4) == 2


def test_disconnected_remainder_stops_the_scan(triangle_with_island):
    solver = DijkstraSolver(triangle_with_island, 1)
    res = solver.solve()
    assert res.distance(4) == UNREACHABLE
    assert res.predecessor(4) == NO_PREDECESSOR
    assert solver.summary()["visited"] == 3


def test_directed_lookup_limits_reach(triangle_directed):
    res = dijkstra(triangle_directed, 2)
    assert res.distances[1:] == [UNREACHABLE, 0, 2]


def test_negative_cost_is_not_checked_by_default():
    g = Graph.from_edges(2, [(1, 2, -3)], directed=True)
    assert dijkstra(g, 1).distance(2) == -3


def test_negative_cost_opt_in_validation():
    g = Graph.from_edges(2, [(1, 2, -3)], directed=True)
    with pytest.raises(NegativeWeightError):
        dijkstra(g, 1, validate=True)


def test_self_loop_is_ignored():
    g = Graph.from_edges(2, [(1, 1, 3), (1, 2, 2)])
    res = dijkstra(g, 1)
    assert res.distances[1:] == [0, 2]


@pytest.mark.parametrize("source", [0, 5])
def test_invalid_source(triangle, source):
    with pytest.raises(InputError):
        dijkstra(triangle, source)


def test_validation_accepts_non_negative_and_edgeless_graphs(triangle):
    assert dijkstra(triangle, 1, validate=True).distances[1:] == [0, 4, 6]
    empty = Graph.from_edges(2, [])
    assert dijkstra(empty, 1, validate=True).distances[1:] == [0, UNREACHABLE]


def test_validation_names_the_most_negative_edge():
    g = Graph.from_edges(3, [(1, 2, -1), (2, 3, -5)], directed=True)
    with pytest.raises(NegativeWeightError, match=r"-5 on edge \(2, 3\)"):
        dijkstra(g, 1, validate=True)
