"""
Unit tests for Graph and GraphBuilder.
"""

import dataclasses

import pytest

from sspaths.constants import MAX_EDGE_COST
from sspaths.exceptions import EdgeNotFoundError, InputError, InvalidEdgeError
from sspaths.graph import Graph, GraphBuilder


def test_add_vertex_is_idempotent():
    b = GraphBuilder()
    b.add_vertex(1)
    b.add_vertex(1)
    b.add_vertex(2)
    g = b.build()
    assert g.vertices == frozenset({1, 2})
    assert g.num_vertices == 2


def test_add_vertex_rejects_negative_ids():
    with pytest.raises(InputError):
        GraphBuilder().add_vertex(-1)


def test_edge_to_unknown_vertex_fails():
    b = GraphBuilder()
    b.add_vertices([1, 2])
    with pytest.raises(InvalidEdgeError):
        b.add_edge(1, 3, 5)
    with pytest.raises(InvalidEdgeError):
        b.add_edge(7, 1, 5)


def test_edge_cost_must_be_bounded_integer():
    b = GraphBuilder()
    b.add_vertices([1, 2])
    with pytest.raises(InvalidEdgeError):
        b.add_edge(1, 2, 1.5)
    with pytest.raises(InvalidEdgeError):
        b.add_edge(1, 2, MAX_EDGE_COST + 1)
    b.add_edge(1, 2, -MAX_EDGE_COST)
    assert b.build().edge_cost(1, 2) == -MAX_EDGE_COST


def test_undirected_lookup_finds_both_directions(triangle):
    assert triangle.has_edge(1, 2)
    assert triangle.has_edge(2, 1)
    assert triangle.edge_cost(3, 1) == 7
    assert not triangle.has_edge(1, 1)


def test_undirected_reverse_insert_overwrites():
    g = Graph.from_edges(2, [(1, 2, 3), (2, 1, 9)])
    assert g.num_edges == 1
    assert g.edge_cost(1, 2) == 9
    assert list(g.edges()) == [(2, 1, 9)]


def test_directed_lookup_follows_insertion(triangle_directed):
    assert triangle_directed.has_edge(1, 2)
    assert not triangle_directed.has_edge(2, 1)
    with pytest.raises(EdgeNotFoundError):
        triangle_directed.edge_cost(2, 1)


def test_missing_edge_is_a_key_error(triangle_directed):
    with pytest.raises(KeyError):
        triangle_directed.edge_cost(3, 2)


def test_same_key_overwrites_cost():
    g = Graph.from_edges(2, [(1, 2, 3), (1, 2, 1)], directed=True)
    assert g.edge_cost(1, 2) == 1
    assert g.num_edges == 1


def test_neighbors_sorted_by_destination(triangle, triangle_directed):
    assert triangle.neighbors(1) == ((2, 4), (3, 7))
    assert triangle.neighbors(3) == ((1, 7), (2, 2))
    assert triangle_directed.neighbors(3) == ()
    assert triangle.neighbors(42) == ()


def test_from_edges_allocates_reserved_vertex(triangle):
    assert 0 in triangle
    assert triangle.num_vertices == 3
    assert triangle.min_cost() == 2


def test_built_graph_is_independent_of_builder():
    b = GraphBuilder()
    b.add_vertices([1, 2, 3])
    b.add_edge(1, 2, 1)
    g = b.build()
    b.add_edge(2, 3, 1)
    assert not g.has_edge(2, 3)
    assert b.build().has_edge(2, 3)


def test_graph_is_frozen(triangle):
    with pytest.raises(dataclasses.FrozenInstanceError):
        triangle.directed = True
    with pytest.raises(TypeError):
        triangle.costs[(1, 2)] = (1, 2, 0)
