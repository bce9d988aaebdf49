"""
Tests for the seeded problem generator.
"""

import pytest

from sspaths.exceptions import ConfigError
from sspaths.generator import chain_with_cycle, generate_edges, generate_problem


def test_same_seed_same_problem():
    a = generate_problem(20, 50, seed=7)
    b = generate_problem(20, 50, seed=7)
    c = generate_problem(20, 50, seed=8)
    assert list(a.graph.edges()) == list(b.graph.edges())
    assert list(a.graph.edges()) != list(c.graph.edges())


def test_edges_respect_bounds():
    edges = generate_edges(6, 100, seed=1, w_min=-3, w_max=3)
    assert len(edges) == 100
    for u, v, w in edges:
        assert 1 <= u <= 6 and 1 <= v <= 6
        assert u != v
        assert -3 <= w <= 3


def test_problem_allocates_reserved_vertex():
    p = generate_problem(5, 4, source=3, directed=True)
    assert p.graph.vertices == frozenset(range(6))
    assert p.source == 3
    assert p.graph.directed


@pytest.mark.parametrize(
    "kwargs",
    [
        dict(num_vertices=0, num_edges=1),
        dict(num_vertices=3, num_edges=-1),
        dict(num_vertices=3, num_edges=1, w_min=5, w_max=1),
        dict(num_vertices=1, num_edges=1),
        dict(num_vertices=3, num_edges=1, source=4),
    ],
)
def test_invalid_parameters(kwargs):
    with pytest.raises(ConfigError):
        generate_problem(**kwargs)


def test_chain_with_cycle_total_cost():
    edges, on_cycle = chain_with_cycle(5, cycle_cost=-2)
    assert on_cycle == {1, 2, 3, 4, 5}
    assert sum(w for _, _, w in edges) == -2
    with pytest.raises(ConfigError):
        chain_with_cycle(1)
