"""
Shared fixtures for the sspaths test-suite.
"""

import pytest

from sspaths.graph import Graph

TRIANGLE_EDGES = [(1, 2, 4), (2, 3, 2), (1, 3, 7)]


@pytest.fixture
def triangle() -> Graph:
    """Vertices {0, 1, 2, 3} with the three-edge triangle, undirected lookup."""
    return Graph.from_edges(3, TRIANGLE_EDGES)


@pytest.fixture
def triangle_directed() -> Graph:
    return Graph.from_edges(3, TRIANGLE_EDGES, directed=True)


@pytest.fixture
def triangle_with_island() -> Graph:
    """The triangle plus vertex 4, which has no edges."""
    return Graph.from_edges(4, TRIANGLE_EDGES)
