"""
Tests for JSON export, path helpers and plotting.
"""

import json

import networkx as nx
import pytest

from sspaths.bellman_ford import bellman_ford
from sspaths.constants import NO_PREDECESSOR
from sspaths.export import export_matrix_json, export_result_json, shortest_path_tree
from sspaths.floyd_warshall import floyd_warshall
from sspaths.path import reconstruct_path, trace_cycle
from sspaths.visualize import draw_shortest_path_tree, to_networkx


def test_shortest_path_tree(triangle_with_island):
    res = bellman_ford(triangle_with_island, 1)
    assert shortest_path_tree(res) == [(1, 2), (2, 3)]


def test_result_json_marks_unreachable_as_null(triangle_with_island):
    data = json.loads(export_result_json(bellman_ford(triangle_with_island, 1)))
    assert data["algorithm"] == "bellman-ford"
    assert data["vertices"][3] == {"id": 4, "distance": None, "predecessor": None}
    assert data["vertices"][0] == {"id": 1, "distance": 0, "predecessor": 0}
    assert data["tree"] == [{"source": 1, "target": 2}, {"source": 2, "target": 3}]


def test_matrix_json(triangle_with_island):
    data = json.loads(export_matrix_json(floyd_warshall(triangle_with_island)))
    assert data["distances"][0] == [0, 4, 6, None]
    assert data["distances"][3] == [None, None, None, 0]


def test_reconstruct_path():
    preds = [NO_PREDECESSOR, NO_PREDECESSOR, 1, 2, NO_PREDECESSOR]
    assert reconstruct_path(preds, 1, 3) == [1, 2, 3]
    assert reconstruct_path(preds, 1, 1) == [1]
    assert reconstruct_path(preds, 1, 4) == []
    with pytest.raises(ValueError):
        reconstruct_path(preds, 1, 9)


def test_reconstruct_path_stops_on_cycle():
    preds = [0, 0, 3, 2]
    assert reconstruct_path(preds, 1, 3) == []


def test_trace_cycle():
    assert trace_cycle([0, 3, 1, 2], 1) == [1, 2, 3]
    assert trace_cycle([0, 0, 1, 2], 3) == []


def test_to_networkx(triangle, triangle_directed):
    g = to_networkx(triangle)
    assert not g.is_directed()
    assert g[3][1]["weight"] == 7
    d = to_networkx(triangle_directed)
    assert isinstance(d, nx.DiGraph)
    assert not d.has_edge(2, 1)
    assert sorted(d.nodes) == [1, 2, 3]


def test_draw_shortest_path_tree(tmp_path, triangle_with_island):
    out = tmp_path / "tree.png"
    draw_shortest_path_tree(
        triangle_with_island, bellman_ford(triangle_with_island, 1), out, layout="circular", show_weights=True
    )
    assert out.stat().st_size > 0
    with pytest.raises(ValueError):
        draw_shortest_path_tree(triangle_with_island, bellman_ford(triangle_with_island, 1), out, layout="nope")
