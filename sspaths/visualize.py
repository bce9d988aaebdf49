"""Drawing helpers built on NetworkX + Matplotlib.

The figure shows every edge of the graph faintly and the shortest-path tree
of a single-source result on top of it, with the source highlighted.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import networkx as nx
from matplotlib.figure import Figure

from .export import shortest_path_tree
from .graph import Graph
from .results import SSSPResult

LAYOUTS = ("spring", "shell", "circular")


def to_networkx(G: Graph, num_vertices: Optional[int] = None) -> nx.Graph:
    """Convert ``G`` to a NetworkX graph with ``weight`` edge attributes.

    Undirected-lookup graphs become :class:`networkx.Graph`, directed ones
    :class:`networkx.DiGraph`. The reserved vertex ``0`` is left out.
    """
    n = G.num_vertices if num_vertices is None else num_vertices
    out: nx.Graph = nx.DiGraph() if G.directed else nx.Graph()
    out.add_nodes_from(range(1, n + 1))
    for u, v, w in G.edges():
        if 1 <= u <= n and 1 <= v <= n:
            out.add_edge(u, v, weight=w)
    return out


def draw_shortest_path_tree(
    G: Graph,
    result: SSSPResult,
    path: str | Path,
    *,
    layout: str = "spring",
    show_weights: bool = False,
    node_size: int = 300,
) -> None:
    """Render ``G`` and the tree of ``result`` to an image file at ``path``.

    Raises:
        ValueError: If ``layout`` is not one of :data:`LAYOUTS`.
    """
    if layout not in LAYOUTS:
        raise ValueError(f"Unknown layout: {layout}")
    nxg = to_networkx(G, result.num_vertices)
    if layout == "spring":
        pos = nx.spring_layout(nxg, seed=42)
    elif layout == "shell":
        pos = nx.shell_layout(nxg)
    else:
        pos = nx.circular_layout(nxg)

    fig = Figure(figsize=(10, 8))
    ax = fig.subplots()
    node_colors = ["tab:red" if v == result.source else "tab:blue" for v in nxg.nodes]
    nx.draw_networkx_nodes(nxg, pos, ax=ax, node_color=node_colors, node_size=node_size, alpha=0.9)
    nx.draw_networkx_edges(nxg, pos, ax=ax, width=1.0, alpha=0.25)

    tree = nx.DiGraph()
    tree.add_nodes_from(nxg.nodes)
    tree.add_edges_from(shortest_path_tree(result))
    nx.draw_networkx_edges(
        tree, pos, ax=ax, edge_color="tab:orange", width=2.0, arrowstyle="->", arrowsize=12
    )
    nx.draw_networkx_labels(nxg, pos, ax=ax, font_size=8)
    if show_weights:
        labels = {(u, v): d["weight"] for u, v, d in nxg.edges(data=True)}
        nx.draw_networkx_edge_labels(nxg, pos, ax=ax, edge_labels=labels, font_size=7)

    ax.set_title(f"{result.algorithm or 'shortest paths'} from vertex {result.source}")
    ax.axis("off")
    fig.tight_layout()
    fig.savefig(path)


__all__ = ["LAYOUTS", "to_networkx", "draw_shortest_path_tree"]
