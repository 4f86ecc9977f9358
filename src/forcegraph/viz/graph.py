"""
Draw a ForceGraph with matplotlib.

Edges are collected with visit_edges and drawn as one LineCollection,
nodes with visit_nodes as a scatter. Anchored nodes get their own marker.
Screen-style coordinates are assumed (y grows downward) unless
invert_y=False.
"""

from __future__ import annotations
from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.collections import LineCollection
from matplotlib.figure import Figure
from matplotlib.axes import Axes

if TYPE_CHECKING:
    from forcegraph.core.graph import ForceGraph


def plot_graph(
    graph: "ForceGraph",
    title: str = "",
    ax: Axes | None = None,
    figsize: tuple[float, float] = (8, 8),
    node_size: float = 120.0,
    node_color: str = "white",
    anchor_color: str = "tab:red",
    edge_color: str = "gray",
    edge_width: float = 1.5,
    background: str = "black",
    invert_y: bool = True,
) -> tuple[Figure, Axes]:
    """
    Plot the current layout of a graph.

    Args:
        graph: Graph to draw
        title: Plot title
        ax: Existing axes (creates new if None)
        node_size: Marker area for nodes
        node_color: Color of free nodes
        anchor_color: Color of anchored nodes
        edge_color: Edge line color
        edge_width: Edge line width
        background: Axes face color
        invert_y: Put y = 0 at the top, as in screen coordinates

    Returns:
        (fig, ax) tuple
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    segments: list[list[tuple[float, float]]] = []
    graph.visit_edges(lambda n1, n2, _edge: segments.append([n1.position, n2.position]))

    free: list[tuple[float, float]] = []
    anchors: list[tuple[float, float]] = []
    graph.visit_nodes(lambda node: (anchors if node.is_anchor else free).append(node.position))

    if segments:
        ax.add_collection(
            LineCollection(segments, colors=edge_color, linewidths=edge_width, zorder=1)
        )

    for points, color, marker in ((free, node_color, "o"), (anchors, anchor_color, "s")):
        if points:
            xy = np.array(points)
            ax.scatter(
                xy[:, 0], xy[:, 1],
                s=node_size, c=color, marker=marker, zorder=2,
                edgecolors=edge_color, linewidths=1.0,
            )

    ax.set_facecolor(background)
    ax.set_aspect("equal")
    ax.autoscale_view()
    if invert_y and not ax.yaxis_inverted():
        ax.invert_yaxis()

    ax.set_title(title)
    ax.set_xlabel("x")
    ax.set_ylabel("y")

    return fig, ax


def save_figure(fig: Figure, path: str | Path, dpi: int = 150, **kwargs) -> None:
    """Save figure to file."""
    fig.savefig(path, dpi=dpi, bbox_inches="tight", **kwargs)
