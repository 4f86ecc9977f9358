"""
Visualization utilities.

- Graph drawing (edges, nodes, anchors) on matplotlib axes
"""

from forcegraph.viz.graph import (
    plot_graph,
    save_figure,
)

__all__ = [
    "plot_graph",
    "save_figure",
]
