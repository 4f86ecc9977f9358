"""Unit tests for graph drawing."""

import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest

from forcegraph.core import NodeData
from forcegraph.viz import plot_graph, save_figure


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


class TestPlotGraph:
    """Tests for plot_graph."""

    def test_star(self, star_graph):
        graph, _, _ = star_graph
        fig, ax = plot_graph(graph, title="star")

        # edges, free nodes, anchors
        assert len(ax.collections) == 3
        assert len(ax.collections[0].get_segments()) == 4
        assert len(ax.collections[1].get_offsets()) == 4
        assert len(ax.collections[2].get_offsets()) == 1
        assert ax.get_title() == "star"
        assert ax.yaxis_inverted()

    def test_existing_axes(self, star_graph):
        graph, _, _ = star_graph
        fig, ax = plt.subplots()
        fig_out, ax_out = plot_graph(graph, ax=ax, invert_y=False)
        assert fig_out is fig
        assert ax_out is ax
        assert not ax.yaxis_inverted()

    def test_nodes_only(self, graph):
        graph.add_node(NodeData(x=1.0, y=1.0))
        _, ax = plot_graph(graph)
        assert len(ax.collections) == 1

    def test_empty_graph(self, graph):
        _, ax = plot_graph(graph)
        assert len(ax.collections) == 0


class TestSaveFigure:
    """Tests for save_figure."""

    def test_writes_file(self, star_graph, tmp_path):
        graph, _, _ = star_graph
        fig, _ = plot_graph(graph)
        path = tmp_path / "graph.png"
        save_figure(fig, path, dpi=50)
        assert path.exists()
        assert path.stat().st_size > 0
