"""
Pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def params():
    """Default simulation parameters."""
    from forcegraph.core import SimulationParameters
    return SimulationParameters()


@pytest.fixture
def graph():
    """Empty graph with default parameters."""
    from forcegraph.core import ForceGraph
    return ForceGraph()


@pytest.fixture
def star_graph():
    """Four free nodes tied to an anchored hub, as in the drag demo."""
    from forcegraph.core import ForceGraph, NodeData
    g = ForceGraph()
    leaves = [
        g.add_node(NodeData(x=250.0, y=250.0)),
        g.add_node(NodeData(x=750.0, y=250.0)),
        g.add_node(NodeData(x=250.0, y=750.0)),
        g.add_node(NodeData(x=750.0, y=750.0)),
    ]
    hub = g.add_node(NodeData(x=500.0, y=500.0, is_anchor=True))
    for leaf in leaves:
        g.add_edge(leaf, hub)
    return g, hub, leaves


@pytest.fixture
def rng():
    """Reproducible random number generator."""
    return np.random.default_rng(seed=42)
