"""
Core engine primitives.

This layer knows nothing about drawing or layout quality metrics.
It only knows:
- Nodes with position, mass, anchor flag and an opaque payload
- Undirected edges with an opaque payload
- Spring attraction and inverse-square repulsion
- A damped Euler integrator advanced once per update(dt)
"""

from forcegraph.core.errors import (
    ForceGraphError,
    InvalidParameterError,
    MissingNodeError,
    TraversalActiveError,
    ViewExpiredError,
)
from forcegraph.core.parameters import SimulationParameters
from forcegraph.core.node import EdgeData, Node, NodeData, NodeIndex, NodeMut, NodeView
from forcegraph.core.forces import attract_nodes, repel_nodes
from forcegraph.core.graph import ForceGraph

__all__ = [
    "ForceGraphError",
    "InvalidParameterError",
    "MissingNodeError",
    "TraversalActiveError",
    "ViewExpiredError",
    "SimulationParameters",
    "EdgeData",
    "Node",
    "NodeData",
    "NodeIndex",
    "NodeMut",
    "NodeView",
    "attract_nodes",
    "repel_nodes",
    "ForceGraph",
]
