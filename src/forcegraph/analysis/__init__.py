"""
Analysis layer: read-only measurements of a layout.

IMPORTANT: The engine never sees this layer. One-way derivation only.

- positions / velocities: snapshots as numpy arrays
- edge_lengths, min_separation, kinetic_energy: layout quality numbers
- compute_layout_stats: all of the above in one LayoutStats record
- settle: advance a graph until it stops moving
"""

from forcegraph.analysis.layout import (
    LayoutStats,
    compute_layout_stats,
    edge_lengths,
    kinetic_energy,
    min_separation,
    positions,
    settle,
    velocities,
)

__all__ = [
    "LayoutStats",
    "compute_layout_stats",
    "edge_lengths",
    "kinetic_energy",
    "min_separation",
    "positions",
    "settle",
    "velocities",
]
