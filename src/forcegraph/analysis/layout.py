"""
Layout measurements derived from a ForceGraph.

Everything here reads the graph through its visitor API and returns numpy
arrays or plain numbers. Nothing in this module changes node state except
settle(), which only calls ForceGraph.update().
"""

from __future__ import annotations
from dataclasses import dataclass
import logging
from typing import TYPE_CHECKING

import numpy as np
from scipy.spatial.distance import pdist

from forcegraph.core.errors import InvalidParameterError

if TYPE_CHECKING:
    from forcegraph.core.graph import ForceGraph

logger = logging.getLogger(__name__)


def positions(graph: "ForceGraph") -> np.ndarray:
    """Node positions as an [n_nodes, 2] array, in node iteration order."""
    coords: list[tuple[float, float]] = []
    graph.visit_nodes(lambda node: coords.append(node.position))
    return np.array(coords, dtype=np.float64).reshape(-1, 2)


def velocities(graph: "ForceGraph") -> np.ndarray:
    """Node velocities as an [n_nodes, 2] array, in node iteration order."""
    vels: list[tuple[float, float]] = []
    graph.visit_nodes(lambda node: vels.append(node.velocity))
    return np.array(vels, dtype=np.float64).reshape(-1, 2)


def edge_lengths(graph: "ForceGraph") -> np.ndarray:
    """Euclidean length of every edge, in edge iteration order."""
    lengths: list[float] = []
    graph.visit_edges(
        lambda n1, n2, _edge: lengths.append(float(np.hypot(n2.x - n1.x, n2.y - n1.y)))
    )
    return np.array(lengths, dtype=np.float64)


def kinetic_energy(graph: "ForceGraph") -> float:
    """Total kinetic energy 0.5 * m * |v|² of the non-anchored nodes."""
    total = 0.0

    def accumulate(node):
        nonlocal total
        if not node.is_anchor:
            vx, vy = node.velocity
            total += 0.5 * node.mass * (vx * vx + vy * vy)

    graph.visit_nodes(accumulate)
    return total


def _min_pairwise(pos: np.ndarray) -> float:
    if len(pos) < 2:
        return float("inf")
    return float(pdist(pos).min())


def min_separation(graph: "ForceGraph") -> float:
    """Smallest distance between any two nodes (inf for fewer than two nodes)."""
    return _min_pairwise(positions(graph))


@dataclass
class LayoutStats:
    """Summary of a layout at one instant."""

    n_nodes: int
    n_edges: int
    bbox_min: tuple[float, float]  # (x, y); nan for an empty graph
    bbox_max: tuple[float, float]
    mean_edge_length: float  # nan when there are no edges
    max_edge_length: float
    min_separation: float
    kinetic_energy: float

    @property
    def extent(self) -> tuple[float, float]:
        """Width and height of the bounding box."""
        return (
            self.bbox_max[0] - self.bbox_min[0],
            self.bbox_max[1] - self.bbox_min[1],
        )


def compute_layout_stats(graph: "ForceGraph") -> LayoutStats:
    """Measure the current layout."""
    pos = positions(graph)
    lengths = edge_lengths(graph)

    if len(pos):
        bbox_min = (float(pos[:, 0].min()), float(pos[:, 1].min()))
        bbox_max = (float(pos[:, 0].max()), float(pos[:, 1].max()))
    else:
        bbox_min = bbox_max = (float("nan"), float("nan"))

    return LayoutStats(
        n_nodes=graph.node_count,
        n_edges=graph.edge_count,
        bbox_min=bbox_min,
        bbox_max=bbox_max,
        mean_edge_length=float(lengths.mean()) if len(lengths) else float("nan"),
        max_edge_length=float(lengths.max()) if len(lengths) else float("nan"),
        min_separation=_min_pairwise(pos),
        kinetic_energy=kinetic_energy(graph),
    )


def settle(
    graph: "ForceGraph",
    dt: float = 0.01,
    max_steps: int = 5000,
    tolerance: float = 1e-3,
    patience: int = 10,
) -> dict:
    """
    Run update(dt) until the layout stops moving.

    The layout counts as settled once no node moves more than `tolerance`
    for `patience` consecutive steps. A single slow step is not enough:
    an oscillating node momentarily stops at every turning point.

    Args:
        graph: Graph to advance in place
        dt: Time step passed to every update
        max_steps: Upper bound on the number of updates
        tolerance: Largest per-step displacement still considered at rest
        patience: Consecutive at-rest steps required

    Returns:
        Summary dict with n_steps, converged, max_displacement, kinetic_energy
    """
    if max_steps < 0:
        raise InvalidParameterError(f"max_steps must be >= 0, got {max_steps}")
    if patience < 1:
        raise InvalidParameterError(f"patience must be >= 1, got {patience}")
    if tolerance < 0:
        raise InvalidParameterError(f"tolerance must be >= 0, got {tolerance}")

    before = positions(graph)
    max_displacement = 0.0
    converged = len(before) == 0
    n_steps = 0
    steps_at_rest = 0

    while not converged and n_steps < max_steps:
        graph.update(dt)
        n_steps += 1

        after = positions(graph)
        max_displacement = float(np.hypot(*(after - before).T).max())
        before = after
        steps_at_rest = steps_at_rest + 1 if max_displacement <= tolerance else 0
        converged = steps_at_rest >= patience

    if not converged:
        logger.warning(
            "Layout did not settle after %d steps (max displacement %.3g > %.3g)",
            n_steps, max_displacement, tolerance,
        )
    else:
        logger.debug("Layout settled after %d steps", n_steps)

    return {
        "n_steps": n_steps,
        "converged": converged,
        "max_displacement": max_displacement,
        "kinetic_energy": kinetic_energy(graph),
    }
