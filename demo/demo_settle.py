#!/usr/bin/env python3
"""
Demo: Settling a Multi-Component Graph

Shows that every component is laid out, not just the one containing the
first node:
1. Build a wheel and a star, each around its own anchored hub
2. Scatter them randomly
3. Run the simulation until nothing moves
4. Save before/after figures
"""

from pathlib import Path

import numpy as np
import matplotlib.pyplot as plt

from forcegraph.core import ForceGraph, NodeData, SimulationParameters
from forcegraph.analysis import compute_layout_stats, settle
from forcegraph.viz import plot_graph, save_figure


def build_graph(rng: np.random.Generator) -> ForceGraph:
    graph = ForceGraph(SimulationParameters())

    def random_node(**kwargs):
        x, y = rng.uniform(100.0, 700.0, size=2)
        return graph.add_node(NodeData(x=float(x), y=float(y), **kwargs))

    # Component 1: wheel of 8 (ring plus spokes) around an anchored hub
    wheel_hub = graph.add_node(NodeData(x=250.0, y=400.0, is_anchor=True, user_data="wheel"))
    ring = [random_node(user_data=f"ring-{i}") for i in range(8)]
    for a, b in zip(ring, ring[1:] + ring[:1]):
        graph.add_edge(a, b)
        graph.add_edge(wheel_hub, a)

    # Component 2: star around a second anchored hub
    star_hub = graph.add_node(NodeData(x=1200.0, y=400.0, is_anchor=True, user_data="star"))
    for i in range(6):
        graph.add_edge(star_hub, random_node(mass=5.0, user_data=f"spoke-{i}"))

    return graph


def main():
    rng = np.random.default_rng(seed=42)

    print("=" * 60)
    print("  SETTLING A MULTI-COMPONENT GRAPH")
    print("=" * 60)

    graph = build_graph(rng)
    print(f"\n1. Setup:")
    print(f"   Nodes: {graph.node_count}, edges: {graph.edge_count}")

    fig, (ax_before, ax_after) = plt.subplots(1, 2, figsize=(14, 7))
    plot_graph(graph, title="Initial (random)", ax=ax_before)

    print(f"\n2. Running simulation...")
    summary = settle(graph, dt=0.01, max_steps=5000, tolerance=1e-2)
    print(f"   Steps: {summary['n_steps']}, converged: {summary['converged']}")
    print(f"   Final max displacement: {summary['max_displacement']:.2e}")

    stats = compute_layout_stats(graph)
    print(f"\n3. Layout:")
    print(f"   Extent: {stats.extent[0]:.1f} x {stats.extent[1]:.1f}")
    print(f"   Mean edge length: {stats.mean_edge_length:.1f}")
    print(f"   Min separation: {stats.min_separation:.1f}")

    plot_graph(graph, title=f"Settled after {summary['n_steps']} steps", ax=ax_after)

    output_dir = Path(__file__).parent / "output"
    output_dir.mkdir(exist_ok=True)
    path = output_dir / "settle.png"
    save_figure(fig, path)
    print(f"\n4. Saved {path}")


if __name__ == "__main__":
    main()
