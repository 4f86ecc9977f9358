#!/usr/bin/env python3
"""
Demo: Interactive Drag

Four nodes tied to an anchored hub:
1. Build the graph in screen coordinates
2. Advance the simulation once per animation frame with the wall-clock delta
3. Drag any node with the left mouse button (visit_nodes_mut)

Release a node and watch it spring back into place.
"""

import time

import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation

from forcegraph.core import ForceGraph, NodeData, SimulationParameters

WIDTH, HEIGHT = 800.0, 600.0
NODE_RADIUS = 15.0


def build_graph() -> ForceGraph:
    graph = ForceGraph(SimulationParameters())

    leaves = [
        graph.add_node(NodeData(x=WIDTH / 4, y=HEIGHT / 4)),
        graph.add_node(NodeData(x=3 * WIDTH / 4, y=HEIGHT / 4)),
        graph.add_node(NodeData(x=WIDTH / 4, y=3 * HEIGHT / 4)),
        graph.add_node(NodeData(x=3 * WIDTH / 4, y=3 * HEIGHT / 4)),
    ]
    hub = graph.add_node(NodeData(x=WIDTH / 2, y=HEIGHT / 2, is_anchor=True))

    for leaf in leaves:
        graph.add_edge(leaf, hub)

    return graph


def overlaps(node, x: float, y: float) -> bool:
    return (node.x - x) ** 2 + (node.y - y) ** 2 < NODE_RADIUS ** 2


class FrameClock:
    """Seconds elapsed between animation frames. The first tick returns 0."""

    def __init__(self, clock=time.perf_counter):
        self._clock = clock
        self._last = None

    def tick(self) -> float:
        now = self._clock()
        dt = 0.0 if self._last is None else now - self._last
        self._last = now
        return dt


def main():
    print("=" * 60)
    print("  FORCE GRAPH: DRAG NODES WITH THE LEFT MOUSE BUTTON")
    print("=" * 60)

    graph = build_graph()
    print(f"\n   {graph.node_count} nodes, {graph.edge_count} edges")

    fig, ax = plt.subplots(figsize=(8, 6))
    fig.patch.set_facecolor("black")
    ax.set_facecolor("black")
    ax.set_xlim(0, WIDTH)
    ax.set_ylim(HEIGHT, 0)
    ax.set_aspect("equal")
    ax.set_xticks([])
    ax.set_yticks([])
    ax.set_title("Drag nodes with the left mouse button", color="white")

    edge_lines = []
    node_scatter = ax.scatter([], [], s=NODE_RADIUS ** 2, c="white", zorder=2)

    state = {"dragging": None, "mouse": None}
    clock = FrameClock()

    def on_press(event):
        if event.button == 1 and event.inaxes is ax:
            state["mouse"] = (event.xdata, event.ydata)

    def on_motion(event):
        if state["mouse"] is not None and event.inaxes is ax:
            state["mouse"] = (event.xdata, event.ydata)

    def on_release(event):
        if event.button == 1:
            state["mouse"] = None
            state["dragging"] = None

    def drag(node):
        mx, my = state["mouse"]
        if state["dragging"] is not None:
            if state["dragging"] == node.index:
                node.x = mx
                node.y = my
        elif overlaps(node, mx, my):
            state["dragging"] = node.index

    def frame(_):
        if state["mouse"] is not None:
            graph.visit_nodes_mut(drag)

        graph.update(clock.tick())

        for line in edge_lines:
            line.remove()
        edge_lines.clear()
        graph.visit_edges(
            lambda n1, n2, _edge: edge_lines.extend(
                ax.plot([n1.x, n2.x], [n1.y, n2.y], color="gray", linewidth=2, zorder=1)
            )
        )

        coords, colors = [], []

        def collect(node):
            coords.append(node.position)
            colors.append("red" if node.index == state["dragging"] else "white")

        graph.visit_nodes(collect)
        node_scatter.set_offsets(coords)
        node_scatter.set_color(colors)
        return [node_scatter, *edge_lines]

    fig.canvas.mpl_connect("button_press_event", on_press)
    fig.canvas.mpl_connect("motion_notify_event", on_motion)
    fig.canvas.mpl_connect("button_release_event", on_release)

    anim = FuncAnimation(fig, frame, interval=16, cache_frame_data=False)  # noqa: F841
    plt.show()


if __name__ == "__main__":
    main()
