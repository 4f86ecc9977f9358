"""
ForceGraph: the graph store, the simulation step and the visitor API.

Storage is a flat arena of node slots. Removed slots go on a free list and
are recycled lowest-first; every inserted node also gets a graph-wide
generation number so that a NodeIndex is only ever valid for the node it
was issued for.

Edges are undirected and keyed by the ordered pair of endpoint handles, so
add_edge(a, b) and add_edge(b, a) name the same edge.

One simulation step (update):
1. Accumulate forces for every live node, in slot order:
   - attraction toward each neighbour
   - repulsion from every other live node, unless the node is an anchor
2. Integrate every non-anchor node; anchors drop their accumulated forces

Positions only change in phase 2, so all forces in a step are computed
against the same snapshot of positions.
"""

from __future__ import annotations
from contextlib import contextmanager
import heapq
import logging
from typing import Callable, Generic, Iterator, TypeVar

from forcegraph.core.errors import InvalidParameterError, MissingNodeError, TraversalActiveError
from forcegraph.core.forces import attract_nodes, repel_nodes
from forcegraph.core.node import EdgeData, Node, NodeData, NodeIndex, NodeMut, NodeView
from forcegraph.core.parameters import SimulationParameters, require_finite

logger = logging.getLogger(__name__)

N = TypeVar("N")
E = TypeVar("E")

EdgeKey = tuple[NodeIndex, NodeIndex]


def _edge_key(a: NodeIndex, b: NodeIndex) -> EdgeKey:
    return (a, b) if a <= b else (b, a)


class ForceGraph(Generic[N, E]):
    """
    A force-directed graph layout.

    Usage:
        graph = ForceGraph()
        hub = graph.add_node(NodeData(x=500.0, y=500.0, is_anchor=True))
        leaf = graph.add_node(NodeData(x=250.0, y=250.0))
        graph.add_edge(hub, leaf)

        # once per frame
        graph.update(dt)
        graph.visit_nodes(lambda node: draw_node(node.x, node.y))
    """

    def __init__(self, parameters: SimulationParameters | None = None):
        self._parameters = parameters if parameters is not None else SimulationParameters()
        self._slots: list[Node[N] | None] = []
        self._free_slots: list[int] = []  # min-heap
        self._next_generation = 0
        self._adjacency: dict[NodeIndex, dict[NodeIndex, None]] = {}
        self._edges: dict[EdgeKey, EdgeData[E]] = {}
        self._traversals = 0

    # ═══════════════════════════════════════════════════════════════
    # PARAMETERS AND READ ACCESS
    # ═══════════════════════════════════════════════════════════════

    @property
    def parameters(self) -> SimulationParameters:
        """Parameters applied uniformly to every node and edge."""
        return self._parameters

    @parameters.setter
    def parameters(self, parameters: SimulationParameters):
        if not isinstance(parameters, SimulationParameters):
            raise InvalidParameterError(
                f"parameters must be SimulationParameters, got {type(parameters).__name__}"
            )
        self._parameters = parameters

    @property
    def node_count(self) -> int:
        return len(self._adjacency)

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    def __len__(self) -> int:
        return self.node_count

    def __contains__(self, index: object) -> bool:
        return self._lookup(index) is not None

    def node(self, index: NodeIndex) -> NodeView[N]:
        """Read-only view of a live node. Raises MissingNodeError for stale handles."""
        return NodeView(self._require(index))

    def node_indices(self) -> list[NodeIndex]:
        """Handles of all live nodes, in iteration order."""
        return [node.index for node in self._iter_nodes()]

    def neighbors(self, index: NodeIndex) -> list[NodeIndex]:
        """Handles of the nodes sharing an edge with index."""
        self._require(index)
        return list(self._adjacency[index])

    def edge(self, a: NodeIndex, b: NodeIndex) -> EdgeData[E] | None:
        """Data of the edge between a and b, or None if they are not connected."""
        if a not in self or b not in self:
            return None
        return self._edges.get(_edge_key(a, b))

    # ═══════════════════════════════════════════════════════════════
    # STRUCTURAL OPERATIONS
    # ═══════════════════════════════════════════════════════════════

    def add_node(self, data: NodeData[N] | None = None) -> NodeIndex:
        """Add a node at rest and return the handle that references it."""
        self._check_not_traversing("add a node")
        if data is None:
            data = NodeData()

        if self._free_slots:
            slot = heapq.heappop(self._free_slots)
        else:
            slot = len(self._slots)
            self._slots.append(None)

        index = NodeIndex(slot, self._next_generation)
        self._next_generation += 1
        self._slots[slot] = Node(data, index)
        self._adjacency[index] = {}

        logger.debug("Added node %r at (%.3f, %.3f)", index, data.x, data.y)
        return index

    def remove_node(self, index: NodeIndex):
        """Remove a node and every edge touching it. Absent or stale handles are ignored."""
        self._check_not_traversing("remove a node")
        if self._lookup(index) is None:
            logger.debug("remove_node(%r): no live node, ignoring", index)
            return

        for neighbor in self._adjacency.pop(index):
            self._edges.pop(_edge_key(index, neighbor), None)
            if neighbor != index:
                del self._adjacency[neighbor][index]

        self._slots[index.slot] = None
        heapq.heappush(self._free_slots, index.slot)
        logger.debug("Removed node %r", index)

    def add_edge(self, a: NodeIndex, b: NodeIndex, data: EdgeData[E] | None = None):
        """
        Add an edge between a and b, or replace the data of the existing one.

        Raises:
            MissingNodeError: a or b is not a live node. The graph is unchanged.
        """
        self._check_not_traversing("add an edge")
        self._require(a)
        self._require(b)
        if data is None:
            data = EdgeData()

        key = _edge_key(a, b)
        if key in self._edges:
            logger.debug("Updated edge %r <-> %r", a, b)
        else:
            self._adjacency[a][b] = None
            self._adjacency[b][a] = None
            logger.debug("Added edge %r <-> %r", a, b)
        self._edges[key] = data

    def remove_edge(self, a: NodeIndex, b: NodeIndex):
        """Remove the edge between a and b if there is one."""
        self._check_not_traversing("remove an edge")
        if a not in self or b not in self:
            return
        if self._edges.pop(_edge_key(a, b), None) is None:
            return
        self._adjacency[a].pop(b, None)
        self._adjacency[b].pop(a, None)
        logger.debug("Removed edge %r <-> %r", a, b)

    def clear(self):
        """Remove all nodes and edges. Slots restart at 0; old handles stay invalid."""
        self._check_not_traversing("clear the graph")
        self._slots.clear()
        self._free_slots.clear()
        self._adjacency.clear()
        self._edges.clear()
        logger.debug("Cleared graph")

    # ═══════════════════════════════════════════════════════════════
    # SIMULATION
    # ═══════════════════════════════════════════════════════════════

    def update(self, dt: float):
        """
        Apply the next step of the simulation.

        Args:
            dt: Seconds elapsed since the previous update, computed by the host.
                Must be finite and >= 0.
        """
        self._check_not_traversing("update the simulation")
        dt = require_finite("dt", dt)
        if dt < 0:
            raise InvalidParameterError(f"dt must be >= 0, got {dt}")

        nodes = list(self._iter_nodes())
        if not nodes:
            return

        params = self._parameters
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Step: %d nodes, %d edges, dt=%g", len(nodes), len(self._edges), dt)

        # Phase 1: accumulate forces; positions are read-only here
        try:
            for n1 in nodes:
                for neighbor in self._adjacency[n1.index]:
                    n2 = self._slots[neighbor.slot]
                    fx, fy = attract_nodes(n1, n2, params)
                    n1.apply_force(fx, fy, dt, params)

                if n1.is_anchor:
                    continue

                for n2 in nodes:
                    if n2 is n1:
                        continue
                    fx, fy = repel_nodes(n1, n2, params)
                    n1.apply_force(fx, fy, dt, params)
        except BaseException:
            # A failed step must not leave half-accumulated forces behind
            for node in nodes:
                node.reset_acceleration()
            raise

        # Phase 2: integrate
        for node in nodes:
            if node.is_anchor:
                node.reset_acceleration()
            else:
                node.integrate(dt, params)

    # ═══════════════════════════════════════════════════════════════
    # VISITORS
    # ═══════════════════════════════════════════════════════════════

    def visit_nodes(self, cb: Callable[[NodeView[N]], object]):
        """Call cb once per live node with a read-only view."""
        with self._traversal():
            for node in self._iter_nodes():
                cb(NodeView(node))

    def visit_nodes_mut(self, cb: Callable[[NodeMut[N]], object]):
        """
        Call cb once per live node with a mutable view.

        The callback may move nodes (e.g. dragging) but must not add or
        remove nodes or edges; doing so raises TraversalActiveError.
        Each view is closed when its callback returns, so a view kept
        past that raises ViewExpiredError on write.
        """
        with self._traversal():
            for node in self._iter_nodes():
                view = NodeMut(node)
                try:
                    cb(view)
                finally:
                    view.close()

    def visit_edges(self, cb: Callable[[NodeView[N], NodeView[N], EdgeData[E]], object]):
        """Call cb once per edge with views of both endpoints and the edge data."""
        with self._traversal():
            for (a, b), data in self._edges.items():
                cb(NodeView(self._slots[a.slot]), NodeView(self._slots[b.slot]), data)

    # ═══════════════════════════════════════════════════════════════
    # INTERNALS
    # ═══════════════════════════════════════════════════════════════

    def _iter_nodes(self) -> Iterator[Node[N]]:
        for node in self._slots:
            if node is not None:
                yield node

    def _lookup(self, index: NodeIndex) -> Node[N] | None:
        if not isinstance(index, NodeIndex):
            return None
        if not 0 <= index.slot < len(self._slots):
            return None
        node = self._slots[index.slot]
        if node is None or node.index != index:
            return None
        return node

    def _require(self, index: NodeIndex) -> Node[N]:
        node = self._lookup(index)
        if node is None:
            raise MissingNodeError(index)
        return node

    @contextmanager
    def _traversal(self):
        self._traversals += 1
        try:
            yield
        finally:
            self._traversals -= 1

    def _check_not_traversing(self, operation: str):
        if self._traversals:
            raise TraversalActiveError(operation)

    def __repr__(self) -> str:
        return f"ForceGraph(nodes={self.node_count}, edges={self.edge_count})"
