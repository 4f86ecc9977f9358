"""
Nodes, edges and their handles.

A Node is owned by the engine. It wraps the caller's NodeData (position,
mass, anchor flag, payload) together with the kinematic state the
integrator needs:

- velocity (vx, vy), carried between steps and decayed by damping
- acceleration (ax, ay), a running sum of clamped forces for the current
  step, reset to zero once the node is integrated

The host never sees a Node directly. Visitors hand out a NodeView
(read-only) or a NodeMut (position and data writable, velocity not).
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Generic, TypeVar, TYPE_CHECKING

from forcegraph.core.errors import InvalidParameterError, ViewExpiredError
from forcegraph.core.parameters import require_finite

if TYPE_CHECKING:
    from forcegraph.core.parameters import SimulationParameters

N = TypeVar("N")
E = TypeVar("E")


@dataclass(frozen=True, order=True)
class NodeIndex:
    """
    Stable handle to a node in a ForceGraph.

    slot is the arena position and may be recycled after removal.
    generation is unique per inserted node for the lifetime of the graph,
    so a handle kept past remove_node() or clear() never names a newer node.
    """

    slot: int
    generation: int

    def __repr__(self) -> str:
        return f"NodeIndex({self.slot}v{self.generation})"


def _require_mass(mass: float) -> float:
    mass = require_finite("mass", mass)
    if mass <= 0:
        raise InvalidParameterError(f"mass must be > 0, got {mass}")
    return mass


@dataclass
class NodeData(Generic[N]):
    """Data associated with a node that can be supplied and modified by the user."""

    x: float = 0.0  # Horizontal position
    y: float = 0.0  # Vertical position
    mass: float = 10.0  # Larger mass repels other nodes harder
    is_anchor: bool = False  # Fixed to its current position
    user_data: N | None = None  # Opaque payload, never read by the engine

    def __post_init__(self):
        self.x = require_finite("x", self.x)
        self.y = require_finite("y", self.y)
        self.mass = _require_mass(self.mass)
        self.is_anchor = bool(self.is_anchor)


@dataclass(frozen=True)
class EdgeData(Generic[E]):
    """Data associated with an edge. Replaced as a whole when the edge is re-added."""

    user_data: E | None = None


class Node(Generic[N]):
    """Engine-side node: user data plus kinematic state."""

    __slots__ = ("data", "index", "vx", "vy", "ax", "ay")

    def __init__(self, data: NodeData[N], index: NodeIndex):
        # Copy so the caller's NodeData cannot alter engine state later
        self.data = replace(data)
        self.index = index
        self.vx = 0.0
        self.vy = 0.0
        self.ax = 0.0
        self.ay = 0.0

    @property
    def x(self) -> float:
        return self.data.x

    @property
    def y(self) -> float:
        return self.data.y

    @property
    def mass(self) -> float:
        return self.data.mass

    @property
    def is_anchor(self) -> bool:
        return self.data.is_anchor

    def apply_force(self, fx: float, fy: float, dt: float, parameters: "SimulationParameters"):
        """
        Accumulate one force contribution into the acceleration.

        Each component is clamped to [-force_max, force_max] BEFORE being
        scaled by dt, so a single force source is bounded independently of
        the frame time.
        """
        force_max = parameters.force_max
        self.ax += max(-force_max, min(force_max, fx)) * dt
        self.ay += max(-force_max, min(force_max, fy)) * dt

    def integrate(self, dt: float, parameters: "SimulationParameters"):
        """
        Advance velocity and position by one damped Euler step.

            v' = (v + a * dt * node_speed) * damping_factor
            p' = p + v' * dt

        The accumulated acceleration is consumed and reset to zero.
        """
        gain = dt * parameters.node_speed
        damping = parameters.damping_factor
        self.vx = (self.vx + self.ax * gain) * damping
        self.vy = (self.vy + self.ay * gain) * damping
        self.data.x += self.vx * dt
        self.data.y += self.vy * dt
        self.reset_acceleration()

    def reset_acceleration(self):
        """Discard the forces accumulated this step."""
        self.ax = 0.0
        self.ay = 0.0

    def __repr__(self) -> str:
        return (
            f"Node({self.index!r}, x={self.x:.3f}, y={self.y:.3f}, "
            f"mass={self.mass}, is_anchor={self.is_anchor})"
        )


class NodeView(Generic[N]):
    """Read-only view of a node handed to visit_nodes / visit_edges callbacks."""

    __slots__ = ("_node",)

    def __init__(self, node: Node[N]):
        self._node = node

    @property
    def index(self) -> NodeIndex:
        """The handle used to reference this node in its graph."""
        return self._node.index

    @property
    def x(self) -> float:
        return self._node.data.x

    @property
    def y(self) -> float:
        return self._node.data.y

    @property
    def position(self) -> tuple[float, float]:
        return self._node.data.x, self._node.data.y

    @property
    def velocity(self) -> tuple[float, float]:
        return self._node.vx, self._node.vy

    @property
    def mass(self) -> float:
        return self._node.data.mass

    @property
    def is_anchor(self) -> bool:
        return self._node.data.is_anchor

    @property
    def user_data(self) -> N | None:
        return self._node.data.user_data

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.index!r}, x={self.x:.3f}, y={self.y:.3f})"


class NodeMut(NodeView[N]):
    """
    Mutable view handed to visit_nodes_mut callbacks.

    Position, mass, anchor flag and payload may be changed. Velocity is
    engine state and stays read-only, so a dragged node keeps whatever
    momentum it had when it is released.

    The view is writable only while the callback it was passed to is
    running. Writing through a view kept past that raises ViewExpiredError;
    reading stays allowed.
    """

    __slots__ = ("_open",)

    def __init__(self, node: Node[N]):
        super().__init__(node)
        self._open = True

    def close(self):
        """Refuse any further writes through this view."""
        self._open = False

    def _writable(self) -> NodeData[N]:
        if not self._open:
            raise ViewExpiredError(self._node.index)
        return self._node.data

    @NodeView.x.setter
    def x(self, value: float):
        self._writable().x = require_finite("x", value)

    @NodeView.y.setter
    def y(self, value: float):
        self._writable().y = require_finite("y", value)

    @NodeView.position.setter
    def position(self, value: tuple[float, float]):
        data = self._writable()
        x, y = value
        x = require_finite("x", x)
        y = require_finite("y", y)
        data.x = x
        data.y = y

    @NodeView.mass.setter
    def mass(self, value: float):
        self._writable().mass = _require_mass(value)

    @NodeView.is_anchor.setter
    def is_anchor(self, value: bool):
        self._writable().is_anchor = bool(value)

    @NodeView.user_data.setter
    def user_data(self, value: N | None):
        self._writable().user_data = value
