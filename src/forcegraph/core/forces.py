"""
Force model: spring attraction and inverse-square repulsion.

Both functions are pure. They return the force acting on the FIRST node;
the force on the second node comes from calling with the arguments swapped.

Coincident nodes (dx == dy == 0) use distance = 1 to avoid a division by
zero. The normalized direction is then (0, 0), so the pair contributes
zero force whatever the strength.
"""

from __future__ import annotations
import math
from typing import Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from forcegraph.core.parameters import SimulationParameters


class Body(Protocol):
    """Anything with a position and a mass (Node, NodeView)."""

    @property
    def x(self) -> float: ...

    @property
    def y(self) -> float: ...

    @property
    def mass(self) -> float: ...


def _direction(n1: Body, n2: Body) -> tuple[float, float, float]:
    """Unit vector from n1 to n2 plus the distance, with the coincident-node convention."""
    dx = n2.x - n1.x
    dy = n2.y - n1.y

    if dx == 0.0 and dy == 0.0:
        distance = 1.0
    else:
        # hypot keeps subnormal and very large separations nonzero and finite
        distance = math.hypot(dx, dy)

    return dx / distance, dy / distance, distance


def _along(ux: float, uy: float, strength: float) -> tuple[float, float]:
    # A zero component stays zero even when strength overflowed to inf
    return (ux * strength if ux else 0.0), (uy * strength if uy else 0.0)


def attract_nodes(
    n1: Body, n2: Body, parameters: "SimulationParameters"
) -> tuple[float, float]:
    """
    Spring force pulling n1 toward n2.

    There is no rest length: strength = force_spring * distance * 0.5 grows
    linearly with separation, so connected nodes always pull together.
    """
    ux, uy, distance = _direction(n1, n2)
    strength = parameters.force_spring * distance * 0.5
    return _along(ux, uy, strength)


def repel_nodes(
    n1: Body, n2: Body, parameters: "SimulationParameters"
) -> tuple[float, float]:
    """
    Charge force pushing n1 away from n2.

    strength = -force_charge * (m1 * m2) / distance²; the negative sign
    turns the n1→n2 direction into a push away from n2.

    For two distinct nodes almost on top of each other the strength
    overflows to infinity; Node.apply_force clamps it to force_max.
    """
    ux, uy, distance = _direction(n1, n2)
    if parameters.force_charge == 0.0:
        return 0.0, 0.0

    # Divide before multiplying so distance² cannot underflow to zero
    inverse_sq = (n1.mass / distance) * (n2.mass / distance)
    strength = -parameters.force_charge * inverse_sq
    return _along(ux, uy, strength)
