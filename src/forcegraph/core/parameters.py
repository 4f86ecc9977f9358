"""
Simulation parameters shared by every node and edge in a graph.

There are no per-node overrides: one SimulationParameters instance drives
the whole force model and integrator.
"""

from dataclasses import dataclass
import math

from forcegraph.core.errors import InvalidParameterError


def require_finite(name: str, value: float) -> float:
    """Return value as a float, raising InvalidParameterError if it is NaN or infinite."""
    try:
        value = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidParameterError(f"{name} must be a number, got {value!r}") from exc
    if not math.isfinite(value):
        raise InvalidParameterError(f"{name} must be finite, got {value!r}")
    return value


@dataclass(frozen=True)
class SimulationParameters:
    """Parameters to control the simulation of a force graph."""

    force_charge: float = 12000.0  # Repulsion strength (scaled by mass product)
    force_spring: float = 0.3  # Spring strength along edges
    force_max: float = 280.0  # Per-component clamp for any single force
    node_speed: float = 7000.0  # Acceleration-to-velocity gain
    damping_factor: float = 0.95  # Velocity multiplier applied every step

    def __post_init__(self):
        for name in ("force_charge", "force_spring", "force_max", "node_speed", "damping_factor"):
            # frozen dataclass: write through object.__setattr__
            object.__setattr__(self, name, require_finite(name, getattr(self, name)))

        if self.force_max < 0:
            raise InvalidParameterError(f"force_max must be >= 0, got {self.force_max}")
        if self.node_speed < 0:
            raise InvalidParameterError(f"node_speed must be >= 0, got {self.node_speed}")
        if not 0.0 <= self.damping_factor <= 1.0:
            raise InvalidParameterError(
                f"damping_factor must be in [0, 1], got {self.damping_factor}"
            )
