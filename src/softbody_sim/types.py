# MIT License (see LICENSE)
"""
Core type definitions for the soft-body simulation.

State is kept as parallel arrays (struct-of-arrays) rather than one record
per vertex, so every force pass and the integrator operate on whole numpy
arrays:
- PointMasses: per-vertex position, velocity and accumulated force.
- SpringRing: per-spring endpoints, rest length, current length and normal.
- SoftBody: the points, the ring and the current inflation pressure.
- InputState / TetherState: host-driven inputs, mutated only between ticks.

The equations of motion are those of independent point masses:
  dx/dt = v
  dv/dt = F/m
where F collects gravity, the directional body force, the tether, the ring
springs and the internal pressure.
"""
from __future__ import annotations
from dataclasses import dataclass

import numpy as np


def _zeros(n: int) -> np.ndarray:
    return np.zeros(n, dtype=np.float64)


# =============================================================================
# Vertex and spring state
# =============================================================================

@dataclass
class PointMasses:
    """
    Dense per-vertex state of N point masses with uniform mass.

    Attributes:
        x, y: Positions in display units.
        vx, vy: Velocities in display units per second.
        fx, fy: Forces accumulated by the last force pass.
        mass: Mass shared by every point.
    """
    x: np.ndarray
    y: np.ndarray
    vx: np.ndarray
    vy: np.ndarray
    fx: np.ndarray
    fy: np.ndarray
    mass: float = 1.0

    @classmethod
    def zeros(cls, n: int, mass: float = 1.0) -> "PointMasses":
        """Allocate N points at rest at the origin."""
        return cls(_zeros(n), _zeros(n), _zeros(n), _zeros(n), _zeros(n), _zeros(n), mass)

    def __len__(self) -> int:
        return len(self.x)

    @property
    def inv_mass(self) -> float:
        return 1.0 / self.mass

    def positions(self) -> np.ndarray:
        """Positions as a fresh (N, 2) array."""
        return np.column_stack((self.x, self.y))


@dataclass
class SpringRing:
    """
    Springs of a closed ring: spring i joins vertex a[i] to vertex b[i].

    Attributes:
        a, b: Endpoint indices (int arrays).
        rest_length: Rest length of each spring, fixed at build time.
        current_length: Length measured by the last spring pass.
        nx, ny: Outward unit normal measured by the last spring pass;
            (0, 0) for a zero-length spring.
    """
    a: np.ndarray
    b: np.ndarray
    rest_length: np.ndarray
    current_length: np.ndarray | None = None
    nx: np.ndarray | None = None
    ny: np.ndarray | None = None

    def __post_init__(self) -> None:
        self.a = np.asarray(self.a, dtype=np.intp)
        self.b = np.asarray(self.b, dtype=np.intp)
        self.rest_length = np.asarray(self.rest_length, dtype=np.float64)
        n = len(self.a)
        if self.current_length is None:
            self.current_length = self.rest_length.copy()
        if self.nx is None:
            self.nx = _zeros(n)
        if self.ny is None:
            self.ny = _zeros(n)

    def __len__(self) -> int:
        return len(self.a)

    def endpoints(self) -> list[tuple[int, int]]:
        """Endpoint table as a list of (a, b) pairs."""
        return [(int(i), int(j)) for i, j in zip(self.a, self.b)]


@dataclass
class SoftBody:
    """
    A pressurized closed ring of point masses.

    Attributes:
        points: Vertex state.
        springs: Ring springs.
        final_pressure: Pressure at full inflation (P_final).
        pressure: Current inflation pressure P, ramped by the driver.
    """
    points: PointMasses
    springs: SpringRing
    final_pressure: float
    pressure: float = 0.0

    @property
    def n_points(self) -> int:
        return len(self.points)

    @property
    def inflated(self) -> bool:
        """True once P has reached P_final (gravity is engaged from then on)."""
        return self.pressure >= self.final_pressure


# =============================================================================
# Host inputs
# =============================================================================

@dataclass
class InputState:
    """Directional body-force flags set by the host between ticks."""
    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False


@dataclass
class TetherState:
    """
    User-pulled tether on a single vertex.

    Attributes:
        engaged: Whether the tether currently pulls.
        anchor: Anchor point (x, y). Any point is legal, including points
            outside the display.
    """
    engaged: bool = False
    anchor: tuple[float, float] = (0.0, 0.0)
