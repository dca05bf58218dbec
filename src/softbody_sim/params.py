# MIT License (see LICENSE)
"""
Simulation parameters.

SoftBodyParams collects every tunable constant of the simulation. All
validation happens here, at construction time, so the tick loop never has
to check its inputs.

Example:
    params = SoftBodyParams(n_points=40)
    stiffer = params.replace(k_spring=1200.0)
"""
from __future__ import annotations
from dataclasses import dataclass, replace

from . import constants as C

AREA_ESTIMATORS = ("divergence", "shoelace")


class ConfigurationError(ValueError):
    """Raised when simulation parameters cannot produce a valid body."""


@dataclass(frozen=True)
class SoftBodyParams:
    """
    Configuration of a soft-body simulation.

    Attributes:
        n_points: Number of point masses (and ring springs). At least 3.
        mass: Mass of every point.
        seed_radius: Radius of the initial (uninflated) ring.
        seed_center: Center of the initial ring.
        k_spring: Spring stiffness K_s.
        k_damping: Spring damping K_d.
        gravity: Downward acceleration, engaged once fully inflated.
        applied_force: Acceleration applied by the directional inputs.
        dt: Fixed integration step in seconds.
        final_pressure: Target inflation pressure P_final.
        pressure_ramp_ticks: Ticks needed to ramp P from 0 to P_final.
        tangential_damping: Wall response along the surface (T).
        normal_damping: Wall response along the normal (N_d).
        arena_center: Center of the circular arena.
        arena_radius: Radius of the circular arena.
        display_width: Width of the clamping box [0, width].
        display_height: Height of the clamping box [0, height].
        tick_rate: Nominal host cadence in ticks per second.
        tether_rest_length: Rest length L_t of the tether spring.
        tether_stiffness: Tether stiffness K_t.
        tether_damping: Tether damping D_t.
        tether_vertex: Index of the vertex the tether pulls.
        area_estimator: "divergence" (sum of 1/2 |dx| |n_x| d per spring)
            or "shoelace" (exact polygon area).
        volume_eps: Enclosed areas below this skip the pressure term.
    """
    n_points: int = C.N_POINTS
    mass: float = C.MASS
    seed_radius: float = C.SEED_RADIUS
    seed_center: tuple[float, float] = C.SEED_CENTER
    k_spring: float = C.K_SPRING
    k_damping: float = C.K_DAMPING
    gravity: float = C.GRAVITY
    applied_force: float = C.APPLIED_FORCE
    dt: float = C.DT
    final_pressure: float = C.FINAL_PRESSURE
    pressure_ramp_ticks: int = C.PRESSURE_RAMP_TICKS
    tangential_damping: float = C.TANGENTIAL_DAMPING
    normal_damping: float = C.NORMAL_DAMPING
    arena_center: tuple[float, float] = C.ARENA_CENTER
    arena_radius: float = C.ARENA_RADIUS
    display_width: float = C.DISPLAY_WIDTH
    display_height: float = C.DISPLAY_HEIGHT
    tick_rate: float = C.TICK_RATE
    tether_rest_length: float = C.TETHER_REST_LENGTH
    tether_stiffness: float = C.TETHER_STIFFNESS
    tether_damping: float = C.TETHER_DAMPING
    tether_vertex: int = C.TETHER_VERTEX
    area_estimator: str = "divergence"
    volume_eps: float = C.VOLUME_EPS

    def __post_init__(self) -> None:
        if self.n_points < 3:
            raise ConfigurationError(f"n_points must be at least 3, got {self.n_points}")
        if self.mass <= 0:
            raise ConfigurationError(f"mass must be positive, got {self.mass}")
        if self.dt <= 0:
            raise ConfigurationError(f"dt must be positive, got {self.dt}")
        if self.arena_radius <= 0:
            raise ConfigurationError(f"arena_radius must be positive, got {self.arena_radius}")
        if self.display_width <= 0 or self.display_height <= 0:
            raise ConfigurationError(
                f"display size must be positive, got {self.display_width}x{self.display_height}"
            )
        if self.seed_radius <= 0:
            raise ConfigurationError(f"seed_radius must be positive, got {self.seed_radius}")
        if self.final_pressure < 0:
            raise ConfigurationError(f"final_pressure must not be negative, got {self.final_pressure}")
        if self.pressure_ramp_ticks < 1:
            raise ConfigurationError(
                f"pressure_ramp_ticks must be at least 1, got {self.pressure_ramp_ticks}"
            )
        if self.tick_rate <= 0:
            raise ConfigurationError(f"tick_rate must be positive, got {self.tick_rate}")
        if not 0 <= self.tether_vertex < self.n_points:
            raise ConfigurationError(
                f"tether_vertex {self.tether_vertex} outside [0, {self.n_points})"
            )
        if self.area_estimator not in AREA_ESTIMATORS:
            raise ConfigurationError(
                f"Unknown area estimator: {self.area_estimator!r} (expected one of {AREA_ESTIMATORS})"
            )

    def replace(self, **changes) -> "SoftBodyParams":
        """Return a copy with the given fields changed (re-validated)."""
        return replace(self, **changes)
