# MIT License (see LICENSE)
"""
Default constants for the pressurized soft-body simulation.

Units are display units (pixels for the default 380x380 arena), seconds and
unit masses. The y axis points down, so positive gravity pulls toward the
bottom of the display.
"""
from __future__ import annotations

# Body
N_POINTS: int = 20
MASS: float = 1.0
SEED_RADIUS: float = 0.516
SEED_CENTER: tuple[float, float] = (190.0, 95.0)

# Ring springs (Kelvin-Voigt style, damping against the raw separation vector)
K_SPRING: float = 755.0
K_DAMPING: float = 35.0

# Gravity and the keyboard-driven body force, per unit mass
GRAVITY: float = 110.0
APPLIED_FORCE: float = 110.0

# Fixed integration step (seconds) and host cadence (ticks per second)
DT: float = 0.01
TICK_RATE: float = 120.0

# Inflation: P ramps from 0 to FINAL_PRESSURE over PRESSURE_RAMP_TICKS ticks
FINAL_PRESSURE: float = 70000.0
PRESSURE_RAMP_TICKS: int = 300

# Below this enclosed area the pressure term is skipped for the pass.
VOLUME_EPS: float = 1e-9

# Arena wall response. A tangential factor of 1.0 is a frictionless wall;
# values above 1.0 inject energy on every bounce.
TANGENTIAL_DAMPING: float = 0.99
NORMAL_DAMPING: float = 0.1

# Arena geometry and display bounds
ARENA_CENTER: tuple[float, float] = (190.0, 190.0)
ARENA_RADIUS: float = 190.0
DISPLAY_WIDTH: float = 380.0
DISPLAY_HEIGHT: float = 380.0

# Tether (mouse pull) spring-damper acting on a single vertex
TETHER_REST_LENGTH: float = 2.2
TETHER_STIFFNESS: float = 22.0
TETHER_DAMPING: float = 54.0
TETHER_VERTEX: int = 0
