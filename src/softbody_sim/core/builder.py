# MIT License (see LICENSE)
"""
Body builder.

Lays N point masses out on a small seed circle and joins consecutive
points with springs into a closed ring. The seed is tiny compared to the
inflated body: the pressure ramp grows it in a controlled way instead of
starting from a large, instantly over-pressured ring.
"""
from __future__ import annotations

import numpy as np

from ..params import SoftBodyParams
from ..types import PointMasses, SoftBody, SpringRing


def seed_ring(n: int, radius: float, center: tuple[float, float]) -> tuple[np.ndarray, np.ndarray]:
    """
    Vertex coordinates of a regular N-gon.

    Vertex i sits at angle 2*pi*i/N, which makes the ring counter-clockwise in
    the y-up convention used for the outward spring normals.
    """
    theta = np.arange(n, dtype=np.float64) * (2.0 * np.pi / n)
    x = radius * np.cos(theta) + center[0]
    y = radius * np.sin(theta) + center[1]
    return x, y


def ring_springs(x: np.ndarray, y: np.ndarray) -> SpringRing:
    """
    Springs (i, (i + 1) mod N) with rest lengths taken from the given geometry.
    """
    n = len(x)
    a = np.arange(n)
    b = (a + 1) % n
    rest = np.hypot(x[a] - x[b], y[a] - y[b])
    return SpringRing(a=a, b=b, rest_length=rest)


def create_body(params: SoftBodyParams | None = None) -> SoftBody:
    """
    Build an uninflated soft body.

    Args:
        params: Simulation parameters; n_points, mass, seed_radius,
            seed_center and final_pressure are used here.

    Returns:
        A SoftBody at rest with P = 0.
    """
    params = params or SoftBodyParams()
    points = PointMasses.zeros(params.n_points, params.mass)
    x, y = seed_ring(params.n_points, params.seed_radius, params.seed_center)
    points.x[:] = x
    points.y[:] = y
    springs = ring_springs(points.x, points.y)
    return SoftBody(points=points, springs=springs, final_pressure=float(params.final_pressure))
