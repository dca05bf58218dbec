# MIT License (see LICENSE)
"""
Diagnostic quantities of a soft body.

Used by tests and examples to check containment, ring topology and
integrator stability. None of these run inside the tick loop.
"""
from __future__ import annotations

import numpy as np

from ..types import PointMasses, SoftBody, SpringRing
from ..util import shoelace_area


def kinetic_energy(points: PointMasses) -> float:
    """T = sum(1/2 m |v|^2)."""
    return float(0.5 * points.mass * np.sum(points.vx * points.vx + points.vy * points.vy))


def linear_momentum(points: PointMasses) -> np.ndarray:
    """P = sum(m v) as [Px, Py]."""
    return np.array([points.mass * np.sum(points.vx), points.mass * np.sum(points.vy)], dtype=np.float64)


def centroid(points: PointMasses) -> np.ndarray:
    """Mean vertex position [x, y]."""
    return np.array([np.mean(points.x), np.mean(points.y)], dtype=np.float64)


def max_speed(points: PointMasses) -> float:
    """Largest vertex speed."""
    return float(np.max(np.hypot(points.vx, points.vy)))


def polygon_area(body: SoftBody) -> float:
    """Exact enclosed area of the ring (shoelace)."""
    return shoelace_area(body.points.x, body.points.y)


def is_finite(points: PointMasses) -> bool:
    """True if no position or velocity is NaN or infinite."""
    return bool(
        np.all(np.isfinite(points.x)) and np.all(np.isfinite(points.y))
        and np.all(np.isfinite(points.vx)) and np.all(np.isfinite(points.vy))
    )


def is_single_cycle(springs: SpringRing, n_points: int) -> bool:
    """
    Whether the spring endpoints form one cycle through all n_points vertices.

    Follows a -> b links from vertex 0 and requires every vertex to be
    visited exactly once before returning to the start.
    """
    if len(springs) != n_points:
        return False
    nxt = {}
    for a, b in springs.endpoints():
        if a == b or a in nxt:
            return False
        nxt[a] = b
    seen = set()
    v = 0
    for _ in range(n_points):
        if v in seen or v not in nxt:
            return False
        seen.add(v)
        v = nxt[v]
    return v == 0 and len(seen) == n_points
