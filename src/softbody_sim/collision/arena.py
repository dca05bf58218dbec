# MIT License (see LICENSE)
"""
Boundary solver for the circular arena.

Applied to every vertex after the corrector displacement:

1. Clamp to the display box [0, width] x [0, height].
2. Breach test: the vertex, advanced horizontally by its displacement drx,
   lies outside the arena circle.
3. Breached vertices have their velocity reflected through the local wall
   frame with independent tangential (T) and normal (N_d) factors:
       v' = T (v . t) t - N_d (v . n) n
   with n = (cos th, sin th) = (p - c) / |p - c| and t = (sin th, -cos th).
   Expanded, this is
       vx' = vy (-T s c - N s c) + vx (T s^2 - N c^2)
       vy' = vy (T c^2 - N s^2)  + vx (-T s c - N s c)
4. Any vertex still outside the circle is projected radially back onto it.

With T <= 1 and N_d <= 1 the outward normal speed never grows; T > 1 makes
the tangential bounce inject energy and is allowed.
"""
from __future__ import annotations
from dataclasses import dataclass
import logging

import numpy as np

from ..params import SoftBodyParams
from ..types import PointMasses

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CircularArena:
    """
    Circular wall inside a rectangular display.

    Attributes:
        center: Arena center (cx, cy).
        radius: Arena radius R.
        width: Display width; x is clamped to [0, width].
        height: Display height; y is clamped to [0, height].
        tangential_damping: T, factor on the velocity along the wall.
        normal_damping: N_d, factor on the (reversed) velocity into the wall.
    """
    center: tuple[float, float] = (190.0, 190.0)
    radius: float = 190.0
    width: float = 380.0
    height: float = 380.0
    tangential_damping: float = 0.99
    normal_damping: float = 0.1

    @classmethod
    def from_params(cls, params: SoftBodyParams) -> "CircularArena":
        arena = cls(
            center=(float(params.arena_center[0]), float(params.arena_center[1])),
            radius=float(params.arena_radius),
            width=float(params.display_width),
            height=float(params.display_height),
            tangential_damping=float(params.tangential_damping),
            normal_damping=float(params.normal_damping),
        )
        if not arena.fits_display():
            logger.warning(
                "Arena circle (center=%s, R=%.1f) extends past the %gx%g display; "
                "the box clamp will cut it off",
                arena.center, arena.radius, arena.width, arena.height,
            )
        return arena

    def fits_display(self) -> bool:
        """Whether the whole circle lies inside the display box."""
        cx, cy = self.center
        r = self.radius
        return cx - r >= 0.0 and cy - r >= 0.0 and cx + r <= self.width and cy + r <= self.height

    # ------------------------------------------------------------------
    # Individual stages
    # ------------------------------------------------------------------

    def clamp(self, points: PointMasses) -> None:
        """Clamp positions into the display box."""
        np.clip(points.x, 0.0, self.width, out=points.x)
        np.clip(points.y, 0.0, self.height, out=points.y)

    def breached(self, x: np.ndarray, y: np.ndarray, drx: np.ndarray) -> np.ndarray:
        """Mask of vertices whose horizontally advanced position is outside the circle."""
        cx, cy = self.center
        ex = x + drx - cx
        ey = y - cy
        return ex * ex + ey * ey > self.radius * self.radius

    def reflect(self, points: PointMasses, mask: np.ndarray) -> None:
        """Apply the wall velocity transform to the masked vertices."""
        if not mask.any():
            return
        cx, cy = self.center
        T = self.tangential_damping
        N = self.normal_damping

        ex = points.x[mask] - cx
        ey = points.y[mask] - cy
        dist = np.hypot(ex, ey)
        # a vertex on the center has no wall direction; fall back to +x
        safe = np.where(dist > 0.0, dist, 1.0)
        c = np.where(dist > 0.0, ex / safe, 1.0)
        s = ey / safe
        vx0 = points.vx[mask]
        vy0 = points.vy[mask]

        points.vx[mask] = vy0 * (-T * s * c - N * s * c) + vx0 * (T * s * s - N * c * c)
        points.vy[mask] = vy0 * (T * c * c - N * s * s) + vx0 * (-T * s * c - N * s * c)

    def project_inside(self, points: PointMasses) -> None:
        """Move vertices outside the circle radially back onto it."""
        cx, cy = self.center
        ex = points.x - cx
        ey = points.y - cy
        dist = np.hypot(ex, ey)
        outside = dist > self.radius
        if not outside.any():
            return
        scale = self.radius / dist[outside]
        points.x[outside] = cx + ex[outside] * scale
        points.y[outside] = cy + ey[outside] * scale

    # ------------------------------------------------------------------
    # Full solve
    # ------------------------------------------------------------------

    def resolve(self, points: PointMasses, drx: np.ndarray, dry: np.ndarray) -> None:
        """
        Run clamp, breach test, reflection and projection.

        Signature matches the integrator's boundary hook; dry is accepted for
        symmetry but the breach test only looks ahead horizontally.
        """
        self.clamp(points)
        mask = self.breached(points.x, points.y, drx)
        self.reflect(points, mask)
        self.project_inside(points)

    def contains(self, x: np.ndarray, y: np.ndarray, eps: float = 1e-9) -> np.ndarray:
        """Mask of points inside the closed disk (with tolerance eps on R^2)."""
        cx, cy = self.center
        ex = np.asarray(x) - cx
        ey = np.asarray(y) - cy
        return ex * ex + ey * ey <= self.radius * self.radius + eps
