# MIT License (see LICENSE)
"""
Heun predictor-corrector integration for the soft body.

One step, assuming forces were just accumulated for the current state:

    1. Save f_prev = f and v_prev = v.
    2. Predictor (explicit Euler):   v <- v + (f/m) dt;   x <- x + v dt
    3. Re-accumulate forces at the predicted state.
    4. Corrector:                    v <- v_prev + ((f + f_prev)/(2m)) dt
                                     x <- x + v dt
    5. Boundary solve with the corrector displacement (v dt).

The corrector adds its displacement on top of the predictor's rather than
restarting from the saved position. The simulation constants are tuned
around this two-displacement pattern.

Reference:
    Heun's method: https://en.wikipedia.org/wiki/Heun%27s_method
"""
from __future__ import annotations
from typing import Callable

import numpy as np

from ..types import PointMasses, SoftBody

ForcePass = Callable[[SoftBody], None]
BoundarySolve = Callable[[PointMasses, np.ndarray, np.ndarray], None]


class HeunIntegrator:
    """
    Fixed-step Heun integrator with save buffers sized at construction.

    Args:
        n_points: Number of vertices of the bodies it will step.
    """

    def __init__(self, n_points: int) -> None:
        self.n_points = n_points
        self._fx_prev = np.zeros(n_points, dtype=np.float64)
        self._fy_prev = np.zeros(n_points, dtype=np.float64)
        self._vx_prev = np.zeros(n_points, dtype=np.float64)
        self._vy_prev = np.zeros(n_points, dtype=np.float64)
        self._drx = np.zeros(n_points, dtype=np.float64)
        self._dry = np.zeros(n_points, dtype=np.float64)

    def step(
        self,
        body: SoftBody,
        dt: float,
        accumulate: ForcePass,
        boundary: BoundarySolve | None = None,
    ) -> None:
        """
        Advance the body by dt.

        Args:
            body: Body whose forces are current for its state (modified in-place).
            dt: Timestep in seconds.
            accumulate: Force pass re-run at the predicted state.
            boundary: Optional per-vertex boundary solve, called with the
                points and the corrector displacements (drx, dry).
        """
        p = body.points
        if len(p) != self.n_points:
            raise ValueError(f"Integrator sized for {self.n_points} points, body has {len(p)}")
        inv_m = p.inv_mass

        # Save before the predictor mutates anything
        np.copyto(self._fx_prev, p.fx)
        np.copyto(self._fy_prev, p.fy)
        np.copyto(self._vx_prev, p.vx)
        np.copyto(self._vy_prev, p.vy)

        # Predictor
        p.vx += p.fx * inv_m * dt
        p.x += p.vx * dt
        p.vy += p.fy * inv_m * dt
        p.y += p.vy * dt

        accumulate(body)

        # Corrector
        p.vx[:] = self._vx_prev + (p.fx + self._fx_prev) * inv_m * dt / 2
        np.multiply(p.vx, dt, out=self._drx)
        p.x += self._drx

        p.vy[:] = self._vy_prev + (p.fy + self._fy_prev) * inv_m * dt / 2
        np.multiply(p.vy, dt, out=self._dry)
        p.y += self._dry

        if boundary is not None:
            boundary(p, self._drx, self._dry)
