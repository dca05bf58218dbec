# MIT License (see LICENSE)
"""
The simulation driver.

SoftBodyScene owns one soft body, the arena, the host inputs and the
integrator, and advances them one fixed step per tick():

    1. Force pass at the current state.
    2. Heun step (re-runs the force pass at the predicted state, then hands
       every vertex to the arena boundary solver).
    3. Pressure ramp: P_k = P_final * min(k, ramp_ticks) / ramp_ticks.

The host changes inputs with set_input() / set_tether() strictly between
ticks, and reads vertices() / tether_line() for rendering.

Structure:
    - Host creates a SoftBodyScene (parameters validated here).
    - Host calls scene.tick() at a fixed cadence (see loop.FixedRateLoop).
"""
from __future__ import annotations
from contextlib import nullcontext
from dataclasses import dataclass, field
import logging

import numpy as np

from .collision.arena import CircularArena
from .core.builder import create_body
from .core.forces import accumulate_forces
from .core.integrators import HeunIntegrator
from .params import SoftBodyParams
from .profiler import Profiler
from .types import InputState, SoftBody, TetherState

logger = logging.getLogger(__name__)


@dataclass
class SoftBodyScene:
    """
    Pressurized soft body in a circular arena.

    Attributes:
        params: Simulation parameters (validated on construction).
        profiler: Optional Profiler timing the "forces", "integrate" and
            "ramp" phases of every tick.
        body: The simulated body.
        arena: Boundary solver.
        inputs: Directional flags read at the start of every force pass.
        tether: Tether state read at the start of every force pass.
        time: Simulated time in seconds.
        tick_count: Number of completed ticks.
    """
    params: SoftBodyParams = field(default_factory=SoftBodyParams)
    profiler: Profiler | None = None

    body: SoftBody = field(init=False)
    arena: CircularArena = field(init=False)
    inputs: InputState = field(default_factory=InputState)
    tether: TetherState = field(default_factory=TetherState)
    time: float = 0.0
    tick_count: int = 0

    def __post_init__(self) -> None:
        self.body = create_body(self.params)
        self.arena = CircularArena.from_params(self.params)
        self._integrator = HeunIntegrator(self.params.n_points)
        self._ramp_ticks = 0
        logger.info(
            "Created soft body: %d points, P_final=%g, dt=%g, estimator=%s",
            self.params.n_points, self.params.final_pressure, self.params.dt,
            self.params.area_estimator,
        )

    # ------------------------------------------------------------------
    # Host inputs
    # ------------------------------------------------------------------

    def set_input(self, up: bool, down: bool, left: bool, right: bool) -> None:
        """Set the directional body-force flags for the following ticks."""
        new = InputState(bool(up), bool(down), bool(left), bool(right))
        if new != self.inputs:
            logger.debug("Input flags: %s", new)
        self.inputs = new

    def set_tether(self, engaged: bool, anchor_x: float, anchor_y: float) -> None:
        """
        Engage, move or release the tether.

        Any anchor is legal, including points outside the display.
        """
        engaged = bool(engaged)
        if engaged != self.tether.engaged:
            logger.debug(
                "Tether %s at (%.1f, %.1f)",
                "engaged" if engaged else "released", anchor_x, anchor_y,
            )
        self.tether = TetherState(engaged=engaged, anchor=(float(anchor_x), float(anchor_y)))

    # ------------------------------------------------------------------
    # Simulation
    # ------------------------------------------------------------------

    @property
    def pressure(self) -> float:
        return self.body.pressure

    def _section(self, name: str):
        return self.profiler.section(name) if self.profiler else nullcontext()

    def _accumulate(self, body: SoftBody) -> None:
        accumulate_forces(body, self.params, self.inputs, self.tether)

    def _ramp_pressure(self) -> None:
        body = self.body
        if body.pressure < body.final_pressure:
            self._ramp_ticks += 1
            n = self.params.pressure_ramp_ticks
            body.pressure = body.final_pressure * min(self._ramp_ticks, n) / n
            if body.inflated:
                logger.info(
                    "Target pressure %g reached at tick %d; gravity engaged",
                    body.final_pressure, self.tick_count,
                )
        else:
            body.pressure = body.final_pressure

    def tick(self) -> None:
        """Advance the simulation by one fixed step of params.dt."""
        with self._section("forces"):
            self._accumulate(self.body)
        with self._section("integrate"):
            self._integrator.step(self.body, self.params.dt, self._accumulate, self.arena.resolve)
        self.tick_count += 1
        self.time += self.params.dt
        with self._section("ramp"):
            self._ramp_pressure()

    def run(self, ticks: int) -> None:
        """Advance by a number of ticks with the current inputs."""
        for _ in range(ticks):
            self.tick()

    # ------------------------------------------------------------------
    # Rendering views
    # ------------------------------------------------------------------

    def vertices(self) -> np.ndarray:
        """Read-only (N, 2) snapshot of the vertex positions."""
        v = self.body.points.positions()
        v.setflags(write=False)
        return v

    def tether_line(self) -> tuple[tuple[float, float], tuple[float, float]] | None:
        """(anchor, tethered vertex) while the tether is engaged, else None."""
        if not self.tether.engaged:
            return None
        i = self.params.tether_vertex
        p = self.body.points
        return self.tether.anchor, (float(p.x[i]), float(p.y[i]))
