# MIT License (see LICENSE)
"""
Fixed-cadence host loop.

The core never paces itself. FixedRateLoop is the optional host: each
iteration renders the current frame, sleeps until the next deadline and
then ticks the scene. Deadlines advance by a fixed period, so a slow frame
is caught up by shorter sleeps instead of drifting.

Example:
    scene = SoftBodyScene()
    FixedRateLoop(scene, renderer=DebugRenderer()).run(ticks=600)
"""
from __future__ import annotations
from typing import TYPE_CHECKING, Callable
import logging
import time

if TYPE_CHECKING:
    from .renderer.adapter import RendererAdapter
    from .scene import SoftBodyScene

logger = logging.getLogger(__name__)


class FixedRateLoop:
    """
    Drive a scene at a fixed number of ticks per second.

    Args:
        scene: Scene to tick.
        tick_rate: Ticks per second; defaults to scene.params.tick_rate.
        renderer: Optional renderer called before every tick.
        clock: Monotonic clock in seconds.
        sleep: Sleep function taking seconds.
    """

    def __init__(
        self,
        scene: "SoftBodyScene",
        tick_rate: float | None = None,
        renderer: "RendererAdapter | None" = None,
        clock: Callable[[], float] = time.perf_counter,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        rate = scene.params.tick_rate if tick_rate is None else tick_rate
        if rate <= 0:
            raise ValueError(f"tick_rate must be positive, got {rate}")
        self.scene = scene
        self.period = 1.0 / rate
        self.renderer = renderer
        self._clock = clock
        self._sleep = sleep
        self._running = False

    def stop(self) -> None:
        """Ask a running loop to finish after the current iteration."""
        self._running = False

    def run(self, ticks: int | None = None) -> int:
        """
        Run until `ticks` ticks have elapsed, or until stop() if ticks is None.

        Returns:
            Number of ticks performed.
        """
        self._running = True
        deadline = self._clock()
        done = 0
        logger.debug("Loop started at %.1f ticks/s", 1.0 / self.period)
        while self._running and (ticks is None or done < ticks):
            if self.renderer is not None:
                self.renderer.render_scene(self.scene)
            deadline += self.period
            self._sleep(max(0.0, deadline - self._clock()))
            self.scene.tick()
            done += 1
        self._running = False
        logger.debug("Loop finished after %d ticks", done)
        return done
