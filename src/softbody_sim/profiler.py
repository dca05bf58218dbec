# MIT License (see LICENSE)
"""
Lightweight per-phase timing for the tick loop.

The scene times its "forces", "integrate" and "ramp" phases when given a
Profiler.

Example:
    profiler = Profiler()
    scene = SoftBodyScene(profiler=profiler)
    for _ in range(600):
        scene.tick()
    print(profiler.stats.summary()["integrate"]["mean_ms"])
"""
from __future__ import annotations
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator
import time


@dataclass
class ProfileStats:
    """Timing samples (seconds) per named phase."""
    samples: dict[str, list[float]] = field(default_factory=dict)

    def add(self, name: str, dt: float) -> None:
        self.samples.setdefault(name, []).append(dt)

    def summary(self) -> dict[str, dict[str, float]]:
        """
        Per-phase statistics.

        Returns:
            Dict mapping phase name to {'n', 'mean_ms', 'max_ms', 'total_ms'}.
        """
        out = {}
        for name, times in self.samples.items():
            n = len(times)
            total = sum(times)
            out[name] = {
                "n": n,
                "mean_ms": 1e3 * total / n,
                "max_ms": 1e3 * max(times),
                "total_ms": 1e3 * total,
            }
        return out

    def reset(self) -> None:
        self.samples.clear()


class Profiler:
    """Context-manager profiler; one sample per entered section."""

    def __init__(self, clock=time.perf_counter) -> None:
        self.stats = ProfileStats()
        self._clock = clock

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        t0 = self._clock()
        try:
            yield
        finally:
            self.stats.add(name, self._clock() - t0)
