# MIT License (see LICENSE)
"""
Renderer adapters for soft-body visualization.

The simulation core has no rendering dependency. A renderer reads the
vertex positions, the arena outline and the tether line between ticks,
through the scene's read-only views.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TextIO
import sys

import numpy as np

if TYPE_CHECKING:
    from ..scene import SoftBodyScene

Point = tuple[float, float]


def to_pixels(vertices: np.ndarray) -> np.ndarray:
    """Truncate display coordinates to integer pixels, as a polygon fill expects."""
    return np.asarray(vertices, dtype=np.float64).astype(np.int64)


class RendererAdapter(ABC):
    """
    Abstract base class for renderer implementations.

    Usage:
        renderer.begin_frame(scene.time)
        renderer.draw_arena(center, radius)
        renderer.draw_body(scene.vertices())
        renderer.draw_tether(*line)      # only while engaged
        renderer.end_frame()

    Or use the convenience method:
        renderer.render_scene(scene)
    """

    @abstractmethod
    def begin_frame(self, time: float) -> None:
        """
        Begin a new frame.

        Args:
            time: Current simulation time in seconds.
        """
        ...

    @abstractmethod
    def draw_arena(self, center: Point, radius: float) -> None:
        """Draw the arena wall."""
        ...

    @abstractmethod
    def draw_body(self, vertices: np.ndarray) -> None:
        """
        Draw the body polygon.

        Args:
            vertices: (N, 2) vertex positions in ring order.
        """
        ...

    @abstractmethod
    def draw_tether(self, anchor: Point, vertex: Point) -> None:
        """Draw the tether line from the anchor to the pulled vertex."""
        ...

    @abstractmethod
    def end_frame(self) -> None:
        """Finalize the current frame."""
        ...

    def render_scene(self, scene: "SoftBodyScene") -> None:
        """Render one frame of the scene."""
        self.begin_frame(scene.time)
        self.draw_arena(scene.arena.center, scene.arena.radius)
        self.draw_body(scene.vertices())
        line = scene.tether_line()
        if line is not None:
            self.draw_tether(*line)
        self.end_frame()


class DebugRenderer(RendererAdapter):
    """
    Console/text renderer for development and testing.

    Output:
        === Frame t=3.0100 ===
        arena c=(190.0, 190.0) R=190.0
        body n=20 centroid=(190.02, 101.37) bbox=[147..233]x[58..145]
        tether (10.0, 10.0) -> (233.10, 95.42)
    """

    def __init__(self, output: TextIO | None = None, verbose: bool = False):
        """
        Args:
            output: Output stream (defaults to sys.stdout).
            verbose: If True, also list every vertex in pixels.
        """
        self.output = output or sys.stdout
        self.verbose = verbose

    def begin_frame(self, time: float) -> None:
        self.output.write(f"=== Frame t={time:.4f} ===\n")

    def draw_arena(self, center: Point, radius: float) -> None:
        self.output.write(f"arena c=({center[0]:.1f}, {center[1]:.1f}) R={radius:.1f}\n")

    def draw_body(self, vertices: np.ndarray) -> None:
        c = vertices.mean(axis=0)
        px = to_pixels(vertices)
        lo = px.min(axis=0)
        hi = px.max(axis=0)
        self.output.write(
            f"body n={len(vertices)} centroid=({c[0]:.2f}, {c[1]:.2f}) "
            f"bbox=[{lo[0]}..{hi[0]}]x[{lo[1]}..{hi[1]}]\n"
        )
        if self.verbose:
            for i, (x, y) in enumerate(px):
                self.output.write(f"  [{i}] ({x}, {y})\n")

    def draw_tether(self, anchor: Point, vertex: Point) -> None:
        self.output.write(
            f"tether ({anchor[0]:.1f}, {anchor[1]:.1f}) -> ({vertex[0]:.2f}, {vertex[1]:.2f})\n"
        )

    def end_frame(self) -> None:
        self.output.write("\n")
        self.output.flush()


class NullRenderer(RendererAdapter):
    """No-op renderer, for timing the loop without drawing."""

    def begin_frame(self, time: float) -> None:
        pass

    def draw_arena(self, center: Point, radius: float) -> None:
        pass

    def draw_body(self, vertices: np.ndarray) -> None:
        pass

    def draw_tether(self, anchor: Point, vertex: Point) -> None:
        pass

    def end_frame(self) -> None:
        pass


class BufferedRenderer(RendererAdapter):
    """
    Renderer that records frames for playback or export.

    Example:
        renderer = BufferedRenderer()
        for _ in range(100):
            scene.tick()
            renderer.render_scene(scene)
        first = renderer.frames[0]["vertices"]
    """

    def __init__(self):
        self.frames: list[dict] = []
        self._current_frame: dict | None = None

    def begin_frame(self, time: float) -> None:
        self._current_frame = {
            "time": time,
            "arena": None,
            "vertices": [],
            "tether": None,
        }

    def draw_arena(self, center: Point, radius: float) -> None:
        if self._current_frame is None:
            return
        self._current_frame["arena"] = (tuple(center), radius)

    def draw_body(self, vertices: np.ndarray) -> None:
        if self._current_frame is None:
            return
        self._current_frame["vertices"] = np.asarray(vertices).tolist()

    def draw_tether(self, anchor: Point, vertex: Point) -> None:
        if self._current_frame is None:
            return
        self._current_frame["tether"] = (tuple(anchor), tuple(vertex))

    def end_frame(self) -> None:
        if self._current_frame is not None:
            self.frames.append(self._current_frame)
            self._current_frame = None

    def clear(self) -> None:
        self.frames.clear()
