# MIT License (see LICENSE)
"""
softbody_sim - A 2D pressurized soft-body simulation.

A closed ring of point masses joined by damped springs is inflated by an
internal pressure computed from its enclosed area, falls under gravity once
fully inflated, bounces inside a circular arena, and can be pushed by
directional inputs or pulled by a tether on one vertex. A fixed-step Heun
predictor-corrector advances the state.

Main entry points:
    - SoftBodyScene: The simulation driver (tick, inputs, rendering views).
    - SoftBodyParams: Validated configuration with the default constants.
    - create_body: Build an uninflated body on its own.

Submodules:
    - core: Body builder, force accumulator, integrator, diagnostics.
    - collision: Circular arena boundary solver.
    - renderer: Optional visualization adapters.
    - loop: Fixed-cadence host loop.

Example:
    from softbody_sim import SoftBodyScene

    scene = SoftBodyScene()
    for _ in range(300):
        scene.tick()
    print(scene.vertices())
"""
from .scene import SoftBodyScene
from .params import SoftBodyParams, ConfigurationError
from .types import PointMasses, SpringRing, SoftBody, InputState, TetherState
from .core.builder import create_body

__all__ = [
    # Simulation
    "SoftBodyScene",
    "SoftBodyParams",
    "ConfigurationError",
    "create_body",
    # State
    "PointMasses",
    "SpringRing",
    "SoftBody",
    "InputState",
    "TetherState",
]
