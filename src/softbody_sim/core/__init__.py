# MIT License (see LICENSE)
"""
Core soft-body simulation components.

This subpackage provides:
    - Body builder: seed ring of points and ring springs.
    - Force accumulator: external forces, ring springs, pressure.
    - Integrator: Heun predictor-corrector.
    - Invariants: diagnostic quantities for tests and examples.

Typical usage:
    from softbody_sim.core import create_body, accumulate_forces, HeunIntegrator

    body = create_body(params)
    accumulate_forces(body, params, inputs, tether)
"""
from .builder import create_body, seed_ring, ring_springs
from .forces import (
    apply_external_forces,
    apply_tether,
    accumulate_spring_forces,
    enclosed_volume,
    apply_pressure,
    accumulate_forces,
)
from .integrators import HeunIntegrator

__all__ = [
    # Builder
    "create_body",
    "seed_ring",
    "ring_springs",
    # Forces
    "apply_external_forces",
    "apply_tether",
    "accumulate_spring_forces",
    "enclosed_volume",
    "apply_pressure",
    "accumulate_forces",
    # Integrators
    "HeunIntegrator",
]
