# MIT License (see LICENSE)
import numpy as np
import pytest
from softbody_sim.scene import SoftBodyScene
from softbody_sim.types import PointMasses
from softbody_sim.core.invariants import (
    kinetic_energy,
    linear_momentum,
    centroid,
    max_speed,
    polygon_area,
    is_finite,
)


def test_quantities_on_known_state():
    p = PointMasses.zeros(2, mass=2.0)
    p.x[:] = [0.0, 4.0]
    p.y[:] = [1.0, 3.0]
    p.vx[:] = [3.0, 0.0]
    p.vy[:] = [4.0, -1.0]
    assert kinetic_energy(p) == pytest.approx(0.5 * 2.0 * (25.0 + 1.0))
    assert linear_momentum(p) == pytest.approx([6.0, 6.0])
    assert centroid(p) == pytest.approx([2.0, 2.0])
    assert max_speed(p) == pytest.approx(5.0)
    assert is_finite(p)
    p.vy[1] = np.nan
    assert not is_finite(p)


def test_inflation_conserves_momentum():
    # no external force during the ramp: ring springs and pressure act in
    # balanced pairs, so the body only grows
    scene = SoftBodyScene()
    scene.run(150)
    p = scene.body.points
    assert kinetic_energy(p) > 0.0
    assert np.allclose(linear_momentum(p), 0.0, atol=1e-6)
    area = polygon_area(scene.body)
    assert area == pytest.approx(np.pi * np.mean(np.hypot(p.x - p.x.mean(), p.y - p.y.mean())) ** 2, rel=0.05)
