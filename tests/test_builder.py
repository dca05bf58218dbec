# MIT License (see LICENSE)
import numpy as np
import pytest
from softbody_sim.params import SoftBodyParams
from softbody_sim.core.builder import create_body, seed_ring
from softbody_sim.core.invariants import is_single_cycle
from softbody_sim.util import signed_area


def test_seed_geometry():
    body = create_body()
    p = body.points
    assert len(p) == 20
    assert p.x[0] == pytest.approx(190.516)
    assert p.y[0] == pytest.approx(95.0)
    r = np.hypot(p.x - 190.0, p.y - 95.0)
    assert np.allclose(r, 0.516)
    assert np.all(p.vx == 0) and np.all(p.vy == 0)
    assert body.pressure == 0.0
    assert body.final_pressure == 70000.0


def test_ring_springs():
    n = 7
    body = create_body(SoftBodyParams(n_points=n, seed_radius=3.0))
    s = body.springs
    assert len(s) == n
    assert s.endpoints() == [(i, (i + 1) % n) for i in range(n)]
    assert is_single_cycle(s, n)
    expected = 2 * 3.0 * np.sin(np.pi / n)
    assert np.allclose(s.rest_length, expected)


def test_ring_winding_gives_outward_normals():
    # Increasing angle is counter-clockwise in y-up terms: positive signed area
    x, y = seed_ring(12, 1.0, (0.0, 0.0))
    assert signed_area(x, y) > 0


def test_is_single_cycle_rejects_broken_ring():
    body = create_body(SoftBodyParams(n_points=5))
    s = body.springs
    s.b[2] = 0  # 2 -> 0 short-circuits the ring
    assert not is_single_cycle(s, 5)
