# MIT License (see LICENSE)
import numpy as np
import pytest
from softbody_sim.params import SoftBodyParams
from softbody_sim.core.builder import create_body
from softbody_sim.core.integrators import HeunIntegrator


def _constant_force(fx: float, fy: float):
    seen = []

    def accumulate(body):
        p = body.points
        seen.append((p.x.copy(), p.vx.copy()))
        p.fx.fill(fx)
        p.fy.fill(fy)

    return accumulate, seen


def test_heun_two_displacements_under_constant_force():
    """
    With constant force the corrector velocity equals the predictor's, and
    the corrector adds a second displacement on top of the predictor's:
        v = a dt,  x = x0 + 2 a dt^2
    """
    body = create_body(SoftBodyParams(n_points=3, mass=2.0))
    x0 = body.points.x.copy()
    y0 = body.points.y.copy()
    accumulate, seen = _constant_force(4.0, -2.0)
    accumulate(body)

    dt = 0.1
    HeunIntegrator(3).step(body, dt, accumulate)

    ax, ay = 4.0 / 2.0, -2.0 / 2.0
    assert np.allclose(body.points.vx, ax * dt)
    assert np.allclose(body.points.vy, ay * dt)
    assert np.allclose(body.points.x, x0 + 2 * ax * dt * dt)
    assert np.allclose(body.points.y, y0 + 2 * ay * dt * dt)

    # the re-accumulation saw the predicted state
    x_pred, vx_pred = seen[-1]
    assert np.allclose(x_pred, x0 + ax * dt * dt)
    assert np.allclose(vx_pred, ax * dt)


def test_corrector_averages_saved_and_new_forces():
    body = create_body(SoftBodyParams(n_points=4))
    body.points.fx.fill(10.0)

    def accumulate(b):
        b.points.fx.fill(30.0)
        b.points.fy.fill(0.0)

    HeunIntegrator(4).step(body, 0.01, accumulate)
    # v = v_prev + (30 + 10) / 2 * dt
    assert np.allclose(body.points.vx, 0.2)


def test_boundary_receives_corrector_displacement():
    body = create_body(SoftBodyParams(n_points=3))
    accumulate, _ = _constant_force(1.0, 0.0)
    accumulate(body)
    calls = []

    def boundary(points, drx, dry):
        calls.append((drx.copy(), dry.copy()))

    HeunIntegrator(3).step(body, 0.5, accumulate, boundary)
    assert len(calls) == 1
    drx, dry = calls[0]
    assert np.allclose(drx, body.points.vx * 0.5)
    assert np.allclose(dry, 0.0)


def test_size_mismatch():
    body = create_body(SoftBodyParams(n_points=5))
    with pytest.raises(ValueError):
        HeunIntegrator(4).step(body, 0.01, lambda b: None)
