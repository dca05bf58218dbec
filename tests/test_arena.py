# MIT License (see LICENSE)
import logging
import numpy as np
import pytest
from softbody_sim.params import SoftBodyParams
from softbody_sim.types import PointMasses
from softbody_sim.collision.arena import CircularArena

C = 190.0
R = 190.0


def _point(x, y, vx=0.0, vy=0.0):
    p = PointMasses.zeros(1)
    p.x[0], p.y[0], p.vx[0], p.vy[0] = x, y, vx, vy
    return p


def test_clamp_to_display():
    arena = CircularArena()
    p = PointMasses.zeros(3)
    p.x[:] = [-5.0, 100.0, 400.0]
    p.y[:] = [400.0, -1.0, 200.0]
    arena.clamp(p)
    assert p.x.tolist() == [0.0, 100.0, 380.0]
    assert p.y.tolist() == [380.0, 0.0, 200.0]


def test_breach_looks_ahead_horizontally():
    arena = CircularArena()
    x = np.array([379.0, 379.0, 190.0])
    y = np.array([190.0, 190.0, 190.0])
    drx = np.array([0.5, 2.0, 100.0])
    assert arena.breached(x, y, drx).tolist() == [False, True, False]


def test_reflect_on_right_wall():
    arena = CircularArena()
    p = _point(380.0, 190.0, vx=10.0, vy=3.0)
    arena.reflect(p, np.array([True]))
    # normal is +x: normal speed reversed and scaled by N_d, tangent scaled by T
    assert p.vx[0] == pytest.approx(-0.1 * 10.0)
    assert p.vy[0] == pytest.approx(0.99 * 3.0)


def test_reflect_on_floor():
    arena = CircularArena()
    p = _point(190.0, 380.0, vx=-4.0, vy=20.0)
    arena.reflect(p, np.array([True]))
    assert p.vx[0] == pytest.approx(0.99 * -4.0)
    assert p.vy[0] == pytest.approx(-0.1 * 20.0)


def test_reflect_matches_tangent_normal_decomposition():
    arena = CircularArena(tangential_damping=0.8, normal_damping=0.3)
    th = 2.2
    x, y = C + R * np.cos(th), C + R * np.sin(th)
    v = np.array([7.0, -11.0])
    p = _point(x, y, *v)
    arena.reflect(p, np.array([True]))
    n = np.array([np.cos(th), np.sin(th)])
    t = np.array([np.sin(th), -np.cos(th)])
    expected = 0.8 * np.dot(v, t) * t - 0.3 * np.dot(v, n) * n
    assert (p.vx[0], p.vy[0]) == pytest.approx(tuple(expected))


def test_reflect_ignores_unmasked():
    arena = CircularArena()
    p = _point(380.0, 190.0, vx=10.0, vy=3.0)
    arena.reflect(p, np.array([False]))
    assert (p.vx[0], p.vy[0]) == (10.0, 3.0)


def test_project_inside():
    arena = CircularArena()
    p = PointMasses.zeros(2)
    p.x[:] = [C + 150.0, 300.0]
    p.y[:] = [C + 150.0, 300.0]
    arena.project_inside(p)
    assert np.hypot(p.x[0] - C, p.y[0] - C) == pytest.approx(R)
    assert p.x[0] == pytest.approx(p.y[0])
    # already inside: untouched
    assert (p.x[1], p.y[1]) == (300.0, 300.0)


def test_resolve_moves_escaped_vertex_inward_and_damps_outward_speed():
    arena = CircularArena()
    n = np.array([np.cos(np.pi / 4), np.sin(np.pi / 4)])
    pos = np.array([C, C]) + (R + 3.0) * n
    v = 50.0 * n
    p = _point(pos[0], pos[1], v[0], v[1])
    arena.resolve(p, drx=v[:1] * 0.01, dry=v[1:] * 0.01)

    dist = np.hypot(p.x[0] - C, p.y[0] - C)
    assert dist < R + 3.0
    assert dist <= R + 1e-9
    v_after = np.array([p.vx[0], p.vy[0]])
    assert abs(np.dot(v_after, n)) <= abs(np.dot(v, n))
    # and it now points back into the arena
    assert np.dot(v_after, n) < 0


def test_contains():
    arena = CircularArena()
    inside = arena.contains(np.array([190.0, 380.0, 380.0]), np.array([190.0, 190.0, 380.0]))
    assert inside.tolist() == [True, True, False]


def test_from_params_and_oversized_arena_warning(caplog):
    arena = CircularArena.from_params(SoftBodyParams(tangential_damping=1.0, normal_damping=0.2))
    assert arena.fits_display()
    assert arena.tangential_damping == 1.0 and arena.normal_damping == 0.2

    caplog.set_level(logging.WARNING, logger="softbody_sim")
    big = CircularArena.from_params(SoftBodyParams(arena_radius=250.0))
    assert not big.fits_display()
    assert any("extends past" in r.getMessage() for r in caplog.records)


def test_reflect_uses_wall_direction_outside_the_circle():
    """
    A vertex past the wall at 1.25 R gets the same transform as one on the
    wall along the same ray: only the direction from the center matters.
    """
    arena = CircularArena(tangential_damping=1.0, normal_damping=0.9)
    n = np.array([np.cos(np.pi / 4), np.sin(np.pi / 4)])
    v = 50.0 * n

    on_wall = _point(*(np.array([C, C]) + R * n), *v)
    beyond = _point(*(np.array([C, C]) + 1.25 * R * n), *v)
    arena.reflect(on_wall, np.array([True]))
    arena.reflect(beyond, np.array([True]))
    assert (beyond.vx[0], beyond.vy[0]) == pytest.approx((on_wall.vx[0], on_wall.vy[0]))


def test_resolve_never_grows_outward_speed_with_high_normal_factor():
    arena = CircularArena(tangential_damping=1.0, normal_damping=0.9)
    n = np.array([np.cos(np.pi / 4), np.sin(np.pi / 4)])
    pos = np.array([C, C]) + 1.25 * R * n
    v = 50.0 * n
    p = _point(pos[0], pos[1], v[0], v[1])
    arena.resolve(p, drx=v[:1] * 0.01, dry=v[1:] * 0.01)

    v_after = np.array([p.vx[0], p.vy[0]])
    assert abs(np.dot(v_after, n)) <= 50.0
    assert np.dot(v_after, n) == pytest.approx(-45.0)
    assert np.hypot(p.x[0] - C, p.y[0] - C) <= R + 1e-9


def test_reflect_at_center_does_not_produce_nan():
    arena = CircularArena()
    p = _point(C, C, vx=5.0, vy=2.0)
    arena.reflect(p, np.array([True]))
    assert np.isfinite(p.vx[0]) and np.isfinite(p.vy[0])
