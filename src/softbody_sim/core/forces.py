# MIT License (see LICENSE)
"""
Force accumulation for the pressurized soft body.

One force pass runs three phases over the current positions and
velocities:

A. External forces: gravity (only once fully inflated), the directional
   body force, and the tether on a single vertex.
B. Ring springs: damped spring forces in equal and opposite pairs, plus the
   outward normal and current length of every spring.
C. Pressure: the enclosed area V is estimated from the spring normals, and
   every spring pushes both endpoints along its normal with d_i * P / V,
   the discretized line integral of pressure over the boundary (P*V = const).

Phase B must run before phase C: the normals depend on the positions of
the current pass.

Reference:
    M. Matyka, "How to implement a pressure soft body model".
"""
from __future__ import annotations

import numpy as np

from ..params import SoftBodyParams
from ..types import InputState, PointMasses, SoftBody, SpringRing, TetherState


# =============================================================================
# Phase A - external forces
# =============================================================================

def apply_external_forces(
    points: PointMasses,
    inputs: InputState,
    gravity: float,
    applied_force: float,
    gravity_on: bool,
) -> None:
    """
    Reset forces to gravity and the directional body force.

    Directional flags replace the axis component outright (gravity included).
    Opposite flags cancel that axis to zero.

    Args:
        points: Vertex state; fx/fy are overwritten.
        inputs: Directional flags.
        gravity: Downward acceleration g.
        applied_force: Acceleration of the directional inputs F_app.
        gravity_on: Whether gravity is engaged (P >= P_final).
    """
    m = points.mass
    fapp = applied_force * m
    points.fx.fill(0.0)
    points.fy.fill(gravity * m if gravity_on else 0.0)

    if inputs.up:
        points.fy.fill(-fapp)
    if inputs.right:
        points.fx.fill(fapp)
    if inputs.left:
        points.fx.fill(-fapp)
    if inputs.down:
        points.fy.fill(fapp)
    if inputs.left and inputs.right:
        points.fx.fill(0.0)
    if inputs.up and inputs.down:
        points.fy.fill(0.0)


def apply_tether(
    points: PointMasses,
    tether: TetherState,
    vertex: int,
    rest_length: float,
    stiffness: float,
    damping: float,
) -> None:
    """
    Pull one vertex toward the tether anchor with a spring-damper.

    F = (d - L_t) * K_t + ((v . r) / d) * D_t, with r = p - anchor,
    subtracted from the vertex force along r / d.

    Has no effect while the tether is released or when the vertex sits
    exactly on the anchor.
    """
    if not tether.engaged:
        return
    dx = points.x[vertex] - tether.anchor[0]
    dy = points.y[vertex] - tether.anchor[1]
    d = float(np.hypot(dx, dy))
    if d == 0.0:
        return
    f = (d - rest_length) * stiffness + (points.vx[vertex] * dx + points.vy[vertex] * dy) * damping / d
    points.fx[vertex] -= (dx / d) * f
    points.fy[vertex] -= (dy / d) * f


# =============================================================================
# Phase B - ring springs
# =============================================================================

def accumulate_spring_forces(
    points: PointMasses,
    springs: SpringRing,
    k_spring: float,
    k_damping: float,
) -> None:
    """
    Add damped spring forces and refresh spring lengths and normals.

    For spring (a, b) with r = p_a - p_b and d = |r|:
        F = (d - L) * K_s + ((v_a - v_b) . r / d) * K_d
    F * r/d is subtracted from a and added to b. The damping term uses the
    raw separation vector, as does the tether.

    The outward normal of a counter-clockwise ring is
        n = (-(y_a - y_b) / d, (x_a - x_b) / d).
    Zero-length springs contribute no force and get a (0, 0) normal.
    """
    a, b = springs.a, springs.b
    dx = points.x[a] - points.x[b]
    dy = points.y[a] - points.y[b]
    d = np.hypot(dx, dy)
    live = d != 0.0
    safe_d = np.where(live, d, 1.0)

    dvx = points.vx[a] - points.vx[b]
    dvy = points.vy[a] - points.vy[b]
    f = (d - springs.rest_length) * k_spring + (dvx * dx + dvy * dy) * k_damping / safe_d
    f = np.where(live, f, 0.0)

    ux = dx / safe_d
    uy = dy / safe_d
    fx0 = ux * f
    fy0 = uy * f

    # Newton's third law: equal and opposite on the two endpoints
    np.subtract.at(points.fx, a, fx0)
    np.subtract.at(points.fy, a, fy0)
    np.add.at(points.fx, b, fx0)
    np.add.at(points.fy, b, fy0)

    springs.current_length[:] = d
    springs.nx[:] = np.where(live, -uy, 0.0)
    springs.ny[:] = np.where(live, ux, 0.0)


# =============================================================================
# Phase C - pressure
# =============================================================================

def enclosed_volume(points: PointMasses, springs: SpringRing, estimator: str = "divergence") -> float:
    """
    Area enclosed by the ring.

    "divergence": V = sum(1/2 * |x_a - x_b| * |n_x| * d) over the springs,
        using the normals and lengths of the last spring pass. This is the
        estimator the pressure constants were tuned with; it is not the
        geometric area.
    "shoelace": V = 1/2 * |sum(x_a * y_b - x_b * y_a)|, the exact area.
    """
    a, b = springs.a, springs.b
    if estimator == "divergence":
        dx = points.x[a] - points.x[b]
        return float(np.sum(0.5 * np.abs(dx) * np.abs(springs.nx) * springs.current_length))
    if estimator == "shoelace":
        cross = points.x[a] * points.y[b] - points.x[b] * points.y[a]
        return float(0.5 * abs(np.sum(cross)))
    raise ValueError(f"Unknown area estimator: {estimator}")


def apply_pressure(
    points: PointMasses,
    springs: SpringRing,
    pressure: float,
    volume: float,
    eps: float,
) -> None:
    """
    Push both endpoints of every spring along its normal by d_i * P / V.

    Skipped entirely when V < eps.
    """
    if volume < eps:
        return
    pv = springs.current_length * (pressure / volume)
    px = springs.nx * pv
    py = springs.ny * pv
    np.add.at(points.fx, springs.a, px)
    np.add.at(points.fy, springs.a, py)
    np.add.at(points.fx, springs.b, px)
    np.add.at(points.fy, springs.b, py)


# =============================================================================
# Full pass
# =============================================================================

def accumulate_forces(
    body: SoftBody,
    params: SoftBodyParams,
    inputs: InputState,
    tether: TetherState,
) -> None:
    """
    Run phases A, B and C on the body's current state.

    Forces are written to body.points.fx/fy; spring lengths and normals are
    refreshed as a side effect.
    """
    points, springs = body.points, body.springs

    apply_external_forces(points, inputs, params.gravity, params.applied_force, body.inflated)
    apply_tether(
        points,
        tether,
        params.tether_vertex,
        params.tether_rest_length,
        params.tether_stiffness,
        params.tether_damping,
    )

    accumulate_spring_forces(points, springs, params.k_spring, params.k_damping)

    volume = enclosed_volume(points, springs, params.area_estimator)
    apply_pressure(points, springs, body.pressure, volume, params.volume_eps)
