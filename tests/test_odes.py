import math

import pytest

from astrocel.integrators import rk4_step
from astrocel.odes import GRAVITATIONAL_CONSTANT, NewtonianTwoBody, State


def _norm(v):
    return math.sqrt(sum(c * c for c in v))


def test_state_addition_and_scaling_agree():
    s = State((1.0, 2.0, 3.0), (4.0, 5.0, 6.0))
    assert s + s == 2.0 * s
    assert (s * 3.0) / 3.0 == s


def test_state_default_is_zero():
    z = State()
    s = State((1.0, -1.0, 2.0), (0.5, 0.5, 0.5))
    assert s + z == s


def test_derivative_of_position_is_velocity():
    ode = NewtonianTwoBody(central_mass=5.972e24)
    state = State((7.0e6, 0.0, 0.0), (0.0, 7.5e3, 0.0))
    assert ode(state, 0.0).position == state.velocity


def test_zero_distance_has_no_acceleration():
    ode = NewtonianTwoBody(central_mass=5.972e24)
    state = State((0.0, 0.0, 0.0), (1.0, 2.0, 3.0))
    derivative = ode(state, 0.0)
    assert derivative.velocity == (0.0, 0.0, 0.0)
    assert derivative.position == state.velocity


def test_acceleration_points_to_center():
    ode = NewtonianTwoBody(central_mass=1.0e20)
    position = (3.0e5, -4.0e5, 1.0e5)
    accel = ode(State(position, (0.0, 0.0, 0.0)), 0.0).velocity
    dot = sum(a * p for a, p in zip(accel, position))
    assert dot < 0
    assert dot == pytest.approx(-_norm(accel) * _norm(position))


def test_acceleration_follows_inverse_square():
    ode = NewtonianTwoBody(central_mass=1.0e22)
    near = ode(State((1.0e6, 0.0, 0.0)), 0.0).velocity
    far = ode(State((2.0e6, 0.0, 0.0)), 0.0).velocity
    assert _norm(near) == pytest.approx(4.0 * _norm(far))


def test_acceleration_scales_with_mass():
    light = NewtonianTwoBody(central_mass=1.0e20)(State((5.0e5, 0.0, 0.0)), 0.0).velocity
    heavy = NewtonianTwoBody(central_mass=3.0e20)(State((5.0e5, 0.0, 0.0)), 0.0).velocity
    assert _norm(heavy) == pytest.approx(3.0 * _norm(light))


def test_circular_orbit_keeps_radius_under_rk4():
    mass = 5.972e24
    radius = 7.0e6
    speed = math.sqrt(GRAVITATIONAL_CONSTANT * mass / radius)
    ode = NewtonianTwoBody(central_mass=mass)
    state = State((radius, 0.0, 0.0), (0.0, speed, 0.0))
    t = 0.0
    for _ in range(100):
        state = rk4_step(state, t, 10.0, ode)
        t += 10.0
    assert _norm(state.position) == pytest.approx(radius, rel=1e-6)
    assert _norm(state.velocity) == pytest.approx(speed, rel=1e-6)