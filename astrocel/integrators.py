"""Numerical integrators: fourth-order Runge-Kutta and symplectic Euler."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

S = TypeVar("S")
V = TypeVar("V")


def rk4_step(state: S, t: float, dt: float, f: Callable[[S, float], S]) -> S:
    """Advance ``state`` by one RK4 step of size ``dt`` and return the new state.

    ``f(state, t)`` returns the time derivative of the state. States must
    support addition with each other and multiplication by a float from the
    left.
    """
    half = 0.5 * dt
    k1 = f(state, t)
    k2 = f(state + half * k1, t + half)
    k3 = f(state + half * k2, t + half)
    k4 = f(state + dt * k3, t + dt)
    return state + (dt / 6.0) * (k1 + 2.0 * k2 + 2.0 * k3 + k4)


def symplectic_euler_step(position: V, velocity: Any, acceleration: Any, dt: float) -> tuple[V, Any]:
    """Advance position and velocity by one symplectic Euler step.

    The position is moved with the velocity from before the step; the new
    ``(position, velocity)`` pair is returned.
    """
    new_position = position + velocity * dt
    new_velocity = velocity + acceleration * dt
    return new_position, new_velocity