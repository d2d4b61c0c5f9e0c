"""Ordinary differential equations for orbital motion."""

from __future__ import annotations

import math
from dataclasses import dataclass

Vec3 = tuple[float, float, float]

GRAVITATIONAL_CONSTANT = 6.67430e-11
_MIN_DISTANCE = 1e-12
_ZERO: Vec3 = (0.0, 0.0, 0.0)


def _add(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def _scale(a: Vec3, k: float) -> Vec3:
    return (a[0] * k, a[1] * k, a[2] * k)


@dataclass(frozen=True)
class State:
    """Position and velocity of a body, or their time derivatives."""

    position: Vec3 = _ZERO
    velocity: Vec3 = _ZERO

    def __add__(self, other: State) -> State:
        if not isinstance(other, State):
            return NotImplemented
        return State(_add(self.position, other.position), _add(self.velocity, other.velocity))

    def __mul__(self, k: float) -> State:
        if not isinstance(k, (int, float)):
            return NotImplemented
        return State(_scale(self.position, k), _scale(self.velocity, k))

    __rmul__ = __mul__

    def __truediv__(self, k: float) -> State:
        if not isinstance(k, (int, float)):
            return NotImplemented
        return self * (1.0 / k)


@dataclass(frozen=True)
class NewtonianTwoBody:
    """Two-body gravitational motion around a central mass."""

    central_mass: float
    gravitational_constant: float = GRAVITATIONAL_CONSTANT

    def __call__(self, state: State, t: float) -> State:
        """Return the time derivative of ``state``."""
        position = state.position
        distance = math.sqrt(sum(c * c for c in position))

        if distance < _MIN_DISTANCE:
            return State(position=state.velocity, velocity=_ZERO)

        factor = -self.gravitational_constant * self.central_mass / distance**3
        return State(position=state.velocity, velocity=_scale(position, factor))