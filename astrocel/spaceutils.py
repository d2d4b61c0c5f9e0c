"""Conversions between simulation and render space, and quaternion helpers.

Vectors are ``(x, y, z)`` tuples; quaternions are ``(w, x, y, z)`` tuples.
"""

from __future__ import annotations

import math
import sys
from collections.abc import Sequence
from typing import Union

Vec3 = tuple[float, float, float]
Quat = tuple[float, float, float, float]

SCALE_FACTOR = 1000.0
OBJ_SCALE_VISUAL_BOOST = 10.0
MIN_RENDERABLE_SCALE = 0.1

IDENTITY_QUAT: Quat = (1.0, 0.0, 0.0, 0.0)

_EPSILON = sys.float_info.epsilon


def to_simulation_space(
    value: Union[float, Sequence[float]], simulation_scale: float
) -> Union[float, tuple[float, ...]]:
    """Scale a scalar or a vector into simulation space."""
    if isinstance(value, (int, float)):
        return value * simulation_scale
    return tuple(component * simulation_scale for component in value)


def to_render_space_position(vec: Sequence[float], simulation_scale: float) -> Vec3:
    """Convert a simulation-space position to render space."""
    x, y, z = vec
    return (x / simulation_scale, y / simulation_scale, z / simulation_scale)


def to_render_space_scale(simulation_scalar: float, simulation_scale: float) -> float:
    """Convert a simulation-space scale to render space."""
    return simulation_scalar / simulation_scale


def renderable_scale(scale: float) -> float:
    """Clamp a scale to the smallest size that can still be rendered."""
    if math.isnan(scale):
        return MIN_RENDERABLE_SCALE
    return max(scale, MIN_RENDERABLE_SCALE)


def euler_angles_to_quat(euler_angles: Sequence[float], in_radians: bool = False) -> Quat:
    """Convert (pitch, yaw, roll) Euler angles to a quaternion.

    Angles are taken as degrees unless ``in_radians`` is true.
    """
    angles = tuple(euler_angles) if in_radians else tuple(math.radians(a) for a in euler_angles)
    cx, cy, cz = (math.cos(a * 0.5) for a in angles)
    sx, sy, sz = (math.sin(a * 0.5) for a in angles)
    return (
        cx * cy * cz + sx * sy * sz,
        sx * cy * cz - cx * sy * sz,
        cx * sy * cz + sx * cy * sz,
        cx * cy * sz - sx * sy * cz,
    )


def _near_zero(a: float, b: float) -> bool:
    return abs(a) < _EPSILON and abs(b) < _EPSILON


def quat_to_euler_angles(quat: Sequence[float], convert_to_radians: bool = False) -> Vec3:
    """Convert a quaternion to (pitch, yaw, roll) Euler angles.

    The result is in degrees unless ``convert_to_radians`` is true.
    """
    w, x, y, z = quat

    pitch_y = 2.0 * (y * z + w * x)
    pitch_x = w * w - x * x - y * y + z * z
    pitch = 2.0 * math.atan2(x, w) if _near_zero(pitch_y, pitch_x) else math.atan2(pitch_y, pitch_x)

    yaw = math.asin(min(1.0, max(-1.0, -2.0 * (x * z - w * y))))

    roll_y = 2.0 * (x * y + w * z)
    roll_x = w * w + x * x - y * y - z * z
    roll = 0.0 if _near_zero(roll_y, roll_x) else math.atan2(roll_y, roll_x)

    if convert_to_radians:
        return (pitch, yaw, roll)
    return (math.degrees(pitch), math.degrees(yaw), math.degrees(roll))


def quat_multiply(a: Sequence[float], b: Sequence[float]) -> Quat:
    """Return the Hamilton product ``a * b`` (apply ``b`` first, then ``a``)."""
    aw, ax, ay, az = a
    bw, bx, by, bz = b
    return (
        aw * bw - ax * bx - ay * by - az * bz,
        aw * bx + ax * bw + ay * bz - az * by,
        aw * by + ay * bw + az * bx - ax * bz,
        aw * bz + az * bw + ax * by - ay * bx,
    )


def quat_normalize(q: Sequence[float]) -> Quat:
    """Return a unit quaternion; a zero quaternion becomes the identity."""
    w, x, y, z = q
    length = math.sqrt(w * w + x * x + y * y + z * z)
    if length <= 0.0:
        return IDENTITY_QUAT
    return (w / length, x / length, y / length, z / length)


def _cross(a: Sequence[float], b: Sequence[float]) -> Vec3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def quat_rotate(q: Sequence[float], v: Sequence[float]) -> Vec3:
    """Rotate a vector by a unit quaternion."""
    w, qx, qy, qz = q
    axis = (qx, qy, qz)
    uv = _cross(axis, v)
    uuv = _cross(axis, uv)
    return (
        v[0] + 2.0 * (uv[0] * w + uuv[0]),
        v[1] + 2.0 * (uv[1] * w + uuv[1]),
        v[2] + 2.0 * (uv[2] * w + uuv[2]),
    )