"""4x4 transformation matrices for 3D rendering, acting on column vectors."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np


def _vec(values: Sequence[float], name: str) -> np.ndarray:
    arr = np.asarray(values, dtype=float)
    if arr.shape != (3,):
        raise ValueError(f"{name} must have 3 components")
    return arr


def _normalize(v: np.ndarray, name: str) -> np.ndarray:
    length = float(np.linalg.norm(v))
    if length == 0.0:
        raise ValueError(f"{name} must not be a zero vector")
    return v / length


def identity() -> np.ndarray:
    return np.eye(4)


def translate(matrix: np.ndarray, offset: Sequence[float]) -> np.ndarray:
    """Return ``matrix`` followed by a translation by ``offset``."""
    t = np.eye(4)
    t[:3, 3] = _vec(offset, "offset")
    return np.asarray(matrix, dtype=float) @ t


def rotate(matrix: np.ndarray, angle: float, axis: Sequence[float]) -> np.ndarray:
    """Return ``matrix`` followed by a rotation of ``angle`` radians about ``axis``."""
    x, y, z = _normalize(_vec(axis, "axis"), "axis")
    c, s = math.cos(angle), math.sin(angle)
    k = 1.0 - c
    r = np.eye(4)
    r[:3, :3] = (
        (c + x * x * k, x * y * k - z * s, x * z * k + y * s),
        (y * x * k + z * s, c + y * y * k, y * z * k - x * s),
        (z * x * k - y * s, z * y * k + x * s, c + z * z * k),
    )
    return np.asarray(matrix, dtype=float) @ r


def scale(matrix: np.ndarray, factors: Sequence[float]) -> np.ndarray:
    """Return ``matrix`` followed by a scale along each axis."""
    s = np.diag([*_vec(factors, "factors"), 1.0])
    return np.asarray(matrix, dtype=float) @ s


def ortho(left: float, right: float, bottom: float, top: float, near: float, far: float) -> np.ndarray:
    """An orthographic projection mapping the box onto -1..1 clip space."""
    if right == left or top == bottom or far == near:
        raise ValueError("projection box must have non-zero extent")
    m = np.eye(4)
    m[0, 0] = 2.0 / (right - left)
    m[1, 1] = 2.0 / (top - bottom)
    m[2, 2] = -2.0 / (far - near)
    m[0, 3] = -(right + left) / (right - left)
    m[1, 3] = -(top + bottom) / (top - bottom)
    m[2, 3] = -(far + near) / (far - near)
    return m


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """A perspective projection; ``fovy`` is the vertical field of view in radians."""
    if aspect == 0.0 or far == near:
        raise ValueError("aspect must be non-zero and near must differ from far")
    tan_half = math.tan(fovy / 2.0)
    if tan_half == 0.0:
        raise ValueError("field of view must be non-zero")
    m = np.zeros((4, 4))
    m[0, 0] = 1.0 / (aspect * tan_half)
    m[1, 1] = 1.0 / tan_half
    m[2, 2] = -(far + near) / (far - near)
    m[3, 2] = -1.0
    m[2, 3] = -(2.0 * far * near) / (far - near)
    return m


def look_at(eye: Sequence[float], center: Sequence[float], up: Sequence[float]) -> np.ndarray:
    """A right-handed view matrix looking from ``eye`` towards ``center``."""
    e = _vec(eye, "eye")
    f = _normalize(_vec(center, "center") - e, "view direction")
    s = _normalize(np.cross(f, _vec(up, "up")), "side vector")
    u = np.cross(s, f)
    m = np.eye(4)
    m[0, :3] = s
    m[1, :3] = u
    m[2, :3] = -f
    m[0, 3] = -float(np.dot(s, e))
    m[1, 3] = -float(np.dot(u, e))
    m[2, 3] = float(np.dot(f, e))
    return m