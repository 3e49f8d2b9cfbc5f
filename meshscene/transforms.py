"""4x4 transform matrices for points written as column vectors (M @ v)."""

from __future__ import annotations

import math

import numpy as np

_EPSILON = float(np.finfo(np.float32).eps)


def _vec3(values) -> np.ndarray:
    vector = np.asarray(values, dtype=np.float64)
    if vector.shape != (3,):
        raise ValueError(f"expected three components, got shape {vector.shape}")
    return vector


def _mat4(values) -> np.ndarray:
    matrix = np.array(values, dtype=np.float64)
    if matrix.shape != (4, 4):
        raise ValueError(f"expected a 4x4 matrix, got shape {matrix.shape}")
    return matrix


def _normalize(vector: np.ndarray) -> np.ndarray:
    with np.errstate(divide="ignore", invalid="ignore"):
        return vector / np.linalg.norm(vector)


def look_at(eye, center, up) -> np.ndarray:
    """Right-handed view matrix looking from eye towards center."""
    eye, center, up = _vec3(eye), _vec3(center), _vec3(up)
    forward = _normalize(center - eye)
    side = _normalize(np.cross(forward, up))
    upward = np.cross(side, forward)
    result = np.identity(4)
    result[0, :3] = side
    result[1, :3] = upward
    result[2, :3] = -forward
    result[0, 3] = -np.dot(side, eye)
    result[1, 3] = -np.dot(upward, eye)
    result[2, 3] = np.dot(forward, eye)
    return result


def perspective(fovy, aspect, near, far) -> np.ndarray:
    """Right-handed perspective projection with depth mapped to [-1, 1]."""
    tan_half = np.float64(math.tan(fovy / 2.0))
    result = np.zeros((4, 4))
    with np.errstate(divide="ignore", invalid="ignore"):
        result[0, 0] = np.float64(1.0) / (np.float64(aspect) * tan_half)
        result[1, 1] = np.float64(1.0) / tan_half
    result[2, 2] = -(far + near) / (far - near)
    result[3, 2] = -1.0
    result[2, 3] = -(2.0 * far * near) / (far - near)
    return result


def ortho(left, right, bottom, top, near, far) -> np.ndarray:
    """Right-handed orthographic projection with depth mapped to [-1, 1]."""
    result = np.identity(4)
    with np.errstate(divide="ignore", invalid="ignore"):
        width = np.float64(right - left)
        height = np.float64(top - bottom)
        depth = np.float64(far - near)
        result[0, 0] = 2.0 / width
        result[1, 1] = 2.0 / height
        result[2, 2] = -2.0 / depth
        result[0, 3] = -(right + left) / width
        result[1, 3] = -(top + bottom) / height
        result[2, 3] = -(far + near) / depth
    return result


def rotate(matrix, angle, axis) -> np.ndarray:
    """Post-multiply matrix by a rotation of angle radians about axis."""
    a = _normalize(_vec3(axis))
    c, s = math.cos(angle), math.sin(angle)
    cross = np.array([[0.0, -a[2], a[1]], [a[2], 0.0, -a[0]], [-a[1], a[0], 0.0]])
    rotation = np.identity(4)
    rotation[:3, :3] = c * np.identity(3) + s * cross + (1.0 - c) * np.outer(a, a)
    return _mat4(matrix) @ rotation


def translate(matrix, offset) -> np.ndarray:
    """Post-multiply matrix by a translation."""
    translation = np.identity(4)
    translation[:3, 3] = _vec3(offset)
    return _mat4(matrix) @ translation


def scale(matrix, factors) -> np.ndarray:
    """Post-multiply matrix by a per-axis scale."""
    scaling = np.diag([*_vec3(factors), 1.0])
    return _mat4(matrix) @ scaling


def euler_to_matrix(angles) -> np.ndarray:
    """Rotation matrix of the quaternion built from Euler angles (x, y, z) in radians."""
    half = _vec3(angles) * 0.5
    cx, cy, cz = np.cos(half)
    sx, sy, sz = np.sin(half)
    w = cx * cy * cz + sx * sy * sz
    x = sx * cy * cz - cx * sy * sz
    y = cx * sy * cz + sx * cy * sz
    z = cx * cy * sz - sx * sy * cz
    result = np.identity(4)
    result[:3, :3] = [
        [1 - 2 * (y * y + z * z), 2 * (x * y - w * z), 2 * (x * z + w * y)],
        [2 * (x * y + w * z), 1 - 2 * (x * x + z * z), 2 * (y * z - w * x)],
        [2 * (x * z - w * y), 2 * (y * z + w * x), 1 - 2 * (x * x + y * y)],
    ]
    return result


def decompose_transform(transform):
    """Split a model matrix into (translation, rotation in radians, scale)."""
    local = _mat4(transform)
    if abs(local[3, 3]) < _EPSILON:
        raise ValueError("transform has a zero homogeneous component")

    if np.any(np.abs(local[3, :3]) >= _EPSILON):
        local[3, :3] = 0.0
        local[3, 3] = 1.0

    translation = local[:3, 3].copy()

    rows = local[:3, :3].T.copy()
    factors = np.linalg.norm(rows, axis=1)
    with np.errstate(divide="ignore", invalid="ignore"):
        rows = rows / factors[:, np.newaxis]

    rotation = np.zeros(3)
    rotation[1] = math.asin(float(np.clip(-rows[0, 2], -1.0, 1.0)))
    if math.cos(rotation[1]) != 0:
        rotation[0] = math.atan2(rows[1, 2], rows[2, 2])
        rotation[2] = math.atan2(rows[0, 1], rows[0, 0])
    else:
        rotation[0] = math.atan2(-rows[2, 0], rows[1, 1])
        rotation[2] = 0.0
    return translation, rotation, factors