"""Camera and 4x4 transforms in column-vector form (``M @ v``)."""

from __future__ import annotations

import math

import numpy as np

SCREEN_WIDTH = 1440
SCREEN_HEIGHT = 1080


def _vec3(values) -> np.ndarray:
    vector = np.asarray(values, dtype=np.float32)
    if vector.shape != (3,):
        raise ValueError(f"expected 3 components, got shape {vector.shape}")
    return vector


def _mat4(matrix) -> np.ndarray:
    result = np.asarray(matrix, dtype=np.float32)
    if result.shape != (4, 4):
        raise ValueError(f"expected a 4x4 matrix, got shape {result.shape}")
    return result


def translate(position) -> np.ndarray:
    matrix = np.eye(4, dtype=np.float32)
    matrix[:3, 3] = _vec3(position)
    return matrix


def scale(factors) -> np.ndarray:
    return np.diag(np.append(_vec3(factors), 1.0)).astype(np.float32)


def rotate(angle, axis) -> np.ndarray:
    """Rotation by ``angle`` radians about ``axis``."""
    a = _vec3(axis).astype(np.float64)
    length = np.linalg.norm(a)
    if length == 0:
        raise ValueError("rotation axis must not be zero")
    x, y, z = a / length
    c, s = math.cos(angle), math.sin(angle)
    cross = np.array([[0.0, -z, y], [z, 0.0, -x], [-y, x, 0.0]])
    matrix = np.eye(4, dtype=np.float32)
    matrix[:3, :3] = c * np.eye(3) + s * cross + (1 - c) * np.outer([x, y, z], [x, y, z])
    return matrix


def ortho(left, right, bottom, top, near, far) -> np.ndarray:
    if left == right or bottom == top or near == far:
        raise ValueError("orthographic volume must have non-zero extent")
    w, h, d = right - left, top - bottom, far - near
    matrix = np.diag([2 / w, 2 / h, -2 / d, 1.0]).astype(np.float32)
    matrix[:3, 3] = [-(right + left) / w, -(top + bottom) / h, -(far + near) / d]
    return matrix


def perspective_fov_lh(fov, width, height, near, far) -> np.ndarray:
    """Left-handed perspective; ``fov`` is the vertical angle in radians."""
    if width <= 0 or height <= 0 or fov <= 0:
        raise ValueError("fov, width and height must be positive")
    if near == far:
        raise ValueError("near and far planes must differ")
    h = 1 / math.tan(0.5 * fov)
    matrix = np.zeros((4, 4), dtype=np.float32)
    matrix[0, 0] = h * height / width
    matrix[1, 1] = h
    matrix[2, 2] = (far + near) / (far - near)
    matrix[2, 3] = -(2 * far * near) / (far - near)
    matrix[3, 2] = 1
    return matrix


class Camera:
    """The view and projection transforms of the scene."""

    def __init__(self) -> None:
        self.position = np.zeros(3, dtype=np.float32)
        self.view = np.eye(4, dtype=np.float32)
        self.projection = np.eye(4, dtype=np.float32)

    def mvp(self, world) -> np.ndarray:
        return self.projection @ self.view @ _mat4(world)

    def set_view(self, matrix) -> None:
        """View from the camera position, applied after ``matrix``."""
        self.view = (np.linalg.inv(translate(self.position)) @ _mat4(matrix)).astype(np.float32)

    def set_projection(self, matrix) -> None:
        self.projection = _mat4(matrix).copy()

    def create_ortho(self, left, right, bottom, top, near, far) -> np.ndarray:
        self.projection = ortho(left, right, bottom, top, near, far)
        return self.projection

    def create_perspective(self, fov, width, height, near, far) -> np.ndarray:
        self.projection = perspective_fov_lh(fov, width, height, near, far)
        return self.projection