"""2D transforms and the matrices handed to a drawable."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

_NEAR_CLIP = -100.0
_FAR_CLIP = 100.0


def _vec2(values=(0.0, 0.0)) -> np.ndarray:
    return np.array(values, dtype=float)


@dataclass
class Transform:
    """Translation, rotation (radians) and scale of an object in the plane."""

    translation: np.ndarray = field(default_factory=_vec2)
    rotation: float = 0.0
    scale: np.ndarray = field(default_factory=lambda: _vec2((1.0, 1.0)))

    def __post_init__(self) -> None:
        self.translation = _vec2(self.translation)
        self.scale = _vec2(self.scale)


@dataclass
class Matrices:
    """Model matrix and combined projection-view matrix."""

    model: np.ndarray
    projection: np.ndarray


def _translate(x: float, y: float, z: float) -> np.ndarray:
    matrix = np.identity(4)
    matrix[:3, 3] = (x, y, z)
    return matrix


def _scale(x: float, y: float, z: float) -> np.ndarray:
    return np.diag([x, y, z, 1.0])


def _rotate_z(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    matrix = np.identity(4)
    matrix[0, 0], matrix[0, 1] = c, -s
    matrix[1, 0], matrix[1, 1] = s, c
    return matrix


def _ortho(left, right, bottom, top, near, far) -> np.ndarray:
    matrix = np.identity(4)
    matrix[0, 0] = 2.0 / (right - left)
    matrix[1, 1] = 2.0 / (top - bottom)
    matrix[2, 2] = -2.0 / (far - near)
    matrix[0, 3] = -(right + left) / (right - left)
    matrix[1, 3] = -(top + bottom) / (top - bottom)
    matrix[2, 3] = -(far + near) / (far - near)
    return matrix


def uniform_matrices(
    transform: Transform,
    size,
    z_index: float,
    window_width: float,
    window_height: float,
) -> Matrices:
    """Build the model and projection-view matrices for one object.

    Screen coordinates have their origin at the window centre.
    """
    width, height = float(size[0]), float(size[1])
    projection = _ortho(0.0, 1.0, 0.0, 1.0, _NEAR_CLIP, _FAR_CLIP)
    view = _scale(1.0 / window_width, 1.0 / window_height, 1.0) @ _translate(
        window_width / 2, window_height / 2, 0.0
    )
    tx, ty = transform.translation
    sx, sy = transform.scale
    model = (
        _translate(tx, ty, z_index)
        @ _rotate_z(transform.rotation)
        @ _scale(sx * width, sy * height, 1.0)
    )
    return Matrices(model=model, projection=projection @ view)