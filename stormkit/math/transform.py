"""Orthographic projection and 2D layer transforms."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace

import numpy as np

IDENTITY_MATRIX = np.identity(4, dtype=np.float32)
IDENTITY_MATRIX.setflags(write=False)


def ortho(left: float, right: float, bottom: float, top: float, near: float, far: float) -> np.ndarray:
    """An orthographic projection matrix (row-major, applied as ``M @ v``)."""
    m = np.zeros((4, 4), dtype=np.float32)
    m[0, 0] = 2.0 / (right - left)
    m[1, 1] = 2.0 / (top - bottom)
    m[2, 2] = -2.0 / (far - near)
    m[0, 3] = -(right + left) / (right - left)
    m[1, 3] = -(top + bottom) / (top - bottom)
    m[2, 3] = -(far + near) / (far - near)
    m[3, 3] = 1.0
    return m


def ortho_from_bounds(bounds) -> np.ndarray:
    """An orthographic matrix for screen bounds with (0, 0) at the center."""
    w = bounds[0] / 2.0
    h = bounds[1] / 2.0
    return ortho(-math.floor(w), math.ceil(w), -math.floor(h), math.ceil(h), -1.0, 1.0)


@dataclass(frozen=True)
class TransformParameters:
    """Translation, zoom and rotation of a layer.

    Rotation is measured in turns; values outside [0, 1) wrap around.
    """

    translation: tuple[float, float] = (0.0, 0.0)
    scale: float = 1.0
    rotation: float = 0.0


def _scale_matrix(scale: float) -> np.ndarray:
    return np.diag(np.array([scale, scale, scale, 1.0], dtype=np.float32))


def _translation_matrix(x: float, y: float) -> np.ndarray:
    m = np.identity(4, dtype=np.float32)
    m[0, 3] = x
    m[1, 3] = y
    return m


def _rotation_z_matrix(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    m = np.identity(4, dtype=np.float32)
    m[0, 0] = c
    m[0, 1] = -s
    m[1, 0] = s
    m[1, 1] = c
    return m


class Transform:
    """Caches the combined orthographic and layer transform, rebuilding it only on change."""

    def __init__(self, logical_size) -> None:
        self._params = TransformParameters()
        self._logical_size = (float(logical_size[0]), float(logical_size[1]))
        self._transform = IDENTITY_MATRIX.copy()
        self._transform_dirty = False
        self._ortho = IDENTITY_MATRIX.copy()
        self._ortho_dirty = True
        self._ortho_transform = IDENTITY_MATRIX.copy()
        self._ortho_transform_dirty = True

    @property
    def parameters(self) -> TransformParameters:
        return self._params

    @property
    def logical_size(self) -> tuple[float, float]:
        return self._logical_size

    def update(self, translation=None, scale=None, rotation=None) -> None:
        """Change any of the layer parameters; omitted ones keep their value."""
        changes = {}
        if translation is not None:
            changes["translation"] = (float(translation[0]), float(translation[1]))
        if scale is not None:
            changes["scale"] = scale
        if rotation is not None:
            changes["rotation"] = rotation
        self._params = replace(self._params, **changes)
        self._transform_dirty = True
        self._ortho_transform_dirty = True

    def set_size(self, logical_size) -> None:
        """Set the logical size of the viewport."""
        self._logical_size = (float(logical_size[0]), float(logical_size[1]))
        self._ortho_dirty = True
        self._ortho_transform_dirty = True

    def generate(self) -> np.ndarray | None:
        """Rebuild the matrix (ortho * scale * translation * rotation) if it changed.

        Returns the new matrix, or None if nothing changed since the last call.
        """
        if self._transform_dirty:
            p = self._params
            tx = math.floor(p.translation[0] * p.scale) / p.scale
            ty = math.floor(p.translation[1] * p.scale) / p.scale
            self._transform = (
                _scale_matrix(p.scale)
                @ _translation_matrix(tx, ty)
                @ _rotation_z_matrix(math.pi * 2.0 * p.rotation)
            )
            self._transform_dirty = False

        if self._ortho_dirty:
            self._ortho = ortho_from_bounds(self._logical_size)
            self._ortho_dirty = False

        if self._ortho_transform_dirty:
            self._ortho_transform = self._ortho @ self._transform
            self._ortho_transform_dirty = False
            return self._ortho_transform.copy()
        return None

    def matrix(self) -> np.ndarray:
        """The current combined matrix, rebuilt first if needed."""
        self.generate()
        return self._ortho_transform.copy()