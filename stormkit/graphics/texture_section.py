"""Normalized 16-bit texture coordinates for a section of a texture."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

_MAX_INTEGER = 0xFFFF
_MAX_FLOAT = np.float32(_MAX_INTEGER + 1)
_NUDGE = np.float32(0.25)


def _to_u16(value: np.float32) -> int:
    value = float(value)
    if math.isnan(value):
        return 0
    return int(min(max(value, 0.0), float(_MAX_INTEGER)))


@dataclass(frozen=True)
class TextureSection:
    """Edges of a texture region in units of 1/65536 of the texture size."""

    left: int = 0
    right: int = _MAX_INTEGER
    top: int = 0
    bottom: int = _MAX_INTEGER

    @classmethod
    def from_texture(cls, texture, left: int, right: int, top: int, bottom: int) -> TextureSection:
        """A section from texel edges, (0, 0) being the top left of ``texture``.

        ``texture`` is anything with ``width`` and ``height``.
        """
        if texture.width <= 0 or texture.height <= 0:
            raise ValueError("texture width and height must be positive")
        h_size = _MAX_FLOAT / np.float32(texture.width)
        v_size = _MAX_FLOAT / np.float32(texture.height)
        h_nudge = h_size * _NUDGE
        v_nudge = v_size * _NUDGE
        return cls(
            _to_u16(np.float32(left) * h_size + h_nudge),
            _to_u16(np.float32(right) * h_size - h_nudge),
            _to_u16(np.float32(top) * v_size + v_nudge),
            _to_u16(np.float32(bottom) * v_size - v_nudge),
        )

    @classmethod
    def full(cls) -> TextureSection:
        """The section covering the whole texture."""
        return cls(0, _MAX_INTEGER, 0, _MAX_INTEGER)

    def mirror_y(self) -> TextureSection:
        """Flip horizontally by swapping left and right."""
        return TextureSection(self.right, self.left, self.top, self.bottom)

    def mirror_x(self) -> TextureSection:
        """Flip vertically by swapping top and bottom."""
        return TextureSection(self.left, self.right, self.bottom, self.top)

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.left, self.right, self.top, self.bottom)