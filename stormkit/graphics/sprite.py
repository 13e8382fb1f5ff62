"""Per-instance sprite data for the sprite shader."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import ClassVar

from stormkit.graphics.texture_section import TextureSection
from stormkit.graphics.vertex import VertexAttribute, VertexInputType, VertexOutputType
from stormkit.math.aabb import AABB2D

WHITE = (255, 255, 255, 255)

_U16_MAX = 0xFFFF
_U32_MAX = 0xFFFF_FFFF


def _saturate(value: float, maximum: int) -> int:
    """Truncate a float toward zero and clamp it to [0, maximum]; NaN becomes 0."""
    if math.isnan(value):
        return 0
    if value <= 0.0:
        return 0
    if value >= maximum:
        return maximum
    return int(value)


def _size_from_floats(size) -> tuple[int, int]:
    width, height = size
    return (
        _saturate(float(width), _U32_MAX) & _U16_MAX,
        _saturate(float(height), _U32_MAX) & _U16_MAX,
    )


def _check_u16(name: str, value: int) -> None:
    if not 0 <= value <= _U16_MAX:
        raise ValueError(f"{name} must be in [0, {_U16_MAX}], got {value}")


def _check_color(color) -> tuple[int, int, int, int]:
    color = tuple(color)
    if len(color) != 4 or not all(0 <= c <= 255 for c in color):
        raise ValueError(f"color must be four components in [0, 255], got {color!r}")
    return color


@dataclass(frozen=True)
class Sprite:
    """One sprite instance.

    ``pos`` is the bottom left corner and depth in pixels, ``size`` is in pixels,
    ``color`` multiplies the texture, and ``rotation`` is in 1/65536 of a turn.
    """

    pos: tuple[float, float, float] = (0.0, 0.0, 0.0)
    size: tuple[int, int] = (100, 100)
    texture: TextureSection = field(default_factory=TextureSection.full)
    color: tuple[int, int, int, int] = WHITE
    rotation: int = 0

    ATTRIBUTES: ClassVar[tuple[VertexAttribute, ...]] = (
        VertexAttribute(3, VertexInputType.F32, VertexOutputType.F32),
        VertexAttribute(2, VertexInputType.U16, VertexOutputType.F32),
        VertexAttribute(4, VertexInputType.U16, VertexOutputType.NORMALIZED_F32),
        VertexAttribute(4, VertexInputType.U8, VertexOutputType.NORMALIZED_F32),
        VertexAttribute(1, VertexInputType.U16, VertexOutputType.NORMALIZED_F32),
    )

    def __post_init__(self) -> None:
        x, y, z = self.pos
        object.__setattr__(self, "pos", (float(x), float(y), float(z)))
        width, height = self.size
        _check_u16("size width", width)
        _check_u16("size height", height)
        object.__setattr__(self, "size", (int(width), int(height)))
        object.__setattr__(self, "color", _check_color(self.color))
        _check_u16("rotation", self.rotation)

    @classmethod
    def from_floats(cls, pos, size, texture, color, rotation: float) -> Sprite:
        """Build a sprite from a float size in pixels and a rotation in turns.

        Size components wrap at 65536; the rotation keeps only its fractional part.
        """
        turns = math.fmod(float(rotation), 1.0) if math.isfinite(rotation) else math.nan
        return cls(
            pos=pos,
            size=_size_from_floats(size),
            texture=texture,
            color=color,
            rotation=_saturate(turns * 65536.0, _U16_MAX),
        )

    def to_aabb(self) -> AABB2D:
        """The 2D box covered by the sprite."""
        return AABB2D.from_pos_size(self.pos[:2], (float(self.size[0]), float(self.size[1])))