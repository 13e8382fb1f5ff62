"""Per-glyph sprite data for the text shader."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from stormkit.graphics.sprite import WHITE, _check_color, _check_u16, _size_from_floats
from stormkit.graphics.texture_section import TextureSection
from stormkit.graphics.vertex import VertexAttribute, VertexInputType, VertexOutputType


@dataclass(frozen=True)
class TextSprite:
    """One rendered glyph: position and depth, size in pixels, atlas section and color."""

    pos: tuple[float, float, float] = (0.0, 0.0, 0.0)
    size: tuple[int, int] = (0, 0)
    texture: TextureSection = field(default_factory=TextureSection.full)
    color: tuple[int, int, int, int] = WHITE

    ATTRIBUTES: ClassVar[tuple[VertexAttribute, ...]] = (
        VertexAttribute(3, VertexInputType.F32, VertexOutputType.F32),
        VertexAttribute(2, VertexInputType.U16, VertexOutputType.F32),
        VertexAttribute(4, VertexInputType.U16, VertexOutputType.NORMALIZED_F32),
        VertexAttribute(4, VertexInputType.U8, VertexOutputType.NORMALIZED_F32),
    )

    def __post_init__(self) -> None:
        x, y, z = self.pos
        object.__setattr__(self, "pos", (float(x), float(y), float(z)))
        width, height = self.size
        _check_u16("size width", width)
        _check_u16("size height", height)
        object.__setattr__(self, "size", (int(width), int(height)))
        object.__setattr__(self, "color", _check_color(self.color))

    @classmethod
    def from_floats(cls, pos, size, texture, color) -> TextSprite:
        """Build a glyph sprite from a float size; components wrap at 65536."""
        return cls(pos=pos, size=_size_from_floats(size), texture=texture, color=color)