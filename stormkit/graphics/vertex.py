"""Descriptions of vertex attributes and the pointers they configure."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum, IntEnum

_log = logging.getLogger(__name__)


class AttributeType(IntEnum):
    """Component data types of a vertex attribute, by their graphics API value."""

    BYTE = 0x1400
    UNSIGNED_BYTE = 0x1401
    SHORT = 0x1402
    UNSIGNED_SHORT = 0x1403
    INT = 0x1404
    UNSIGNED_INT = 0x1405
    FLOAT = 0x1406
    DOUBLE = 0x140A
    HALF_FLOAT = 0x140B
    FIXED = 0x140C
    INT_2_10_10_10_REV = 0x8D9F
    UNSIGNED_INT_2_10_10_10_REV = 0x8368
    UNSIGNED_INT_10F_11F_11F_REV = 0x8C3B


class VertexInputType(Enum):
    """The stored type of each attribute component: byte size and data type."""

    I8 = (1, AttributeType.BYTE)
    U8 = (1, AttributeType.UNSIGNED_BYTE)
    I16 = (2, AttributeType.SHORT)
    U16 = (2, AttributeType.UNSIGNED_SHORT)
    I32 = (4, AttributeType.INT)
    U32 = (4, AttributeType.UNSIGNED_INT)
    F16 = (2, AttributeType.HALF_FLOAT)
    F32 = (4, AttributeType.FLOAT)
    F64 = (8, AttributeType.DOUBLE)
    FIXED = (4, AttributeType.FIXED)
    INT_2_10_10_10_REV = (4, AttributeType.INT_2_10_10_10_REV)
    UNSIGNED_INT_2_10_10_10_REV = (4, AttributeType.UNSIGNED_INT_2_10_10_10_REV)
    UNSIGNED_INT_10F_11F_11F_REV = (4, AttributeType.UNSIGNED_INT_10F_11F_11F_REV)

    def __init__(self, size: int, attribute_type: AttributeType) -> None:
        self.size = size
        self.attribute_type = attribute_type


class VertexOutputType(Enum):
    """How the shader reads an attribute.

    NORMALIZED_F32 maps signed values to [-1, 1] and unsigned to [0, 1];
    F32 converts to float as is; I32 converts to integer.
    """

    NORMALIZED_F32 = (False, True)
    F32 = (False, False)
    I32 = (True, False)

    def __init__(self, integer: bool, normalized: bool) -> None:
        self.integer = integer
        self.normalized = normalized


@dataclass(frozen=True)
class VertexAttribute:
    """One attribute of a vertex: component count, stored type and shader type."""

    count: int
    input: VertexInputType
    output: VertexOutputType


@dataclass(frozen=True)
class AttributePointer:
    """The pointer set up for one attribute of an instanced vertex layout."""

    index: int
    count: int
    attribute_type: AttributeType
    integer: bool
    normalized: bool
    stride: int
    offset: int
    divisor: int = 1


def configure_vertex(attributes: Iterable[VertexAttribute], stride: int) -> list[AttributePointer]:
    """Lay out attributes one after another in a vertex of ``stride`` bytes."""
    pointers = []
    offset = 0
    for index, attribute in enumerate(attributes):
        pointers.append(
            AttributePointer(
                index=index,
                count=attribute.count,
                attribute_type=attribute.input.attribute_type,
                integer=attribute.output.integer,
                normalized=attribute.output.normalized and not attribute.output.integer,
                stride=stride,
                offset=offset,
            )
        )
        offset += attribute.count * attribute.input.size
    _log.debug("Configured vertex: Size %d, Stride: %d", offset, stride)
    return pointers