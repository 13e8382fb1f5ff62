from stormkit.graphics.vertex import (
    AttributeType,
    VertexAttribute,
    VertexInputType,
    VertexOutputType,
    configure_vertex,
)

SPRITE_LIKE = [
    VertexAttribute(3, VertexInputType.F32, VertexOutputType.F32),
    VertexAttribute(2, VertexInputType.U16, VertexOutputType.F32),
    VertexAttribute(4, VertexInputType.U16, VertexOutputType.NORMALIZED_F32),
    VertexAttribute(4, VertexInputType.U8, VertexOutputType.NORMALIZED_F32),
    VertexAttribute(1, VertexInputType.I32, VertexOutputType.I32),
]


def test_input_type_sizes_and_formats():
    attributes = [
        VertexAttribute(1, VertexInputType.F32, VertexOutputType.F32),
        VertexAttribute(1, VertexInputType.U8, VertexOutputType.F32),
        VertexAttribute(1, VertexInputType.F64, VertexOutputType.F32),
        VertexAttribute(1, VertexInputType.U16, VertexOutputType.F32),
    ]
    pointers = configure_vertex(attributes, 15)
    assert [p.offset for p in pointers] == [0, 4, 5, 13]
    assert pointers[0].attribute_type is AttributeType.FLOAT


def test_output_type_flags():
    attributes = [
        VertexAttribute(1, VertexInputType.I32, VertexOutputType.I32),
        VertexAttribute(1, VertexInputType.U8, VertexOutputType.NORMALIZED_F32),
        VertexAttribute(1, VertexInputType.F32, VertexOutputType.F32),
    ]
    pointers = configure_vertex(attributes, 9)
    assert [p.integer for p in pointers] == [True, False, False]
    assert [p.normalized for p in pointers] == [False, True, False]


def test_configure_indices_and_stride():
    pointers = configure_vertex(SPRITE_LIKE, 40)
    assert [p.index for p in pointers] == list(range(len(SPRITE_LIKE)))
    assert all(p.stride == 40 for p in pointers)
    assert all(p.divisor == 1 for p in pointers)


def test_configure_offsets_follow_attribute_sizes():
    pointers = configure_vertex(SPRITE_LIKE, 40)
    assert pointers[0].offset == 0
    for prev, attr, pointer in zip(pointers, SPRITE_LIKE, pointers[1:]):
        assert pointer.offset == prev.offset + attr.count * attr.input.size


def test_configure_carries_types_and_flags():
    pointers = configure_vertex(SPRITE_LIKE, 40)
    assert [p.attribute_type for p in pointers] == [a.input.attribute_type for a in SPRITE_LIKE]
    assert [p.count for p in pointers] == [a.count for a in SPRITE_LIKE]
    assert pointers[4].integer
    assert pointers[2].normalized
    assert not pointers[1].normalized


def test_configure_empty():
    assert configure_vertex([], 0) == []