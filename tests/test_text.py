import pytest

from stormkit.graphics.text import TextSprite
from stormkit.graphics.texture_section import TextureSection
from stormkit.graphics.vertex import VertexInputType, configure_vertex


def test_from_floats_with_whole_sizes_matches_raw():
    section = TextureSection.full().mirror_y()
    made = TextSprite.from_floats((1.0, 2.0, 0.25), (8.0, 12.0), section, (10, 20, 30, 40))
    raw = TextSprite((1.0, 2.0, 0.25), (8, 12), section, (10, 20, 30, 40))
    assert made == raw


def test_from_floats_truncates_and_wraps():
    a = TextSprite.from_floats((0, 0, 0), (65536 + 3.8, 5.2), TextureSection(), (0, 0, 0, 255))
    b = TextSprite.from_floats((0, 0, 0), (3.0, 5.0), TextureSection(), (0, 0, 0, 255))
    assert a.size == b.size
    assert b.size == (3, 5)


def test_negative_and_nan_sizes_become_zero():
    sprite = TextSprite.from_floats((0, 0, 0), (-2.0, float("nan")), TextureSection(), (0, 0, 0, 0))
    assert sprite.size == (0, 0)


def test_position_is_stored_as_floats():
    sprite = TextSprite((1, 2, 3), (4, 4))
    assert sprite.pos == (1.0, 2.0, 3.0)
    assert all(isinstance(v, float) for v in sprite.pos)


def test_raw_size_out_of_range():
    with pytest.raises(ValueError):
        TextSprite((0, 0, 0), (65536, 1))


def test_bad_color():
    with pytest.raises(ValueError):
        TextSprite(color=(1, 2, 3))


def test_attributes_layout():
    pointers = configure_vertex(TextSprite.ATTRIBUTES, 32)
    assert [p.count for p in pointers] == [3, 2, 4, 4]
    assert [p.offset for p in pointers] == [0, 12, 16, 24]
    assert pointers[1].attribute_type is VertexInputType.U16.attribute_type
    assert not pointers[1].normalized
    assert pointers[2].normalized


def test_attribute_offsets_follow_sizes():
    pointers = configure_vertex(TextSprite.ATTRIBUTES, 32)
    assert pointers[0].offset == 0
    for before, after, attribute in zip(pointers, pointers[1:], TextSprite.ATTRIBUTES):
        assert after.offset - before.offset == attribute.count * attribute.input.size
    assert all(p.stride == 32 for p in pointers)