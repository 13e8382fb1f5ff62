import pytest

from stormkit.image.image import Image

RED = (255, 0, 0, 255)
BLUE = (0, 0, 255, 255)


def test_from_color_fills_every_pixel():
    image = Image.from_color(RED, 3, 2)
    assert image.width == 3
    assert image.height == 2
    assert len(image) == 6
    assert all(pixel == RED for pixel in image)


@pytest.mark.parametrize("width,height", [(0, 2), (2, 0), (0, 0)])
def test_zero_dimension_rejected(width, height):
    with pytest.raises(ValueError):
        Image.from_color(RED, width, height)


def test_from_pixels_length_must_match():
    with pytest.raises(ValueError):
        Image.from_pixels([RED] * 5, 3, 2)


def test_from_pixels_keeps_order():
    pixels = list(range(6))
    image = Image.from_pixels(pixels, 3, 2)
    assert list(image) == pixels


def test_index_for_row_major():
    image = Image.from_color(0, 4, 3)
    assert image.index_for(0, 0) == 0
    assert image.index_for(1, 0) == 1
    assert image.index_for(0, 1) == 4


def test_index_for_out_of_bounds():
    image = Image.from_color(0, 4, 3)
    with pytest.raises(IndexError):
        image.index_for(4, 0)
    with pytest.raises(IndexError):
        image.index_for(0, 3)


def test_get_and_set_by_coordinates_and_index_agree():
    image = Image.from_color(RED, 4, 3)
    image[2, 1] = BLUE
    assert image[2, 1] == BLUE
    assert image[image.index_for(2, 1)] == BLUE
    assert sum(1 for pixel in image if pixel == BLUE) == 1


def test_set_by_flat_index():
    image = Image.from_color(0, 2, 2)
    image[3] = 9
    assert image[1, 1] == 9


def test_set_subsection_copies_region():
    base = Image.from_color(0, 5, 4)
    patch = Image.from_pixels([1, 2, 3, 4, 5, 6], 3, 2)
    base.set_subsection(1, 2, patch)
    for y in range(patch.height):
        for x in range(patch.width):
            assert base[x + 1, y + 2] == patch[x, y]
    assert sum(1 for pixel in base if pixel == 0) == len(base) - len(patch)


def test_set_subsection_must_fit():
    base = Image.from_color(0, 4, 4)
    patch = Image.from_color(1, 3, 3)
    with pytest.raises(ValueError):
        base.set_subsection(2, 0, patch)
    with pytest.raises(ValueError):
        base.set_subsection(0, 2, patch)


def test_copy_is_independent():
    image = Image.from_color(RED, 2, 2)
    clone = image.copy()
    clone[0, 0] = BLUE
    assert image[0, 0] == RED
    assert clone != image