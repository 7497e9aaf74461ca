import pytest

from pixeltools.otb import encode_otb, parse_otb


def test_writes_header_and_packed_pixels():
    data = encode_otb([1, 0, 1, 0, 1, 0, 1, 1, 1], 3, 3)
    assert data == bytes([0x00, 3, 3, 1, 0xAB, 0x80])


def test_output_parses_back_to_same_pixels():
    rows = [[(x * y + x) % 3 == 0 for x in range(11)] for y in range(4)]
    pixels = [int(bit) for row in rows for bit in row]
    image = parse_otb(encode_otb(pixels, 11, 4))
    assert (image.width, image.height, image.color_depth) == (11, 4, 1)
    assert image.rows() == [[int(bit) for bit in row] for row in rows]


@pytest.mark.parametrize("width,height", [(0, 1), (1, 0), (256, 1), (1, 256)])
def test_rejects_out_of_range_dimensions(width, height):
    with pytest.raises(ValueError):
        encode_otb([0] * max(0, width * height), width, height)


def test_rejects_wrong_pixel_count():
    with pytest.raises(ValueError):
        encode_otb([0, 1, 0], 2, 2)
