import io
import warnings

import pytest
from PIL import Image

from pixeltools.conversion import (
    ConversionSettings,
    ImageToOtbBuilder,
    OtbConverter,
    suggest_output_name,
)
from pixeltools.otb import InsufficientBitmapDataError, parse_otb
from pixeltools.rendering.converters import fit_to_bounds
from pixeltools.rendering.renderer import image_to_bw_pixels, otb_to_image


@pytest.mark.parametrize(
    "filename,expected",
    [
        ("1.otb", "1.bmp"),
        ("logo.OTB", "logo.bmp"),
        ("archive.tar.otb", "archive.tar.bmp"),
        ("noext", "noext.bmp"),
        ("dir.v2/noext", "dir.v2/noext.bmp"),
    ],
)
def test_suggest_output_name(filename, expected):
    assert suggest_output_name(filename, ".bmp") == expected


def test_convert_bytes_to_bmp():
    result = OtbConverter().convert_bytes(bytes([0, 8, 1, 1, 0xFF]), "1.otb")
    assert result.output_name == "1.bmp"
    assert result.image.width == 8
    assert result.payload[:2] == b"BM"
    assert len(result.payload) == 66


def test_convert_bytes_to_png():
    converter = OtbConverter(ConversionSettings(output_format="png"))
    result = converter.convert_bytes(bytes([0, 2, 1, 1, 0x80]), "pic.otb")
    assert result.output_name == "pic.png"
    with Image.open(io.BytesIO(result.payload)) as img:
        gray = img.convert("L")
        assert gray.getpixel((0, 0)) == 0
        assert gray.getpixel((1, 0)) == 255


def test_convert_propagates_validation_errors():
    with pytest.raises(InsufficientBitmapDataError):
        OtbConverter().convert_bytes(bytes([0, 72, 28, 1, 0]), "short.otb")


def test_unknown_output_format():
    with pytest.raises(ValueError):
        OtbConverter(ConversionSettings(output_format="gif"))


def test_convert_file(tmp_path):
    path = tmp_path / "smile.otb"
    path.write_bytes(bytes([0, 1, 1, 1, 0x80]))
    result = OtbConverter().convert_file(str(path))
    assert result.output_name == "smile.bmp"
    assert len(result.payload) == 66


def test_convert_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        OtbConverter().convert_file(str(tmp_path / "missing.otb"))


def _half_black(width, height):
    img = Image.new("L", (width, height), 255)
    img.paste(0, (0, 0, width // 2, height))
    return img


def test_image_to_bw_pixels_marks_dark_as_ink():
    pixels = image_to_bw_pixels(_half_black(4, 1), dither=False)
    assert pixels == [1, 1, 0, 0]
    assert image_to_bw_pixels(_half_black(4, 1), dither=True) == [1, 1, 0, 0]


def test_image_to_bw_pixels_keeps_one_value_per_pixel():
    img = _half_black(10, 2)
    expected = ([1] * 5 + [0] * 5) * 2
    with warnings.catch_warnings():
        warnings.simplefilter("error", DeprecationWarning)
        assert image_to_bw_pixels(img, dither=True) == expected
        assert image_to_bw_pixels(img, dither=False) == expected


def test_fit_to_bounds_keeps_aspect_and_never_enlarges():
    assert fit_to_bounds(Image.new("L", (200, 100)), 72, 28).size == (56, 28)
    assert fit_to_bounds(Image.new("L", (10, 5)), 72, 28).size == (10, 5)
    assert fit_to_bounds(Image.new("L", (1000, 1)), 72, 28).size == (72, 1)


def test_otb_to_image():
    img = otb_to_image(parse_otb(bytes([0, 3, 1, 1, 0b10100000])))
    assert img.mode == "1"
    assert [img.convert("L").getpixel((x, 0)) for x in range(3)] == [0, 255, 0]


def test_build_otb_from_png(tmp_path):
    path = tmp_path / "logo.png"
    _half_black(16, 8).save(path)
    settings = ConversionSettings(dither=False)
    data = ImageToOtbBuilder(settings).build_from_file(str(path))
    image = parse_otb(data)
    assert (image.width, image.height) == (16, 8)
    assert image.rows()[0] == [1] * 8 + [0] * 8


def test_build_otb_scales_to_bounds(tmp_path):
    path = tmp_path / "big.png"
    _half_black(144, 56).save(path)
    data = ImageToOtbBuilder().build_from_file(str(path))
    assert data[1:4] == bytes([72, 28, 1])


def test_build_otb_rejects_unknown_extension(tmp_path):
    path = tmp_path / "notes.txt"
    path.write_text("hello")
    with pytest.raises(ValueError):
        ImageToOtbBuilder().build_from_file(str(path))


def test_build_otb_rejects_oversized_bounds(tmp_path):
    path = tmp_path / "logo.png"
    _half_black(4, 4).save(path)
    with pytest.raises(ValueError):
        ImageToOtbBuilder(ConversionSettings(max_width=300)).build_from_file(str(path))
