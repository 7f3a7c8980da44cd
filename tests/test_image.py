import io
import random

import pytest
from PIL import Image as PILImage

from fauxgen.image import add_image_lookup, image, image_jpeg, image_png, image_url
from fauxgen.lookup import FuncLookupError, MapParams, get_func_lookup

PNG_SIGNATURE = bytes([137, 80, 78, 71, 13, 10, 26, 10])


def test_image_url():
    assert image_url(640, 480) == "https://picsum.photos/640/480"


def test_image_single_pixel():
    img = image(1, 1, random.Random(11))
    assert img.size == (1, 1)
    assert img.mode == "RGBA"
    assert img.getpixel((0, 0))[3] == 255


def test_image_all_opaque_and_in_range():
    img = image(4, 3, random.Random(2))
    assert img.size == (4, 3)
    for pixel in img.getdata():
        assert pixel[3] == 255
        assert all(0 <= channel <= 255 for channel in pixel)


def test_image_reproducible():
    first = image(3, 2, random.Random(9)).tobytes()
    second = image(3, 2, random.Random(9)).tobytes()
    assert first == second


def test_image_png_header():
    data = image_png(1, 1, random.Random(11))
    assert data[:8] == PNG_SIGNATURE
    assert data[12:16] == b"IHDR"
    assert data[24] == 8
    assert data[25] == 2


def test_image_png_round_trip():
    rng_a = random.Random(4)
    rng_b = random.Random(4)
    expected = image(5, 4, rng_a).convert("RGB")
    decoded = PILImage.open(io.BytesIO(image_png(5, 4, rng_b))).convert("RGB")
    assert decoded.size == (5, 4)
    assert decoded.tobytes() == expected.tobytes()


def test_image_jpeg_markers_and_size():
    data = image_jpeg(1, 1, random.Random(11))
    assert data[:2] == bytes([255, 216])
    assert data[-2:] == bytes([255, 217])
    decoded = PILImage.open(io.BytesIO(image_jpeg(6, 3, random.Random(1))))
    assert decoded.format == "JPEG"
    assert decoded.size == (6, 3)


def test_imageurl_lookup_defaults():
    add_image_lookup()
    info = get_func_lookup("imageurl")
    assert info.generate(random.Random(1), None, info) == "https://picsum.photos/500/500"


@pytest.mark.parametrize("name", ["imageurl", "imagejpeg", "imagepng"])
@pytest.mark.parametrize(
    "width,height", [("5", "100"), ("1000", "100"), ("100", "9"), ("100", "1000")]
)
def test_image_lookup_rejects_bad_sizes(name, width, height):
    add_image_lookup()
    info = get_func_lookup(name)
    params = MapParams()
    params.add("width", width)
    params.add("height", height)
    with pytest.raises(FuncLookupError):
        info.generate(random.Random(1), params, info)


def test_imagepng_lookup_generates_png():
    add_image_lookup()
    info = get_func_lookup("imagepng")
    params = MapParams()
    params.add("width", "10")
    params.add("height", "12")
    data = info.generate(random.Random(1), params, info)
    assert data[:8] == PNG_SIGNATURE
    assert PILImage.open(io.BytesIO(data)).size == (10, 12)