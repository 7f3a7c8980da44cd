"""Random images: picsum URLs, RGBA pixel noise and its JPEG/PNG encodings."""

from __future__ import annotations

import io
import random
from typing import Optional

from PIL import Image as PILImage

from fauxgen.helpers import resolve_rng
from fauxgen.lookup import FuncLookupError, Info, MapParams, Param, add_func_lookup
from fauxgen.number import number


def image_url(width: int, height: int) -> str:
    """Picsum URL for an image of the given size."""
    return f"https://picsum.photos/{width}/{height}"


def image(width: int, height: int, rng: Optional[random.Random] = None) -> PILImage.Image:
    """RGBA image with every pixel a random opaque colour."""
    rng = resolve_rng(rng)
    img = PILImage.new("RGBA", (width, height))
    for x in range(width):
        for y in range(height):
            red = number(0, 255, rng)
            green = number(0, 255, rng)
            blue = number(0, 255, rng)
            img.putpixel((x, y), (red, green, blue, 0xFF))
    return img


def image_jpeg(width: int, height: int, rng: Optional[random.Random] = None) -> bytes:
    """JPEG bytes of a random image."""
    buffer = io.BytesIO()
    image(width, height, rng).convert("RGB").save(buffer, format="JPEG", quality=75)
    return buffer.getvalue()


def image_png(width: int, height: int, rng: Optional[random.Random] = None) -> bytes:
    """PNG bytes of a random image; fully opaque, so stored as RGB."""
    buffer = io.BytesIO()
    image(width, height, rng).convert("RGB").save(buffer, format="PNG")
    return buffer.getvalue()


def _dimensions(params: Optional[MapParams], info: Info) -> tuple[int, int]:
    width = info.get_int(params, "width")
    if width < 10 or width >= 1000:
        raise FuncLookupError(
            "invalid image width, must be greater than 10, less than 1000"
        )
    height = info.get_int(params, "height")
    if height < 10 or height >= 1000:
        raise FuncLookupError(
            "invalid image height, must be greater than 10, less than 1000"
        )
    return width, height


def _size_params() -> list[Param]:
    return [
        Param(field="width", display="Width", type="int", default="500",
              description="Image width in px"),
        Param(field="height", display="Height", type="int", default="500",
              description="Image height in px"),
    ]


def _gen_url(rng: random.Random, params: Optional[MapParams], info: Info) -> str:
    return image_url(*_dimensions(params, info))


def _gen_jpeg(rng: random.Random, params: Optional[MapParams], info: Info) -> bytes:
    width, height = _dimensions(params, info)
    return image_jpeg(width, height, rng)


def _gen_png(rng: random.Random, params: Optional[MapParams], info: Info) -> bytes:
    width, height = _dimensions(params, info)
    return image_png(width, height, rng)


def add_image_lookup() -> None:
    """Register the image generators in the lookup registry."""
    add_func_lookup(
        "imageurl",
        Info(
            display="Image URL",
            category="image",
            description="Random image url",
            example="https://picsum.photos/500/500",
            output="string",
            params=_size_params(),
            generate=_gen_url,
        ),
    )
    add_func_lookup(
        "imagejpeg",
        Info(
            display="Image JPEG",
            category="image",
            description="Random jpeg image",
            example="file.jpeg - bytes",
            output="[]byte",
            params=_size_params(),
            generate=_gen_jpeg,
        ),
    )
    add_func_lookup(
        "imagepng",
        Info(
            display="Image PNG",
            category="image",
            description="Random png image",
            example="file.png - bytes",
            output="[]byte",
            params=_size_params(),
            generate=_gen_png,
        ),
    )