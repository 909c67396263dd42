"""Shared fixtures: synthetic test images built with Pillow and NumPy."""
import io

import numpy as np
import pytest
from PIL import Image


def make_image_bytes(width: int, height: int, format: str = "PNG") -> bytes:
    """Encode a deterministic RGBA gradient so every pixel is distinguishable."""
    ys, xs = np.mgrid[0:height, 0:width]
    rgba = np.stack([
        (xs * 7) % 256,
        (ys * 11) % 256,
        (xs + ys) % 256,
        np.full_like(xs, 255),
    ], axis=-1).astype(np.uint8)

    img = Image.fromarray(rgba)
    if format == "JPEG":
        img = img.convert("RGB")

    output = io.BytesIO()
    img.save(output, format=format)
    return output.getvalue()


def image_size(data: bytes) -> tuple:
    with Image.open(io.BytesIO(data)) as img:
        return img.size


@pytest.fixture
def png_200():
    return make_image_bytes(200, 200)


@pytest.fixture
def jpeg_1080p():
    return make_image_bytes(1920, 1080, format="JPEG")
