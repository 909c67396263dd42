"""Tests for PillowCodec and the pixel buffer types."""
import io

import numpy as np
import pytest
from PIL import Image

from conftest import image_size, make_image_bytes
from kiosk.errors import DecodeError, InvalidArgumentError
from kiosk.image import PillowCodec, PixelBuffer, PixelFormat, ScaleFactor
from kiosk.region import Rectangle


@pytest.fixture
def codec():
    return PillowCodec()


def test_decode_dimensions(codec):
    buffer = codec.decode(make_image_bytes(30, 20))
    assert (buffer.width, buffer.height) == (30, 20)
    assert buffer.pixels.shape == (20, 30, 4)
    assert buffer.pixel_format == PixelFormat.BGRA8


def test_decode_uses_bgra_order(codec):
    output = io.BytesIO()
    Image.new("RGBA", (2, 2), (10, 20, 30, 255)).save(output, format="PNG")

    buffer = codec.decode(output.getvalue())
    assert buffer.data[:4] == bytes([30, 20, 10, 255])


def test_png_roundtrip_is_lossless(codec):
    buffer = codec.decode(make_image_bytes(17, 9))
    assert codec.decode(codec.encode(buffer, format="PNG")) == buffer


def test_jpeg_encode_keeps_dimensions(codec):
    buffer = codec.decode(make_image_bytes(40, 30))
    data = codec.encode(buffer, format="jpg")
    assert image_size(data) == (40, 30)


@pytest.mark.parametrize("data", [b"", b"plain text", b"\x89PNG\r\n\x1a\n"])
def test_decode_garbage(codec, data):
    with pytest.raises(DecodeError):
        codec.decode(data)


def test_decode_error_chains_cause(codec):
    with pytest.raises(DecodeError) as excinfo:
        codec.decode(b"not an image")
    assert excinfo.value.__cause__ is not None


def test_encode_unsupported_format(codec):
    buffer = codec.decode(make_image_bytes(4, 4))
    with pytest.raises(InvalidArgumentError):
        codec.encode(buffer, format="TIFF")


def test_encode_empty_buffer(codec):
    with pytest.raises(InvalidArgumentError):
        codec.encode(PixelBuffer(np.zeros((0, 5, 4), dtype=np.uint8)))


def test_pixel_buffer_from_bytes():
    data = bytes(range(24))
    buffer = PixelBuffer.from_bytes(3, 2, data)
    assert (buffer.width, buffer.height) == (3, 2)
    assert buffer.data == data
    assert buffer.bounds == Rectangle(0, 0, 3, 2)


def test_pixel_buffer_from_bytes_wrong_length():
    with pytest.raises(InvalidArgumentError):
        PixelBuffer.from_bytes(3, 2, bytes(23))


@pytest.mark.parametrize("pixels", [
    np.zeros((2, 2, 3), dtype=np.uint8),
    np.zeros((2, 2), dtype=np.uint8),
    np.zeros((2, 2, 4), dtype=np.float32),
])
def test_pixel_buffer_rejects_bad_layout(pixels):
    with pytest.raises(InvalidArgumentError):
        PixelBuffer(pixels)


def test_scale_factor_identity():
    rect = Rectangle(12, 34, 56, 78)
    assert ScaleFactor().to_original(rect) == rect


def test_scale_factor_uneven_axes():
    scale = ScaleFactor(scale_x=2.5, scale_y=1.5)
    assert scale.to_original(Rectangle(10, 10, 20, 20)) == Rectangle(25, 15, 50, 30)
