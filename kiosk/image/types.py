from dataclasses import dataclass
from typing import NamedTuple
from enum import Enum
import logging

import numpy as np

from ..config import BYTES_PER_PIXEL
from ..errors import InvalidArgumentError
from ..region import Rectangle

logger = logging.getLogger(__name__)


class PixelFormat(Enum):
    """Byte layout of decoded pixels"""
    BGRA8 = "bgra8"

    def __str__(self):
        return self.value


@dataclass(eq=False)
class PixelBuffer:
    """Decoded raster image, one BGRA8 pixel per 4 bytes, rows top to bottom."""
    pixels: np.ndarray
    pixel_format: PixelFormat = PixelFormat.BGRA8

    def __post_init__(self):
        """Validate the backing array layout"""
        if (self.pixels.ndim != 3 or self.pixels.shape[2] != BYTES_PER_PIXEL
                or self.pixels.dtype != np.uint8):
            logger.error(f"Invalid pixel array: shape={self.pixels.shape}, dtype={self.pixels.dtype}")
            raise InvalidArgumentError(
                f"Pixel array must be (height, width, {BYTES_PER_PIXEL}) uint8, "
                f"got {self.pixels.shape} {self.pixels.dtype}"
            )
        self.pixels = np.ascontiguousarray(self.pixels)

    @classmethod
    def from_bytes(cls, width: int, height: int, data: bytes) -> 'PixelBuffer':
        """Wrap raw BGRA8 bytes"""
        expected = width * height * BYTES_PER_PIXEL
        if width < 0 or height < 0 or len(data) != expected:
            raise InvalidArgumentError(
                f"Expected {expected} bytes for {width}x{height} BGRA8, got {len(data)}",
                details={'width': width, 'height': height, 'length': len(data)}
            )
        pixels = np.frombuffer(data, dtype=np.uint8).reshape(height, width, BYTES_PER_PIXEL)
        return cls(pixels.copy())

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    @property
    def data(self) -> bytes:
        return self.pixels.tobytes()

    @property
    def bounds(self) -> Rectangle:
        """Rectangle covering the whole buffer"""
        return Rectangle(0, 0, self.width, self.height)

    def __eq__(self, other):
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return (self.pixel_format == other.pixel_format and
                self.pixels.shape == other.pixels.shape and
                np.array_equal(self.pixels, other.pixels))

    def __repr__(self):
        return f"PixelBuffer({self.width}x{self.height}, {self.pixel_format})"


@dataclass(frozen=True)
class ScaleFactor:
    """Original-to-resized ratio on each axis; 1.0 means unchanged."""
    scale_x: float = 1.0
    scale_y: float = 1.0

    def to_original(self, rect: Rectangle) -> Rectangle:
        """Map a rectangle measured on the resized image back to the original."""
        left = round(rect.left * self.scale_x)
        top = round(rect.top * self.scale_y)
        right = round(rect.right * self.scale_x)
        bottom = round(rect.bottom * self.scale_y)
        return Rectangle.from_corners(left, top, right, bottom)


class ResizeResult(NamedTuple):
    """Encoded image plus the scale applied to produce it"""
    data: bytes
    scale: ScaleFactor
