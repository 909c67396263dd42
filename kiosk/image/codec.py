"""Decode and encode image bytes to and from BGRA8 pixel buffers."""
from abc import ABC, abstractmethod
from typing import Tuple
import io
import logging

import cv2
import numpy as np
from PIL import Image, UnidentifiedImageError

from .types import PixelBuffer
from ..config import DEFAULT_DPI, DEFAULT_IMAGE_FORMAT, JPEG_QUALITY
from ..errors import DecodeError, InvalidArgumentError

logger = logging.getLogger(__name__)


class ImageCodec(ABC):
    """Base class for image codecs used by the cropper and resizer."""

    @abstractmethod
    def decode(self, data: bytes) -> PixelBuffer:
        """Decode image bytes.

        Args:
            data: Encoded image (any container the codec understands)

        Returns:
            PixelBuffer: Decoded BGRA8 pixels

        Raises:
            DecodeError: If the bytes cannot be parsed
        """
        pass

    @abstractmethod
    def encode(self,
               buffer: PixelBuffer,
               format: str = DEFAULT_IMAGE_FORMAT,
               dpi: Tuple[int, int] = (DEFAULT_DPI, DEFAULT_DPI)) -> bytes:
        """Encode a pixel buffer into the given container format."""
        pass


class PillowCodec(ImageCodec):
    """Codec backed by Pillow, with OpenCV doing the BGRA channel swap."""

    SUPPORTED_FORMATS = ('JPEG', 'PNG')

    def __init__(self, jpeg_quality: int = JPEG_QUALITY):
        self.jpeg_quality = jpeg_quality

    def decode(self, data: bytes) -> PixelBuffer:
        if not data:
            raise DecodeError("Cannot decode empty image data")

        try:
            with Image.open(io.BytesIO(data)) as img:
                img.load()
                rgba = np.asarray(img.convert('RGBA'))
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError, EOFError, ValueError) as e:
            logger.debug(f"Pillow failed to decode {len(data)} bytes: {e}")
            raise DecodeError(f"Could not decode image: {e}", details={'length': len(data)}) from e

        bgra = cv2.cvtColor(rgba, cv2.COLOR_RGBA2BGRA)
        logger.debug(f"Decoded image {bgra.shape[1]}x{bgra.shape[0]}")
        return PixelBuffer(bgra)

    def encode(self,
               buffer: PixelBuffer,
               format: str = DEFAULT_IMAGE_FORMAT,
               dpi: Tuple[int, int] = (DEFAULT_DPI, DEFAULT_DPI)) -> bytes:
        format = format.upper()
        if format == 'JPG':
            format = 'JPEG'
        if format not in self.SUPPORTED_FORMATS:
            raise InvalidArgumentError(f"Unsupported image format: {format}")
        if buffer.width == 0 or buffer.height == 0:
            raise InvalidArgumentError(f"Cannot encode empty image {buffer.width}x{buffer.height}")

        rgba = cv2.cvtColor(buffer.pixels, cv2.COLOR_BGRA2RGBA)
        img = Image.fromarray(rgba)

        output = io.BytesIO()
        if format == 'JPEG':
            # JPEG has no alpha channel
            img.convert('RGB').save(output, format='JPEG', quality=self.jpeg_quality, dpi=dpi)
        else:
            img.save(output, format='PNG', dpi=dpi)

        logger.debug(f"Encoded {buffer.width}x{buffer.height} image as {format}")
        return output.getvalue()
