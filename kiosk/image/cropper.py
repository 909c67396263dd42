"""Crops rectangular regions out of encoded images."""
from typing import Optional
import asyncio
import logging

from .codec import ImageCodec, PillowCodec
from .types import PixelBuffer
from .utils import ImageSource, read_source
from ..errors import OutOfBoundsError
from ..region import Rectangle

logger = logging.getLogger(__name__)


class ImageCropper:
    """Decodes an image and copies out the pixels inside a rectangle.

    A crop is a byte-exact copy of the source pixels, never a resample.
    Errors propagate to the caller; the "no image" fallback belongs to
    kiosk.faces.get_cropped_image.
    """

    def __init__(self, codec: Optional[ImageCodec] = None):
        self.codec = codec or PillowCodec()

    def crop(self, source: ImageSource, rect: Rectangle) -> PixelBuffer:
        """Crop ``rect`` out of an encoded image.

        Args:
            source: Encoded image bytes or a binary stream
            rect: Region to extract, in source pixel coordinates

        Returns:
            PixelBuffer of exactly rect.width x rect.height

        Raises:
            DecodeError: If the source cannot be decoded
            OutOfBoundsError: If rect does not fit inside the image
        """
        buffer = self.codec.decode(read_source(source))
        return self.crop_pixels(buffer, rect)

    def crop_pixels(self, buffer: PixelBuffer, rect: Rectangle) -> PixelBuffer:
        """Crop ``rect`` out of an already decoded buffer."""
        # Origin must lie in [0, width) x [0, height), the far edges may touch the border
        if (rect.left < 0 or rect.top < 0 or
                rect.left >= buffer.width or rect.top >= buffer.height or
                rect.right > buffer.width or rect.bottom > buffer.height):
            raise OutOfBoundsError(
                f"Crop region {rect} exceeds image bounds {buffer.width}x{buffer.height}",
                details={'rect': rect, 'width': buffer.width, 'height': buffer.height}
            )

        pixels = buffer.pixels[rect.top:rect.bottom, rect.left:rect.right].copy()
        logger.debug(f"Cropped {rect.width}x{rect.height} at ({rect.left},{rect.top}) "
                     f"from {buffer.width}x{buffer.height}")
        return PixelBuffer(pixels, pixel_format=buffer.pixel_format)

    async def crop_async(self, source: ImageSource, rect: Rectangle) -> PixelBuffer:
        """Run crop() in a worker thread."""
        return await asyncio.to_thread(self.crop, source, rect)
