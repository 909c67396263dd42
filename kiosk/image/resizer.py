"""Downscales photos to a target height while tracking the scale applied."""
from typing import Optional
import asyncio
import logging

import cv2

from .codec import ImageCodec, PillowCodec
from .types import PixelBuffer, ResizeResult, ScaleFactor
from .utils import ImageSource, read_source
from ..config import DEFAULT_DPI, DEFAULT_IMAGE_FORMAT
from ..errors import InvalidArgumentError

logger = logging.getLogger(__name__)


class ImageResizer:
    """Resizes images to a maximum height, preserving aspect ratio."""

    def __init__(self,
                 codec: Optional[ImageCodec] = None,
                 format: str = DEFAULT_IMAGE_FORMAT,
                 dpi: int = DEFAULT_DPI):
        self.codec = codec or PillowCodec()
        self.format = format
        self.dpi = dpi

    @staticmethod
    def get_target_dimensions(width: int, height: int, target_height: int) -> tuple[int, int]:
        """Dimensions after fitting ``height`` to ``target_height``.

        Images already at or below the target are left alone. The new width
        is always derived from the height.
        """
        if height <= target_height:
            return (width, height)
        new_width = max(1, round(width * target_height / height))
        return (new_width, target_height)

    def resize(self, source: ImageSource, target_height: int) -> ResizeResult:
        """Downscale an image so it is at most ``target_height`` pixels tall.

        Args:
            source: Encoded image bytes or a binary stream
            target_height: Maximum height of the result

        Returns:
            ResizeResult with the re-encoded image and the original/new
            ratio on each axis, for mapping coordinates found on the
            resized image back to the original

        Raises:
            DecodeError: If the source cannot be decoded
            InvalidArgumentError: If target_height is not positive
        """
        if target_height < 1:
            raise InvalidArgumentError(f"Target height must be positive, got {target_height}")

        buffer = self.codec.decode(read_source(source))
        original_width, original_height = buffer.width, buffer.height
        new_width, new_height = self.get_target_dimensions(original_width, original_height, target_height)

        if (new_width, new_height) != (original_width, original_height):
            logger.debug(f"Resizing image {original_width}x{original_height} to {new_width}x{new_height}")
            resized = cv2.resize(buffer.pixels, (new_width, new_height), interpolation=cv2.INTER_LINEAR)
            buffer = PixelBuffer(resized, pixel_format=buffer.pixel_format)
        else:
            logger.debug(f"Image {original_width}x{original_height} already fits height {target_height}")

        data = self.codec.encode(buffer, format=self.format, dpi=(self.dpi, self.dpi))
        scale = ScaleFactor(original_width / buffer.width, original_height / buffer.height)

        logger.debug(f"Resize scale factors: x={scale.scale_x:.4f}, y={scale.scale_y:.4f}")
        return ResizeResult(data, scale)

    async def resize_async(self, source: ImageSource, target_height: int) -> ResizeResult:
        """Run resize() in a worker thread."""
        return await asyncio.to_thread(self.resize, source, target_height)
