"""Caller-side helpers for working with faces returned by the detection service."""
from dataclasses import dataclass
from typing import Awaitable, Callable, Iterable, Optional, Union
import logging

from .errors import KioskError
from .image import ImageCropper, PixelBuffer
from .image.utils import ImageSource
from .region import Rectangle, find_closest_match

logger = logging.getLogger(__name__)

SourceOpener = Callable[[], ImageSource]
AsyncSourceOpener = Callable[[], Awaitable[ImageSource]]


@dataclass
class DetectedFace:
    """A face reported by the detector for one frame."""
    face_id: str
    rectangle: Rectangle


def find_face_closest_to_region(faces: Optional[Iterable[DetectedFace]],
                                region: Rectangle) -> Optional[DetectedFace]:
    """Return the detected face most likely framing ``region``, or None."""
    if not faces:
        return None

    faces = list(faces)
    index = find_closest_match(region, [(i, face.rectangle) for i, face in enumerate(faces)])
    return None if index is None else faces[index]


def get_cropped_image(source: Union[ImageSource, SourceOpener],
                      rect: Rectangle,
                      cropper: Optional[ImageCropper] = None) -> Optional[PixelBuffer]:
    """Crop a face thumbnail, defaulting to no image if anything fails.

    Args:
        source: Encoded image, a binary stream, or a callable returning either
        rect: Region to crop
        cropper: Optional cropper to use instead of a default one

    Returns:
        The cropped pixels, or None when the image could not be read,
        decoded or cropped
    """
    cropper = cropper or ImageCropper()
    try:
        if not callable(source):
            return cropper.crop(source, rect)

        # Streams handed out by the opener are ours to close
        data = source()
        try:
            return cropper.crop(data, rect)
        finally:
            if hasattr(data, 'close'):
                data.close()
    except (KioskError, OSError) as e:
        logger.warning(f"Could not crop face region {rect}: {e}")
        return None


async def get_cropped_image_async(open_source: AsyncSourceOpener,
                                  rect: Rectangle,
                                  cropper: Optional[ImageCropper] = None) -> Optional[PixelBuffer]:
    """Async variant of get_cropped_image taking an async opener."""
    cropper = cropper or ImageCropper()
    try:
        data = await open_source()
        try:
            return await cropper.crop_async(data, rect)
        finally:
            if hasattr(data, 'close'):
                data.close()
    except (KioskError, OSError) as e:
        logger.warning(f"Could not crop face region {rect}: {e}")
        return None
