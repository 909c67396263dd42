"""Kiosk - Face region matching and image geometry"""

from .errors import KioskError, InvalidArgumentError, OutOfBoundsError, DecodeError
from .region import Rectangle, RegionMatcher, find_closest_match, is_potential_same_face
from .image import ImageCropper, ImageResizer, PixelBuffer, ScaleFactor

__all__ = [
    'KioskError', 'InvalidArgumentError', 'OutOfBoundsError', 'DecodeError',
    'Rectangle', 'RegionMatcher', 'find_closest_match', 'is_potential_same_face',
    'ImageCropper', 'ImageResizer', 'PixelBuffer', 'ScaleFactor',
]
