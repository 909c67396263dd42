from .types import PixelBuffer, PixelFormat, ScaleFactor, ResizeResult
from .codec import ImageCodec, PillowCodec
from .cropper import ImageCropper
from .resizer import ImageResizer

__all__ = ['PixelBuffer', 'PixelFormat', 'ScaleFactor', 'ResizeResult',
           'ImageCodec', 'PillowCodec', 'ImageCropper', 'ImageResizer']
