"""Utility functions shared by the cropper and resizer."""

from typing import BinaryIO, Union
import logging

from ..errors import InvalidArgumentError

logger = logging.getLogger(__name__)

ImageSource = Union[bytes, bytearray, memoryview, BinaryIO]


def read_source(source: ImageSource) -> bytes:
    """Return the encoded image bytes from raw bytes or a binary stream.

    Streams are read from their current position to the end.
    """
    if isinstance(source, (bytes, bytearray, memoryview)):
        return bytes(source)

    read = getattr(source, 'read', None)
    if read is None:
        raise InvalidArgumentError(f"Image source must be bytes or a binary stream, got {type(source)}")

    data = read()
    if not isinstance(data, (bytes, bytearray)):
        raise InvalidArgumentError(f"Image stream returned {type(data)}, expected bytes")
    return bytes(data)
