"""
Exception hierarchy for the kiosk imaging core.

Every error raised by the geometry, crop and resize code derives from
KioskError, so callers can apply a single fallback policy (see
kiosk.faces.get_cropped_image) or tell the kinds apart.
"""

from typing import Any, Dict, Optional


class KioskError(Exception):
    """Base exception for all kiosk errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidArgumentError(KioskError, ValueError):
    """Raised when a rectangle, buffer or size argument is malformed."""
    pass


class OutOfBoundsError(KioskError):
    """Raised when a crop rectangle does not fit inside the image."""
    pass


class DecodeError(KioskError):
    """Raised when image bytes cannot be decoded."""
    pass
