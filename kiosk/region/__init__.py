"""Region handling package for Kiosk.

This package contains the Rectangle value type and the matcher used to
correlate face regions between frames:
- Rectangle: Axis-aligned region in pixel coordinates
- RegionMatcher: Finds the tracked region most likely to be the same face
"""

from .region import Rectangle
from .region_matcher import RegionMatcher, is_potential_same_face, find_closest_match

__all__ = ['Rectangle', 'RegionMatcher', 'is_potential_same_face', 'find_closest_match']
