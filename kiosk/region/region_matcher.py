"""Matches a detected face region to previously tracked regions."""
from typing import Hashable, Iterable, Optional, Tuple
import logging

from .region import Rectangle
from ..config import (
    MIN_OVERLAP_FRACTION,
    MAX_CORNER_DISTANCE_FRACTION,
    SIZE_TOLERANCE_FRACTION,
)

logger = logging.getLogger(__name__)


class RegionMatcher:
    """Correlates face rectangles across frames with a coarse geometric test.

    Two rectangles are a potential match when they are close (they overlap
    by more than ``min_overlap`` of the smaller area, or their top-left
    corners are within ``max_corner_distance`` of the average side length)
    and they have comparable size (each side differs by at most
    ``size_tolerance`` of the larger side).
    """

    def __init__(self,
                 min_overlap: float = MIN_OVERLAP_FRACTION,
                 max_corner_distance: float = MAX_CORNER_DISTANCE_FRACTION,
                 size_tolerance: float = SIZE_TOLERANCE_FRACTION):
        self.min_overlap = min_overlap
        self.max_corner_distance = max_corner_distance
        self.size_tolerance = size_tolerance

    def _is_close(self, a: Rectangle, b: Rectangle) -> bool:
        smaller_area = min(a.area, b.area)
        if a.intersection_area(b) > smaller_area * self.min_overlap:
            return True

        average_side = (a.width + a.height + b.width + b.height) / 4
        return a.corner_distance(b) <= average_side * self.max_corner_distance

    def _is_similar_size(self, a: Rectangle, b: Rectangle) -> bool:
        return (abs(a.width - b.width) <= max(a.width, b.width) * self.size_tolerance and
                abs(a.height - b.height) <= max(a.height, b.height) * self.size_tolerance)

    def is_potential_same_face(self, a: Rectangle, b: Rectangle) -> bool:
        """Check whether two rectangles plausibly frame the same face."""
        return self._is_close(a, b) and self._is_similar_size(a, b)

    def find_closest_match(self,
                           candidate: Rectangle,
                           known: Optional[Iterable[Tuple[Hashable, Rectangle]]]) -> Optional[Hashable]:
        """Return the id of the closest potential match, or None.

        Survivors of ``is_potential_same_face`` are ranked by the Manhattan
        distance between top-left corners. Ties keep input order.
        """
        if not known:
            logger.debug("No known regions to match against")
            return None

        matches = [
            (region_id, rect) for region_id, rect in known
            if self.is_potential_same_face(candidate, rect)
        ]

        if not matches:
            logger.debug(f"No potential match for region {candidate}")
            return None

        best_id, best_rect = min(matches, key=lambda m: candidate.corner_distance(m[1]))
        logger.debug(f"Matched region {candidate} to {best_id!r} at {best_rect}")
        return best_id


_default_matcher = RegionMatcher()


def is_potential_same_face(a: Rectangle, b: Rectangle) -> bool:
    """Check two rectangles with the default thresholds."""
    return _default_matcher.is_potential_same_face(a, b)


def find_closest_match(candidate: Rectangle,
                       known: Optional[Iterable[Tuple[Hashable, Rectangle]]]) -> Optional[Hashable]:
    """Find the closest known region with the default thresholds."""
    return _default_matcher.find_closest_match(candidate, known)
