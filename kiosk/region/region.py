"""Represents a rectangular region in an image."""
from dataclasses import dataclass, fields
from numbers import Integral
from typing import Tuple
import logging

from ..errors import InvalidArgumentError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned region in pixel coordinates."""
    left: int
    top: int
    width: int
    height: int

    def __post_init__(self):
        """Reject non-integer fields and negative sizes."""
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, Integral):
                logger.error(f"Invalid rectangle {f.name}: {value!r}")
                raise InvalidArgumentError(
                    f"Rectangle {f.name} must be an integer, got {type(value).__name__} {value!r}",
                    details={f.name: value}
                )

        if self.width < 0 or self.height < 0:
            logger.error(f"Invalid rectangle size: {self.width}x{self.height}")
            raise InvalidArgumentError(
                f"Rectangle width and height must be non-negative, got {self.width}x{self.height}",
                details={'width': self.width, 'height': self.height}
            )

    @classmethod
    def from_corners(cls, x1: int, y1: int, x2: int, y2: int) -> 'Rectangle':
        """Build a rectangle from top-left and bottom-right corners."""
        return cls(left=x1, top=y1, width=x2 - x1, height=y2 - y1)

    @property
    def right(self) -> int:
        return self.left + self.width

    @property
    def bottom(self) -> int:
        return self.top + self.height

    @property
    def area(self) -> int:
        return self.width * self.height

    def get_dimensions(self) -> Tuple[int, int]:
        """Get width and height of region."""
        return (self.width, self.height)

    def intersection_area(self, other: 'Rectangle') -> int:
        """Area shared by this rectangle and another, 0 if disjoint."""
        x_left = max(self.left, other.left)
        y_top = max(self.top, other.top)
        x_right = min(self.right, other.right)
        y_bottom = min(self.bottom, other.bottom)

        if x_right <= x_left or y_bottom <= y_top:
            return 0

        return (x_right - x_left) * (y_bottom - y_top)

    def corner_distance(self, other: 'Rectangle') -> int:
        """Manhattan distance between the top-left corners."""
        return abs(self.left - other.left) + abs(self.top - other.top)
