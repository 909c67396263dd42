"""Tests for the Rectangle value type."""
import dataclasses

import numpy as np
import pytest

from kiosk.errors import InvalidArgumentError
from kiosk.region import Rectangle


def test_derived_edges():
    rect = Rectangle(left=10, top=20, width=100, height=50)
    assert rect.right == 110
    assert rect.bottom == 70
    assert rect.area == 5000
    assert rect.get_dimensions() == (100, 50)


def test_from_corners():
    assert Rectangle.from_corners(5, 5, 15, 25) == Rectangle(5, 5, 10, 20)


@pytest.mark.parametrize("width,height", [(-1, 10), (10, -1)])
def test_negative_size_rejected(width, height):
    with pytest.raises(InvalidArgumentError):
        Rectangle(0, 0, width, height)


def test_invalid_argument_is_value_error():
    with pytest.raises(ValueError):
        Rectangle(0, 0, -5, 5)


def test_zero_size_allowed():
    rect = Rectangle(3, 4, 0, 0)
    assert rect.area == 0


def test_immutable():
    rect = Rectangle(0, 0, 1, 1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        rect.left = 5


def test_intersection_area():
    a = Rectangle(0, 0, 10, 10)
    assert a.intersection_area(Rectangle(5, 5, 10, 10)) == 25
    assert a.intersection_area(a) == 100
    # Touching edges share no area
    assert a.intersection_area(Rectangle(10, 0, 10, 10)) == 0
    assert a.intersection_area(Rectangle(100, 100, 10, 10)) == 0


def test_corner_distance():
    assert Rectangle(10, 10, 5, 5).corner_distance(Rectangle(13, 6, 5, 5)) == 7


@pytest.mark.parametrize("fields", [
    (1.5, 0, 10, 10),
    (0, 2.0, 10, 10),
    (0, 0, "10", 10),
    (0, 0, 10, None),
    (True, 0, 10, 10),
])
def test_non_integer_fields_rejected(fields):
    with pytest.raises(InvalidArgumentError):
        Rectangle(*fields)


def test_numpy_integers_accepted():
    rect = Rectangle(np.int64(4), np.int32(5), np.int64(6), np.uint8(7))
    assert rect.right == 10
