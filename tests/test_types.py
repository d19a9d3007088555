"""Tests for Point / Rectangle value types and derived bounds."""

from __future__ import annotations

import dataclasses

import pytest

from rectcheck.core.errors import RECTANGLE_EMPTY, InvalidInput
from rectcheck.core.types import CornerType, Point, Rectangle, bounds_of


def test_point_value_equality_and_hash() -> None:
    assert Point(1, 2) == Point(1, 2)
    assert len({Point(1, 2), Point(1, 2), Point(2, 1)}) == 2


def test_point_is_immutable() -> None:
    p = Point(1, 2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.x = 5  # type: ignore[misc]


def test_point_from_coords() -> None:
    assert Point.from_coords([3, -4]) == Point(3, -4)
    with pytest.raises(InvalidInput):
        Point.from_coords([3])


def test_bounds_of() -> None:
    lo, hi = bounds_of([Point(5, 0), Point(0, 5), Point(2, 2)])
    assert lo == Point(0, 0)
    assert hi == Point(5, 5)


def test_bounds_of_empty() -> None:
    with pytest.raises(InvalidInput) as exc:
        bounds_of([])
    assert exc.value.error_key == RECTANGLE_EMPTY


def test_rectangle_empty_vertices() -> None:
    with pytest.raises(InvalidInput):
        Rectangle(())


def test_bounds_of_large_ints() -> None:
    big = 2**80
    lo, hi = bounds_of([Point(-big, 3), Point(big, -big)])
    assert lo == Point(-big, -big)
    assert hi == Point(big, 3)


def test_rectangle_derives_bounds() -> None:
    rect = Rectangle.from_points([Point(0, 0), Point(0, 5), Point(5, 5), Point(5, 0)])
    assert rect.min_point == Point(0, 0)
    assert rect.max_point == Point(5, 5)
    assert len(rect.vertices) == 4
    assert rect.width == 5 and rect.height == 5


def test_rectangle_bounds_not_settable() -> None:
    rect = Rectangle.from_points([Point(0, 0), Point(3, 4)])
    with pytest.raises(dataclasses.FrozenInstanceError):
        rect.min_point = Point(-1, -1)  # type: ignore[misc]
    with pytest.raises(TypeError):
        Rectangle((Point(0, 0),), min_point=Point(9, 9))  # type: ignore[call-arg]


def test_rectangle_from_non_rectangular_vertices() -> None:
    # Construction does not check shape.
    rect = Rectangle.from_points([Point(0, 0), Point(3, 3)])
    assert rect.min_point == Point(0, 0) and rect.max_point == Point(3, 3)


def test_rectangle_corners() -> None:
    rect = Rectangle.from_points([Point(1, 2), Point(6, 9)])
    corners = rect.corners()
    assert corners[CornerType.BOTTOM_LEFT] == Point(1, 2)
    assert corners[CornerType.TOP_LEFT] == Point(1, 9)
    assert corners[CornerType.BOTTOM_RIGHT] == Point(6, 2)
    assert corners[CornerType.TOP_RIGHT] == Point(6, 9)
