# rectcheck/core/types.py
"""
Dataclasses for points, rectangles and check results.
Point and Rectangle are immutable value types rebuilt for every query.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Literal, Sequence

from rectcheck.core.errors import RECTANGLE_EMPTY, InvalidInput
from rectcheck.core.validate import validate_point_coordinates


CheckReason = Literal["inside", "outside", "on_boundary", "invalid_shape"]


class CornerType(Enum):
    """The four corners of an axis-aligned box (x grows right, y grows up)."""
    BOTTOM_LEFT = "bottom_left"
    TOP_LEFT = "top_left"
    BOTTOM_RIGHT = "bottom_right"
    TOP_RIGHT = "top_right"


@dataclass(frozen=True)
class Point:
    """Integer 2D point. Equal by value."""
    x: int
    y: int

    @classmethod
    def from_coords(cls, coords: Sequence[int]) -> Point:
        """Build from [x, y]; raises InvalidInput if coords is null or malformed."""
        validate_point_coordinates(coords)
        return cls(int(coords[0]), int(coords[1]))

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)


def bounds_of(points: Sequence[Point]) -> tuple[Point, Point]:
    """Componentwise (min, max) over points. Raises InvalidInput if points is empty."""
    if not points:
        raise InvalidInput("Rectangle coordinates cannot be empty", error_key=RECTANGLE_EMPTY)
    xs = [p.x for p in points]
    ys = [p.y for p in points]
    return Point(min(xs), min(ys)), Point(max(xs), max(ys))


@dataclass(frozen=True)
class Rectangle:
    """
    Vertex list plus its bounding box. min_point/max_point are derived from vertices
    at construction; a Rectangle need not describe a real rectangle (see is_valid_rectangle).
    """
    vertices: tuple[Point, ...]
    min_point: Point = field(init=False)
    max_point: Point = field(init=False)

    def __post_init__(self) -> None:
        verts = tuple(self.vertices)
        lo, hi = bounds_of(verts)
        object.__setattr__(self, "vertices", verts)
        object.__setattr__(self, "min_point", lo)
        object.__setattr__(self, "max_point", hi)

    @classmethod
    def from_points(cls, points: Iterable[Point]) -> Rectangle:
        return cls(tuple(points))

    @property
    def width(self) -> int:
        return self.max_point.x - self.min_point.x

    @property
    def height(self) -> int:
        return self.max_point.y - self.min_point.y

    def corners(self) -> dict[CornerType, Point]:
        """Bounding-box corners keyed by CornerType."""
        lo, hi = self.min_point, self.max_point
        return {
            CornerType.BOTTOM_LEFT: Point(lo.x, lo.y),
            CornerType.TOP_LEFT: Point(lo.x, hi.y),
            CornerType.BOTTOM_RIGHT: Point(hi.x, lo.y),
            CornerType.TOP_RIGHT: Point(hi.x, hi.y),
        }


@dataclass(frozen=True)
class CheckResult:
    """
    Outcome of one point-in-rectangle query.
    inside is the boolean answer; reason says why it is True/False.
    """
    rectangle_coords: list[tuple[int, int]]
    point_coords: tuple[int, int]
    valid_shape: bool
    inside: bool
    reason: CheckReason
