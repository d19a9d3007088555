# rectcheck/core/geometry.py
"""
Rectangle geometry: build from raw coordinates, shape validation, strict containment.
Shape validation uses only set membership against the bounding box, never vertex order.
"""

from __future__ import annotations

import logging
from typing import Literal, Sequence

from shapely.geometry import Polygon, box

from rectcheck.core.config import MINIMUM_RECTANGLE_VERTICES
from rectcheck.core.errors import RECTANGLE_EMPTY, InvalidInput
from rectcheck.core.types import Point, Rectangle
from rectcheck.core.validate import validate_rectangle_coordinates

logger = logging.getLogger(__name__)

PointPosition = Literal["inside", "on_boundary", "outside"]


def build_rectangle(coords_list: Sequence[Sequence[int]]) -> Rectangle:
    """
    Validate coords_list structurally and build a Rectangle (vertices + bounding box).
    No rectangularity check here. Raises InvalidInput if malformed or empty.
    """
    validate_rectangle_coordinates(coords_list)
    if len(coords_list) == 0:
        raise InvalidInput("Rectangle coordinates cannot be empty", error_key=RECTANGLE_EMPTY)
    return Rectangle.from_points(Point.from_coords(c) for c in coords_list)


def is_point_on_edge(point: Point, min_point: Point, max_point: Point) -> bool:
    """True if point lies on the boundary of the box [min_point, max_point]."""
    x, y = point.x, point.y
    on_horizontal = (y == min_point.y or y == max_point.y) and min_point.x <= x <= max_point.x
    on_vertical = (x == min_point.x or x == max_point.x) and min_point.y <= y <= max_point.y
    return on_horizontal or on_vertical


def is_valid_rectangle(rectangle: Rectangle) -> bool:
    """
    True if the vertices describe exactly the boundary of their bounding box:
    at least 4 vertices, non-zero width and height, every vertex on an edge,
    and all four corners present. Extra edge points, duplicates and any order are fine.
    """
    vertices = rectangle.vertices
    if len(vertices) < MINIMUM_RECTANGLE_VERTICES:
        logger.debug("Not a rectangle: %d vertices", len(vertices))
        return False
    if rectangle.width == 0 or rectangle.height == 0:
        logger.debug("Not a rectangle: degenerate box %dx%d", rectangle.width, rectangle.height)
        return False
    lo, hi = rectangle.min_point, rectangle.max_point
    for vertex in vertices:
        if not is_point_on_edge(vertex, lo, hi):
            logger.debug("Not a rectangle: vertex (%d, %d) off the boundary", vertex.x, vertex.y)
            return False
    missing = set(rectangle.corners().values()) - set(vertices)
    if missing:
        logger.debug("Not a rectangle: missing corners %s", sorted(p.as_tuple() for p in missing))
        return False
    return True


def contains_point(rectangle: Rectangle, point: Point) -> bool:
    """Strict interior test against the bounding box; edges and corners are outside."""
    lo, hi = rectangle.min_point, rectangle.max_point
    return lo.x < point.x < hi.x and lo.y < point.y < hi.y


def classify_point(rectangle: Rectangle, point: Point) -> PointPosition:
    """Position of point relative to the bounding box."""
    if contains_point(rectangle, point):
        return "inside"
    if is_point_on_edge(point, rectangle.min_point, rectangle.max_point):
        return "on_boundary"
    return "outside"


def rectangle_to_polygon(rectangle: Rectangle) -> Polygon:
    """Shapely polygon of the bounding box (for rendering and export)."""
    lo, hi = rectangle.min_point, rectangle.max_point
    return box(lo.x, lo.y, hi.x, hi.y)
