# rectcheck/core/checker.py
"""
Point-in-rectangle entrypoints: validate inputs, build the rectangle, check its shape,
then test strict containment. Malformed input raises InvalidInput; a well-formed but
non-rectangular shape is a plain False.
"""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from rectcheck.core.config import MINIMUM_RECTANGLE_VERTICES
from rectcheck.core.geometry import build_rectangle, classify_point, is_valid_rectangle
from rectcheck.core.types import CheckResult, Point
from rectcheck.core.validate import validate_point_coordinates, validate_rectangle_coordinates

logger = logging.getLogger(__name__)


def check_point(
    rectangle_coords: Sequence[Sequence[int]],
    point_coords: Sequence[int],
) -> CheckResult:
    """
    Run the full check and return a CheckResult.
    Raises InvalidInput if either input is structurally malformed.
    """
    validate_rectangle_coordinates(rectangle_coords)
    validate_point_coordinates(point_coords)
    point = Point.from_coords(point_coords)
    raw = [(int(c[0]), int(c[1])) for c in rectangle_coords]

    if len(raw) < MINIMUM_RECTANGLE_VERTICES:
        logger.debug("Rectangle has %d vertices; shape is invalid", len(raw))
        return CheckResult(raw, point.as_tuple(), valid_shape=False, inside=False, reason="invalid_shape")

    rectangle = build_rectangle(rectangle_coords)
    if not is_valid_rectangle(rectangle):
        return CheckResult(raw, point.as_tuple(), valid_shape=False, inside=False, reason="invalid_shape")

    position = classify_point(rectangle, point)
    return CheckResult(
        raw,
        point.as_tuple(),
        valid_shape=True,
        inside=position == "inside",
        reason=position,
    )


def is_point_in_rectangle(
    rectangle_coords: Sequence[Sequence[int]],
    point_coords: Sequence[int],
) -> bool:
    """
    True iff point_coords is strictly inside the rectangle described by rectangle_coords.
    Vertices may include extra points on the edges, duplicates, and any order.
    Raises InvalidInput on null or malformed coordinates.
    """
    return check_point(rectangle_coords, point_coords).inside


class RectanglePointChecker:
    """Object-style entrypoint; the checking backend can be swapped (e.g. in tests)."""

    def __init__(
        self,
        backend: Callable[[Sequence[Sequence[int]], Sequence[int]], CheckResult] = check_point,
    ) -> None:
        self._backend = backend

    def check(self, rectangle: Sequence[Sequence[int]], point: Sequence[int]) -> CheckResult:
        return self._backend(rectangle, point)

    def is_inside_rectangle(self, rectangle: Sequence[Sequence[int]], point: Sequence[int]) -> bool:
        return self.check(rectangle, point).inside
