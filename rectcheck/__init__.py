"""
rectcheck: strict point-in-rectangle checks for integer, axis-aligned rectangles
described by any number of boundary vertices.
"""

from rectcheck.core.checker import RectanglePointChecker, check_point, is_point_in_rectangle
from rectcheck.core.errors import InvalidInput
from rectcheck.core.types import CheckResult, CornerType, Point, Rectangle

__all__ = [
    "CheckResult",
    "CornerType",
    "InvalidInput",
    "Point",
    "Rectangle",
    "RectanglePointChecker",
    "check_point",
    "is_point_in_rectangle",
]
