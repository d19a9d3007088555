# rectcheck/core/validate.py
"""
Structural validation of raw coordinate data: null checks, arity, integer type.
Says nothing about whether the vertices form a rectangle; see geometry.is_valid_rectangle.
"""

from __future__ import annotations

import logging
import numbers
from typing import Any

import numpy as np

from rectcheck.core.config import REQUIRED_POINT_DIMENSIONS
from rectcheck.core.errors import (
    COORDINATE_TYPE,
    POINT_ARITY,
    POINT_NULL,
    RECTANGLE_NULL,
    VERTEX_NULL,
    InvalidInput,
)

logger = logging.getLogger(__name__)


def _fail(message: str, error_key: str) -> InvalidInput:
    logger.debug("Invalid input (%s): %s", error_key, message)
    return InvalidInput(message, error_key=error_key)


def _is_integer(value: Any) -> bool:
    """True for int and numpy integers; bool is not a coordinate."""
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def _is_sequence(value: Any) -> bool:
    if isinstance(value, (str, bytes, dict)):
        return False
    if isinstance(value, np.ndarray) and value.ndim == 0:
        return False
    return hasattr(value, "__len__") and hasattr(value, "__getitem__")


def validate_point_coordinates(coords: Any) -> None:
    """
    Check coords is [x, y]: not None, exactly 2 elements, both integers.
    Raises InvalidInput otherwise.
    """
    if coords is None:
        raise _fail("Point coordinates cannot be null", POINT_NULL)
    if not _is_sequence(coords):
        raise _fail(
            f"Point coordinates must be a sequence of {REQUIRED_POINT_DIMENSIONS} integers, "
            f"found: {type(coords).__name__}",
            POINT_ARITY,
        )
    if len(coords) != REQUIRED_POINT_DIMENSIONS:
        raise _fail(
            f"Point coordinates must have exactly {REQUIRED_POINT_DIMENSIONS} elements, found: {len(coords)}",
            POINT_ARITY,
        )
    for value in coords:
        if not _is_integer(value):
            raise _fail(
                f"Point coordinates must be integers, found: {value!r}",
                COORDINATE_TYPE,
            )


def validate_rectangle_coordinates(coords_list: Any) -> None:
    """
    Check coords_list is a list of valid [x, y] pairs (no None entries).
    Does not enforce a minimum vertex count.
    """
    if coords_list is None:
        raise _fail("Rectangle coordinates cannot be null", RECTANGLE_NULL)
    if not _is_sequence(coords_list):
        raise _fail(
            f"Rectangle coordinates must be a sequence of [x, y] pairs, found: {type(coords_list).__name__}",
            RECTANGLE_NULL,
        )
    for i, coords in enumerate(coords_list):
        if coords is None:
            raise _fail(f"Rectangle vertex {i} cannot be null", VERTEX_NULL)
        validate_point_coordinates(coords)
