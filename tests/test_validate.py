"""
Structural validation of raw coordinates: null, arity, integer type.
"""

from __future__ import annotations

import numpy as np
import pytest

from rectcheck.core.errors import (
    COORDINATE_TYPE,
    POINT_ARITY,
    POINT_NULL,
    RECTANGLE_NULL,
    VERTEX_NULL,
    InvalidInput,
)
from rectcheck.core.validate import validate_point_coordinates, validate_rectangle_coordinates


def test_validate_point_accepts_pair() -> None:
    assert validate_point_coordinates([1, 2]) is None
    assert validate_point_coordinates((-3, 0)) is None


def test_validate_point_accepts_numpy_ints() -> None:
    validate_point_coordinates(np.array([4, 5]))


def test_validate_point_null() -> None:
    with pytest.raises(InvalidInput, match="cannot be null") as exc:
        validate_point_coordinates(None)
    assert exc.value.error_key == POINT_NULL


@pytest.mark.parametrize("coords, n", [([1], 1), ([1, 2, 3], 3), ([], 0)])
def test_validate_point_wrong_arity(coords: list[int], n: int) -> None:
    with pytest.raises(InvalidInput, match=f"exactly 2 elements, found: {n}") as exc:
        validate_point_coordinates(coords)
    assert exc.value.error_key == POINT_ARITY


@pytest.mark.parametrize("coords", [[1.5, 2], [1, "2"], [True, 0], [None, 1]])
def test_validate_point_non_integer(coords: list) -> None:
    with pytest.raises(InvalidInput) as exc:
        validate_point_coordinates(coords)
    assert exc.value.error_key == COORDINATE_TYPE


def test_validate_point_not_a_sequence() -> None:
    with pytest.raises(InvalidInput):
        validate_point_coordinates("12")
    with pytest.raises(InvalidInput):
        validate_point_coordinates(7)


def test_validate_rectangle_accepts_any_count() -> None:
    validate_rectangle_coordinates([[0, 0], [0, 5], [5, 5], [5, 0]])
    # Fewer than 4 vertices is not a structural error.
    validate_rectangle_coordinates([[0, 0], [0, 5], [5, 5]])
    validate_rectangle_coordinates([])


def test_validate_rectangle_null() -> None:
    with pytest.raises(InvalidInput, match="Rectangle coordinates cannot be null") as exc:
        validate_rectangle_coordinates(None)
    assert exc.value.error_key == RECTANGLE_NULL


def test_validate_rectangle_null_vertex() -> None:
    with pytest.raises(InvalidInput) as exc:
        validate_rectangle_coordinates([[0, 0], None, [5, 5], [5, 0]])
    assert exc.value.error_key == VERTEX_NULL


def test_validate_rectangle_bad_vertex_arity() -> None:
    with pytest.raises(InvalidInput, match="found: 3"):
        validate_rectangle_coordinates([[0, 0], [0, 5, 1], [5, 5], [5, 0]])


def test_invalid_input_is_value_error() -> None:
    with pytest.raises(ValueError):
        validate_point_coordinates(None)


def test_validate_point_zero_dim_array() -> None:
    with pytest.raises(InvalidInput) as exc:
        validate_point_coordinates(np.array(3))
    assert exc.value.error_key == POINT_ARITY


def test_validate_rectangle_zero_dim_array() -> None:
    with pytest.raises(InvalidInput):
        validate_rectangle_coordinates(np.array(3))
