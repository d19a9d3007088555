"""Render smoke tests: PNG is written for valid and invalid shapes."""

from __future__ import annotations

from pathlib import Path

from rectcheck.core.checker import check_point
from rectcheck.core.geometry import build_rectangle
from rectcheck.core.render import render_check
from rectcheck.core.types import Point


def test_render_valid_rectangle(tmp_path: Path) -> None:
    coords = [[0, 0], [0, 2], [0, 5], [5, 5], [5, 0]]
    result = check_point(coords, [2, 2])
    out = render_check(build_rectangle(coords), Point(2, 2), result, tmp_path / "ok.png", width_px=200, height_px=200)
    assert out.exists()
    assert out.read_bytes()[:4] == b"\x89PNG"


def test_render_invalid_shape(tmp_path: Path) -> None:
    coords = [[0, 0], [0, 5], [3, 3], [5, 0]]
    result = check_point(coords, [9, 9])
    out = render_check(build_rectangle(coords), Point(9, 9), result, tmp_path / "bad.png", width_px=200, height_px=200)
    assert out.exists()
