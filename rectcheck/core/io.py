# rectcheck/core/io.py
"""
Load rectangle / point coordinates from JSON text, JSON files or WKT files.
WKT coordinates must be integral; closed polygon rings drop their repeated closing vertex.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from shapely import wkt
from shapely.errors import ShapelyError
from shapely.geometry import LineString, MultiPoint, Polygon
from shapely.geometry.base import BaseGeometry

from rectcheck.core.errors import COORDINATE_TYPE, INPUT_UNREADABLE, InvalidInput


def _resolve_path(path: str | Path, repo_root: Path | None) -> Path:
    """Resolve path; if relative, against repo_root (or cwd if repo_root is None)."""
    p = Path(path)
    if not p.is_absolute() and repo_root is not None:
        p = repo_root / p
    return p.resolve()


def parse_json_coordinates(text: str) -> Any:
    """
    Parse a JSON coordinate literal such as '[2, 2]' or '[[0, 0], [0, 5], [5, 5], [5, 0]]'.
    Structure is not validated here; 'null' parses to None.
    """
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidInput(f"Coordinates are not valid JSON: {e.msg}", error_key=INPUT_UNREADABLE) from e


def _to_int(value: float) -> int:
    if not float(value).is_integer():
        raise InvalidInput(f"Coordinates must be integers, found: {value!r}", error_key=COORDINATE_TYPE)
    return int(value)


def geometry_to_coordinates(geom: BaseGeometry) -> list[list[int]]:
    """Vertex list of a Polygon exterior, LineString or MultiPoint as integer [x, y] pairs."""
    if geom is None or geom.is_empty:
        raise InvalidInput("Geometry is empty", error_key=INPUT_UNREADABLE)
    if isinstance(geom, Polygon):
        coords = list(geom.exterior.coords)
        if len(coords) > 1 and coords[0] == coords[-1]:
            coords = coords[:-1]
    elif isinstance(geom, LineString):
        coords = list(geom.coords)
    elif isinstance(geom, MultiPoint):
        coords = [(p.x, p.y) for p in geom.geoms]
    else:
        raise InvalidInput(f"Unsupported geometry type: {geom.geom_type}", error_key=INPUT_UNREADABLE)
    return [[_to_int(c[0]), _to_int(c[1])] for c in coords]


def parse_wkt_coordinates(wkt_string: str) -> list[list[int]]:
    """Parse a WKT POLYGON / LINESTRING / MULTIPOINT into integer vertex pairs."""
    try:
        geom = wkt.loads(wkt_string.strip())
    except ShapelyError as e:
        raise InvalidInput(f"Could not parse WKT: {e}", error_key=INPUT_UNREADABLE) from e
    return geometry_to_coordinates(geom)


def load_coordinates(path: str | Path, repo_root: Path | None = None) -> Any:
    """
    Read rectangle vertices from a .json (list of [x, y]) or .wkt file.
    Raises FileNotFoundError if path is missing, InvalidInput if the content is unreadable.
    """
    resolved = _resolve_path(path, repo_root)
    if not resolved.exists():
        raise FileNotFoundError(f"Coordinates file not found: {resolved}")
    text = resolved.read_text(encoding="utf-8").strip()
    if resolved.suffix.lower() == ".wkt":
        return parse_wkt_coordinates(text)
    return parse_json_coordinates(text)
