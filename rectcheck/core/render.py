# rectcheck/core/render.py
"""
Matplotlib PNG rendering of a rectangle check: bounding box, supplied vertices, query point.
"""

from __future__ import annotations

from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np

from rectcheck.core.config import RENDER_HEIGHT_PX, RENDER_PAD_FRAC, RENDER_WIDTH_PX
from rectcheck.core.geometry import rectangle_to_polygon
from rectcheck.core.types import CheckResult, Point, Rectangle


def _new_fig(width_px: int, height_px: int) -> tuple[plt.Figure, plt.Axes]:
    fig = plt.figure(figsize=(width_px / 100.0, height_px / 100.0), dpi=100)
    ax = fig.add_axes([0.05, 0.05, 0.9, 0.9])
    return fig, ax


def _set_axes(ax: plt.Axes, rectangle: Rectangle, point: Point, pad_frac: float) -> None:
    """Limits covering the box and the point, with margin; equal aspect."""
    xs = [rectangle.min_point.x, rectangle.max_point.x, point.x]
    ys = [rectangle.min_point.y, rectangle.max_point.y, point.y]
    minx, maxx, miny, maxy = min(xs), max(xs), min(ys), max(ys)
    dx = max(1.0, (maxx - minx) * pad_frac)
    dy = max(1.0, (maxy - miny) * pad_frac)
    ax.set_xlim(minx - dx, maxx + dx)
    ax.set_ylim(miny - dy, maxy + dy)
    ax.set_aspect("equal", adjustable="box")


def render_check(
    rectangle: Rectangle,
    point: Point,
    result: CheckResult,
    output_path: str | Path,
    width_px: int = RENDER_WIDTH_PX,
    height_px: int = RENDER_HEIGHT_PX,
) -> Path:
    """
    Render the bounding box (filled if the shape is valid, dashed outline if not),
    the supplied vertices, and the point colored by the result. Returns output_path.
    """
    fig, ax = _new_fig(width_px, height_px)
    poly = rectangle_to_polygon(rectangle)
    xy = np.array(poly.exterior.coords)
    if result.valid_shape:
        ax.fill(xy[:, 0], xy[:, 1], facecolor="lightblue", edgecolor="navy", linewidth=1)
    else:
        ax.plot(xy[:, 0], xy[:, 1], color="gray", linestyle="--", linewidth=1)

    verts = np.array([v.as_tuple() for v in rectangle.vertices])
    ax.scatter(verts[:, 0], verts[:, 1], s=20, color="navy", zorder=3)

    color = "green" if result.inside else "red"
    ax.scatter([point.x], [point.y], s=60, marker="x", color=color, zorder=4)
    ax.set_title(f"{result.reason} (inside={result.inside})")
    _set_axes(ax, rectangle, point, RENDER_PAD_FRAC)

    out = Path(output_path)
    fig.savefig(out, dpi=100, facecolor="white")
    plt.close(fig)
    return out
