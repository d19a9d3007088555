# rectcheck/core/config.py
"""
Central configuration for rectangle checks, reporting and rendering.
All tunable values live here; no magic numbers in other modules.
"""

from __future__ import annotations
import os

# ----- Coordinates -----
REQUIRED_POINT_DIMENSIONS: int = 2
"""A coordinate pair is exactly [x, y]."""

MINIMUM_RECTANGLE_VERTICES: int = 4
"""Fewer vertices than this can never cover all four corners."""

# ----- Paths (repo-relative) -----
REPORTS_DIR: str = "reports"

# ----- Rendering -----
RENDER_WIDTH_PX: int = 600
RENDER_HEIGHT_PX: int = 600
RENDER_PAD_FRAC: float = 0.15
"""Margin around the bounding box (fraction of its size) in rendered PNGs."""

# ----- Batch -----
BATCH_INDEX_FIELDS: tuple[str, ...] = (
    "case_id",
    "rectangle",
    "point",
    "valid_shape",
    "inside",
    "reason",
    "error",
)

# ----- Logging -----
LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()
"""Log level for the CLI. Set env LOG_LEVEL=DEBUG to see validation details."""
