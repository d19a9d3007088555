# rectcheck/core/reporting.py
"""
Create reports/<run_name>/ and write result.json / run_metadata.json for checks.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

from rectcheck.core.config import (
    MINIMUM_RECTANGLE_VERTICES,
    REPORTS_DIR,
    REQUIRED_POINT_DIMENSIONS,
)
from rectcheck.core.types import CheckResult

SCHEMA_VERSION = "1.0"


def check_result_to_dict(result: CheckResult) -> dict:
    """Exact structure for result.json."""
    return {
        "schema_version": SCHEMA_VERSION,
        "input": {
            "rectangle": [{"x": x, "y": y} for x, y in result.rectangle_coords],
            "point": {"x": result.point_coords[0], "y": result.point_coords[1]},
        },
        "result": {
            "valid_shape": result.valid_shape,
            "inside": result.inside,
            "reason": result.reason,
        },
    }


def run_metadata_dict(run_name: str, source: str, n_cases: int) -> dict:
    """Timestamp and config snapshot for run_metadata.json."""
    return {
        "run_name": run_name,
        "timestamp_utc": datetime.now(timezone.utc).isoformat(),
        "source": source,
        "n_cases": n_cases,
        "config": {
            "REQUIRED_POINT_DIMENSIONS": REQUIRED_POINT_DIMENSIONS,
            "MINIMUM_RECTANGLE_VERTICES": MINIMUM_RECTANGLE_VERTICES,
        },
    }


def ensure_report_dir(
    repo_root: Path,
    run_name: str,
    output_dir: str | None = None,
) -> Path:
    """Create output_dir/<run_name>/ under repo_root; return path. Default output_dir from config."""
    base = output_dir if output_dir is not None else REPORTS_DIR
    out = (repo_root / base).resolve() / run_name
    out.mkdir(parents=True, exist_ok=True)
    return out


def write_result_json(report_dir: Path, result: CheckResult) -> Path:
    """Write result.json to report_dir. Returns path to file."""
    path = report_dir / "result.json"
    path.write_text(json.dumps(check_result_to_dict(result), indent=2), encoding="utf-8")
    return path


def write_run_metadata_json(report_dir: Path, run_name: str, source: str, n_cases: int) -> Path:
    """Write run_metadata.json to report_dir."""
    path = report_dir / "run_metadata.json"
    path.write_text(json.dumps(run_metadata_dict(run_name, source, n_cases), indent=2), encoding="utf-8")
    return path
