# rectcheck/core/batch.py
"""
Batch mode: run checks for every case in a CSV or JSON manifest.
Output: reports/batch_<run_name>/index.csv, results.json and run_metadata.json.
"""

from __future__ import annotations

import csv
import json
import logging
from pathlib import Path
from typing import Any

from rectcheck.core.checker import check_point
from rectcheck.core.config import BATCH_INDEX_FIELDS, REPORTS_DIR
from rectcheck.core.errors import INPUT_UNREADABLE, InvalidInput
from rectcheck.core.io import parse_json_coordinates
from rectcheck.core.reporting import check_result_to_dict, ensure_report_dir, write_run_metadata_json

logger = logging.getLogger(__name__)


def load_manifest(manifest_path: Path) -> list[dict[str, Any]]:
    """
    Read cases from a manifest.
    CSV: columns rectangle,point holding JSON literals (optional case_id).
    JSON: list of {"rectangle": [...], "point": [...]} objects (optional case_id).
    """
    if not manifest_path.exists():
        raise FileNotFoundError(f"Manifest not found: {manifest_path}")
    if manifest_path.suffix.lower() == ".json":
        try:
            data = json.loads(manifest_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise InvalidInput(f"Manifest is not valid JSON: {e.msg}", error_key=INPUT_UNREADABLE) from e
        if not isinstance(data, list):
            raise InvalidInput("JSON manifest must be a list of cases", error_key=INPUT_UNREADABLE)
        if not all(isinstance(case, dict) for case in data):
            raise InvalidInput("Each JSON manifest case must be an object", error_key=INPUT_UNREADABLE)
        return [dict(case) for case in data]
    cases: list[dict[str, Any]] = []
    with open(manifest_path, newline="", encoding="utf-8") as f:
        for row in csv.DictReader(f):
            cases.append({
                "case_id": row.get("case_id") or None,
                "rectangle": (row.get("rectangle") or "").strip(),
                "point": (row.get("point") or "").strip(),
            })
    return cases


def _decode(value: Any) -> Any:
    """CSV cells hold JSON text; JSON manifests already hold lists."""
    if isinstance(value, str):
        return parse_json_coordinates(value) if value else None
    return value


def _as_text(value: Any) -> str:
    return value if isinstance(value, str) else json.dumps(value)


def run_case(case_id: str, case: dict[str, Any]) -> dict[str, Any]:
    """Run one case; InvalidInput is recorded in the error column instead of raised."""
    row: dict[str, Any] = {k: "" for k in BATCH_INDEX_FIELDS}
    row["case_id"] = case_id
    row["rectangle"] = _as_text(case.get("rectangle"))
    row["point"] = _as_text(case.get("point"))
    try:
        result = check_point(_decode(case.get("rectangle")), _decode(case.get("point")))
    except InvalidInput as e:
        logger.info("Case %s: invalid input (%s): %s", case_id, e.error_key, e.message)
        row["reason"] = "error"
        row["error"] = e.message
        return row
    row["valid_shape"] = result.valid_shape
    row["inside"] = result.inside
    row["reason"] = result.reason
    row["result"] = check_result_to_dict(result)
    return row


def run_batch(
    run_name: str,
    manifest_path: Path,
    repo_root: Path | None = None,
    output_dir: str = REPORTS_DIR,
    limit: int | None = None,
) -> Path:
    """
    Run every case in the manifest. Returns the batch report directory
    containing index.csv, results.json and run_metadata.json.
    """
    root = repo_root or Path.cwd().resolve()
    cases = load_manifest(manifest_path)
    if limit is not None:
        cases = cases[:limit]
    batch_dir = ensure_report_dir(root, f"batch_{run_name}", output_dir=output_dir)

    rows = [
        run_case(case.get("case_id") or f"case_{i:04d}", case)
        for i, case in enumerate(cases)
    ]

    with open(batch_dir / "index.csv", "w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=list(BATCH_INDEX_FIELDS), extrasaction="ignore")
        w.writeheader()
        w.writerows(rows)
    results = [{"case_id": r["case_id"], "error": r["error"] or None, **(r.get("result") or {})} for r in rows]
    (batch_dir / "results.json").write_text(json.dumps(results, indent=2), encoding="utf-8")
    write_run_metadata_json(batch_dir, run_name, str(manifest_path), len(rows))

    n_inside = sum(1 for r in rows if r["inside"] is True)
    n_errors = sum(1 for r in rows if r["error"])
    logger.info("Batch %s: %d cases, %d inside, %d errors -> %s", run_name, len(rows), n_inside, n_errors, batch_dir)
    return batch_dir
