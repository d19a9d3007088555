# rectcheck/core/runner.py
"""
CLI entrypoint: check a point against a rectangle given inline (JSON) or from a file,
optionally render a PNG, or run a batch manifest.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from rectcheck.core.checker import check_point
from rectcheck.core.config import LOG_LEVEL, REPORTS_DIR
from rectcheck.core.errors import InvalidInput, user_message
from rectcheck.core.io import load_coordinates, parse_json_coordinates
from rectcheck.core.reporting import (
    check_result_to_dict,
    ensure_report_dir,
    write_result_json,
    write_run_metadata_json,
)

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Check whether a point is strictly inside a rectangle.")
    p.add_argument("--rectangle", type=str, default=None, help="Rectangle vertices as JSON, e.g. '[[0,0],[0,5],[5,5],[5,0]]'")
    p.add_argument("--geometry", type=str, default=None, help="Rectangle vertices file (.json or .wkt)")
    p.add_argument("--point", type=str, default=None, help="Point as JSON, e.g. '[2,2]'")
    p.add_argument("--render", type=str, default=None, help="Write a PNG of the check to this path")
    p.add_argument("--json", action="store_true", dest="as_json", help="Print the full result as JSON")
    p.add_argument("--batch-manifest", type=str, default=None, dest="batch_manifest", help="Batch mode: CSV/JSON manifest path")
    p.add_argument("--batch-limit", type=int, default=None, dest="batch_limit", help="Max cases in batch")
    p.add_argument("--run-name", type=str, default="run", dest="run_name", help="Reports subdir name")
    p.add_argument("--output-dir", type=str, default=REPORTS_DIR, dest="output_dir", help="Output directory (repo-relative)")
    p.add_argument("--repo-root", type=str, default=None, dest="repo_root", help="Repo root (default: cwd)")
    return p.parse_args(argv)


def _run_single(args: argparse.Namespace, repo_root: Path) -> None:
    if args.geometry:
        rectangle = load_coordinates(args.geometry, repo_root=repo_root)
    else:
        rectangle = parse_json_coordinates(args.rectangle) if args.rectangle is not None else None
    point = parse_json_coordinates(args.point) if args.point is not None else None

    result = check_point(rectangle, point)

    report_dir = ensure_report_dir(repo_root, args.run_name, output_dir=args.output_dir)
    result_path = write_result_json(report_dir, result)
    write_run_metadata_json(report_dir, args.run_name, args.geometry or "cli", 1)
    logger.info("Wrote %s", result_path)

    if args.render and result.rectangle_coords:
        from rectcheck.core.render import render_check
        from rectcheck.core.types import Point, Rectangle

        rect = Rectangle.from_points(Point(x, y) for x, y in result.rectangle_coords)
        out = render_check(rect, Point(*result.point_coords), result, args.render)
        logger.info("Wrote %s", out)

    if args.as_json:
        print(json.dumps(check_result_to_dict(result), indent=2))
    else:
        print("true" if result.inside else "false")


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO))
    args = _parse_args(argv)
    repo_root = Path(args.repo_root).resolve() if args.repo_root else Path.cwd().resolve()

    try:
        if args.batch_manifest:
            from rectcheck.core.batch import run_batch
            manifest = Path(args.batch_manifest)
            if not manifest.is_absolute():
                manifest = repo_root / manifest
            out = run_batch(
                run_name=args.run_name,
                manifest_path=manifest,
                repo_root=repo_root,
                output_dir=args.output_dir,
                limit=args.batch_limit,
            )
            print(out / "index.csv")
            return 0
        _run_single(args, repo_root)
    except InvalidInput as e:
        print(f"error: {e.message}", file=sys.stderr)
        print(user_message(e.error_key), file=sys.stderr)
        return 2
    except FileNotFoundError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
