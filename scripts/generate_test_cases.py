#!/usr/bin/env python3
"""
Generate a JSON batch manifest of point-in-rectangle cases for rectcheck.

Categories:
valid:          rectangles with shuffled extra edge points and duplicates
missing_corner: a valid rectangle with one corner removed
off_boundary:   a valid rectangle with one vertex moved inside or outside the box
degenerate:     zero-width or zero-height boxes
too_few:        fewer than 4 vertices

Each case carries "expected" (the answer by construction); run_batch ignores it.
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import numpy as np

OUTPUT_PATH = Path(__file__).parent.parent / "docs" / "assets" / "test_cases.json"


def _corners(x0: int, y0: int, x1: int, y1: int) -> list[list[int]]:
    return [[x0, y0], [x0, y1], [x1, y1], [x1, y0]]


def _random_box(rng: np.random.Generator) -> tuple[int, int, int, int]:
    x0, y0 = (int(v) for v in rng.integers(-50, 50, size=2))
    w, h = (int(v) for v in rng.integers(2, 40, size=2))
    return x0, y0, x0 + w, y0 + h


def _edge_points(rng: np.random.Generator, box: tuple[int, int, int, int], n: int) -> list[list[int]]:
    """n random points strictly between corners on the box edges."""
    x0, y0, x1, y1 = box
    out: list[list[int]] = []
    for _ in range(n):
        side = int(rng.integers(0, 4))
        if side == 0:
            out.append([x0, int(rng.integers(y0 + 1, y1))])
        elif side == 1:
            out.append([x1, int(rng.integers(y0 + 1, y1))])
        elif side == 2:
            out.append([int(rng.integers(x0 + 1, x1)), y0])
        else:
            out.append([int(rng.integers(x0 + 1, x1)), y1])
    return out


def _shuffled(rng: np.random.Generator, vertices: list[list[int]]) -> list[list[int]]:
    order = rng.permutation(len(vertices))
    return [vertices[int(i)] for i in order]


def _query_point(rng: np.random.Generator, box: tuple[int, int, int, int]) -> list[int]:
    """Mix of interior, boundary and exterior points."""
    x0, y0, x1, y1 = box
    kind = int(rng.integers(0, 3))
    if kind == 0:
        return [int(rng.integers(x0 + 1, x1)), int(rng.integers(y0 + 1, y1))]
    if kind == 1:
        return _edge_points(rng, box, 1)[0]
    return [x1 + int(rng.integers(1, 10)), int(rng.integers(y0 - 10, y1 + 10))]


def _strictly_inside(box: tuple[int, int, int, int], point: list[int]) -> bool:
    x0, y0, x1, y1 = box
    return x0 < point[0] < x1 and y0 < point[1] < y1


def generate_cases(n_per_category: int, seed: int) -> list[dict]:
    rng = np.random.default_rng(seed)
    cases: list[dict] = []

    for i in range(n_per_category):
        box = _random_box(rng)
        verts = _corners(*box) + _edge_points(rng, box, int(rng.integers(0, 5)))
        verts += [list(v) for v in verts[: int(rng.integers(0, 3))]]
        point = _query_point(rng, box)
        cases.append({
            "case_id": f"valid_{i:03d}",
            "rectangle": _shuffled(rng, verts),
            "point": point,
            "expected": _strictly_inside(box, point),
        })

    for i in range(n_per_category):
        box = _random_box(rng)
        corners = _corners(*box)
        del corners[int(rng.integers(0, 4))]
        verts = corners + _edge_points(rng, box, 4)
        cases.append({
            "case_id": f"missing_corner_{i:03d}",
            "rectangle": _shuffled(rng, verts),
            "point": _query_point(rng, box),
            "expected": False,
        })

    for i in range(n_per_category):
        box = _random_box(rng)
        x0, y0, x1, y1 = box
        stray = [int(rng.integers(x0 + 1, x1)), int(rng.integers(y0 + 1, y1))]
        if i % 2:
            stray = [x1 + 5, y1 + 5]
        cases.append({
            "case_id": f"off_boundary_{i:03d}",
            "rectangle": _shuffled(rng, _corners(*box) + [stray]),
            "point": _query_point(rng, box),
            "expected": False,
        })

    for i in range(n_per_category):
        box = _random_box(rng)
        x0, y0, x1, y1 = box
        flat = (x0, y0, x0, y1) if i % 2 else (x0, y0, x1, y0)
        cases.append({
            "case_id": f"degenerate_{i:03d}",
            "rectangle": _corners(*flat),
            "point": _query_point(rng, box),
            "expected": False,
        })

    for i in range(n_per_category):
        box = _random_box(rng)
        cases.append({
            "case_id": f"too_few_{i:03d}",
            "rectangle": _corners(*box)[: int(rng.integers(0, 4))],
            "point": _query_point(rng, box),
            "expected": False,
        })

    return cases


def main() -> None:
    p = argparse.ArgumentParser(description="Generate a rectcheck batch manifest.")
    p.add_argument("--n", type=int, default=20, help="Cases per category")
    p.add_argument("--seed", type=int, default=42, help="Random seed")
    p.add_argument("--out", type=str, default=str(OUTPUT_PATH), help="Output JSON path")
    args = p.parse_args()

    cases = generate_cases(args.n, args.seed)
    out = Path(args.out)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(json.dumps(cases, indent=1), encoding="utf-8")
    print(f"Created: {out} ({len(cases)} cases)")


if __name__ == "__main__":
    main()
