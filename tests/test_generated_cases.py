"""
Regression over generated cases: every category from scripts/generate_test_cases.py
must give the answer it was constructed with. Deterministic (fixed seed).
"""

from __future__ import annotations

import importlib.util
from pathlib import Path

import pytest

from rectcheck.core.checker import is_point_in_rectangle

_SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "generate_test_cases.py"


def _load_generator():
    spec = importlib.util.spec_from_file_location("generate_test_cases", _SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.mark.parametrize("seed", [0, 7, 42])
def test_generated_cases_match_expected(seed: int) -> None:
    cases = _load_generator().generate_cases(10, seed)
    assert len(cases) == 50
    for case in cases:
        got = is_point_in_rectangle(case["rectangle"], case["point"])
        assert got is case["expected"], case["case_id"]


def test_generated_valid_cases_reach_inside() -> None:
    cases = _load_generator().generate_cases(30, 1)
    assert any(c["expected"] for c in cases if c["case_id"].startswith("valid_"))
