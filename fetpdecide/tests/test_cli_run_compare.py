from __future__ import annotations

import csv
import json
from pathlib import Path

from fetpdecide.cli import run_compare

BASELINE_FORM = {
    "delivery_method": "inperson",
    "training_model": "parttime",
    "training_type": "frontline",
    "annual_capacity": "100",
    "stipend_support": "75000",
    "career_pathway": "government",
    "geographic_distribution": "centralized",
    "accreditation": "unaccredited",
    "total_cost": "medium",
}


def test_run_compare_saves_and_exports(tmp_path: Path, capsys) -> None:
    scenarios = tmp_path / "scenarios.json"
    incomplete = {k: v for k, v in BASELINE_FORM.items() if k != "accreditation"}
    scenarios.write_text(
        json.dumps([BASELINE_FORM, incomplete, {**BASELINE_FORM, "delivery_method": "hybrid"}]),
        encoding="utf-8",
    )
    out_csv = tmp_path / "out.csv"

    rc = run_compare.main(["--scenarios", str(scenarios), "--csv", str(out_csv)])

    out = capsys.readouterr().out
    assert rc == 0
    assert "SKIP position=2 missing=accreditation" in out
    assert "SUMMARY csv_rows=2" in out
    assert "SUMMARY saved=2 skipped=1" in out
    with out_csv.open(newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert [r["Name"] for r in rows] == ["Scenario 1", "Scenario 2"]
    assert [r["Delivery"] for r in rows] == ["inperson", "hybrid"]


def test_run_compare_rejects_non_list(tmp_path: Path, capsys) -> None:
    scenarios = tmp_path / "scenarios.json"
    scenarios.write_text(json.dumps({"delivery_method": "hybrid"}), encoding="utf-8")

    rc = run_compare.main(["--scenarios", str(scenarios)])

    assert rc == 2
    assert "SCENARIOS_MUST_BE_LIST_OF_OBJECTS" in capsys.readouterr().out
