"""Save several FETP scenarios into one session and compare them.

Inputs:
  - JSON file holding a list of form objects keyed by attribute name.
Outputs:
  - Comparison table on stdout and an optional CSV file.
Example:
  - python -m fetpdecide.cli.run_compare --scenarios scenarios.json --csv out.csv
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from fetpdecide.app_api.build_app import build_decision_aid
from fetpdecide.app_api.dto import IncompleteConfigurationError
from fetpdecide.uptake.model_config import DEFAULT_RULE_ID

from ._args import format_configuration


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compare saved FETP scenarios")
    parser.add_argument("--scenarios", required=True, help="JSON list of scenario forms")
    parser.add_argument("--rule", default=DEFAULT_RULE_ID, help="DCE model rule_id")
    parser.add_argument("--csv", default=None, help="Write the comparison to this CSV path")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    try:
        forms = json.loads(Path(args.scenarios).read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        print(f"SUMMARY status=ERROR message={exc}")
        return 2
    if not isinstance(forms, list) or not all(isinstance(f, dict) for f in forms):
        print("SUMMARY status=ERROR message=SCENARIOS_MUST_BE_LIST_OF_OBJECTS")
        return 2

    try:
        app = build_decision_aid(args.rule)
    except ValueError:
        print("SUMMARY status=ERROR message=DCE_MODEL_NOT_FOUND")
        return 2

    skipped = 0
    for position, form in enumerate(forms, start=1):
        try:
            app.save_scenario(form)
        except IncompleteConfigurationError as exc:
            print(f"SKIP position={position} missing={','.join(exc.missing)}")
            skipped += 1
        except ValueError as exc:
            print(f"SKIP position={position} error={exc}")
            skipped += 1

    saved = app.saved_scenarios()
    print("name | uptake_pct | net_benefit | configuration")
    for sc in saved:
        print(
            f"{sc.name} | {sc.uptake * 100.0:.2f} | {sc.net_benefit:.2f} | "
            f"{format_configuration(sc.configuration)}"
        )

    if args.csv:
        n = app.export_csv(args.csv)
        print(f"SUMMARY csv_rows={n}")
    print(f"SUMMARY saved={len(saved)} skipped={skipped}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
