"""Evaluate predicted uptake and cost/benefit for one FETP configuration.

Example:
  - python -m fetpdecide.cli.run_uptake --delivery-method hybrid --training-model fulltime \
      --training-type advanced --annual-capacity 2000 --stipend-support 150000 \
      --career-pathway international --geographic-distribution nationwide \
      --accreditation international --total-cost low --benefit-scenario high
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from fetpdecide.app_api.build_app import build_decision_aid
from fetpdecide.app_api.dto import IncompleteConfigurationError
from fetpdecide.core.domain.enums import BenefitScenario, benefit_scenario_from_label
from fetpdecide.economics.cost_benefit import itemized_total_cost
from fetpdecide.uptake.model_config import DEFAULT_RULE_ID

from ._args import add_attribute_args, form_from_args


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Predict FETP uptake for one configuration")
    parser.add_argument("--rule", default=DEFAULT_RULE_ID, help="DCE model rule_id")
    parser.add_argument(
        "--benefit-scenario",
        default=BenefitScenario.MEDIUM.value,
        choices=[s.value for s in BenefitScenario],
        help="Benefit multiplier scenario",
    )
    parser.add_argument(
        "--cost-items",
        default=None,
        help="JSON object of itemized cost line items; overrides the tiered cost",
    )
    add_attribute_args(parser)
    return parser.parse_args(argv)


def _load_cost_items(path: str) -> float:
    payload = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(payload, dict):
        raise ValueError("Cost items must be a JSON object")
    return itemized_total_cost(payload)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)

    try:
        app = build_decision_aid(args.rule)
    except ValueError:
        print("SUMMARY status=ERROR message=DCE_MODEL_NOT_FOUND")
        return 2

    try:
        total_cost = _load_cost_items(args.cost_items) if args.cost_items else None
        evaluation = app.evaluate(
            form_from_args(args),
            benefit_scenario=benefit_scenario_from_label(args.benefit_scenario),
            total_cost=total_cost,
        )
    except IncompleteConfigurationError as exc:
        print("SUMMARY status=ERROR message=INCOMPLETE_CONFIGURATION")
        print(f"SUMMARY missing={','.join(exc.missing)}")
        return 2
    except (OSError, ValueError) as exc:
        print(f"SUMMARY status=ERROR message={exc}")
        return 2

    cb = evaluation.cost_benefit
    print(f"SUMMARY rule_id={app.rule_id}")
    for name, level in evaluation.configuration.items():
        print(f"SUMMARY {name}={level}")
    print(f"SUMMARY utility={evaluation.utility:.4f}")
    print(f"SUMMARY uptake_pct={evaluation.uptake_pct:.2f}")
    print(f"SUMMARY uptake_band={evaluation.band.value}")
    print(f"SUMMARY recommendation={evaluation.recommendation}")
    print(f"SUMMARY trainees={cb.trainees}")
    print(f"SUMMARY effective_enrollment={round(cb.effective_enrollment)}")
    print(f"SUMMARY total_cost={cb.total_cost:.2f}")
    print(f"SUMMARY monetized_benefit={cb.monetized_benefit:.2f}")
    print(f"SUMMARY net_benefit={cb.net_benefit:.2f}")
    print(f"SUMMARY economic_advice={evaluation.economic_advice}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
