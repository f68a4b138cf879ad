"""Search every FETP configuration for the maximal predicted uptake.

Example:
  - python -m fetpdecide.cli.run_optimize --top 5
"""

from __future__ import annotations

import argparse
import sys

from fetpdecide.app_api.build_app import build_decision_aid
from fetpdecide.optimize.enumerate import count_configurations
from fetpdecide.optimize.optimizer import EmptySearchSpaceError, set_optimizer_debug
from fetpdecide.uptake.model_config import DEFAULT_RULE_ID

from ._args import format_configuration
from ._debug_utils import _dbg, _debug_sink


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Find the uptake-maximizing FETP configuration")
    parser.add_argument("--rule", default=DEFAULT_RULE_ID, help="DCE model rule_id")
    parser.add_argument("--top", type=int, default=0, help="Also print the N best configurations")
    parser.add_argument("--debug", action="store_true", help="Print search trace lines")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    if args.top < 0:
        print("SUMMARY status=ERROR message=TOP_MUST_BE_NON_NEGATIVE")
        return 2

    try:
        app = build_decision_aid(args.rule)
    except ValueError:
        print("SUMMARY status=ERROR message=DCE_MODEL_NOT_FOUND")
        return 2

    _dbg(args, f"search_space={count_configurations(app.model.domain)}")
    set_optimizer_debug(_debug_sink(args))
    try:
        result = app.optimize()
        ranked = app.rank(args.top) if args.top > 0 else []
    except EmptySearchSpaceError:
        print("SUMMARY status=ERROR message=EMPTY_SEARCH_SPACE")
        return 2
    finally:
        set_optimizer_debug(None)

    print(f"SUMMARY rule_id={app.rule_id}")
    print(f"SUMMARY evaluated={result.evaluated}")
    for name, level in result.configuration.items():
        print(f"SUMMARY {name}={level}")
    print(f"SUMMARY uptake_pct={result.uptake * 100.0:.2f}")

    if ranked:
        print("RANKED")
        print("rank | index | utility | uptake_pct | configuration")
        for item in ranked:
            print(
                f"{item.rank} | {item.index} | {item.utility:.4f} | "
                f"{item.uptake * 100.0:.2f} | {format_configuration(item.configuration)}"
            )
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
