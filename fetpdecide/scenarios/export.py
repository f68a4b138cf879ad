from __future__ import annotations

import csv
from pathlib import Path
from typing import Iterable, TextIO

from fetpdecide.core.domain.attributes import ATTRIBUTE_LABELS, CANONICAL_ATTRIBUTES
from fetpdecide.core.domain.models import SavedScenario

CSV_HEADER = ["Name"] + [ATTRIBUTE_LABELS[a] for a in CANONICAL_ATTRIBUTES] + ["Uptake", "Net Benefit"]


def scenario_row(scenario: SavedScenario) -> list[str]:
    return (
        [scenario.name]
        + [scenario.configuration.get(a, "") for a in CANONICAL_ATTRIBUTES]
        + [f"{scenario.uptake * 100.0:.2f}", f"{scenario.net_benefit:.2f}"]
    )


def write_scenarios_csv(scenarios: Iterable[SavedScenario], target: str | Path | TextIO) -> int:
    if isinstance(target, (str, Path)):
        with Path(target).open("w", newline="", encoding="utf-8") as f:
            return write_scenarios_csv(scenarios, f)

    writer = csv.writer(target)
    writer.writerow(CSV_HEADER)
    n = 0
    for scenario in scenarios:
        writer.writerow(scenario_row(scenario))
        n += 1
    return n
