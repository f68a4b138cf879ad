"""DTO definitions and input parsing at the decision-aid boundary.

Responsibilities:
  - Turn form-like input into a complete configuration or reject it.
  - Define stable, typed structures for evaluation outputs.
Must not:
  - Implement model or search logic.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from fetpdecide.core.domain.enums import UptakeBand
from fetpdecide.core.domain.models import CostBenefit
from fetpdecide.uptake.model_config import AttributeDomain


class IncompleteConfigurationError(ValueError):
    def __init__(self, missing: list[str]) -> None:
        super().__init__(f"Please select all required fields: {', '.join(missing)}")
        self.missing = missing


def build_configuration(form: Mapping[str, Any], domain: AttributeDomain) -> dict[str, str]:
    """Collect one selected level per attribute from ``form``.

    Missing, None and blank values count as unselected. Levels are not checked
    against the domain; unknown levels are scored as weight 0 downstream.
    """
    config: dict[str, str] = {}
    missing: list[str] = []
    for name in domain.names():
        value = form.get(name)
        if value is None:
            missing.append(name)
            continue
        stripped = str(value).strip()
        if not stripped:
            missing.append(name)
            continue
        config[name] = stripped
    if missing:
        raise IncompleteConfigurationError(missing)
    return config


@dataclass(frozen=True)
class ScenarioEvaluation:
    configuration: dict[str, str]
    utility: float
    uptake: float
    band: UptakeBand
    recommendation: str
    cost_benefit: CostBenefit
    economic_advice: str

    @property
    def uptake_pct(self) -> float:
        return self.uptake * 100.0
