"""Domain enums for uptake bands, benefit scenarios and cost tiers.

Responsibilities:
  - Define stable identifiers shared by the boundary, CLI and exports.
  - Provide band recommendation metadata and benefit multipliers.

Invariants:
  - Enum values must remain stable for saved scenarios and exports.
  - Metadata tables must be complete and deterministic.
"""

from __future__ import annotations

from enum import Enum


class UptakeBand(Enum):
    LOW = "LOW"
    MODERATE = "MODERATE"
    HIGH = "HIGH"


class BenefitScenario(Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class CostTier(Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


# Lower bounds (inclusive) of each band on the probability scale.
UPTAKE_BAND_LOWER_BOUND: dict[UptakeBand, float] = {
    UptakeBand.LOW: 0.0,
    UptakeBand.MODERATE: 0.30,
    UptakeBand.HIGH: 0.70,
}

UPTAKE_BAND_RECOMMENDATION: dict[UptakeBand, str] = {
    UptakeBand.LOW: "Uptake is low. Consider revising features.",
    UptakeBand.MODERATE: "Uptake is moderate. Some adjustments may boost support.",
    UptakeBand.HIGH: "Uptake is high. This configuration is promising.",
}

# Share of effective enrollees assumed to yield the monetized benefit.
BENEFIT_MULTIPLIER: dict[BenefitScenario, float] = {
    BenefitScenario.LOW: 0.01,
    BenefitScenario.MEDIUM: 0.05,
    BenefitScenario.HIGH: 0.08,
}


def benefit_scenario_from_label(label: str) -> BenefitScenario:
    try:
        return BenefitScenario(label.strip().lower())
    except ValueError:
        raise ValueError(f"Unknown benefit scenario: {label!r}") from None


for _table_name, _table, _enum in (
    ("UPTAKE_BAND_LOWER_BOUND", UPTAKE_BAND_LOWER_BOUND, UptakeBand),
    ("UPTAKE_BAND_RECOMMENDATION", UPTAKE_BAND_RECOMMENDATION, UptakeBand),
    ("BENEFIT_MULTIPLIER", BENEFIT_MULTIPLIER, BenefitScenario),
):
    _missing = [m.value for m in _enum if m not in _table]
    if _missing:
        raise RuntimeError(f"Missing {_table_name} for: {_missing}")
