"""Program cost and monetized benefit for an evaluated configuration.

Inputs/Outputs:
  - Inputs: annual capacity (trainees), predicted uptake, a total cost figure
    and a benefit scenario.
  - Outputs: CostBenefit with effective enrollment and net benefit.

Invariants:
  - Uptake is consumed as produced by UtilityModel; nothing here rescales it.
"""

from __future__ import annotations

import math
from typing import Mapping

from fetpdecide.core.domain.enums import BENEFIT_MULTIPLIER, BenefitScenario, CostTier
from fetpdecide.core.domain.models import CostBenefit

BENEFIT_PER_ENROLLEE = 50000.0
MODEST_NET_BENEFIT_CEILING = 50000.0

TIERED_COST: dict[CostTier, float] = {
    CostTier.LOW: 27000.0,
    CostTier.MEDIUM: 55000.0,
    CostTier.HIGH: 83000.0,
}


def tiered_total_cost(tier: str | CostTier) -> float:
    if isinstance(tier, CostTier):
        return TIERED_COST[tier]
    try:
        return TIERED_COST[CostTier(tier.strip().lower())]
    except ValueError:
        raise ValueError(f"Unknown cost tier: {tier!r}") from None


def itemized_total_cost(items: Mapping[str, float]) -> float:
    total = 0.0
    for name, amount in items.items():
        if isinstance(amount, bool) or not isinstance(amount, (int, float)):
            raise ValueError(f"Cost item '{name}' must be numeric")
        if not math.isfinite(amount) or amount < 0:
            raise ValueError(f"Cost item '{name}' must be a finite non-negative amount")
        total += float(amount)
    return total


def parse_trainees(annual_capacity: str | int) -> int:
    try:
        trainees = int(annual_capacity)
    except (TypeError, ValueError):
        raise ValueError(f"Annual capacity must be an integer: {annual_capacity!r}") from None
    if trainees < 0:
        raise ValueError("Annual capacity must be >= 0")
    return trainees


def compute_cost_benefit(
    trainees: int,
    uptake: float,
    total_cost: float,
    scenario: BenefitScenario = BenefitScenario.MEDIUM,
) -> CostBenefit:
    effective_enrollment = trainees * uptake
    monetized_benefit = effective_enrollment * BENEFIT_MULTIPLIER[scenario] * BENEFIT_PER_ENROLLEE
    return CostBenefit(
        trainees=trainees,
        uptake=uptake,
        effective_enrollment=effective_enrollment,
        total_cost=total_cost,
        monetized_benefit=monetized_benefit,
        net_benefit=monetized_benefit - total_cost,
        benefit_scenario=scenario,
    )


def economic_advice(net_benefit: float) -> str:
    if net_benefit < 0:
        return "The program may not be cost-effective. Consider revising features."
    if net_benefit < MODEST_NET_BENEFIT_CEILING:
        return "Modest benefits. Some improvements could enhance cost-effectiveness."
    return "This configuration appears highly cost-effective."
