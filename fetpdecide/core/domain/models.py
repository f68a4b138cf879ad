"""Domain models for uptake evaluation, search and saved scenarios.

Responsibilities:
  - Define immutable data carriers produced by the optimizer, the cost model
    and the scenario session.

Invariants:
  - Models must be deterministic containers with no behavior.
  - Configurations are held as plain dicts keyed by attribute name.
"""

from __future__ import annotations

from dataclasses import dataclass

from .enums import BenefitScenario


@dataclass(frozen=True)
class OptimizationResult:
    configuration: dict[str, str]
    uptake: float
    evaluated: int


@dataclass(frozen=True)
class RankedConfiguration:
    rank: int
    index: int
    configuration: dict[str, str]
    utility: float
    uptake: float


@dataclass(frozen=True)
class CostBenefit:
    trainees: int
    uptake: float
    effective_enrollment: float
    total_cost: float
    monetized_benefit: float
    net_benefit: float
    benefit_scenario: BenefitScenario


@dataclass(frozen=True)
class SavedScenario:
    name: str
    configuration: dict[str, str]
    uptake: float
    total_cost: float
    net_benefit: float
    benefit_scenario: BenefitScenario
