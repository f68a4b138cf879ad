from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping, TextIO

from fetpdecide.core.domain.attributes import ANNUAL_CAPACITY, TOTAL_COST
from fetpdecide.core.domain.enums import BenefitScenario
from fetpdecide.core.domain.models import OptimizationResult, RankedConfiguration, SavedScenario
from fetpdecide.economics.cost_benefit import (
    compute_cost_benefit,
    economic_advice,
    parse_trainees,
    tiered_total_cost,
)
from fetpdecide.optimize.optimizer import ConfigurationOptimizer
from fetpdecide.scenarios.export import write_scenarios_csv
from fetpdecide.scenarios.repo import SavedScenarioRepo
from fetpdecide.uptake.classify import classify_uptake, uptake_recommendation
from fetpdecide.uptake.utility_model import UtilityModel

from .dto import ScenarioEvaluation, build_configuration


class FetpDecisionAid:
    def __init__(
        self,
        model: UtilityModel,
        optimizer: ConfigurationOptimizer,
        scenario_repo: SavedScenarioRepo,
        rule_id: str,
    ) -> None:
        self._model = model
        self._optimizer = optimizer
        self._scenario_repo = scenario_repo
        self._rule_id = rule_id
        self._scenario_repo.ensure_schema()

    @property
    def rule_id(self) -> str:
        return self._rule_id

    @property
    def model(self) -> UtilityModel:
        return self._model

    def evaluate(
        self,
        form: Mapping[str, Any],
        benefit_scenario: BenefitScenario = BenefitScenario.MEDIUM,
        total_cost: float | None = None,
    ) -> ScenarioEvaluation:
        config = build_configuration(form, self._model.domain)
        utility = self._model.utility(config)
        uptake = self._model.evaluate_uptake(config)
        cost = total_cost if total_cost is not None else tiered_total_cost(config[TOTAL_COST])
        cost_benefit = compute_cost_benefit(
            trainees=parse_trainees(config[ANNUAL_CAPACITY]),
            uptake=uptake,
            total_cost=cost,
            scenario=benefit_scenario,
        )
        return ScenarioEvaluation(
            configuration=config,
            utility=utility,
            uptake=uptake,
            band=classify_uptake(uptake),
            recommendation=uptake_recommendation(uptake),
            cost_benefit=cost_benefit,
            economic_advice=economic_advice(cost_benefit.net_benefit),
        )

    def save_scenario(self, form: Mapping[str, Any], total_cost: float | None = None) -> SavedScenario:
        evaluation = self.evaluate(form, BenefitScenario.MEDIUM, total_cost=total_cost)
        scenario = SavedScenario(
            name=self._scenario_repo.next_name(),
            configuration=evaluation.configuration,
            uptake=evaluation.uptake,
            total_cost=evaluation.cost_benefit.total_cost,
            net_benefit=evaluation.cost_benefit.net_benefit,
            benefit_scenario=BenefitScenario.MEDIUM,
        )
        self._scenario_repo.insert_scenario(scenario)
        return scenario

    def saved_scenarios(self) -> list[SavedScenario]:
        return self._scenario_repo.list_scenarios()

    def reset(self) -> None:
        self._scenario_repo.clear()

    def optimize(self) -> OptimizationResult:
        return self._optimizer.optimize()

    def rank(self, top_n: int | None = None) -> list[RankedConfiguration]:
        return self._optimizer.rank(top_n)

    def export_csv(self, target: str | Path | TextIO) -> int:
        return write_scenarios_csv(self.saved_scenarios(), target)
