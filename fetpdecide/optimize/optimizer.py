"""Exhaustive search for the uptake-maximizing FETP configuration.

Responsibilities:
  - Evaluate every configuration of the domain in canonical order.
  - Keep the first configuration reaching the maximal uptake.
  - Provide the full ranked set for cost/benefit comparison.

Invariants:
  - Replacement only on strictly greater uptake; ties keep the earlier
    configuration in odometer order.
  - No side effects; callers apply the result to their own state.
"""

from __future__ import annotations

from typing import Callable

from fetpdecide.core.domain.models import OptimizationResult, RankedConfiguration
from fetpdecide.uptake.utility_model import UtilityModel, logistic

from .enumerate import configuration_at, count_configurations, iter_configurations
from .ranking import ranked_indices, utility_grid

_DEBUG_FN: Callable[[str], None] | None = None


def set_optimizer_debug(fn: Callable[[str], None] | None) -> None:
    global _DEBUG_FN
    _DEBUG_FN = fn


class EmptySearchSpaceError(ValueError):
    pass


class ConfigurationOptimizer:
    def __init__(self, model: UtilityModel) -> None:
        self._model = model

    def _require_search_space(self) -> int:
        total = count_configurations(self._model.domain)
        if total == 0:
            raise EmptySearchSpaceError("Attribute domain has no configurations to search")
        return total

    def optimize(self) -> OptimizationResult:
        self._require_search_space()
        best_uptake = 0.0
        best_config: dict[str, str] | None = None
        evaluated = 0
        for candidate in iter_configurations(self._model.domain):
            uptake = self._model.evaluate_uptake(candidate)
            if uptake > best_uptake:
                best_uptake = uptake
                best_config = candidate
                if _DEBUG_FN is not None:
                    _DEBUG_FN(f"OPTIMIZE_IMPROVED index={evaluated} uptake={uptake:.6f}")
            evaluated += 1

        if best_config is None:
            # Every candidate underflowed to 0.0; fall back to the first one.
            best_config = configuration_at(self._model.domain, 0)
            best_uptake = self._model.evaluate_uptake(best_config)

        return OptimizationResult(
            configuration=best_config,
            uptake=best_uptake,
            evaluated=evaluated,
        )

    def rank(self, top_n: int | None = None) -> list[RankedConfiguration]:
        self._require_search_space()
        if top_n is not None and top_n < 1:
            raise ValueError("top_n must be >= 1")
        domain = self._model.domain
        utilities = utility_grid(domain, self._model.coefficients)
        ranked: list[RankedConfiguration] = []
        for position, index in enumerate(ranked_indices(utilities, top_n), start=1):
            u = float(utilities[index])
            ranked.append(
                RankedConfiguration(
                    rank=position,
                    index=int(index),
                    configuration=configuration_at(domain, int(index)),
                    utility=u,
                    uptake=logistic(u),
                )
            )
        return ranked
