"""Linear-in-parameters utility and logistic uptake for FETP configurations.

Responsibilities:
  - Score a complete configuration against an injected coefficient table.
  - Map utility to uptake probability with the logistic transform.

Invariants:
  - Pure and deterministic; no caching and no shared mutable state.
  - Levels outside the domain contribute weight 0 instead of failing.
  - Utility terms are accumulated base first, then attributes in domain order.
"""

from __future__ import annotations

import math
from typing import Mapping

from .model_config import AttributeDomain, CoefficientTable, DceModelConfig


class InvalidConfigurationError(ValueError):
    pass


def logistic(u: float) -> float:
    # Exponent kept non-positive so large |u| saturates instead of overflowing.
    if u >= 0:
        return 1.0 / (1.0 + math.exp(-u))
    e = math.exp(u)
    return e / (e + 1.0)


class UtilityModel:
    def __init__(self, coefficients: CoefficientTable, domain: AttributeDomain) -> None:
        self._coefficients = coefficients
        self._domain = domain

    @classmethod
    def from_config(cls, config: DceModelConfig) -> "UtilityModel":
        return cls(coefficients=config.coefficients, domain=config.domain)

    @property
    def domain(self) -> AttributeDomain:
        return self._domain

    @property
    def coefficients(self) -> CoefficientTable:
        return self._coefficients

    def utility(self, config: Mapping[str, str]) -> float:
        missing = [spec.name for spec in self._domain if spec.name not in config]
        if missing:
            raise InvalidConfigurationError(f"Configuration is missing attributes: {missing}")
        u = self._coefficients.base
        for spec in self._domain:
            u += self._coefficients.weight(spec.name, config[spec.name])
        return u

    def evaluate_uptake(self, config: Mapping[str, str]) -> float:
        return logistic(self.utility(config))
