"""Vectorized utility scoring of the full attribute cross-product.

Inputs/Outputs:
  - Inputs: AttributeDomain and CoefficientTable.
  - Outputs: float64 utilities indexed by canonical enumeration index, and a
    stable descending ordering of those indices.

Invariants:
  - Weights are accumulated base first, then one attribute column at a time in
    domain order, so each utility equals UtilityModel.utility bit for bit.
"""

from __future__ import annotations

import numpy as np

from fetpdecide.uptake.model_config import AttributeDomain, CoefficientTable


def level_digits(domain: AttributeDomain) -> list[np.ndarray]:
    total = domain.size()
    index = np.arange(total, dtype=np.int64)
    digits: list[np.ndarray] = []
    stride = total
    for spec in domain:
        stride //= len(spec.levels)
        digits.append((index // stride) % len(spec.levels))
    return digits


def utility_grid(domain: AttributeDomain, coefficients: CoefficientTable) -> np.ndarray:
    total = domain.size()
    if total == 0:
        return np.zeros(0, dtype=float)
    u = np.full(total, coefficients.base, dtype=float)
    for spec, digits in zip(domain, level_digits(domain)):
        weights = np.array(
            [coefficients.weight(spec.name, level) for level in spec.levels], dtype=float
        )
        u += weights[digits]
    return u


def ranked_indices(utilities: np.ndarray, top_n: int | None = None) -> np.ndarray:
    # Stable sort keeps ties in enumeration order.
    order = np.argsort(-utilities, kind="stable")
    if top_n is not None:
        order = order[:top_n]
    return order
