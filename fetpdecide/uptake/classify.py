from __future__ import annotations

from fetpdecide.core.domain.enums import (
    UPTAKE_BAND_LOWER_BOUND,
    UPTAKE_BAND_RECOMMENDATION,
    UptakeBand,
)


def classify_uptake(probability: float) -> UptakeBand:
    if probability < UPTAKE_BAND_LOWER_BOUND[UptakeBand.MODERATE]:
        return UptakeBand.LOW
    if probability < UPTAKE_BAND_LOWER_BOUND[UptakeBand.HIGH]:
        return UptakeBand.MODERATE
    return UptakeBand.HIGH


def uptake_recommendation(probability: float) -> str:
    return UPTAKE_BAND_RECOMMENDATION[classify_uptake(probability)]
