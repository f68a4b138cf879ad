"""Canonical attribute identifiers for FETP configurations.

Invariants:
  - CANONICAL_ATTRIBUTES order is the enumeration order used by the optimizer.
  - Identifiers must remain stable; they key saved scenarios and CSV exports.
"""

from __future__ import annotations

DELIVERY_METHOD = "delivery_method"
TRAINING_MODEL = "training_model"
TRAINING_TYPE = "training_type"
ANNUAL_CAPACITY = "annual_capacity"
STIPEND_SUPPORT = "stipend_support"
CAREER_PATHWAY = "career_pathway"
GEOGRAPHIC_DISTRIBUTION = "geographic_distribution"
ACCREDITATION = "accreditation"
TOTAL_COST = "total_cost"

CANONICAL_ATTRIBUTES: tuple[str, ...] = (
    DELIVERY_METHOD,
    TRAINING_MODEL,
    TRAINING_TYPE,
    ANNUAL_CAPACITY,
    STIPEND_SUPPORT,
    CAREER_PATHWAY,
    GEOGRAPHIC_DISTRIBUTION,
    ACCREDITATION,
    TOTAL_COST,
)

# Column labels used by comparison tables and CSV export.
ATTRIBUTE_LABELS: dict[str, str] = {
    DELIVERY_METHOD: "Delivery",
    TRAINING_MODEL: "Model",
    TRAINING_TYPE: "Type",
    ANNUAL_CAPACITY: "Capacity",
    STIPEND_SUPPORT: "Stipend",
    CAREER_PATHWAY: "Career",
    GEOGRAPHIC_DISTRIBUTION: "Geographic",
    ACCREDITATION: "Accreditation",
    TOTAL_COST: "Total Cost",
}

_missing = [a for a in CANONICAL_ATTRIBUTES if a not in ATTRIBUTE_LABELS]
if _missing:
    raise RuntimeError(f"Missing ATTRIBUTE_LABELS for: {_missing}")
