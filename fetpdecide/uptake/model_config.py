from __future__ import annotations

import json
import math
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterator, Mapping

DEFAULT_RULE_ID = "FETP_DCE_MAIN_V1"


@dataclass(frozen=True)
class AttributeSpec:
    name: str
    coefficient_prefix: str
    levels: tuple[str, ...]


@dataclass(frozen=True)
class AttributeDomain:
    """Ordered attribute specs; order defines the canonical enumeration order.

    Empty domains are representable so callers can exercise the optimizer's
    empty search space contract. load_model_config never produces one.
    """

    attributes: tuple[AttributeSpec, ...]

    def __iter__(self) -> Iterator[AttributeSpec]:
        return iter(self.attributes)

    def names(self) -> tuple[str, ...]:
        return tuple(spec.name for spec in self.attributes)

    def levels_for(self, name: str) -> tuple[str, ...]:
        for spec in self.attributes:
            if spec.name == name:
                return spec.levels
        raise KeyError(name)

    def size(self) -> int:
        if not self.attributes:
            return 0
        total = 1
        for spec in self.attributes:
            total *= len(spec.levels)
        return total


@dataclass(frozen=True)
class CoefficientTable:
    base: float
    weights: Mapping[str, Mapping[str, float]]

    def weight(self, attribute: str, level: str) -> float:
        by_level = self.weights.get(attribute)
        if by_level is None:
            return 0.0
        # Reference levels may be omitted from the table; they weigh 0.
        return by_level.get(level, 0.0)


@dataclass(frozen=True)
class DceModelConfig:
    rule_id: str
    description: str
    domain: AttributeDomain
    coefficients: CoefficientTable


def _models_dir() -> Path:
    return Path(__file__).resolve().parent / "models"


def _require(payload: Mapping[str, Any], key: str, expected_type: type) -> Any:
    if key not in payload:
        raise ValueError(f"Missing required field '{key}' in model config")
    value = payload[key]
    if expected_type is float:
        if not isinstance(value, (int, float)) or isinstance(value, bool):
            raise ValueError(f"Field '{key}' must be float")
        return float(value)
    if not isinstance(value, expected_type):
        raise ValueError(f"Field '{key}' must be {expected_type.__name__}")
    return value


def _require_finite(key: str, value: float) -> float:
    if not math.isfinite(value):
        raise ValueError(f"Coefficient '{key}' must be finite")
    return value


def _parse_attribute(raw: Any) -> AttributeSpec:
    if not isinstance(raw, dict):
        raise ValueError("Each attribute must be a JSON object")
    name = _require(raw, "name", str)
    prefix = _require(raw, "coefficient_prefix", str)
    levels_raw = _require(raw, "levels", list)
    if not name.strip() or not prefix.strip():
        raise ValueError("Attribute name and coefficient_prefix must be non-empty")
    if not levels_raw:
        raise ValueError(f"Attribute '{name}' must declare at least one level")
    levels: list[str] = []
    for level in levels_raw:
        if not isinstance(level, str) or not level.strip():
            raise ValueError(f"Attribute '{name}' levels must be non-empty strings")
        if level in levels:
            raise ValueError(f"Attribute '{name}' has duplicate level '{level}'")
        levels.append(level)
    return AttributeSpec(name=name, coefficient_prefix=prefix, levels=tuple(levels))


def _split_coefficients(
    attributes: tuple[AttributeSpec, ...], raw: Mapping[str, Any]
) -> dict[str, dict[str, float]]:
    # Longest prefix first so a prefix that extends another still resolves.
    by_prefix = sorted(attributes, key=lambda spec: len(spec.coefficient_prefix), reverse=True)
    weights: dict[str, dict[str, float]] = {spec.name: {} for spec in attributes}
    for key in raw:
        value = _require_finite(key, _require(raw, key, float))
        owner: AttributeSpec | None = None
        for spec in by_prefix:
            if key.startswith(f"{spec.coefficient_prefix}_"):
                owner = spec
                break
        if owner is None:
            raise ValueError(f"Coefficient '{key}' does not match any attribute prefix")
        level = key[len(owner.coefficient_prefix) + 1 :]
        if not level:
            raise ValueError(f"Coefficient '{key}' has an empty level")
        weights[owner.name][level] = value
    return weights


def build_model_config(payload: Mapping[str, Any]) -> DceModelConfig:
    rule_id = _require(payload, "rule_id", str)
    description = _require(payload, "description", str)
    base = _require_finite("base", _require(payload, "base", float))

    attributes_raw = _require(payload, "attributes", list)
    if not attributes_raw:
        raise ValueError("Model config must declare at least one attribute")
    attributes = tuple(_parse_attribute(raw) for raw in attributes_raw)
    names = [spec.name for spec in attributes]
    if len(set(names)) != len(names):
        raise ValueError("Model config has duplicate attribute names")
    prefixes = [spec.coefficient_prefix for spec in attributes]
    if len(set(prefixes)) != len(prefixes):
        raise ValueError("Model config has duplicate coefficient prefixes")

    raw_coefficients = _require(payload, "coefficients", dict)
    weights = _split_coefficients(attributes, raw_coefficients)

    return DceModelConfig(
        rule_id=rule_id,
        description=description,
        domain=AttributeDomain(attributes=attributes),
        coefficients=CoefficientTable(
            base=base,
            weights=MappingProxyType(
                {name: MappingProxyType(levels) for name, levels in weights.items()}
            ),
        ),
    )


def load_model_config(rule_id: str = DEFAULT_RULE_ID, models_dir: Path | None = None) -> DceModelConfig:
    model_path = (models_dir if models_dir is not None else _models_dir()) / f"{rule_id}.json"
    if not model_path.exists():
        raise ValueError(f"Unknown DCE model rule_id: {rule_id}")

    payload = json.loads(model_path.read_text(encoding="utf-8"))
    if not isinstance(payload, dict):
        raise ValueError("Model config must be a JSON object")

    config = build_model_config(payload)
    if config.rule_id != rule_id:
        raise ValueError(
            f"rule_id mismatch: requested '{rule_id}', config has '{config.rule_id}'"
        )
    return config
