from __future__ import annotations

import json
import math
from pathlib import Path

import pytest

from fetpdecide.core.domain.attributes import CANONICAL_ATTRIBUTES
from fetpdecide.uptake import model_config
from fetpdecide.uptake.model_config import build_model_config, load_model_config


def _real_payload() -> dict:
    path = Path(model_config.__file__).resolve().parent / "models" / "FETP_DCE_MAIN_V1.json"
    return json.loads(path.read_text(encoding="utf-8"))


def test_load_fetp_dce_main_v1_config() -> None:
    cfg = load_model_config("FETP_DCE_MAIN_V1")

    assert cfg.rule_id == "FETP_DCE_MAIN_V1"
    assert cfg.coefficients.base == pytest.approx(-0.1, abs=1e-12)
    assert cfg.domain.names() == CANONICAL_ATTRIBUTES
    assert cfg.domain.size() == 23328
    assert [len(spec.levels) for spec in cfg.domain] == [3, 2, 3, 4, 3, 4, 3, 3, 3]
    assert cfg.domain.levels_for("career_pathway") == (
        "government",
        "international",
        "academic",
        "private",
    )


def test_coefficients_split_into_attribute_level_weights() -> None:
    table = load_model_config().coefficients

    assert table.weight("delivery_method", "hybrid") == pytest.approx(0.5)
    assert table.weight("training_model", "fulltime") == pytest.approx(0.3)
    assert table.weight("annual_capacity", "2000") == pytest.approx(0.6)
    assert table.weight("accreditation", "unaccredited") == pytest.approx(-0.5)
    assert table.weight("total_cost", "high") == pytest.approx(-0.5)


def test_missing_weights_default_to_zero() -> None:
    table = load_model_config().coefficients

    assert table.weight("delivery_method", "satellite") == 0.0
    assert table.weight("no_such_attribute", "anything") == 0.0


def test_omitted_reference_level_weighs_zero() -> None:
    payload = _real_payload()
    del payload["coefficients"]["delivery_online"]

    cfg = build_model_config(payload)

    assert "online" not in cfg.coefficients.weights["delivery_method"]
    assert cfg.coefficients.weight("delivery_method", "online") == 0.0


def test_coefficient_table_is_read_only() -> None:
    table = load_model_config().coefficients

    with pytest.raises(TypeError):
        table.weights["delivery_method"]["hybrid"] = 9.0  # type: ignore[index]


def test_unknown_rule_id_rejected(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="Unknown DCE model rule_id"):
        load_model_config("FETP_DCE_MISSING", models_dir=tmp_path)


def test_rule_id_mismatch_rejected(tmp_path: Path) -> None:
    payload = _real_payload()
    (tmp_path / "FETP_DCE_OTHER_V1.json").write_text(json.dumps(payload), encoding="utf-8")

    with pytest.raises(ValueError, match="rule_id mismatch"):
        load_model_config("FETP_DCE_OTHER_V1", models_dir=tmp_path)


def test_non_finite_weight_rejected_at_load(tmp_path: Path) -> None:
    payload = _real_payload()
    payload["coefficients"]["cost_low"] = math.nan
    (tmp_path / "FETP_DCE_MAIN_V1.json").write_text(json.dumps(payload), encoding="utf-8")

    with pytest.raises(ValueError, match="must be finite"):
        load_model_config("FETP_DCE_MAIN_V1", models_dir=tmp_path)


def test_non_finite_base_rejected() -> None:
    payload = _real_payload()
    payload["base"] = math.inf

    with pytest.raises(ValueError, match="must be finite"):
        build_model_config(payload)


def test_unknown_coefficient_prefix_rejected() -> None:
    payload = _real_payload()
    payload["coefficients"]["mentoring_weekly"] = 0.1

    with pytest.raises(ValueError, match="does not match any attribute prefix"):
        build_model_config(payload)


def test_empty_levels_rejected() -> None:
    payload = _real_payload()
    payload["attributes"][0]["levels"] = []

    with pytest.raises(ValueError, match="at least one level"):
        build_model_config(payload)


def test_duplicate_level_rejected() -> None:
    payload = _real_payload()
    payload["attributes"][1]["levels"] = ["parttime", "parttime"]

    with pytest.raises(ValueError, match="duplicate level"):
        build_model_config(payload)


def test_missing_field_rejected() -> None:
    payload = _real_payload()
    del payload["base"]

    with pytest.raises(ValueError, match="Missing required field 'base'"):
        build_model_config(payload)


def test_boolean_weight_rejected() -> None:
    payload = _real_payload()
    payload["coefficients"]["cost_low"] = True

    with pytest.raises(ValueError, match="must be float"):
        build_model_config(payload)
