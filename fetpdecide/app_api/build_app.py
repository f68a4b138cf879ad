from __future__ import annotations

import sqlite3
from pathlib import Path

from fetpdecide.optimize.optimizer import ConfigurationOptimizer
from fetpdecide.scenarios.repo import SavedScenarioRepo
from fetpdecide.uptake.model_config import DEFAULT_RULE_ID, load_model_config
from fetpdecide.uptake.utility_model import UtilityModel

from .facade import FetpDecisionAid


def build_decision_aid(
    rule_id: str = DEFAULT_RULE_ID,
    conn: sqlite3.Connection | None = None,
    models_dir: Path | None = None,
) -> FetpDecisionAid:
    config = load_model_config(rule_id, models_dir=models_dir)
    model = UtilityModel.from_config(config)
    return FetpDecisionAid(
        model=model,
        optimizer=ConfigurationOptimizer(model),
        scenario_repo=SavedScenarioRepo(conn),
        rule_id=config.rule_id,
    )
