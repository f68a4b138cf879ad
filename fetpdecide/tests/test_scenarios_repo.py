from __future__ import annotations

import sqlite3

from fetpdecide.core.domain.enums import BenefitScenario
from fetpdecide.core.domain.models import SavedScenario
from fetpdecide.scenarios.repo import SavedScenarioRepo


def _scenario(name: str, uptake: float) -> SavedScenario:
    return SavedScenario(
        name=name,
        configuration={"delivery_method": "hybrid", "total_cost": "low"},
        uptake=uptake,
        total_cost=27000.0,
        net_benefit=1000.0,
        benefit_scenario=BenefitScenario.MEDIUM,
    )


def test_saved_scenario_repo_round_trip_in_save_order() -> None:
    repo = SavedScenarioRepo()
    repo.ensure_schema()

    assert repo.count() == 0
    assert repo.next_name() == "Scenario 1"

    repo.insert_scenario(_scenario("Scenario 1", 0.9))
    repo.insert_scenario(_scenario("Scenario 2", 0.4))

    rows = repo.list_scenarios()
    assert [r.name for r in rows] == ["Scenario 1", "Scenario 2"]
    assert rows[0] == _scenario("Scenario 1", 0.9)
    assert list(rows[0].configuration) == ["delivery_method", "total_cost"]
    assert repo.next_name() == "Scenario 3"


def test_saved_scenario_repo_clear_resets_names() -> None:
    conn = sqlite3.connect(":memory:")
    repo = SavedScenarioRepo(conn)
    repo.ensure_schema()
    repo.insert_scenario(_scenario("Scenario 1", 0.9))

    repo.clear()

    assert repo.count() == 0
    assert repo.list_scenarios() == []
    assert repo.next_name() == "Scenario 1"


def test_ensure_schema_is_idempotent() -> None:
    repo = SavedScenarioRepo()
    repo.ensure_schema()
    repo.insert_scenario(_scenario("Scenario 1", 0.9))

    repo.ensure_schema()

    assert repo.count() == 1
