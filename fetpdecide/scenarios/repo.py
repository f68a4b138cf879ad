from __future__ import annotations

import json
import sqlite3

from fetpdecide.core.domain.enums import BenefitScenario
from fetpdecide.core.domain.models import SavedScenario


class SavedScenarioRepo:
    """Saved scenarios for one session, in save order.

    The default connection is an in-memory database, so scenarios vanish with
    the process or on clear().
    """

    def __init__(self, conn: sqlite3.Connection | None = None) -> None:
        self._conn = conn if conn is not None else sqlite3.connect(":memory:")

    def ensure_schema(self) -> None:
        self._conn.execute(
            """
            CREATE TABLE IF NOT EXISTS saved_scenario (
              seq INTEGER PRIMARY KEY AUTOINCREMENT,
              name TEXT NOT NULL,
              configuration_json TEXT NOT NULL,
              uptake REAL NOT NULL,
              total_cost REAL NOT NULL,
              net_benefit REAL NOT NULL,
              benefit_scenario TEXT NOT NULL,
              created_at TEXT NOT NULL DEFAULT (datetime('now'))
            )
            """
        )
        self._conn.commit()

    def count(self) -> int:
        row = self._conn.execute("SELECT COUNT(*) FROM saved_scenario").fetchone()
        return int(row[0])

    def next_name(self) -> str:
        return f"Scenario {self.count() + 1}"

    def insert_scenario(self, scenario: SavedScenario) -> None:
        self._conn.execute(
            """
            INSERT INTO saved_scenario (
              name,
              configuration_json,
              uptake,
              total_cost,
              net_benefit,
              benefit_scenario
            )
            VALUES (?, ?, ?, ?, ?, ?)
            """,
            (
                scenario.name,
                json.dumps(scenario.configuration),
                scenario.uptake,
                scenario.total_cost,
                scenario.net_benefit,
                scenario.benefit_scenario.value,
            ),
        )
        self._conn.commit()

    def list_scenarios(self) -> list[SavedScenario]:
        rows = self._conn.execute(
            """
            SELECT name, configuration_json, uptake, total_cost, net_benefit, benefit_scenario
            FROM saved_scenario
            ORDER BY seq ASC
            """
        ).fetchall()
        return [
            SavedScenario(
                name=str(row[0]),
                configuration=json.loads(row[1]),
                uptake=float(row[2]),
                total_cost=float(row[3]),
                net_benefit=float(row[4]),
                benefit_scenario=BenefitScenario(row[5]),
            )
            for row in rows
        ]

    def clear(self) -> None:
        self._conn.execute("DELETE FROM saved_scenario")
        self._conn.execute("DELETE FROM sqlite_sequence WHERE name = 'saved_scenario'")
        self._conn.commit()
