from __future__ import annotations

import csv
import io
from pathlib import Path

from fetpdecide.core.domain.enums import BenefitScenario
from fetpdecide.core.domain.models import SavedScenario
from fetpdecide.scenarios.export import CSV_HEADER, write_scenarios_csv

CONFIG = {
    "delivery_method": "hybrid",
    "training_model": "fulltime",
    "training_type": "advanced",
    "annual_capacity": "2000",
    "stipend_support": "150000",
    "career_pathway": "international",
    "geographic_distribution": "nationwide",
    "accreditation": "international",
    "total_cost": "low",
}


def _scenario() -> SavedScenario:
    return SavedScenario(
        name="Scenario 1",
        configuration=CONFIG,
        uptake=0.980159,
        total_cost=27000.0,
        net_benefit=4873015.873,
        benefit_scenario=BenefitScenario.MEDIUM,
    )


def test_csv_header_columns() -> None:
    assert CSV_HEADER == [
        "Name",
        "Delivery",
        "Model",
        "Type",
        "Capacity",
        "Stipend",
        "Career",
        "Geographic",
        "Accreditation",
        "Total Cost",
        "Uptake",
        "Net Benefit",
    ]


def test_write_scenarios_csv_to_stream() -> None:
    buf = io.StringIO()

    n = write_scenarios_csv([_scenario()], buf)

    assert n == 1
    rows = list(csv.reader(io.StringIO(buf.getvalue())))
    assert rows[0] == CSV_HEADER
    assert rows[1] == [
        "Scenario 1",
        "hybrid",
        "fulltime",
        "advanced",
        "2000",
        "150000",
        "international",
        "nationwide",
        "international",
        "low",
        "98.02",
        "4873015.87",
    ]


def test_write_scenarios_csv_to_path(tmp_path: Path) -> None:
    out = tmp_path / "fetp_scenarios.csv"

    n = write_scenarios_csv([], out)

    assert n == 0
    assert out.read_text(encoding="utf-8").splitlines() == [",".join(CSV_HEADER)]
