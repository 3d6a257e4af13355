"""Tests for mission rows of a contract."""

from __future__ import annotations

import pytest

from companion.data.models import ContractDetails, Mission
from companion.missions.contract_view import (
    COMPLETE,
    IN_PROGRESS,
    NOT_STARTED,
    UNKNOWN,
    UNKNOWN_MISSION,
    catalog_rows,
    contract_rows,
    mission_row,
)


@pytest.mark.unit
def test_in_progress_row(sample_assets):
    row = mission_row(
        sample_assets.missions["m-kills"],
        Mission(id="m-kills", objective_progress={"o-kills": 10}),
        sample_assets,
    )
    assert row.status == IN_PROGRESS
    assert row.name == "Get 25 kills"
    assert row.xp_text == "+2000 XP"
    assert row.progress_text == "10/25"
    assert row.fraction_complete == pytest.approx(0.4)


@pytest.mark.unit
def test_complete_row_has_no_progress(sample_assets):
    row = mission_row(
        sample_assets.missions["m-kills"],
        Mission(id="m-kills", is_complete=True, objective_progress={"o-kills": 25}),
        sample_assets,
    )
    assert row.status == COMPLETE
    assert row.is_complete
    assert row.progress_text is None
    assert row.xp_text is None


@pytest.mark.unit
def test_not_started_row_keeps_empty_bar(sample_assets):
    row = mission_row(sample_assets.missions["m-bare"], None, sample_assets)
    assert row.status == NOT_STARTED
    assert row.fraction_complete is None
    assert row.xp_text == "+500 XP"


@pytest.mark.unit
def test_contract_rows_mark_unknown_missions(sample_assets):
    details = ContractDetails(
        subject="u1",
        missions=[
            Mission(id="m-kills", objective_progress={"o-kills": 3}),
            Mission(id="m-nope", objective_progress={"o": 1}),
        ],
    )
    rows = contract_rows(details, sample_assets)
    assert [row.status for row in rows] == [IN_PROGRESS, UNKNOWN]
    assert rows[1].name == UNKNOWN_MISSION


@pytest.mark.unit
def test_contract_rows_without_catalog():
    details = ContractDetails(subject="u1", missions=[Mission(id="m-kills")])
    rows = contract_rows(details, None)
    assert rows[0].status == UNKNOWN


@pytest.mark.unit
def test_catalog_rows(sample_assets):
    rows = catalog_rows(["m-bare", "m-kills", "m-gone"], sample_assets)
    assert [row.status for row in rows] == [NOT_STARTED, NOT_STARTED, UNKNOWN]
    assert rows[1].name == "Get 25 kills"
