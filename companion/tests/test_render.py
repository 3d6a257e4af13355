"""Tests for Rich rendering of scoreboards, missions and user cells."""

from __future__ import annotations

import pytest
from rich.console import Console

from companion.bookmarks.user_cell import UserCellData
from companion.match.match_view import MatchViewData
from companion.match.scoreboard import RankInfo, build_scoreboard
from companion.missions.contract_view import (
    COMPLETE,
    IN_PROGRESS,
    NOT_STARTED,
    UNKNOWN,
    MissionRow,
)
from companion.utils.render import (
    render_missions_table,
    render_progress_bar,
    render_rank,
    render_scoreboard_table,
    render_user_cells_table,
)


def _text(renderable) -> str:
    console = Console(record=True, width=200)
    console.print(renderable)
    return console.export_text()


class TestProgressBar:

    @pytest.mark.unit
    def test_empty_bar_for_missing_progress(self):
        assert render_progress_bar(None, width=4).count("━") == 4
        assert "[cyan][/cyan]" in render_progress_bar(None, width=4)

    @pytest.mark.unit
    def test_overflow_is_capped(self):
        bar = render_progress_bar(3.0, width=4)
        assert bar.startswith("[cyan]━━━━[/cyan]")
        assert "[grey37][/grey37]" in bar

    @pytest.mark.unit
    def test_half(self):
        assert render_progress_bar(0.5, width=10).startswith("[cyan]━━━━━[/cyan]")


@pytest.mark.unit
def test_render_rank():
    assert "?" in render_rank(None)
    assert render_rank(RankInfo(12, "Gold 1", 40, False)) == "Gold 1 (40 RR)"
    assert render_rank(RankInfo(0, "Unranked", 0, True)) == "[dim]Unranked[/dim]"


@pytest.mark.unit
def test_scoreboard_table(sample_match, colors):
    data = MatchViewData(sample_match, "a1", colors)
    text = _text(render_scoreboard_table(build_scoreboard(data)))
    assert "Playera1" in text
    assert "(you)" in text
    assert "Party A" in text
    assert "42 / 3 / 2" in text
    assert text.index("Playera1") < text.index("Playerb1") < text.index("Playera2")


@pytest.mark.unit
def test_missions_table():
    rows = [
        MissionRow("m1", "Get 25 kills", IN_PROGRESS, "+2000 XP", "10/25", 0.4),
        MissionRow("m2", "Plant [spikes]", COMPLETE),
        MissionRow("m3", "Win 3 games", NOT_STARTED, "+500 XP"),
        MissionRow("m4", "Unknown mission!", UNKNOWN),
    ]
    text = _text(render_missions_table(rows))
    assert "10/25" in text
    assert "+2000 XP" in text
    assert "Plant [spikes]" in text
    assert "✓" in text
    assert "Unknown mission!" in text


@pytest.mark.unit
def test_user_cells_table():
    cells = [
        UserCellData("u1", "Sova Main", "EUW", "Level 142", rank=RankInfo(12, "Gold 1", 57, False)),
        UserCellData("u2", "Unknown Player"),
    ]
    text = _text(render_user_cells_table(cells))
    assert "Sova Main #EUW" in text
    assert "Level 142" in text
    assert "Gold 1 (57 RR)" in text
    assert "u2" in text
