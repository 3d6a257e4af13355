"""Tests for the match view data."""

from __future__ import annotations

import pytest

from companion.data.models import MatchDetails, MatchInfo
from companion.errors import CorruptSnapshotError
from companion.match.match_view import MatchViewData


def _match(*players) -> MatchDetails:
    return MatchDetails(match_info=MatchInfo(match_id="m"), players=list(players))


class TestConstruction:
    """Viewer lookup and the player table."""

    @pytest.mark.unit
    def test_viewer_found(self, sample_match, colors):
        data = MatchViewData(sample_match, "a2", colors)
        assert data.myself is not None
        assert data.myself.id == "a2"
        assert len(data.players) == 10
        assert data.players["b3"].team_id == "Red"
        assert data.highlighted_player is None

    @pytest.mark.unit
    def test_no_viewer(self, sample_match, colors):
        data = MatchViewData(sample_match, None, colors)
        assert data.myself is None

    @pytest.mark.unit
    def test_viewer_not_in_match(self, sample_match, colors):
        data = MatchViewData(sample_match, "someone-else", colors)
        assert data.myself is None

    @pytest.mark.unit
    def test_duplicate_viewer_is_corrupt(self, make_player, colors):
        match = _match(make_player("x", 10), make_player("x", 20), make_player("y", 5))
        with pytest.raises(CorruptSnapshotError):
            MatchViewData(match, "x", colors)

    @pytest.mark.unit
    def test_duplicate_other_player_is_corrupt(self, make_player, colors):
        match = _match(make_player("x", 10), make_player("y", 20), make_player("y", 5))
        with pytest.raises(CorruptSnapshotError):
            MatchViewData(match, "x", colors)


class TestHighlight:
    """Highlight toggling and fading."""

    @pytest.mark.unit
    def test_switch_twice_clears(self, sample_match, colors):
        data = MatchViewData(sample_match, "a1", colors)
        data.switch_highlight("b2")
        assert data.highlighted_player == "b2"
        assert data.is_highlighting
        data.switch_highlight("b2")
        assert data.highlighted_player is None
        assert not data.is_highlighting

    @pytest.mark.unit
    def test_switch_to_other_replaces(self, sample_match, colors):
        data = MatchViewData(sample_match, "a1", colors)
        data.switch_highlight("b2")
        data.switch_highlight("a3")
        assert data.highlighted_player == "a3"

    @pytest.mark.unit
    def test_no_fade_without_highlight(self, sample_match, colors):
        data = MatchViewData(sample_match, "a1", colors)
        assert not any(data.should_fade(player_id) for player_id in data.players)

    @pytest.mark.unit
    def test_fade_everyone_but_highlighted(self, sample_match, colors):
        data = MatchViewData(sample_match, "a1", colors)
        data.switch_highlight("b1")
        faded = {player_id for player_id in data.players if data.should_fade(player_id)}
        assert faded == set(data.players) - {"b1"}


class TestRelativeColor:
    """Self > ally/enemy > team color > none."""

    @pytest.mark.unit
    def test_teammate_gets_ally_color(self, make_player, colors):
        data = MatchViewData(
            _match(make_player("x", team_id="A"), make_player("y", team_id="A")), "x", colors
        )
        assert data.relative_color(data.players["y"]) == colors.ally

    @pytest.mark.unit
    def test_opponent_gets_enemy_color(self, make_player, colors):
        data = MatchViewData(
            _match(make_player("x", team_id="A"), make_player("y", team_id="B")), "x", colors
        )
        assert data.relative_color(data.players["y"]) == colors.enemy

    @pytest.mark.unit
    def test_self_color_wins(self, sample_match, colors):
        data = MatchViewData(sample_match, "a1", colors)
        assert data.relative_color(data.players["a1"]) == colors.self_color

    @pytest.mark.unit
    def test_unknown_viewer_uses_team_color(self, sample_match, colors):
        data = MatchViewData(sample_match, None, colors)
        assert data.relative_color(data.players["b1"]) == colors.team_red
        assert data.relative_color("Red") == colors.team_red
        assert data.relative_color("Blue") == colors.team_blue

    @pytest.mark.unit
    def test_unknown_viewer_and_colorless_team(self, make_player, colors):
        data = MatchViewData(_match(make_player("x", team_id="x-team")), None, colors)
        assert data.relative_color("x-team") is None
        # players always get a color
        assert data.relative_color(data.players["x"]) == colors.ally

    @pytest.mark.unit
    def test_team_ids_relative_to_viewer(self, sample_match, colors):
        data = MatchViewData(sample_match, "b4", colors)
        assert data.relative_color("Red") == colors.ally
        assert data.relative_color("Blue") == colors.enemy


@pytest.mark.unit
def test_parties_follow_ranked_order(sample_match, colors):
    data = MatchViewData(sample_match, "a1", colors)
    assert data.parties[:3] == ["p-blue", "p-red", "party-a3"]
    assert len(data.parties) == 7
