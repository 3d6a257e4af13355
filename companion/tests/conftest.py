"""Pytest configuration and fixtures for companion tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Callable, Dict

import pytest

from companion.data.assets import AssetCollection
from companion.data.models import (
    MatchDetails,
    MatchInfo,
    MissionInfo,
    ObjectiveInfo,
    ObjectiveValue,
    Player,
    PlayerStats,
)
from companion.utils.colors import DisplayColors


@pytest.fixture
def make_player() -> Callable[..., Player]:
    """Factory for players with sensible defaults."""

    def _make(
        player_id: str,
        score: int = 0,
        team_id: str = "Blue",
        party_id: str | None = None,
        game_name: str | None = None,
    ) -> Player:
        return Player(
            id=player_id,
            game_name=game_name or f"Player{player_id}",
            tag_line="EUW",
            team_id=team_id,
            party_id=party_id or f"party-{player_id}",
            stats=PlayerStats(score=score, kills=score // 100, deaths=3, assists=2),
        )

    return _make


@pytest.fixture
def colors(monkeypatch) -> DisplayColors:
    """Display colors with defaults, regardless of the test environment."""
    for var in ("COLOR_SELF", "COLOR_ALLY", "COLOR_ENEMY", "COLOR_TEAM_BLUE", "COLOR_TEAM_RED"):
        monkeypatch.delenv(var, raising=False)
    return DisplayColors()


@pytest.fixture
def sample_match(make_player) -> MatchDetails:
    """Ten-player match: two premade parties plus solo players."""
    players = [
        make_player("a1", score=4200, team_id="Blue", party_id="p-blue"),
        make_player("a2", score=3100, team_id="Blue", party_id="p-blue"),
        make_player("a3", score=2500, team_id="Blue"),
        make_player("a4", score=1900, team_id="Blue"),
        make_player("a5", score=1200, team_id="Blue"),
        make_player("b1", score=3900, team_id="Red", party_id="p-red"),
        make_player("b2", score=2800, team_id="Red", party_id="p-red"),
        make_player("b3", score=2500, team_id="Red", party_id="p-red"),
        make_player("b4", score=1500, team_id="Red"),
        make_player("b5", score=900, team_id="Red"),
    ]
    return MatchDetails(match_info=MatchInfo(match_id="match-1"), players=players)


@pytest.fixture
def sample_assets() -> AssetCollection:
    """Catalog with one directive-backed mission and one bare mission."""
    return AssetCollection(
        version="release-08.11",
        missions={
            "m-kills": MissionInfo(
                id="m-kills",
                display_name="Kills",
                xp_grant=2000,
                progress_to_complete=25,
                objectives=[ObjectiveValue(objective_id="o-kills", value=25)],
            ),
            "m-spike": MissionInfo(
                id="m-spike",
                title="Spike duty",
                xp_grant=3000,
                progress_to_complete=1,
                objectives=[ObjectiveValue(objective_id="o-spike", value=5)],
            ),
            "m-bare": MissionInfo(id="m-bare", xp_grant=500, progress_to_complete=3),
        },
        objectives={
            "o-kills": ObjectiveInfo(id="o-kills", directive="Get [Progress] kills"),
            "o-spike": ObjectiveInfo(id="o-spike", directive="Plant or defuse [Progress] spikes"),
        },
        tiers={0: "Unranked", 12: "Gold 1", 21: "Immortal 1"},
    )


@pytest.fixture
def sample_match_json() -> Dict:
    """Match snapshot as written by the sync job (game API keys)."""
    return {
        "matchInfo": {"matchId": "match-json", "mapId": "/Game/Maps/Ascent", "queueID": "competitive"},
        "players": [
            {
                "subject": "u1",
                "gameName": "Sova Main",
                "tagLine": "EUW",
                "teamId": "Blue",
                "partyId": "party-1",
                "characterId": "sova",
                "competitiveTier": 12,
                "stats": {"score": 5200, "kills": 21, "deaths": 12, "assists": 4, "roundsPlayed": 22},
            },
            {
                "subject": "u2",
                "gameName": "Jett Diff",
                "tagLine": "NA1",
                "teamId": "Red",
                "partyId": "party-2",
                "characterId": "jett",
                "stats": {"score": 4100, "kills": 17, "deaths": 15, "assists": 2, "roundsPlayed": 22},
            },
        ],
    }


@pytest.fixture
def data_dir(tmp_path, sample_match_json) -> Path:
    """Snapshot directory with a match, a contract, one user's records and assets."""
    root = tmp_path / "data"
    for sub in ("matches", "contracts", "users", "identities", "career"):
        (root / sub).mkdir(parents=True)

    (root / "matches" / "match-json.json").write_text(json.dumps(sample_match_json))
    (root / "contracts" / "u1.json").write_text(
        json.dumps(
            {
                "subject": "u1",
                "Missions": [
                    {"ID": "m-kills", "Complete": False, "Objectives": {"o-kills": 10}},
                    {"ID": "m-spike", "Complete": True, "Objectives": {"o-spike": 5}},
                    {"ID": "m-missing", "Complete": False, "Objectives": {"o-x": 1}},
                ],
            }
        )
    )
    (root / "users" / "u1.json").write_text(
        json.dumps({"subject": "u1", "gameName": "Sova Main", "tagLine": "EUW"})
    )
    (root / "identities" / "u1.json").write_text(
        json.dumps({"subject": "u1", "playerCardID": "card-1", "accountLevel": 142})
    )
    (root / "career" / "u1.json").write_text(
        json.dumps({"subject": "u1", "competitiveTier": 12, "rankedRating": 57})
    )
    (root / "assets.json").write_text(
        json.dumps(
            {
                "version": "release-08.11",
                "missions": {
                    "m-kills": {
                        "uuid": "m-kills",
                        "displayName": "Kills",
                        "xpGrant": 2000,
                        "progressToComplete": 25,
                        "objectives": [{"objectiveUuid": "o-kills", "value": 25}],
                    },
                    "m-spike": {
                        "uuid": "m-spike",
                        "title": "Spike duty",
                        "xpGrant": 3000,
                        "progressToComplete": 1,
                        "objectives": [{"objectiveUuid": "o-spike", "value": 5}],
                    },
                },
                "objectives": {
                    "o-kills": {"uuid": "o-kills", "directive": "Get [Progress] kills"},
                },
                "tiers": {"0": "Unranked", "12": "Gold 1"},
            }
        )
    )
    return root
