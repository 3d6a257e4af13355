"""Pydantic models for cached game-data snapshots.

Field names are snake_case; the camelCase keys used by the game API are
accepted as aliases so snapshot JSON can be validated directly.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class SnapshotModel(BaseModel):
    """Base for immutable snapshot records."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class PlayerStats(SnapshotModel):
    """Per-match statistics for one player."""

    score: int = 0
    kills: int = 0
    deaths: int = 0
    assists: int = 0
    rounds_played: int = 0


class Player(SnapshotModel):
    """A participant in a match."""

    id: str = Field(alias="subject")
    game_name: str
    tag_line: str = ""
    team_id: str
    party_id: str
    agent_id: Optional[str] = Field(default=None, alias="characterId")
    competitive_tier: int = 0
    stats: PlayerStats = Field(default_factory=PlayerStats)


class MatchInfo(SnapshotModel):
    """Match metadata."""

    match_id: str
    map_id: Optional[str] = None
    queue_id: Optional[str] = Field(default=None, alias="queueID")
    game_start: Optional[int] = Field(default=None, alias="gameStartMillis")


class MatchDetails(SnapshotModel):
    """A finished match and everybody who played in it."""

    match_info: MatchInfo
    players: List[Player] = []

    @property
    def id(self) -> str:
        return self.match_info.match_id


class User(SnapshotModel):
    """A Riot account as shown in lists."""

    id: str = Field(alias="subject")
    game_name: str
    tag_line: str = ""

    @classmethod
    def from_player(cls, player: Player) -> "User":
        return cls(id=player.id, game_name=player.game_name, tag_line=player.tag_line)


class PlayerIdentity(SnapshotModel):
    """Loadout identity of a player (card, title, level)."""

    id: str = Field(alias="subject")
    card_id: Optional[str] = Field(default=None, alias="playerCardID")
    title_id: Optional[str] = Field(default=None, alias="playerTitleID")
    account_level: int = 0


class CareerSummary(SnapshotModel):
    """Competitive standing of a player for the current act."""

    user_id: str = Field(alias="subject")
    competitive_tier: int = 0
    ranked_rating: int = 0
    leaderboard_rank: Optional[int] = None


class ObjectiveValue(SnapshotModel):
    """Target value of one objective within a mission."""

    objective_id: str = Field(alias="objectiveUuid")
    value: int


class ObjectiveInfo(SnapshotModel):
    """Catalog entry for an objective."""

    id: str = Field(alias="uuid")
    directive: Optional[str] = None


class MissionInfo(SnapshotModel):
    """Catalog entry for a mission."""

    id: str = Field(alias="uuid")
    display_name: Optional[str] = None
    title: Optional[str] = None
    type: Optional[str] = None
    xp_grant: int = 0
    progress_to_complete: int = 0
    objectives: List[ObjectiveValue] = []

    def objective(self, objective_id: Optional[str] = None) -> Optional[ObjectiveValue]:
        """Look up an objective value of this mission.

        Args:
            objective_id: Objective to look for. When None, the mission's own
                declared (first) objective is used.

        Returns:
            The matching ObjectiveValue, or None if it cannot be resolved
        """
        if objective_id is None:
            return self.objectives[0] if self.objectives else None
        for objective in self.objectives:
            if objective.objective_id == objective_id:
                return objective
        return None


class Mission(SnapshotModel):
    """Per-account state of a mission."""

    id: str = Field(alias="ID")
    is_complete: bool = Field(default=False, alias="Complete")
    objective_progress: Dict[str, int] = Field(default_factory=dict, alias="Objectives")


class ContractDetails(SnapshotModel):
    """Contract and mission state of an account."""

    subject: str
    missions: List[Mission] = Field(default_factory=list, alias="Missions")
